"""
Error types for GRIDLOGIC puzzle parsing, model building, and solving.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class GridLogicError(Exception):
    """Base exception for all GRIDLOGIC errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    @property
    def line(self) -> int | None:
        return self.context.line if self.context else None

    @property
    def column(self) -> int | None:
        return self.context.column if self.context else None


class ParseError(GridLogicError):
    """
    Raised when puzzle source cannot be tokenized or parsed.

    Examples:
    - Unexpected characters
    - Indentation that is not a multiple of 4, or that matches no open block
    - Missing punctuation or line ends
    - Malformed definitions, declarations, or rules
    """

    pass


class ModelError(GridLogicError):
    """
    Raised when the runtime model cannot be built or an expression cannot be
    evaluated against it.

    Examples:
    - Variable declared with an unknown type
    - Struct entry typed with something other than a domain
    - Duplicate domain, struct, or variable names
    - Reference to an unknown variable
    - Missing or out-of-range index, missing or unknown field
    """

    pass


class ManifestError(GridLogicError):
    """Raised when gridlogic.toml cannot be read or has invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "puzzle.grid:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its number and an error marker."""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + max(self.column, 1) - 1) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context)


def make_model_error(
    message: str,
    file: Path | None = None,
    line: int | None = None,
    column: int | None = None,
) -> ModelError:
    """
    Helper to create a ModelError with optional context.

    Args:
        message: Error description
        file: Optional source file path
        line: Optional line number
        column: Optional column number

    Returns:
        ModelError with context if location provided
    """
    if file and line and column:
        return ModelError(message, ErrorContext(file=file, line=line, column=column))
    return ModelError(message)
