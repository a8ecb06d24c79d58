"""
Lexer/Tokenizer for the GRIDLOGIC puzzle DSL.

Converts raw puzzle text into a stream of tokens with source location tracking.
Handles indentation-based blocks (Python-style) with INDENT/DEDENT tokens.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import make_parse_error

logger = logging.getLogger(__name__)

INDENT_WIDTH = 4


class TokenType(Enum):
    """Token types in the GRIDLOGIC DSL."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"

    # Keywords
    VAR = "var"
    UNIQUE = "unique"

    # Operators
    EQUALS = "="
    NOT_EQUALS = "!="
    YIELDS = "=>"

    # Punctuation
    DOT = "."
    COMMA = ","
    COLON = ":"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    # Layout
    NEWLINE = "NEWLINE"
    INDENT = "INDENT"
    DEDENT = "DEDENT"


KEYWORDS = {"var", "unique"}

PUNCTUATION = {
    "=": TokenType.EQUALS,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

TWO_CHAR_OPERATORS = {
    "=>": TokenType.YIELDS,
    "!=": TokenType.NOT_EQUALS,
}


@dataclass
class Token:
    """
    A single token in the DSL.

    Attributes:
        type: Type of token
        value: String value of the token
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for the GRIDLOGIC DSL.

    Converts source text into a stream of tokens with indentation tracking.
    """

    def __init__(self, text: str, file: Path):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.indent_stack = [0]  # Stack of indentation widths

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def source_line(self, line: int) -> str | None:
        """Return the text of a 1-indexed source line, for error snippets."""
        lines = self.text.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1].rstrip("\r")
        return None

    def read_number(self) -> str:
        """Read a maximal run of digits."""
        chars = []
        current = self.current_char()
        while current and current.isdigit():
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def read_indentation(self) -> int:
        """Consume leading spaces/tabs and return the indentation width."""
        width = 0
        while self.current_char() in (" ", "\t"):
            width += INDENT_WIDTH if self.current_char() == "\t" else 1
            self.advance()
        return width

    def handle_indentation(self, indent_level: int) -> None:
        """Generate INDENT/DEDENT tokens based on indentation level."""
        if indent_level % INDENT_WIDTH != 0:
            raise make_parse_error(
                f"Indentation must be a multiple of {INDENT_WIDTH} (got {indent_level})",
                self.file,
                self.line,
                self.column,
                self.source_line(self.line),
            )

        current_indent = self.indent_stack[-1]

        if indent_level > current_indent:
            self.indent_stack.append(indent_level)
            self.tokens.append(Token(TokenType.INDENT, "", self.line, 1))

        elif indent_level < current_indent:
            while indent_level < self.indent_stack[-1]:
                self.indent_stack.pop()
                self.tokens.append(Token(TokenType.DEDENT, "", self.line, 1))

            if self.indent_stack[-1] != indent_level:
                raise make_parse_error(
                    f"Unmatched indentation (expected {self.indent_stack[-1]} spaces, "
                    f"got {indent_level})",
                    self.file,
                    self.line,
                    self.column,
                    self.source_line(self.line),
                )

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens including INDENT/DEDENT, terminated by a NEWLINE

        Raises:
            ParseError: If an unexpected character or bad indentation is found
        """
        while self.pos < len(self.text):
            ch = self.current_char()
            token_line = self.line
            token_col = self.column

            # Newlines, followed by the indentation of the next line
            if ch == "\n":
                self.tokens.append(Token(TokenType.NEWLINE, "\\n", token_line, token_col))
                self.advance()

                indent_level = self.read_indentation()

                # Blank lines leave the indentation state alone
                nxt = self.current_char()
                if nxt is None or nxt == "\n" or (nxt == "\r" and self.peek_char() in (None, "\n")):
                    continue

                self.handle_indentation(indent_level)
                continue

            # Whitespace inside a line
            if ch in (" ", "\t", "\r"):
                self.advance()
                continue

            two_chars = ch + (self.peek_char() or "")
            if two_chars in TWO_CHAR_OPERATORS:
                self.advance()
                self.advance()
                self.tokens.append(
                    Token(TWO_CHAR_OPERATORS[two_chars], two_chars, token_line, token_col)
                )

            elif ch in PUNCTUATION:
                self.advance()
                self.tokens.append(Token(PUNCTUATION[ch], ch, token_line, token_col))

            # Identifiers and keywords
            elif ch.isalpha() or ch == "_":
                value = self.read_identifier()
                if value in KEYWORDS:
                    token_type = TokenType(value)
                else:
                    token_type = TokenType.IDENTIFIER
                self.tokens.append(Token(token_type, value, token_line, token_col))

            elif ch.isdigit():
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, token_line, token_col))

            else:
                raise make_parse_error(
                    f"Unexpected character: {ch!r}",
                    self.file,
                    token_line,
                    token_col,
                    self.source_line(token_line),
                )

        # Emit remaining DEDENTs
        while len(self.indent_stack) > 1:
            self.indent_stack.pop()
            self.tokens.append(Token(TokenType.DEDENT, "", self.line, 1))

        # Terminating NEWLINE
        self.tokens.append(Token(TokenType.NEWLINE, "\\n", self.line, self.column))

        logger.debug("Tokenized %s: %d tokens", self.file, len(self.tokens))
        return self.tokens


def tokenize(text: str, file: Path | None = None) -> list[Token]:
    """
    Convenience function to tokenize puzzle text.

    Args:
        text: Source text
        file: Source file path (defaults to "<string>")

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file or Path("<string>"))
    return lexer.tokenize()
