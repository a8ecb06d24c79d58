"""
Base parser class for the GRIDLOGIC DSL.

Provides common token manipulation and utility methods used by all parser mixins.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..errors import ParseError, make_parse_error
from ..lexer import Token, TokenType

if TYPE_CHECKING:
    from .. import ir


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: list[Token]
    file: Path
    pos: int

    def current_token(self) -> Token | None: ...
    def peek_token(self, offset: int = 1) -> Token | None: ...
    def advance(self) -> Token: ...
    def at_end(self) -> bool: ...
    def expect(self, token_type: TokenType) -> Token: ...
    def expect_newline(self) -> None: ...
    def match(self, *token_types: TokenType) -> bool: ...
    def skip_newlines(self) -> None: ...
    def error(self, message: str, token: Token | None = None) -> ParseError: ...

    # Methods from other mixins that may be called cross-mixin
    def parse_entry(self) -> "ir.EntrySpec": ...
    def parse_rule_head(self) -> "tuple[ir.Expression, bool]": ...
    def parse_rule_block(self, guard: "ir.Expression") -> "ir.RuleSpec": ...
    def parse_expression(self) -> "ir.Expression": ...
    def parse_variable_ref(self) -> "ir.VariableRef": ...


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing,
    including token navigation, matching, and error generation. The token
    stream is not required to end in a sentinel; running past the last token
    is reported at that token's position.
    """

    def __init__(self, tokens: list[Token], file: Path, source: str | None = None):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            file: Source file path (for error reporting)
            source: Optional source text (for error snippets)
        """
        self.tokens = tokens
        self.file = file
        self.pos = 0
        self._source_lines = source.split("\n") if source is not None else None

    def at_end(self) -> bool:
        """True once every token has been consumed."""
        return self.pos >= len(self.tokens)

    def current_token(self) -> Token | None:
        """Get current token, or None past the end of the stream."""
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token | None:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return None
        return self.tokens[pos]

    def advance(self) -> Token:
        """
        Consume and return current token.

        Raises:
            ParseError: If the token stream is exhausted
        """
        token = self.current_token()
        if token is None:
            raise self.error("Unexpected end of input")
        self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        token = self.current_token()
        return token is not None and token.type in token_types

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token is None:
            raise self.error(f"Expected {token_type.value}, got end of input")
        if token.type != token_type:
            raise self.error(f"Expected {token_type.value}, got {token.type.value}", token)
        return self.advance()

    def expect_newline(self) -> None:
        """Require the end of a line, then swallow any blank lines after it."""
        self.expect(TokenType.NEWLINE)
        self.skip_newlines()

    def skip_newlines(self) -> None:
        """Skip any NEWLINE tokens."""
        while self.match(TokenType.NEWLINE):
            self.advance()

    def error(self, message: str, token: Token | None = None) -> ParseError:
        """Build a ParseError located at `token`, the current token, or the last one."""
        if token is None:
            token = self.current_token()
        if token is None and self.tokens:
            token = self.tokens[-1]

        line = token.line if token else 1
        column = token.column if token else 1
        snippet = None
        if self._source_lines is not None and 1 <= line <= len(self._source_lines):
            snippet = self._source_lines[line - 1].rstrip("\r")

        return make_parse_error(message, self.file, line, column, snippet)
