"""
Definition parsing for the GRIDLOGIC DSL.

Handles domain and struct definitions and variable declarations:

    Color = {red, green, blue}
    Party = [unique Name host, Color color]
    var Parties : Party[4]
"""

from typing import TYPE_CHECKING

from .. import ir
from ..lexer import TokenType

if TYPE_CHECKING:
    from .base import ParserProtocol


class DefinitionParserMixin:
    """Parser mixin for definitions and variable declarations."""

    def is_definition_start(self: "ParserProtocol") -> bool:
        """A definition starts with `IDENTIFIER =`."""
        following = self.peek_token()
        return (
            self.match(TokenType.IDENTIFIER)
            and following is not None
            and following.type == TokenType.EQUALS
        )

    def parse_definition(self: "ParserProtocol") -> ir.DomainSpec | ir.StructSpec:
        """
        Parse a domain or struct definition.

        Returns:
            DomainSpec for `Name = {a, b}`, StructSpec for `Name = [Type f, ...]`
        """
        name = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.EQUALS)

        if self.match(TokenType.LBRACE):
            self.advance()
            values = [self.expect(TokenType.IDENTIFIER)]
            while self.match(TokenType.COMMA):
                self.advance()
                values.append(self.expect(TokenType.IDENTIFIER))
            self.expect(TokenType.RBRACE)
            self.expect_newline()

            labels: list[str] = []
            for token in values:
                if token.value in labels:
                    raise self.error(
                        f"Duplicate label '{token.value}' in domain '{name}'", token
                    )
                labels.append(token.value)
            return ir.DomainSpec(name=name, values=labels)

        if self.match(TokenType.LBRACKET):
            self.advance()
            entries = [self.parse_entry()]
            while self.match(TokenType.COMMA):
                self.advance()
                entries.append(self.parse_entry())
            self.expect(TokenType.RBRACKET)
            self.expect_newline()
            return ir.StructSpec(name=name, entries=entries)

        raise self.error(f"Expected '{{' or '[' in definition of '{name}'")

    def parse_entry(self: "ParserProtocol") -> ir.EntrySpec:
        """Parse a struct entry: `[unique] Type name`."""
        unique = False
        if self.match(TokenType.UNIQUE):
            self.advance()
            unique = True
        type_name = self.expect(TokenType.IDENTIFIER).value
        name = self.expect(TokenType.IDENTIFIER).value
        return ir.EntrySpec(type_name=type_name, name=name, unique=unique)

    def parse_variable(self: "ParserProtocol") -> ir.VariableSpec:
        """Parse a declaration: `var Name : Type [N]`."""
        keyword = self.expect(TokenType.VAR)
        name = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.COLON)
        type_name = self.expect(TokenType.IDENTIFIER).value

        size = None
        if self.match(TokenType.LBRACKET):
            self.advance()
            size = int(self.expect(TokenType.NUMBER).value)
            self.expect(TokenType.RBRACKET)

        self.expect_newline()
        return ir.VariableSpec(
            name=name,
            type_name=type_name,
            size=size,
            line=keyword.line,
            column=keyword.column,
        )
