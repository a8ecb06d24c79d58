"""
Rule parsing for the GRIDLOGIC DSL.

Handles single-line constraints and implication blocks:

    Parties[0].color != Parties[1].color

    Parties.host = alice =>
        Parties.color = red
        Parties.snack = cake
"""

from typing import TYPE_CHECKING

from .. import ir
from ..lexer import TokenType

if TYPE_CHECKING:
    from .base import ParserProtocol


class RuleParserMixin:
    """Parser mixin for rules, expressions, and variable references."""

    def parse_rule_head(self: "ParserProtocol") -> tuple[ir.Expression, bool]:
        """
        Parse a rule's guard.

        Returns:
            Tuple of (guard, has_block). When has_block is True the `=>` has
            been consumed and the consequent block follows.
        """
        guard = self.parse_expression()
        if self.match(TokenType.YIELDS):
            self.advance()
            return guard, True
        self.expect_newline()
        return guard, False

    def parse_rule_block(self: "ParserProtocol", guard: ir.Expression) -> ir.RuleSpec:
        """Parse the indented consequents that follow `=>`."""
        self.expect_newline()
        self.expect(TokenType.INDENT)

        consequents: list[ir.Expression] = []
        while True:
            self.skip_newlines()
            if self.match(TokenType.DEDENT):
                break
            consequents.append(self.parse_expression())
            # The block may end at end of input without a trailing newline
            if not self.match(TokenType.DEDENT):
                self.expect_newline()

        if not consequents:
            raise self.error("Expected at least one consequent after '=>'")

        self.expect(TokenType.DEDENT)
        return ir.RuleSpec(guard=guard, consequents=consequents)

    def parse_expression(self: "ParserProtocol") -> ir.Expression:
        """Parse `ref (= | !=) ref`."""
        left = self.parse_variable_ref()

        if self.match(TokenType.EQUALS):
            operator = ir.ComparisonOperator.EQUALS
        elif self.match(TokenType.NOT_EQUALS):
            operator = ir.ComparisonOperator.NOT_EQUALS
        else:
            raise self.error("Expected '=' or '!='")
        self.advance()

        right = self.parse_variable_ref()
        return ir.Expression(left=left, operator=operator, right=right)

    def parse_variable_ref(self: "ParserProtocol") -> ir.VariableRef:
        """Parse an identifier followed by any number of `[N]` / `.field` modifiers."""
        name = self.expect(TokenType.IDENTIFIER)

        modifiers: list[ir.IndexModifier | ir.FieldModifier] = []
        while self.match(TokenType.LBRACKET, TokenType.DOT):
            if self.advance().type == TokenType.LBRACKET:
                index = int(self.expect(TokenType.NUMBER).value)
                self.expect(TokenType.RBRACKET)
                modifiers.append(ir.IndexModifier(index=index))
            else:
                modifiers.append(ir.FieldModifier(name=self.expect(TokenType.IDENTIFIER).value))

        return ir.VariableRef.from_chain(name.value, modifiers, name.line, name.column)
