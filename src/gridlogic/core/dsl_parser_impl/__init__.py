"""
GRIDLOGIC DSL Parser Package.

The parser is built using mixins to separate parsing logic by construct type.

The main exports are:
- Parser: The complete parser class
- parse_dsl: Convenience function to parse puzzle text

Usage:
    from gridlogic.core.dsl_parser_impl import parse_dsl

    puzzle = parse_dsl(text, file)
"""

import logging
from pathlib import Path

from .. import ir
from ..errors import ParseError
from ..lexer import TokenType, tokenize
from .base import BaseParser
from .definitions import DefinitionParserMixin
from .rules import RuleParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    DefinitionParserMixin,
    RuleParserMixin,
):
    """
    Complete GRIDLOGIC DSL Parser.

    - DefinitionParserMixin: domains, structs, and variable declarations
    - RuleParserMixin: rules, expressions, and variable references
    """

    def parse(self) -> ir.PuzzleSpec:
        """
        Parse the whole token stream and return the puzzle IR.

        A line that is neither a definition nor a declaration is parsed as a
        rule. If that rule's guard does not parse, parsing stops there and the
        puzzle read so far is returned. Errors inside definitions, declarations,
        or a rule's `=>` block are raised.

        Returns:
            PuzzleSpec with all parsed declarations
        """
        domains: list[ir.DomainSpec] = []
        structs: list[ir.StructSpec] = []
        variables: list[ir.VariableSpec] = []
        rules: list[ir.RuleSpec] = []

        while not self.at_end():
            self.skip_newlines()
            if self.at_end():
                break

            if self.is_definition_start():
                definition = self.parse_definition()
                if isinstance(definition, ir.DomainSpec):
                    domains.append(definition)
                else:
                    structs.append(definition)

            elif self.match(TokenType.VAR):
                variables.append(self.parse_variable())

            else:
                try:
                    guard, has_block = self.parse_rule_head()
                except ParseError as e:
                    logger.warning(
                        "Stopped parsing %s at line %s: %s", self.file, e.line, e.message
                    )
                    break

                if has_block:
                    rules.append(self.parse_rule_block(guard))
                else:
                    rules.append(ir.RuleSpec(guard=guard))

        logger.debug(
            "Parsed %s: %d domains, %d structs, %d variables, %d rules",
            self.file,
            len(domains),
            len(structs),
            len(variables),
            len(rules),
        )
        return ir.PuzzleSpec(
            file=self.file,
            domains=domains,
            structs=structs,
            variables=variables,
            rules=rules,
        )


def parse_dsl(text: str, file: Path | None = None) -> ir.PuzzleSpec:
    """
    Parse puzzle text into a PuzzleSpec.

    Args:
        text: Puzzle source text
        file: Source file path (for error reporting)

    Returns:
        PuzzleSpec

    Raises:
        ParseError: On tokenizer errors or structural errors the parser does
            not recover from
    """
    file = file or Path("<string>")
    tokens = tokenize(text, file)
    parser = Parser(tokens, file, source=text)
    return parser.parse()


__all__ = ["Parser", "parse_dsl"]
