"""Tests for the GRIDLOGIC tokenizer."""

from pathlib import Path

import pytest

from gridlogic.core.errors import ParseError
from gridlogic.core.lexer import TokenType, tokenize


def types(text: str) -> list[TokenType]:
    return [t.type for t in tokenize(text, Path("test.grid"))]


class TestBasicTokens:
    """Tests for literals, keywords, and punctuation."""

    def test_variable_declaration(self) -> None:
        """A declaration line ends in its own NEWLINE plus the terminating one."""
        assert types("var Birds : Bird[6]\n") == [
            TokenType.VAR,
            TokenType.IDENTIFIER,
            TokenType.COLON,
            TokenType.IDENTIFIER,
            TokenType.LBRACKET,
            TokenType.NUMBER,
            TokenType.RBRACKET,
            TokenType.NEWLINE,
            TokenType.NEWLINE,
        ]

    def test_token_values_and_positions(self) -> None:
        tokens = tokenize("var Birds : Bird[6]\n")
        assert tokens[1].value == "Birds"
        assert (tokens[1].line, tokens[1].column) == (1, 5)
        assert tokens[5].value == "6"
        assert (tokens[5].line, tokens[5].column) == (1, 18)

    def test_keywords_are_whole_words(self) -> None:
        assert types("unique uniqueness var variable") == [
            TokenType.UNIQUE,
            TokenType.IDENTIFIER,
            TokenType.VAR,
            TokenType.IDENTIFIER,
            TokenType.NEWLINE,
        ]

    def test_two_character_operators(self) -> None:
        assert types("a != b =>") == [
            TokenType.IDENTIFIER,
            TokenType.NOT_EQUALS,
            TokenType.IDENTIFIER,
            TokenType.YIELDS,
            TokenType.NEWLINE,
        ]

    def test_single_equals_is_not_yields(self) -> None:
        assert types("a = b")[1] == TokenType.EQUALS

    def test_punctuation(self) -> None:
        assert types("{ } [ ] . , :")[:-1] == [
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.LBRACKET,
            TokenType.RBRACKET,
            TokenType.DOT,
            TokenType.COMMA,
            TokenType.COLON,
        ]

    def test_number_is_maximal_digit_run(self) -> None:
        tokens = tokenize("123ab")
        assert [(t.type, t.value) for t in tokens[:2]] == [
            (TokenType.NUMBER, "123"),
            (TokenType.IDENTIFIER, "ab"),
        ]

    def test_identifier_with_underscore_and_digits(self) -> None:
        tokens = tokenize("_my_var2")
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == "_my_var2"

    def test_crlf_line_endings(self) -> None:
        assert types("var X : Y\r\n") == [
            TokenType.VAR,
            TokenType.IDENTIFIER,
            TokenType.COLON,
            TokenType.IDENTIFIER,
            TokenType.NEWLINE,
            TokenType.NEWLINE,
        ]

    def test_empty_input_is_single_newline(self) -> None:
        assert types("") == [TokenType.NEWLINE]


class TestIndentation:
    """Tests for INDENT/DEDENT generation."""

    def test_block_indent_and_dedent(self) -> None:
        assert types("a = b =>\n    c = d\n") == [
            TokenType.IDENTIFIER,
            TokenType.EQUALS,
            TokenType.IDENTIFIER,
            TokenType.YIELDS,
            TokenType.NEWLINE,
            TokenType.INDENT,
            TokenType.IDENTIFIER,
            TokenType.EQUALS,
            TokenType.IDENTIFIER,
            TokenType.NEWLINE,
            TokenType.DEDENT,
            TokenType.NEWLINE,
        ]

    def test_tab_counts_as_four_spaces(self) -> None:
        assert types("a = b =>\n\tc = d\n") == types("a = b =>\n    c = d\n")

    def test_blank_lines_do_not_change_indentation(self) -> None:
        result = types("a = b =>\n    c = d\n\n    e = f\n")
        assert result.count(TokenType.INDENT) == 1
        assert result.count(TokenType.DEDENT) == 1

    def test_dedent_back_to_top_level(self) -> None:
        result = types("a = b =>\n    c = d\ne = f\n")
        dedent = result.index(TokenType.DEDENT)
        assert result[dedent + 1] == TokenType.IDENTIFIER

    def test_end_of_input_closes_all_blocks(self) -> None:
        result = types("a = b =>\n    c = d =>\n        e = f")
        assert result[-3:] == [TokenType.DEDENT, TokenType.DEDENT, TokenType.NEWLINE]

    def test_indentation_not_multiple_of_four(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("A.x = red =>\n  A.x = blue\n", Path("bad.grid"))
        assert exc_info.value.line == 2
        assert "multiple of 4" in exc_info.value.message
        assert "bad.grid:2:" in str(exc_info.value)

    def test_indentation_error_on_later_line(self) -> None:
        text = "var X : Y\n\nA.x = red =>\n    A.x = blue\n     A.x = red\n"
        with pytest.raises(ParseError) as exc_info:
            tokenize(text)
        assert exc_info.value.line == 5

    def test_unmatched_dedent(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("a = b =>\n        c = d\n    e = f\n")
        assert exc_info.value.line == 3
        assert "Unmatched indentation" in exc_info.value.message

    def test_whitespace_only_line_is_blank(self) -> None:
        result = types("a = b\n   \nc = d\n")
        assert TokenType.INDENT not in result


class TestLexerErrors:
    """Tests for unexpected characters."""

    def test_unexpected_character_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("a = b @\n")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 7
        assert "'@'" in exc_info.value.message

    def test_lone_bang_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            tokenize("a ! b\n")

    def test_error_includes_snippet(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("var X : Y\nX$ = a\n", Path("p.grid"))
        message = str(exc_info.value)
        assert "p.grid:2:2" in message
        assert "X$ = a" in message
