from __future__ import annotations

import pytest

from dekhao.lang.parser.grammar.lexer import (
    Token,
    TokenType,
    split_lines,
    tokenize,
    tokenize_line,
)


def _values(tokens):
    return [token.value for token in tokens]


def test_print_scenario_tokens() -> None:
    tokens = tokenize_line('dekhao("Hello", x)')

    assert _values(tokens) == ['dekhao', '(', '"Hello"', ',', 'x', ')', '\n']
    assert [token.type for token in tokens] == [
        TokenType.KEYWORD,
        TokenType.PUNCTUATION,
        TokenType.STRING,
        TokenType.PUNCTUATION,
        TokenType.IDENTIFIER,
        TokenType.PUNCTUATION,
        TokenType.NEWLINE,
    ]


@pytest.mark.parametrize("line", ["", "   ", "\t \t", " \r"])
def test_whitespace_only_line_yields_only_newline(line: str) -> None:
    tokens = tokenize_line(line)

    assert len(tokens) == 1
    assert tokens[0].type is TokenType.NEWLINE


def test_unterminated_string_runs_to_end_of_line() -> None:
    tokens = tokenize_line('dekhao("oops, x)')

    assert _values(tokens) == ['dekhao', '(', '"oops, x)', '\n']
    assert tokens[2].type is TokenType.STRING
    assert not tokens[2].value.endswith('"')


def test_string_keeps_both_quotes() -> None:
    tokens = tokenize_line('string s te "a b"')

    assert tokens[3] == Token(TokenType.STRING, '"a b"', 1)


def test_punctuation_is_split_per_character() -> None:
    assert _values(tokenize_line("a+-*/,()b"))[:-1] == ['a', '+', '-', '*', '/', ',', '(', ')', 'b']


def test_word_runs_cover_identifiers_and_numbers() -> None:
    tokens = tokenize_line("integer total_2 te 42")

    assert _values(tokens) == ['integer', 'total_2', 'te', '42', '\n']
    assert tokens[0].type is TokenType.KEYWORD
    assert tokens[1].type is TokenType.IDENTIFIER
    assert tokens[2].type is TokenType.KEYWORD
    assert tokens[3].type is TokenType.IDENTIFIER


def test_other_characters_fall_back_to_single_symbols() -> None:
    tokens = tokenize_line("x = 3.5;")

    assert _values(tokens) == ['x', '=', '3', '.', '5', ';', '\n']
    assert tokens[1].type is TokenType.SYMBOL
    assert tokens[3].type is TokenType.SYMBOL


def test_tokenize_appends_newline_per_line_and_tracks_line_numbers() -> None:
    tokens = tokenize("a\n\nb\n")

    assert _values(tokens) == ['a', '\n', '\n', 'b', '\n']
    assert [token.line for token in tokens] == [1, 1, 2, 3, 3]


def test_empty_source_has_no_tokens() -> None:
    assert tokenize("") == []


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("\n", [""]),
    ],
)
def test_split_lines(source: str, expected) -> None:
    assert split_lines(source) == expected


def test_word_like_classification() -> None:
    tokens = tokenize_line('x "s" + 1 te')

    assert [token.is_word_like for token in tokens] == [True, True, False, True, True, False]
