"""Dekhao parser package.

Public API:
    parse_source(source, path) -> Program
    parse_tokens(tokens, path) -> Program
    DekhaoParser - the statement parser class
"""

from .parse import DekhaoParser, parse_source, parse_tokens
from .expressions import ArgumentList, ExpressionBuffer, ExpressionParsingMixin
from .grammar.lexer import Token, TokenType, tokenize, tokenize_line, tokenize_lines

__all__ = [
    "DekhaoParser",
    "parse_source",
    "parse_tokens",
    "ArgumentList",
    "ExpressionBuffer",
    "ExpressionParsingMixin",
    "Token",
    "TokenType",
    "tokenize",
    "tokenize_line",
    "tokenize_lines",
]
