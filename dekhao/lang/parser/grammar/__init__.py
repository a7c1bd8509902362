"""Grammar-level building blocks for the Dekhao parser."""

from .lexer import Token, TokenType, Lexer, tokenize, tokenize_line, tokenize_lines

__all__ = ["Token", "TokenType", "Lexer", "tokenize", "tokenize_line", "tokenize_lines"]
