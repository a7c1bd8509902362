"""Lexical analyzer (tokenizer) for the Dekhao language.

Converts line-oriented source text into a flat stream of tagged tokens.
Every source line is followed by one NEWLINE token, which is the only
statement delimiter the parser knows about.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

from dekhao.lang.keywords import RESERVED_WORDS
from dekhao.observability.logging import get_logger


logger = get_logger("dekhao.lexer")


class TokenType(Enum):
    """Token kinds for the Dekhao language."""

    IDENTIFIER = auto()   # identifiers and numeric literals
    KEYWORD = auto()
    STRING = auto()       # quoted literal, quotes included
    PUNCTUATION = auto()  # ( ) + - * / ,
    SYMBOL = auto()       # any other single character
    NEWLINE = auto()


WORD_LIKE_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.KEYWORD, TokenType.STRING})

PUNCTUATION_CHARS = frozenset("()+-*/,")

NEWLINE_VALUE = "\n"


@dataclass(frozen=True)
class Token:
    """A single token tagged with its kind and source line."""

    type: TokenType
    value: str
    line: int = 0

    @property
    def is_word_like(self) -> bool:
        return self.type in WORD_LIKE_TYPES

    @property
    def is_newline(self) -> bool:
        return self.type is TokenType.NEWLINE

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line})"


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == '_'


class Lexer:
    """Tokenizer for a single line of Dekhao source."""

    def __init__(self, line: str, line_number: int = 1):
        self.source = line
        self.line_number = line_number
        self.pos = 0
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def add_token(self, token_type: TokenType, value: str) -> None:
        self.tokens.append(Token(type=token_type, value=value, line=self.line_number))

    def read_string(self) -> str:
        """Read a string literal through its closing quote, or to end of line."""
        start = self.pos
        end = self.source.find('"', start + 1)
        if end == -1:
            self.pos = len(self.source)
        else:
            self.pos = end + 1
        return self.source[start:self.pos]

    def read_word(self) -> str:
        """Read an identifier, keyword or number."""
        start = self.pos
        while self.peek() is not None and _is_word_char(self.peek()):
            self.pos += 1
        return self.source[start:self.pos]

    def tokenize(self) -> List[Token]:
        """Tokenize the line and append its NEWLINE token."""
        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char.isspace():
                self.pos += 1
                continue

            if char == '"':
                self.add_token(TokenType.STRING, self.read_string())
                continue

            if char in PUNCTUATION_CHARS:
                self.add_token(TokenType.PUNCTUATION, char)
                self.pos += 1
                continue

            if _is_word_char(char):
                value = self.read_word()
                token_type = TokenType.KEYWORD if value in RESERVED_WORDS else TokenType.IDENTIFIER
                self.add_token(token_type, value)
                continue

            self.add_token(TokenType.SYMBOL, char)
            self.pos += 1

        self.add_token(TokenType.NEWLINE, NEWLINE_VALUE)
        return self.tokens


def tokenize_line(line: str, line_number: int = 1) -> List[Token]:
    """Tokenize one source line, NEWLINE token included."""
    return Lexer(line, line_number).tokenize()


def split_lines(source: str) -> List[str]:
    """Split source on newlines; a trailing newline does not open a new line."""
    if not source:
        return []
    lines = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    return lines


def tokenize_lines(lines: Iterable[str]) -> List[Token]:
    """Tokenize an iterable of lines into one token stream."""
    tokens: List[Token] = []
    count = 0
    for count, line in enumerate(lines, start=1):
        tokens.extend(tokenize_line(line.rstrip("\n"), count))
    logger.debug("Tokenized %d line(s) into %d token(s)", count, len(tokens))
    return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize Dekhao source code."""
    return tokenize_lines(split_lines(source))


__all__ = [
    "Token",
    "TokenType",
    "WORD_LIKE_TYPES",
    "PUNCTUATION_CHARS",
    "NEWLINE_VALUE",
    "Lexer",
    "tokenize_line",
    "tokenize_lines",
    "split_lines",
    "tokenize",
]
