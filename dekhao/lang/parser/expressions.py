"""Expression and argument reading methods for DekhaoParser.

Expressions are never parsed into a tree. They are re-serialized token by
token, with a single space inserted only between two adjacent word-like
tokens so that identifiers, numbers and strings do not fuse together.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from dekhao.lang.keywords import BIND_KEYWORD
from .grammar.lexer import Token, TokenType


class ExpressionBuffer:
    """Accumulates token text, applying the word-like spacing rule."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._previous: Optional[Token] = None

    def append(self, token: Token) -> None:
        if self._previous is not None and self._previous.is_word_like and token.is_word_like:
            self._parts.append(" ")
        self._parts.append(token.value)
        self._previous = token

    def flush(self, *, strip: bool = True) -> str:
        text = "".join(self._parts)
        if strip:
            text = text.strip()
        self._parts = []
        self._previous = None
        return text


@dataclass
class ArgumentList:
    """Top-level arguments of a call, and whether its ')' was found."""

    arguments: List[str] = field(default_factory=list)
    terminated: bool = True


class ExpressionParsingMixin:
    """Mixin with argument splitting and expression reading methods."""

    def split_arguments(self) -> ArgumentList:
        """
        Split call arguments on top-level commas.

        The opening parenthesis must already be consumed. Consumes tokens
        through the matching closing parenthesis; NEWLINE tokens inside the
        call are ignored, so a call may span several lines. Empty arguments
        are dropped.

        Grammar:
            ArgumentList = [ Argument , { "," , Argument } ] , ")" ;
        """
        result = ArgumentList()
        buffer = ExpressionBuffer()
        depth = 0

        def flush() -> None:
            text = buffer.flush()
            if text:
                result.arguments.append(text)

        while self.current() is not None:
            token = self.advance()
            if token.type is TokenType.NEWLINE:
                continue
            if token.value == "(" and token.type is TokenType.PUNCTUATION:
                depth += 1
                buffer.append(token)
            elif token.value == ")" and token.type is TokenType.PUNCTUATION:
                if depth == 0:
                    flush()
                    return result
                depth -= 1
                buffer.append(token)
            elif token.value == "," and token.type is TokenType.PUNCTUATION and depth == 0:
                flush()
            else:
                buffer.append(token)

        flush()
        result.terminated = False
        return result

    def read_expression(self) -> str:
        """
        Read tokens up to the end of the line as one expression string.

        Leaves the cursor on the NEWLINE token. A stray binding keyword
        inside the expression is dropped.
        """
        buffer = ExpressionBuffer()
        while self.current() is not None and not self.current().is_newline:
            token = self.advance()
            if token.value == BIND_KEYWORD:
                continue
            buffer.append(token)
        return buffer.flush(strip=False)
