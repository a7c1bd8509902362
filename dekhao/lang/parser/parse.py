"""Statement parser for the Dekhao language.

A single forward pass over the token stream. Each source line becomes one
statement: a print statement, a declaration, or an unrecognized line that
records why it was skipped. Nothing here raises for bad input; skipping a
line is never fatal.
"""

from __future__ import annotations
from typing import List, Optional

from dekhao.ast import (
    Declaration,
    PrintStatement,
    Program,
    SkipReason,
    Statement,
    UnrecognizedLine,
)
from dekhao.lang.keywords import BIND_KEYWORD, PRINT_KEYWORD, TYPE_KEYWORDS
from dekhao.observability.logging import log_skipped_line

from .grammar.lexer import Token, TokenType, tokenize
from .expressions import ExpressionParsingMixin


# Tokens a declaration needs after its type keyword: name, 'te', value
_DECLARATION_MIN_TOKENS = 3


class DekhaoParser(ExpressionParsingMixin):
    """Line-oriented parser producing a :class:`Program` of statements."""

    def __init__(self, tokens: List[Token], *, path: str = ""):
        self.tokens = tokens
        self.path = path
        self.pos = 0
        self.statements: List[Statement] = []

    # ====================================================================
    # Token Management
    # ====================================================================

    def peek(self, offset: int = 0) -> Optional[Token]:
        """Peek at token without consuming."""
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def current(self) -> Optional[Token]:
        return self.peek(0)

    def advance(self) -> Optional[Token]:
        """Consume and return current token."""
        token = self.current()
        if token is not None:
            self.pos += 1
        return token

    def match_value(self, value: str, *, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and not token.is_newline and token.value == value

    def skip_newlines(self) -> None:
        while self.current() is not None and self.current().is_newline:
            self.pos += 1

    def skip_to_end_of_line(self) -> None:
        """Discard tokens up to, not including, the next NEWLINE."""
        while self.current() is not None and not self.current().is_newline:
            self.pos += 1

    def tokens_left_on_line(self) -> int:
        count = 0
        while True:
            token = self.peek(count)
            if token is None or token.is_newline:
                return count
            count += 1

    def line_text(self, start: int) -> str:
        """Render the tokens of the line starting at ``start`` for diagnostics."""
        values = []
        for token in self.tokens[start:]:
            if token.is_newline:
                break
            values.append(token.value)
        return " ".join(values)

    # ====================================================================
    # High-Level Parsing
    # ====================================================================

    def parse(self) -> Program:
        """
        Parse every line of the token stream.

        Grammar:
            Program   = { Line } ;
            Line      = PrintStmt | Declaration | Other , NEWLINE ;
            PrintStmt = "dekhao" , "(" , ArgumentList ;
            Declaration = TypeKeyword , Name , [ "te" ] , Expression ;
        """
        self.skip_newlines()
        while self.current() is not None:
            statement = self.parse_statement()
            self.statements.append(statement)
            if isinstance(statement, UnrecognizedLine):
                log_skipped_line(
                    reason=str(statement.reason),
                    line=statement.line,
                    text=statement.text,
                    path=self.path or None,
                )
            self.skip_newlines()
        return Program(statements=list(self.statements), path=self.path)

    def parse_statement(self) -> Statement:
        token = self.current()
        if token.type is TokenType.KEYWORD and token.value == PRINT_KEYWORD:
            return self.parse_print_statement()
        if token.type is TokenType.KEYWORD and token.value in TYPE_KEYWORDS:
            if self.tokens_left_on_line() - 1 >= _DECLARATION_MIN_TOKENS:
                return self.parse_declaration()
            return self._skip_line(SkipReason.INSUFFICIENT_TOKENS)
        return self._skip_line(SkipReason.UNKNOWN_STATEMENT)

    def parse_print_statement(self) -> Statement:
        """
        Parse a print statement.

        Grammar:
            PrintStmt = "dekhao" , "(" , ArgumentList , { ignored } ;
        """
        start = self.pos
        keyword = self.advance()
        if not self.match_value("("):
            self.skip_to_end_of_line()
            return UnrecognizedLine(
                reason=SkipReason.MALFORMED_CALL,
                line=keyword.line,
                text=self.line_text(start),
            )
        self.advance()
        call = self.split_arguments()
        if not call.terminated:
            return UnrecognizedLine(
                reason=SkipReason.UNTERMINATED_CALL,
                line=keyword.line,
                text=self.line_text(start),
            )
        # Anything after the closing parenthesis is discarded
        self.skip_to_end_of_line()
        return PrintStatement(arguments=call.arguments, line=keyword.line)

    def parse_declaration(self) -> Declaration:
        """
        Parse a typed declaration.

        Grammar:
            Declaration = TypeKeyword , Name , [ "te" ] , Expression ;
        """
        type_token = self.advance()
        name_token = self.advance()
        if self.match_value(BIND_KEYWORD):
            self.advance()
        initializer = self.read_expression()
        return Declaration(
            type_keyword=type_token.value,
            name=name_token.value,
            initializer=initializer,
            line=type_token.line,
        )

    def _skip_line(self, reason: SkipReason) -> UnrecognizedLine:
        start = self.pos
        line = self.current().line
        self.skip_to_end_of_line()
        return UnrecognizedLine(reason=reason, line=line, text=self.line_text(start))


def parse_tokens(tokens: List[Token], path: str = "") -> Program:
    """Parse an already tokenized stream into a :class:`Program`."""
    return DekhaoParser(tokens, path=path).parse()


def parse_source(source: str, path: str = "") -> Program:
    """Tokenize and parse Dekhao source text."""
    return parse_tokens(tokenize(source), path=path)


__all__ = ["DekhaoParser", "parse_tokens", "parse_source"]
