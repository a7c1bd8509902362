"""Statement node definitions produced by the Dekhao parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class SkipReason(str, Enum):
    """Why a source line produced no code."""

    UNKNOWN_STATEMENT = "unknown_statement"
    MALFORMED_CALL = "malformed_call"
    UNTERMINATED_CALL = "unterminated_call"
    INSUFFICIENT_TOKENS = "insufficient_tokens"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _SKIP_DESCRIPTIONS[self]


_SKIP_DESCRIPTIONS = {
    SkipReason.UNKNOWN_STATEMENT: "line does not start with a statement keyword",
    SkipReason.MALFORMED_CALL: "print keyword is not followed by '('",
    SkipReason.UNTERMINATED_CALL: "print call has no closing ')'",
    SkipReason.INSUFFICIENT_TOKENS: "declaration needs a name, 'te' and a value",
}


@dataclass
class PrintStatement:
    """dekhao(arg, ...): write each argument, then a newline."""

    arguments: List[str] = field(default_factory=list)
    line: int = 0


@dataclass
class Declaration:
    """<type> <name> te <initializer>"""

    type_keyword: str
    name: str
    initializer: str
    line: int = 0


@dataclass
class UnrecognizedLine:
    """A line the parser skipped, with the reason it was skipped."""

    reason: SkipReason
    line: int = 0
    text: str = ""


Statement = Union[PrintStatement, Declaration, UnrecognizedLine]


@dataclass
class Program:
    """All statements of one source file, in source order."""

    statements: List[Statement] = field(default_factory=list)
    path: str = ""

    @property
    def emittable(self) -> List[Union[PrintStatement, Declaration]]:
        return [stmt for stmt in self.statements if not isinstance(stmt, UnrecognizedLine)]

    @property
    def skipped(self) -> List[UnrecognizedLine]:
        return [stmt for stmt in self.statements if isinstance(stmt, UnrecognizedLine)]


__all__ = [
    "SkipReason",
    "PrintStatement",
    "Declaration",
    "UnrecognizedLine",
    "Statement",
    "Program",
]
