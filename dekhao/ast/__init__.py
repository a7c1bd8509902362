"""Dataclasses representing parsed Dekhao statements."""

from .statements import (
    Declaration,
    PrintStatement,
    Program,
    SkipReason,
    Statement,
    UnrecognizedLine,
)

__all__ = [
    "Declaration",
    "PrintStatement",
    "Program",
    "SkipReason",
    "Statement",
    "UnrecognizedLine",
]
