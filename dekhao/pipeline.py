"""End-to-end transpilation: source text to C++ text."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import List, Optional, Union

from dekhao.ast import Program, UnrecognizedLine
from dekhao.codegen.cpp import DEFAULT_INDENT, CppEmitter, EmissionContext
from dekhao.errors import EmptyInputError, OutputWriteError
from dekhao.lang.parser.grammar.lexer import Token, tokenize
from dekhao.lang.parser.parse import parse_tokens
from dekhao.loader import read_tokens
from dekhao.observability.logging import get_logger


logger = get_logger("dekhao.pipeline")


@dataclass
class TranspileResult:
    """Everything one transpilation run produced."""

    tokens: List[Token]
    program: Program
    context: EmissionContext
    code: str
    path: str = ""

    @property
    def skipped(self) -> List[UnrecognizedLine]:
        return self.program.skipped

    @property
    def statement_count(self) -> int:
        return len(self.program.emittable)


def transpile_tokens(tokens: List[Token], *, path: str = "", indent: str = DEFAULT_INDENT) -> TranspileResult:
    program = parse_tokens(tokens, path=path)
    context = EmissionContext()
    code = CppEmitter(indent=indent).generate(program, context)
    logger.debug(
        "Transpiled %d statement(s), skipped %d line(s)",
        len(program.emittable),
        len(program.skipped),
    )
    return TranspileResult(tokens=tokens, program=program, context=context, code=code, path=path)


def transpile_source(source: str, *, path: str = "", indent: str = DEFAULT_INDENT) -> TranspileResult:
    """
    Transpile Dekhao source text.

    Raises:
        EmptyInputError: If the source yields no tokens.
    """
    tokens = tokenize(source)
    if not tokens:
        raise EmptyInputError(path or None)
    return transpile_tokens(tokens, path=path, indent=indent)


def transpile_file(path: Union[str, PathLike], *, indent: str = DEFAULT_INDENT) -> TranspileResult:
    """Read, tokenize and transpile a source file."""
    tokens = read_tokens(path)
    return transpile_tokens(tokens, path=str(path), indent=indent)


def write_output(code: str, destination: Union[str, PathLike]) -> Path:
    """Write generated code verbatim, creating parent directories as needed."""
    target = Path(destination)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(target, reason=exc.strerror or str(exc)) from exc
    logger.info("Wrote generated code to %s", target)
    return target


__all__ = [
    "TranspileResult",
    "transpile_tokens",
    "transpile_source",
    "transpile_file",
    "write_output",
]
