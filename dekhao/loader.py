"""Utilities for reading Dekhao source files into token streams."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import List, Union

from dekhao.errors import EmptyInputError, InputUnavailableError
from dekhao.lang.parser.grammar.lexer import Token, split_lines, tokenize_lines
from dekhao.observability.logging import get_logger


logger = get_logger("dekhao.loader")


def load_source(path: Union[str, PathLike]) -> str:
    """
    Read the whole source file.

    Bytes that are not valid UTF-8 are replaced with U+FFFD and the run
    continues; only a file that cannot be opened is fatal.

    Raises:
        InputUnavailableError: If the file cannot be opened or read.
    """
    source_path = Path(path)
    try:
        try:
            return source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.warning(
                "%s is not valid UTF-8 (first bad byte at offset %d); replacing undecodable bytes",
                source_path,
                exc.start,
            )
            return source_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputUnavailableError(source_path, reason=exc.strerror or str(exc)) from exc


def read_tokens(path: Union[str, PathLike]) -> List[Token]:
    """
    Tokenize a source file.

    Raises:
        InputUnavailableError: If the file cannot be opened.
        EmptyInputError: If the file yields no tokens.
    """
    source = load_source(path)
    tokens = tokenize_lines(split_lines(source))
    if not tokens:
        raise EmptyInputError(path)
    logger.debug("Read %d token(s) from %s", len(tokens), path)
    return tokens


__all__ = ["load_source", "read_tokens"]
