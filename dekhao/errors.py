"""
Run-level failures of a Dekhao transpilation.

Problems inside the source never raise: the parser records them as
skipped lines and the run continues. The exceptions here end a run
because a file could not be read or written, or because the workspace
configuration is unusable.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union


PathArg = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class ErrorLocation:
    """File (and, for configuration files, line) an error refers to."""

    path: Optional[str] = None
    line: Optional[int] = None

    def describe(self) -> Optional[str]:
        if not self.path:
            return None
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"


class DekhaoError(Exception):
    """Base class for all transpiler errors surfaced to users."""

    code = "DEKHAO_ERROR"
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[PathArg] = None,
        line: Optional[int] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path=str(path) if path else None, line=line)
        if hint is not None:
            self.hint = hint

    @property
    def path(self) -> Optional[str]:
        return self.location.path

    @property
    def line(self) -> Optional[int]:
        return self.location.line

    def format(self) -> str:
        """Render as ``message (path:line; CODE) Hint: ...``."""
        meta = [part for part in (self.location.describe(), self.code) if part]
        text = self.message
        if meta:
            text = f"{text} ({'; '.join(meta)})"
        if self.hint:
            text = f"{text} Hint: {self.hint}"
        return text


class InputUnavailableError(DekhaoError):
    """The input file could not be opened or read."""

    code = "DEKHAO_INPUT_UNAVAILABLE"
    hint = "Check that the input file exists and is readable."

    def __init__(self, path: PathArg, *, reason: Optional[str] = None) -> None:
        message = f"Cannot open {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)
        self.reason = reason


class EmptyInputError(DekhaoError):
    """The input produced no tokens at all."""

    code = "DEKHAO_EMPTY_INPUT"
    hint = "Add at least one line of Dekhao source to the input file."

    def __init__(self, path: Optional[PathArg] = None) -> None:
        super().__init__("No tokens (or failed to read input)", path=path)


class OutputWriteError(DekhaoError):
    """Generated C++ could not be written to its destination."""

    code = "DEKHAO_OUTPUT_WRITE"
    hint = "Check that the output directory is writable."

    def __init__(self, path: PathArg, *, reason: Optional[str] = None) -> None:
        message = f"Could not write {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)
        self.reason = reason


class ConfigError(DekhaoError):
    """A workspace configuration file is missing, unreadable or invalid."""

    code = "DEKHAO_CONFIG"


__all__ = [
    "ErrorLocation",
    "DekhaoError",
    "InputUnavailableError",
    "EmptyInputError",
    "OutputWriteError",
    "ConfigError",
]
