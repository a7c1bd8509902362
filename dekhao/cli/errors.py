"""
Error reporting for the ``dekhao`` command.

Every failure ends the process the same way: one message block on stderr
and exit status 1. Transpiler errors render through
:meth:`dekhao.errors.DekhaoError.format`; invocation problems raise a
:class:`CLIError` subclass carrying its own code and hint.

Environment switches:
    DEKHAO_VERBOSE  append a traceback excerpt to the message
    DEKHAO_RERAISE  re-raise the exception instead of exiting
    DEKHAO_DEBUG    both of the above
"""

import os
import sys
import traceback
from typing import NoReturn, Optional

from ..errors import DekhaoError


EXIT_FAILURE = 1

_TRACE_LIMIT = 4000
_TRUE_VALUES = {"1", "true", "yes", "on"}


class CLIError(Exception):
    """An unusable invocation of the command line."""

    code = "CLI_ERROR"

    def __init__(self, message: str, *, hint: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        if code is not None:
            self.code = code


class CLIConfigError(CLIError):
    """The workspace configuration could not be loaded."""

    code = "CLI_CONFIG_ERROR"


class CLIValidationError(CLIError):
    """A path or option given on the command line has an unusable value."""

    code = "CLI_VALIDATION_ERROR"


def format_cli_error(exc: BaseException, *, include_traceback: bool = False) -> str:
    """
    Render an exception as the message block printed on stderr.

    Examples:
        >>> print(format_cli_error(CLIValidationError("Bad file", hint="Pass a .dk file")))
        Error [CLI_VALIDATION_ERROR]: Bad file
        Hint: Pass a .dk file
    """
    if isinstance(exc, CLIError):
        lines = [f"Error [{exc.code}]: {exc.message}"]
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    elif isinstance(exc, DekhaoError):
        lines = [f"Error: {exc.format()}"]
    else:
        lines = [f"Error: {type(exc).__name__}: {exc}"]

    if include_traceback:
        lines.extend(["", "Traceback:", _traceback_excerpt()])
    return "\n".join(lines)


def _traceback_excerpt() -> str:
    trace = traceback.format_exc().strip()
    if len(trace) > _TRACE_LIMIT:
        trace = trace[:_TRACE_LIMIT - 3] + "..."
    return trace


def _env_enabled(*names: str) -> bool:
    return any(os.getenv(name, "").strip().lower() in _TRUE_VALUES for name in names)


def verbose_requested(flag: bool = False) -> bool:
    return flag or _env_enabled("DEKHAO_VERBOSE", "DEKHAO_DEBUG")


def reraise_requested() -> bool:
    return _env_enabled("DEKHAO_RERAISE", "DEKHAO_DEBUG")


def handle_cli_exception(exc: BaseException, *, verbose: bool = False) -> NoReturn:
    """Report ``exc`` on stderr and exit, or re-raise it when debugging."""
    if reraise_requested():
        raise exc
    print(format_cli_error(exc, include_traceback=verbose_requested(verbose)), file=sys.stderr)
    sys.exit(EXIT_FAILURE)
