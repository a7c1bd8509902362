"""Validation for CLI arguments."""

import os
from pathlib import Path
from typing import Any, Optional

from .errors import CLIValidationError


LOG_LEVELS = {"debug", "info", "warn", "warning", "error"}


def validate_path(value: Any, *, allow_none: bool = False) -> Optional[Path]:
    """
    Validate and convert value to Path.

    Args:
        value: Value to validate (string, PathLike, or None)
        allow_none: Whether None is acceptable

    Raises:
        CLIValidationError: If value is not a valid path type

    Examples:
        >>> validate_path("/tmp/hello.dk")
        PosixPath('/tmp/hello.dk')
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Path value cannot be None",
            hint="Provide a valid file path"
        )

    if isinstance(value, (str, os.PathLike)):
        if not str(value).strip():
            raise CLIValidationError(
                "Path value cannot be empty",
                hint="Provide a valid file path"
            )
        return Path(value)

    raise CLIValidationError(
        f"Expected path-like value, got {type(value).__name__}",
        hint="Provide a string or Path object"
    )


def validate_log_level(value: Optional[str]) -> str:
    """Normalize a log level name, rejecting unknown names."""
    if value is None:
        return "warning"
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        raise CLIValidationError(
            f"Unknown log level: {value}",
            hint=f"Use one of: {', '.join(sorted(LOG_LEVELS))}"
        )
    return level
