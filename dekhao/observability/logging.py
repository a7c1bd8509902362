"""Centralised logging helpers for the Dekhao transpiler."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = "dekhao") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_skipped_line(
    *,
    reason: str,
    line: int,
    text: str,
    path: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured debug entry for a source line the parser skipped."""

    payload: Dict[str, Any] = {
        "reason": reason,
        "line": line,
        "text": text,
    }
    if path:
        payload["path"] = path
    if extras:
        payload.update(extras)
    target_logger = logger or get_logger("dekhao.parser")
    target_logger.debug(
        "Skipping line %d (%s): %s",
        line,
        reason,
        text,
        extra={"dekhao_event": "line_skipped", "dekhao_data": payload},
    )
