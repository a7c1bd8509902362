"""Lightweight observability helpers for transpiler logging."""

from __future__ import annotations

from .logging import get_logger, log_skipped_line

__all__ = [
    "get_logger",
    "log_skipped_line",
]
