"""Logging helpers shared by the checker, the git client and the CLI.

Provides root logger configuration plus small utilities for structured
`extra=` payloads and timing of slow operations.
"""
from __future__ import annotations

import logging
import sys
import time
from typing import Any, Dict, Optional

from constants import Constants


def configure_logging(level: str = "INFO", log_file: Optional[str] = None, quiet: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. "INFO").
        log_file: Optional path; when set, records are also written there.
        quiet: Suppress the stderr handler.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    formatter = logging.Formatter(Constants.LOG_FORMAT)
    if not quiet:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    if not root.handlers:
        root.addHandler(logging.NullHandler())


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an `extra=` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by logger."""
    return logger.isEnabledFor(logging.DEBUG)


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.monotonic()
        self._end = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.monotonic()

    def duration_ms(self) -> int:
        """Elapsed milliseconds; measured up to now while still inside the block."""
        end = self._end if self._end is not None else time.monotonic()
        return int((end - self._start) * 1000)
