"""Logging set-up: all records go to a single log file."""

from __future__ import annotations

import logging
from pathlib import Path

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "1": logging.ERROR,
    "2": logging.WARNING,
    "3": logging.INFO,
    "4": logging.DEBUG,
    "5": TRACE,
}

DEFAULT_LOG_FILE = Path("logs") / "app.log"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_MARKER = "_filetamer_handler"


def _resolve(level: str | int) -> int:
    if isinstance(level, bool):
        raise ValueError(f"invalid logging level: {level!r}")
    if isinstance(level, int):
        return level
    try:
        return LEVELS[level.strip().lower()]
    except KeyError:
        raise ValueError(f"invalid logging level: {level!r}") from None


def init(level: str | int, log_file: str | Path = DEFAULT_LOG_FILE) -> logging.Handler:
    """Send log records at ``level`` and above to ``log_file``, truncating it.

    Returns the installed handler; a handler installed by an earlier call is
    removed. The log file's directory must already exist.
    """
    threshold = _resolve(level)
    handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(threshold)
    setattr(handler, _MARKER, True)

    root = logging.getLogger()
    for old in [h for h in root.handlers if getattr(h, _MARKER, False)]:
        root.removeHandler(old)
        old.close()
    root.addHandler(handler)
    root.setLevel(threshold)
    return handler