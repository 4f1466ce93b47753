"""Leveled logging to standard error, with a configurable minimal level."""

from __future__ import annotations

import enum
import sys
from typing import TextIO


class LogLevel(enum.IntEnum):
    """Severity of a log message. Messages below the minimal level are dropped."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    NO_LOGS = 3


class BuildError(Exception):
    """Raised when a build step (file operation, command, ...) fails."""


_PREFIXES = {
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
}


class Logger:
    """Writes prefixed messages to a stream, suppressing those below a level.

    When ``stream`` is ``None`` the current ``sys.stderr`` is used at the time
    of each write.
    """

    def __init__(
        self,
        minimal_level: LogLevel = LogLevel.INFO,
        stream: TextIO | None = None,
    ) -> None:
        self.minimal_level = LogLevel(minimal_level)
        self.stream = stream

    def log(self, level: LogLevel, fmt: str, *args: object) -> None:
        """Write ``fmt % args`` with a level prefix, unless suppressed."""
        level = LogLevel(level)
        if level < self.minimal_level or level is LogLevel.NO_LOGS:
            return
        message = fmt % args if args else fmt
        out = self.stream if self.stream is not None else sys.stderr
        out.write(f"{_PREFIXES[level]}{message}\n")


_default_logger = Logger()


def log(level: LogLevel, fmt: str, *args: object) -> None:
    """Log through the package-wide logger."""
    _default_logger.log(level, fmt, *args)


def set_minimal_log_level(level: LogLevel) -> LogLevel:
    """Set the package-wide minimal level and return the previous one."""
    previous = _default_logger.minimal_level
    _default_logger.minimal_level = LogLevel(level)
    return previous