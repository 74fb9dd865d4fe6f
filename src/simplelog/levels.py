"""Verbosity, output mode and printed level names."""
from __future__ import annotations

import logging
from enum import Enum, IntEnum


class LogLevel(IntEnum):
    """Verbosity threshold chosen at construction."""

    INFO = 0
    DEBUG = 1

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        """Look up a level by case-insensitive name (``"info"``, ``"debug"``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown log level {name!r}") from None


class LogMode(str, Enum):
    """Where a record goes: structlog JSON, or a bare line on stdout."""

    STRUCTURED = "structured"
    PLAINTEXT = "plaintext"


class PrintLevel(str, Enum):
    """Level names handed to :meth:`LogHandler.get_message`."""

    DEBUG = "DEBG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]

    @property
    def sink_method(self) -> str:
        """Name of the structlog bound-logger method for this level."""
        return _SINK_METHODS[self]


_STDLIB_LEVELS = {
    PrintLevel.DEBUG: logging.DEBUG,
    PrintLevel.INFO: logging.INFO,
    PrintLevel.WARN: logging.WARNING,
    PrintLevel.ERROR: logging.ERROR,
}

_SINK_METHODS = {
    PrintLevel.DEBUG: "debug",
    PrintLevel.INFO: "info",
    PrintLevel.WARN: "warning",
    PrintLevel.ERROR: "error",
}


__all__ = ["LogLevel", "LogMode", "PrintLevel"]
