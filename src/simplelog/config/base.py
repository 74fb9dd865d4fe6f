"""Config settings – Settings base class and LoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from simplelog.errors import InvalidSettingValueError
from simplelog.levels import LogLevel, LogMode


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


def parse_level(value: Any) -> LogLevel:
    """Accept a :class:`LogLevel` or its case-insensitive name."""
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel.parse(value)
        except ValueError:
            pass
    raise InvalidSettingValueError("level", value, f"expected one of {[m.name.lower() for m in LogLevel]}")


def parse_mode(value: Any) -> LogMode:
    """Accept a :class:`LogMode` or its case-insensitive value."""
    if isinstance(value, LogMode):
        return value
    if isinstance(value, str):
        try:
            return LogMode(value.strip().lower())
        except ValueError:
            pass
    raise InvalidSettingValueError("mode", value, f"expected one of {[m.value for m in LogMode]}")


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Logger configuration read from ``SIMPLELOG_*`` variables.

    ``SIMPLELOG_LEVEL`` (``info``/``debug``), ``SIMPLELOG_MODE``
    (``structured``/``plaintext``), ``SIMPLELOG_USE_GCP_LOGGING`` and
    ``SIMPLELOG_GCP_PROJECT_ID``. ``level`` and ``mode`` also take names and
    are normalised to their enums on construction.
    """

    _prefix: ClassVar[str] = "SIMPLELOG"

    level: LogLevel = LogLevel.INFO
    mode: LogMode = LogMode.STRUCTURED
    use_gcp_logging: bool = True
    gcp_project_id: str = ""

    def _validate(self) -> None:
        self.level = parse_level(self.level)
        self.mode = parse_mode(self.mode)


__all__ = ["LoggerSettings", "Settings", "parse_level", "parse_mode"]
