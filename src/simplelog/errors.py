"""Errors raised while building a logger from configuration.

Logging calls themselves never raise.

Hierarchy::

    BaseError
    └── ConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of simplelog's errors.

    ``code`` is a stable slug for the failure kind and ``detail`` names the
    offending setting, so callers can report it without parsing the message.
    """

    default_code: str = "simplelog_error"

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})


class ConfigError(BaseError):
    """``LoggerSettings`` could not be loaded or built."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"setting {setting_name} is required but not set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"setting {setting_name}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "BaseError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
