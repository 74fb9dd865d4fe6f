"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import enum
import logging
import os
from typing import Any, TypeVar

from simplelog.config.base import Settings
from simplelog.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_logger = logging.getLogger("simplelog")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """``LoggerSettings.level`` → ``SIMPLELOG_LEVEL``."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Values are coerced from the field's declared type: ``bool`` accepts
    ``1/0``, ``true/false``, ``yes/no`` and ``on/off``; ``int`` must parse;
    an enum-typed field (``LoggerSettings.level``/``mode``) is converted by
    the enum itself. Anything else stays a string.
    """

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(key)
                continue
            kwargs[field.name] = self._coerce(key, raw, field)

        if kwargs:
            _logger.debug("%s read from environment: %s", settings_class.__name__, sorted(kwargs))
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"cannot build {settings_class.__name__}: {exc}") from exc

    @staticmethod
    def _coerce(key: str, raw: str, field: dataclasses.Field[Any]) -> Any:
        type_hint = field.type
        if type_hint is bool or type_hint == "bool":
            value = raw.strip().lower()
            if value in _TRUE:
                return True
            if value in _FALSE:
                return False
            raise InvalidSettingValueError(key, raw, "expected a boolean")
        if type_hint is int or type_hint == "int":
            try:
                return int(raw)
            except ValueError:
                raise InvalidSettingValueError(key, raw, "expected an integer") from None
        if isinstance(field.default, enum.Enum):
            enum_cls = type(field.default)
            parse = getattr(enum_cls, "parse", None)
            try:
                return parse(raw) if parse is not None else enum_cls(raw.strip().lower())
            except ValueError:
                choices = [m.name.lower() for m in enum_cls]
                raise InvalidSettingValueError(key, raw, f"expected one of {choices}") from None
        return raw


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from dotenv import load_dotenv

        if not load_dotenv(self._env_file, override=self._override):
            _logger.debug("no settings found in %s", self._env_file)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
