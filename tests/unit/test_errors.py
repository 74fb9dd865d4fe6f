"""Unit tests for the error hierarchy."""

from __future__ import annotations

import pytest

from simplelog.config import LoggerSettings
from simplelog.errors import BaseError, ConfigError, InvalidSettingValueError, MissingRequiredSettingError


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("x").code == "simplelog_error"

    def test_explicit_code_and_detail(self) -> None:
        err = BaseError("boom", code="c", detail={"k": 1})
        assert (err.message, err.code, err.detail) == ("boom", "c", {"k": 1})
        assert str(err) == "boom"


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(ConfigError, BaseError)

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("SIMPLELOG_LEVEL")
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "SIMPLELOG_LEVEL"}
        assert "SIMPLELOG_LEVEL" in err.message

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("mode", "xml", "unknown mode")
        assert err.code == "invalid_setting_value"
        assert err.value == "xml"
        assert err.detail == {"setting": "mode", "reason": "unknown mode"}

    def test_settings_report_offending_field(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LoggerSettings(mode="xml")
        assert exc_info.value.detail["setting"] == "mode"
