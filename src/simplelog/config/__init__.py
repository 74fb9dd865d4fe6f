"""Config – 12-factor settings for building a Logger from the environment."""
from simplelog.config.base import LoggerSettings, Settings
from simplelog.config.factory import SettingsFactory
from simplelog.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggerSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
