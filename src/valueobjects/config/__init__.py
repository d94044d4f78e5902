"""Config – 12-factor settings and loaders."""

from valueobjects.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from valueobjects.config.settings import Settings, ValuesSettings
from valueobjects.kernel.errors.application import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "ValuesSettings",
]
