"""Config – 12-factor settings and loaders."""

from easy_export.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from easy_export.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
