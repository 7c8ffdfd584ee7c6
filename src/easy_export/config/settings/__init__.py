"""Config settings – 12-factor env-based configuration."""
from easy_export.config.settings.base import Settings
from easy_export.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
