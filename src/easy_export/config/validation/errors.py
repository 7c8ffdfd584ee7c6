"""Config validation errors.

Every error names both the settings field and the environment variable it is
read from, so a bad ``EASY_EXPORT_DELIMITER`` can be traced from either end.
"""
from __future__ import annotations

from typing import Any

from easy_export.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting {setting_name!r} is missing (set {env_key})",
            detail={"setting": setting_name, "env_key": env_key},
            **kwargs,
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        source = f" (from {env_key})" if env_key else ""
        super().__init__(
            f"Setting {setting_name!r}{source} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "value": repr(value)},
            **kwargs,
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
