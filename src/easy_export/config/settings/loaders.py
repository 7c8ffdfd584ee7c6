"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import re
import typing
from typing import Any, Final, TypeVar

from easy_export.config.settings.base import Settings
from easy_export.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_ESCAPES: Final = {"t": "\t", "r": "\r", "n": "\n", "\\": "\\"}
_ESCAPE_PATTERN: Final = re.compile(r"\\([trn\\])")


def unescape(value: str) -> str:
    """Decode ``\\t``, ``\\r``, ``\\n`` and ``\\\\``; other backslashes stay as typed."""
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES[m.group(1)], value)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each dataclass field ``name`` maps to ``settings_class.env_key(name)``;
    fields without a matching variable keep their declared default.
    """

    def load(self, settings_class: type[T]) -> T:
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(field.name, env_key=env_key)
                continue

            try:
                value = self._coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(field.name, raw, str(exc), env_key=env_key) from exc
            if field.metadata.get("escapes") and isinstance(value, str):
                value = unescape(value)
            kwargs[field.name] = value

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is bool:
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int:
            return int(value)
        if type_hint is float:
            return float(value)
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "unescape"]
