"""Application export – ExportSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from easy_export.application.export.column import PLACEHOLDER
from easy_export.config.settings import EnvSettingsLoader, Settings
from easy_export.config.validation import InvalidSettingValueError

__all__ = ["ExportSettings"]


@dataclasses.dataclass(frozen=True)
class ExportSettings(Settings):
    """Tunables for CSV rendering and cell resolution.

    Read from ``EASY_EXPORT_*`` environment variables by :meth:`from_env`.
    """

    _prefix: ClassVar[str] = "EASY_EXPORT"

    delimiter: str = dataclasses.field(default=",", metadata={"escapes": True})
    line_terminator: str = dataclasses.field(default="\n", metadata={"escapes": True})
    placeholder: str = PLACEHOLDER
    strict: bool = False
    date_format: str = "%Y-%m-%d"
    bom: bool = False

    def _validate(self) -> None:
        if len(self.delimiter) != 1:
            self._reject("delimiter", "must be a single character")
        if not self.line_terminator:
            self._reject("line_terminator", "must not be empty")
        if not self.date_format:
            self._reject("date_format", "must not be empty")

    def _reject(self, name: str, reason: str) -> None:
        raise InvalidSettingValueError(name, getattr(self, name), reason, env_key=self.env_key(name))

    @classmethod
    def from_env(cls) -> "ExportSettings":
        return EnvSettingsLoader().load(cls)
