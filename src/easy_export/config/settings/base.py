"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for 12-factor settings.

    Subclasses are frozen dataclasses; ``_prefix`` names the environment
    variable prefix used by the loaders. Mark a ``str`` field with
    ``metadata={"escapes": True}`` to have ``\\t``, ``\\r`` and ``\\n`` in its
    environment value decoded.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``delimiter`` -> ``EASY_EXPORT_DELIMITER`` for ``_prefix = "EASY_EXPORT"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
