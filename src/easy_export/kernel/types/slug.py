"""URL-safe slug value object."""

from __future__ import annotations

import dataclasses
import re
import unicodedata
from typing import Final

from easy_export.kernel.errors.domain import ValidationError

_SLUG_PATTERN: Final = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_SEPARATORS: Final = re.compile(r"[^a-z0-9]+")


@dataclasses.dataclass(frozen=True, slots=True)
class Slug:
    """URL-safe lowercase slug."""

    value: str

    def __post_init__(self) -> None:
        if not _SLUG_PATTERN.match(self.value):
            raise ValidationError(
                f"Invalid slug (must be lowercase alphanumeric + hyphens): {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str) -> "Slug":
        """Normalise arbitrary text into a slug (``parameterize`` rules).

        Folds accented letters to ASCII, lowercases, turns every run of
        non-alphanumeric characters into a single hyphen, then strips hyphens
        from both ends::

            >>> str(Slug.from_text("Mar 5, 2024"))
            'mar-5-2024'
            >>> str(Slug.from_text("févr. 2024"))
            'fevr-2024'
        """
        folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
        value = _SEPARATORS.sub("-", folded.lower()).strip("-")
        return cls(value)


__all__ = ["Slug"]
