"""Application export – ExportSchema and the ExportConfig declaration DSL."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

import inflection

from easy_export.application.export.column import ColumnSpec, build_columns

__all__ = ["ExportConfig", "ExportSchema", "ScopeFn", "partial_name_for"]

ScopeFn = Callable[[Mapping[str, Any]], Sequence[Any]]

_MISSING: Any = object()


def partial_name_for(model: type) -> str:
    """``AppointmentSlot`` -> ``appointment_slots``."""
    return inflection.pluralize(inflection.underscore(model.__name__))


@dataclass(frozen=True)
class ExportSchema:
    """The registered export shape of one model type."""

    model: type
    partial_name: str
    scope: ScopeFn | None
    columns: tuple[ColumnSpec, ...]

    @property
    def headers(self) -> tuple[str, ...]:
        return tuple(col.header for col in self.columns)


class ExportConfig:
    """Receiver of an export declaration block.

    ``scope`` and ``fields`` set a value when called with an argument and
    return the current one when called without::

        def declare(export: ExportConfig) -> None:
            export.scope(lambda options: Appointment.query(**options))
            export.fields([
                ("Date", "date"),
                ("Client", lambda a: a.client.full_name),
                ("Source", "web"),
            ])
    """

    def __init__(self) -> None:
        self._scope: ScopeFn | None = None
        self._columns: tuple[ColumnSpec, ...] = ()

    def scope(self, value: ScopeFn | None = _MISSING) -> ScopeFn | None:
        if value is not _MISSING:
            self._scope = value
        return self._scope

    def fields(self, value: Sequence[Sequence[Any]] = _MISSING) -> tuple[ColumnSpec, ...]:
        if value is not _MISSING:
            self._columns = build_columns(value)
        return self._columns

    def build(self, model: type) -> ExportSchema:
        return ExportSchema(
            model=model,
            partial_name=partial_name_for(model),
            scope=self._scope,
            columns=self._columns,
        )
