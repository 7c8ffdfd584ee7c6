"""Application export – ExportInvocation and ExportTable."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from easy_export.application.export.column import ColumnSpec
from easy_export.application.export.schema import ExportSchema, ScopeFn

__all__ = ["ExportInvocation", "ExportTable"]


@dataclass(frozen=True)
class ExportInvocation:
    """One export request: a schema plus per-call overrides."""

    schema: ExportSchema
    scope_override: ScopeFn | None = None
    fields_override: tuple[ColumnSpec, ...] | None = None
    options: Mapping[str, Any] = field(default_factory=dict)  # handed to the scope

    @property
    def model(self) -> type:
        return self.schema.model

    @property
    def effective_scope(self) -> ScopeFn | None:
        if self.scope_override is not None:
            return self.scope_override
        return self.schema.scope

    @property
    def effective_columns(self) -> tuple[ColumnSpec, ...]:
        if self.fields_override is not None:
            return self.fields_override
        return self.schema.columns


@dataclass(frozen=True)
class ExportTable:
    """Header plus resolved rows, ready for serialisation."""

    header: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __post_init__(self) -> None:
        width = len(self.header)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} cells, header has {width}")

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        """Yield the header followed by every row."""
        yield self.header
        yield from self.rows
