"""Application export – Exporter."""
from __future__ import annotations

from typing import Any, Sequence

import inflection

from easy_export.application.export.column import build_columns
from easy_export.application.export.csv_export import CsvExporter
from easy_export.application.export.errors import InvalidConfigurationError
from easy_export.application.export.registry import ExportRegistry
from easy_export.application.export.request import ExportInvocation, ExportTable
from easy_export.application.export.resolver import RowResolver
from easy_export.application.export.schema import ScopeFn
from easy_export.application.export.settings import ExportSettings
from easy_export.kernel.errors import ValidationError
from easy_export.kernel.time import Clock, SystemClock
from easy_export.kernel.types import Slug
from easy_export.observability.logging import get_logger

__all__ = ["Exporter"]


class Exporter:
    """Converts the instances of an exportable model into a CSV document.

    Parameters
    ----------
    registry:
        Registry the model's schema was declared on.
    model:
        The model class, a registered class name or a dotted import path.
    scope:
        Replaces the schema's scope for this export.
    fields:
        Replaces the schema's columns for this export; same shape as the
        ``fields`` declaration.
    settings:
        Rendering options; defaults to :class:`ExportSettings` defaults.
    clock:
        Source of the date stamped into :meth:`file_name`.
    **options:
        Passed unchanged to the scope, e.g. a filter string.

    Raises
    ------
    UnresolvableModelError
        When *model* names no type.
    NotExportableError
        When the type has no registered schema.
    InvalidConfigurationError
        When *fields* has the wrong shape.
    """

    MIME_TYPE = "text/csv"
    EXTENSION = "csv"

    def __init__(
        self,
        registry: ExportRegistry,
        model: Any,
        *,
        scope: ScopeFn | None = None,
        fields: Sequence[Sequence[Any]] | None = None,
        settings: ExportSettings | None = None,
        clock: Clock | None = None,
        **options: Any,
    ) -> None:
        self._model = registry.resolve_model(model)
        self._invocation = ExportInvocation(
            schema=registry.get(self._model),
            scope_override=scope,
            fields_override=build_columns(fields) if fields is not None else None,
            options=options,
        )
        self._settings = settings or ExportSettings()
        self._clock = clock or SystemClock()
        self._log = get_logger(__name__, model=self._model.__qualname__)
        self._resolver = RowResolver(
            placeholder=self._settings.placeholder,
            strict=self._settings.strict,
            logger=self._log,
        )
        self._csv = CsvExporter(
            delimiter=self._settings.delimiter,
            line_terminator=self._settings.line_terminator,
            bom=self._settings.bom,
        )

    @property
    def model(self) -> type:
        return self._model

    @property
    def invocation(self) -> ExportInvocation:
        return self._invocation

    @property
    def header(self) -> tuple[str, ...]:
        return tuple(col.header for col in self._invocation.effective_columns)

    def table(self) -> ExportTable:
        """Call the scope once and resolve every instance it returns."""
        scope = self._invocation.effective_scope
        if scope is None:
            raise InvalidConfigurationError(f"{self._model.__qualname__} has no export scope")
        columns = self._invocation.effective_columns

        self._log.info("export.started", columns=len(columns))
        instances = scope(dict(self._invocation.options))
        rows = tuple(self._resolver.resolve_row(instance, columns) for instance in instances)
        self._log.info("export.completed", rows=len(rows))

        return ExportTable(header=self.header, rows=rows)

    def data(self) -> str:
        return self._csv.render(self.table())

    def file_name(self) -> str:
        """``Appointments-2024-03-05.csv`` for ``Appointment`` on 5 March 2024.

        A date format that leaves no ASCII letters or digits falls back to
        the ISO date.
        """
        today = self._clock.today()
        try:
            stamp = Slug.from_text(today.strftime(self._settings.date_format))
        except ValidationError:
            stamp = Slug.from_text(today.isoformat())
        model_name = inflection.pluralize(self._model.__name__)
        return f"{model_name}-{stamp}.{self.EXTENSION}"

    def file_type(self) -> str:
        return self.MIME_TYPE
