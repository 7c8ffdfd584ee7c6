"""Application export – ExportRegistry."""
from __future__ import annotations

import importlib
import threading
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, TypeVar

from easy_export.application.export.column import ColumnSpec
from easy_export.application.export.errors import (
    InvalidConfigurationError,
    NotExportableError,
    UnresolvableModelError,
)
from easy_export.application.export.schema import ExportConfig, ExportSchema, ScopeFn
from easy_export.observability.logging import get_logger

__all__ = ["ExportRegistry"]

M = TypeVar("M", bound=type)

_log = get_logger(__name__)


class ExportRegistry:
    """Holds one :class:`ExportSchema` per model type.

    Schemas are declared once, usually at import time, and read by every
    :class:`~easy_export.application.export.exporter.Exporter` afterwards.
    Writes are serialised; readers always see a complete mapping.

    Usage::

        exports = ExportRegistry()

        @exports.exportable(
            scope=lambda options: Appointment.query(**options),
            fields=[("Date", "date"), ("Client", lambda a: a.client.name)],
        )
        class Appointment: ...
    """

    def __init__(self) -> None:
        self._schemas: Mapping[type, ExportSchema] = MappingProxyType({})
        self._lock = threading.Lock()

    def register(self, model: type, configure: Callable[[ExportConfig], Any]) -> ExportSchema:
        """Run *configure* against a fresh :class:`ExportConfig` and store the result.

        Registering the same model again replaces its schema wholesale.
        """
        if not isinstance(model, type):
            raise InvalidConfigurationError(
                f"exportable models must be classes, got {type(model).__name__}"
            )
        config = ExportConfig()
        configure(config)
        schema = config.build(model)

        with self._lock:
            schemas = dict(self._schemas)
            schemas[model] = schema
            self._schemas = MappingProxyType(schemas)

        _log.debug(
            "export.schema_registered",
            model=model.__qualname__,
            partial=schema.partial_name,
            columns=len(schema.columns),
        )
        return schema

    def exportable(
        self,
        configure: Callable[[ExportConfig], Any] | None = None,
        *,
        scope: ScopeFn | None = None,
        fields: Sequence[Sequence[Any]] | None = None,
    ) -> Callable[[M], M]:
        """Class decorator form of :meth:`register`.

        Either pass a *configure* block or the ``scope``/``fields`` keywords.
        """

        def declare(export: ExportConfig) -> None:
            if configure is not None:
                configure(export)
            if scope is not None:
                export.scope(scope)
            if fields is not None:
                export.fields(fields)

        def decorator(model: M) -> M:
            self.register(model, declare)
            return model

        return decorator

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------

    def get(self, model: type) -> ExportSchema:
        try:
            return self._schemas[model]
        except KeyError:
            raise NotExportableError(model) from None

    def __contains__(self, model: object) -> bool:
        return model in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def models(self) -> tuple[type, ...]:
        return tuple(self._schemas)

    def export_partial(self, model: type) -> str:
        return self.get(model).partial_name

    def export_scope(self, model: type) -> ScopeFn | None:
        return self.get(model).scope

    def export_fields(self, model: type) -> tuple[ColumnSpec, ...]:
        return self.get(model).columns

    def resolve_model(self, identifier: Any) -> type:
        """Turn a class, a registered class name or a dotted path into a type.

        Names are matched against registered models first (simple name,
        qualified name, then ``module.QualName``); anything else containing a
        dot is imported.
        """
        if isinstance(identifier, type):
            return identifier
        if not isinstance(identifier, str) or not identifier:
            raise UnresolvableModelError(identifier, "An export needs a model class or name")

        matches = [
            model
            for model in self._schemas
            if identifier in (model.__name__, model.__qualname__, f"{model.__module__}.{model.__qualname__}")
        ]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise UnresolvableModelError(
                identifier,
                f"Model name {identifier!r} is ambiguous; use the dotted path",
                detail={"candidates": [f"{m.__module__}.{m.__qualname__}" for m in matches]},
            )

        module_name, _, attr = identifier.rpartition(".")
        if not module_name:
            raise UnresolvableModelError(identifier)
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise UnresolvableModelError(identifier, cause=exc) from exc
        model = getattr(module, attr, None)
        if not isinstance(model, type):
            raise UnresolvableModelError(identifier)
        return model
