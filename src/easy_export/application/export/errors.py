"""Application export – error types."""
from __future__ import annotations

from typing import Any

from easy_export.kernel.errors import ApplicationError

__all__ = [
    "ExportError",
    "InvalidConfigurationError",
    "MissingMemberError",
    "NotExportableError",
    "UnresolvableModelError",
]


class ExportError(ApplicationError):
    """Base class for every export failure."""

    default_code = "export_error"


class InvalidConfigurationError(ExportError, TypeError):
    """The export declaration has the wrong shape."""

    default_code = "invalid_configuration"


class UnresolvableModelError(ExportError, LookupError):
    """The model identifier given to an exporter names no known type."""

    default_code = "unresolvable_model"

    def __init__(self, identifier: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Cannot resolve model {identifier!r}", **kwargs)
        self.identifier = identifier


class NotExportableError(UnresolvableModelError):
    """The model type exists but never declared an export schema."""

    default_code = "not_exportable"

    def __init__(self, model: type, **kwargs: Any) -> None:
        super().__init__(model, f"{model.__qualname__} is not exportable", **kwargs)
        self.model = model


class MissingMemberError(ExportError):
    """A callable column referenced a member the instance does not have.

    Only raised by a strict :class:`~easy_export.application.export.resolver.RowResolver`;
    the lenient resolver substitutes a placeholder instead.
    """

    default_code = "missing_member"

    def __init__(self, header: str, *, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"Column {header!r} referenced a missing member: {cause}",
            cause=cause,
            detail={"header": header},
            **kwargs,
        )
        self.header = header
