"""Application export – RowResolver."""
from __future__ import annotations

from typing import Any, Iterable

from easy_export.application.export.column import PLACEHOLDER, ColumnSpec, ResolverKind, classify
from easy_export.application.export.errors import MissingMemberError
from easy_export.observability.logging import Logger, get_logger

__all__ = ["RowResolver"]


class RowResolver:
    """Resolves model instances into rows of cell values.

    For every (instance, column) pair the resolver is classified afresh, since
    one scope may yield instances of different shapes:

    * callable -> ``resolver(instance)``; an :class:`AttributeError` raised
      while evaluating it becomes *placeholder* for that cell only
    * name of a member the instance has -> the member, called with no
      arguments when it is callable
    * anything else -> the resolver value itself

    With ``strict=True`` the missing-member case raises
    :class:`MissingMemberError` instead.
    """

    def __init__(
        self,
        *,
        placeholder: Any = PLACEHOLDER,
        strict: bool = False,
        logger: Logger | None = None,
    ) -> None:
        self._placeholder = placeholder
        self._strict = strict
        self._log = logger or get_logger(__name__)

    def resolve_cell(self, instance: Any, column: ColumnSpec) -> Any:
        resolver = column.resolver
        kind = classify(resolver, instance)

        if kind is ResolverKind.CALLABLE:
            try:
                return resolver(instance)
            except AttributeError as exc:
                if self._strict:
                    raise MissingMemberError(column.header, cause=exc) from exc
                self._log.warning("export.cell_failed", header=column.header, error=str(exc))
                return self._placeholder

        if kind is ResolverKind.ATTRIBUTE:
            member = getattr(instance, resolver)
            return member() if callable(member) else member

        return resolver

    def resolve_row(self, instance: Any, columns: Iterable[ColumnSpec]) -> tuple[Any, ...]:
        return tuple(self.resolve_cell(instance, column) for column in columns)
