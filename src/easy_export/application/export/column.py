"""Application export – ColumnSpec and resolver-kind dispatch."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Final

from easy_export.application.export.errors import InvalidConfigurationError

__all__ = ["PLACEHOLDER", "ColumnSpec", "ResolverKind", "build_columns", "classify"]

PLACEHOLDER: Final = "Error getting field value"


class ResolverKind(enum.Enum):
    CALLABLE = "callable"
    ATTRIBUTE = "attribute"
    LITERAL = "literal"


@dataclass(frozen=True)
class ColumnSpec:
    """One exported column.

    ``resolver`` is a callable taking the instance, the name of a member on
    the instance, or a literal value. Which one it is gets decided per
    instance by :func:`classify`.
    """

    header: str
    resolver: Any


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def classify(resolver: Any, instance: Any) -> ResolverKind:
    """Decide how *resolver* produces a cell for *instance*."""
    if callable(resolver):
        return ResolverKind.CALLABLE
    if isinstance(resolver, str) and not _is_dunder(resolver) and hasattr(instance, resolver):
        return ResolverKind.ATTRIBUTE
    return ResolverKind.LITERAL


def build_columns(fields: Any) -> tuple[ColumnSpec, ...]:
    """Turn ``[(header, resolver), ...]`` into ordered column specs.

    A repeated header keeps its first position and takes the last resolver.

    Raises
    ------
    InvalidConfigurationError
        When *fields* is not a list/tuple of 2-element pairs.
    """
    if not isinstance(fields, (list, tuple)):
        raise InvalidConfigurationError(
            "fields must be an ordered sequence",
            detail={"type": type(fields).__name__},
        )

    resolvers: dict[str, Any] = {}
    for index, pair in enumerate(fields):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise InvalidConfigurationError(
                "fields must be an ordered sequence of (header, resolver) pairs",
                detail={"index": index, "value": repr(pair)},
            )
        header, resolver = pair
        try:
            resolvers[header] = resolver
        except TypeError:
            raise InvalidConfigurationError(
                "fields must be an ordered sequence of (header, resolver) pairs with hashable headers",
                detail={"index": index, "value": repr(pair)},
            ) from None

    return tuple(ColumnSpec(header, resolver) for header, resolver in resolvers.items())
