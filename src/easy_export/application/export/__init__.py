"""Application export – declarative model-to-CSV export."""
from easy_export.application.export.column import PLACEHOLDER, ColumnSpec, ResolverKind, build_columns, classify
from easy_export.application.export.csv_export import CsvExporter
from easy_export.application.export.errors import (
    ExportError,
    InvalidConfigurationError,
    MissingMemberError,
    NotExportableError,
    UnresolvableModelError,
)
from easy_export.application.export.exporter import Exporter
from easy_export.application.export.registry import ExportRegistry
from easy_export.application.export.request import ExportInvocation, ExportTable
from easy_export.application.export.resolver import RowResolver
from easy_export.application.export.schema import ExportConfig, ExportSchema, partial_name_for
from easy_export.application.export.settings import ExportSettings

__all__ = [
    "PLACEHOLDER",
    "ColumnSpec",
    "CsvExporter",
    "ExportConfig",
    "ExportError",
    "ExportInvocation",
    "ExportRegistry",
    "ExportSchema",
    "ExportSettings",
    "ExportTable",
    "Exporter",
    "InvalidConfigurationError",
    "MissingMemberError",
    "NotExportableError",
    "ResolverKind",
    "RowResolver",
    "UnresolvableModelError",
    "build_columns",
    "classify",
    "partial_name_for",
]
