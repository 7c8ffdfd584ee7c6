"""
easy_export – declarative CSV export for model types.

Import path convention::

    from easy_export import ExportRegistry, Exporter
    from easy_export.application.export import ColumnSpec, RowResolver
    from easy_export.kernel.errors import BaseError
"""

from easy_export.application.export import (
    PLACEHOLDER,
    ColumnSpec,
    ExportConfig,
    Exporter,
    ExportRegistry,
    ExportSchema,
    ExportSettings,
    ExportTable,
    RowResolver,
)

__version__ = "0.1.0"
__all__ = [
    "PLACEHOLDER",
    "ColumnSpec",
    "ExportConfig",
    "ExportRegistry",
    "ExportSchema",
    "ExportSettings",
    "ExportTable",
    "Exporter",
    "RowResolver",
    "__version__",
]
