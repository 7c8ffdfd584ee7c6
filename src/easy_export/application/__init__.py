"""Application – export use cases."""

from easy_export.application.export import Exporter, ExportRegistry, ExportSchema, RowResolver

__all__ = ["ExportRegistry", "ExportSchema", "Exporter", "RowResolver"]
