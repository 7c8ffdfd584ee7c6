"""Application export – CsvExporter."""
from __future__ import annotations

import csv
import io

from easy_export.application.export.request import ExportTable

__all__ = ["CsvExporter"]


class CsvExporter:
    """Renders an :class:`ExportTable` as CSV text (in-memory).

    ``None`` cells become empty fields; every other value goes through
    ``str``.
    """

    def __init__(
        self,
        delimiter: str = ",",
        quoting: int = csv.QUOTE_MINIMAL,
        *,
        line_terminator: str = "\n",
        bom: bool = False,
    ) -> None:
        self._delimiter = delimiter
        self._quoting = quoting
        self._line_terminator = line_terminator
        self._bom = bom

    def render(self, table: ExportTable) -> str:
        """Return the complete CSV content, header row first."""
        buf = io.StringIO()
        if self._bom:
            buf.write("\ufeff")  # BOM for Excel compatibility

        writer = csv.writer(
            buf,
            delimiter=self._delimiter,
            quoting=self._quoting,
            lineterminator=self._line_terminator,
        )
        writer.writerows(table)
        return buf.getvalue()

    def encode(self, table: ExportTable, encoding: str = "utf-8") -> bytes:
        return self.render(table).encode(encoding)
