"""Spreadsheet reader backed by openpyxl.

Loads workbooks in read-only, values-only mode: formulas come back as
their cached results and date-formatted cells come back as ``datetime``
objects.  Cells formatted as plain numbers stay numeric, which is how
legacy serial dates reach the normalizer.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any

import structlog
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from src.interfaces.spreadsheet_reader import ISpreadsheetReader, SheetData
from src.utils.errors import DataUnavailableError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class OpenpyxlSpreadsheetReader(ISpreadsheetReader):
    """Reads the first worksheet of an ``.xlsx`` workbook."""

    def read(self, path: Path) -> SheetData:
        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except FileNotFoundError as exc:
            raise DataUnavailableError(
                message=f"File not found: {path.name}", source=str(path)
            ) from exc
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
            raise DataUnavailableError(
                message=f"Unreadable workbook {path.name}: {exc}", source=str(path)
            ) from exc

        try:
            sheet = workbook.worksheets[0] if workbook.worksheets else None
            if sheet is None:
                return SheetData()

            rows_iter = sheet.iter_rows(values_only=True)
            header_cells = next(rows_iter, None)
            if header_cells is None:
                return SheetData()

            headers = tuple(
                str(h).strip() if h is not None else f"column_{idx + 1}"
                for idx, h in enumerate(header_cells)
            )

            rows: list[dict[str, Any]] = []
            for values in rows_iter:
                if values is None or all(v is None or v == "" for v in values):
                    continue
                row = {
                    header: (values[idx] if idx < len(values) and values[idx] is not None else "")
                    for idx, header in enumerate(headers)
                }
                rows.append(row)
        finally:
            workbook.close()

        _logger.debug("workbook_read", path=str(path), rows=len(rows), columns=len(headers))
        return SheetData(headers=headers, rows=tuple(rows))

    def get_provider_name(self) -> str:
        return "openpyxl"
