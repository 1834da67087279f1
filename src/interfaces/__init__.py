"""Public interface definitions for file-format adapters.

Business logic reads workbooks only through the abstract base classes in
this package; concrete adapters live in ``src/providers/`` and are wired
up in ``src/main.py``.

    Interface              →  Concrete implementations (in src/providers/)
    ─────────────────────────────────────────────────────────────────────
    ISpreadsheetReader     →  OpenpyxlSpreadsheetReader
"""

from src.interfaces.spreadsheet_reader import ISpreadsheetReader, SheetData

__all__ = ["ISpreadsheetReader", "SheetData"]
