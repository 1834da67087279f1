"""Abstract base class for spreadsheet readers.

Defines the contract the normalizer and summary service use to obtain
rows from a workbook, so neither depends on a specific file-parsing
library.  Implementations read the first worksheet, treat its first row
as the header row, and fill blank cells with ``""``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SheetData:
    """Header row plus data rows keyed by header."""

    headers: tuple[str, ...] = ()
    rows: tuple[dict[str, Any], ...] = field(default_factory=tuple)


class ISpreadsheetReader(ABC):
    """Contract for reading tabular rows out of a workbook file.

    Reads are synchronous; callers run them in a worker thread so the
    event loop is not blocked by file I/O.
    """

    @abstractmethod
    def read(self, path: Path) -> SheetData:
        """Read the first worksheet of the workbook at *path*.

        Parameters
        ----------
        path:
            Location of the workbook.

        Returns
        -------
        SheetData
            The header row and one ``{header: value}`` mapping per data row.

        Raises
        ------
        DataUnavailableError
            If the file is missing or cannot be parsed as a workbook.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for logs, e.g. ``"openpyxl"``."""
