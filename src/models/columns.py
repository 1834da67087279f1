"""Typed column-mapping tables for the spreadsheets the API reads.

A workbook row arrives as a plain ``{header: cell}`` mapping.  Rather than
scattering header strings through the normalizer, the expected headers
live here, are loaded from ``config/config.yaml`` when present, and are
resolved once against each parsed file's header row.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from pydantic import BaseModel, ConfigDict

from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class ColumnMapping(BaseModel):
    """Header names for the release workbook.

    ``label`` and ``gender`` are optional: a workbook without those columns
    yields records with empty label/gender.
    """

    model_config = ConfigDict(frozen=True)

    artist: str = "Artist Name"
    release: str = "Release Name"
    country: str = "Artist Country"
    date: str = "Release Date"
    label: str | None = "Label Name"
    gender: str | None = "Gender"

    def resolve(self, headers: Iterable[str]) -> ColumnMapping:
        """Return a copy with optional columns absent from *headers* dropped.

        Missing required columns are logged; every row of such a file will
        fail the artist/release check, so the dataset comes out empty.
        """
        present = {h for h in headers if h}
        missing = [
            name
            for name in (self.artist, self.release, self.country, self.date)
            if name not in present
        ]
        if missing:
            _logger.warning("required_columns_missing", missing=missing)

        return self.model_copy(
            update={
                "label": self.label if self.label in present else None,
                "gender": self.gender if self.gender in present else None,
            }
        )


class SummaryColumns(BaseModel):
    """Header names shared by the pre-aggregated summary workbooks."""

    model_config = ConfigDict(frozen=True)

    artist: str = "Artist"
    country: str = "Country"
    year: str = "Year"
    releases: str = "Releases"
