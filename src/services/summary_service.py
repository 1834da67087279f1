"""Passthrough for the pre-aggregated summary workbooks.

Three summaries can be uploaded next to the release workbook.  This
service maps a ``kind`` to its file, reshapes the rows into typed models,
and caches the result per file version.

Parsed summaries are cached in a ``cachetools.LRUCache`` keyed by
``(kind, st_mtime_ns)``, so replacing a file on disk is picked up on the
next request.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from cachetools import LRUCache

from src.interfaces.spreadsheet_reader import ISpreadsheetReader
from src.models.columns import SummaryColumns
from src.models.summary import (
    DEFAULT_SUMMARY_FILES,
    CountryYearRow,
    SummaryKind,
    SummaryRow,
    TopArtistRow,
    TopCountryRow,
)
from src.services.record_normalizer import clean_text
from src.utils.errors import BadRequestError, SummaryNotFoundError
from src.utils.logging import get_logger

logger: structlog.BoundLogger = get_logger(__name__)


def to_number(value: Any) -> int | float:
    """Lenient numeric coercion: blanks and garbage become 0.

    Integral values are returned as ``int`` so JSON output reads ``12``
    rather than ``12.0``.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


class SummaryService:
    """Loads and reshapes summary workbooks on demand.

    Parameters
    ----------
    data_dir:
        Directory the summary files live in.
    reader:
        Spreadsheet reader used to load the workbooks.
    files:
        Mapping of summary kind to file name.  Defaults to the standard
        ``Summary*.xlsx`` names.
    columns:
        Header names used inside the summary workbooks.
    cache_size:
        Number of parsed summaries to keep.
    """

    def __init__(
        self,
        data_dir: Path,
        reader: ISpreadsheetReader,
        files: Mapping[SummaryKind, str] | None = None,
        columns: SummaryColumns | None = None,
        cache_size: int = 8,
    ) -> None:
        self._data_dir = Path(data_dir)
        self._reader = reader
        self._files = dict(files or DEFAULT_SUMMARY_FILES)
        self._columns = columns or SummaryColumns()
        self._cache: LRUCache[tuple[SummaryKind, int], tuple[SummaryRow, ...]] = LRUCache(
            maxsize=cache_size
        )

    async def get(self, kind: str) -> tuple[SummaryRow, ...]:
        """Return the rows of the summary identified by *kind*.

        Raises
        ------
        BadRequestError
            If *kind* is not a known summary kind.
        SummaryNotFoundError
            If the backing file has not been uploaded.
        """
        summary_kind = self._parse_kind(kind)
        file_name = self._files[summary_kind]
        path = self._data_dir / file_name

        try:
            version = path.stat().st_mtime_ns
        except FileNotFoundError as exc:
            raise SummaryNotFoundError(
                message=f"Summary file not found: {file_name}",
                source=str(path),
            ) from exc

        key = (summary_kind, version)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("summary_cache_hit", kind=summary_kind.value)
            return cached

        sheet = await asyncio.to_thread(self._reader.read, path)
        rows = self._shape(summary_kind, sheet.rows)
        self._cache[key] = rows
        logger.info(
            "summary_loaded",
            kind=summary_kind.value,
            provider=self._reader.get_provider_name(),
            rows=len(rows),
        )
        return rows

    @staticmethod
    def _parse_kind(kind: str) -> SummaryKind:
        try:
            return SummaryKind(kind)
        except ValueError as exc:
            raise BadRequestError(message="Unknown kind", source=kind or None) from exc

    def _shape(
        self, kind: SummaryKind, rows: tuple[dict[str, Any], ...]
    ) -> tuple[SummaryRow, ...]:
        cols = self._columns
        shaped: list[SummaryRow] = []

        for row in rows:
            releases = to_number(row.get(cols.releases))
            if kind == SummaryKind.TOP_ARTISTS:
                artist = clean_text(row.get(cols.artist))
                if artist:
                    shaped.append(TopArtistRow(artist=artist, releases=releases))
            elif kind == SummaryKind.COUNTRY_YEAR:
                year = to_number(row.get(cols.year))
                country = clean_text(row.get(cols.country))
                if year and country:
                    shaped.append(CountryYearRow(year=year, country=country, releases=releases))
            else:
                country = clean_text(row.get(cols.country))
                if country:
                    shaped.append(TopCountryRow(country=country, releases=releases))

        return tuple(shaped)
