"""Record normalizer: raw workbook rows to canonical ReleaseRecords.

Design pattern: Service (stateless apart from its column mapping).
One normalizer is built per parsed file, using the mapping resolved
against that file's header row.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from src.models.columns import ColumnMapping
from src.models.release import ReleaseRecord
from src.utils.dates import coerce_datetime
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


def clean_text(value: Any) -> str:
    """Coerce a cell to a trimmed string; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).strip()


class RecordNormalizer:
    """Converts ``{header: cell}`` rows into ReleaseRecords."""

    def __init__(self, columns: ColumnMapping) -> None:
        self._columns = columns

    @property
    def columns(self) -> ColumnMapping:
        return self._columns

    def normalize(self, row: Mapping[str, Any]) -> ReleaseRecord | None:
        """Build a record from *row*, or ``None`` if artist or release is blank."""
        cols = self._columns
        artist = clean_text(row.get(cols.artist))
        release = clean_text(row.get(cols.release))
        if not artist or not release:
            return None

        return ReleaseRecord(
            artist=artist,
            release=release,
            country=clean_text(row.get(cols.country)),
            date=coerce_datetime(row.get(cols.date)),
            label=clean_text(row.get(cols.label)) if cols.label else "",
            gender=clean_text(row.get(cols.gender)) if cols.gender else "",
        )

    def normalize_rows(self, rows: Iterable[Mapping[str, Any]]) -> tuple[ReleaseRecord, ...]:
        """Normalise every row, dropping the ones without artist/release."""
        records: list[ReleaseRecord] = []
        skipped = 0
        for row in rows:
            record = self.normalize(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        undated = sum(1 for r in records if r.date is None)
        _logger.info(
            "rows_normalized",
            records=len(records),
            skipped=skipped,
            undated=undated,
        )
        return tuple(records)
