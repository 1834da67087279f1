"""Modification-time keyed cache for the release dataset.

The release workbook is small enough to hold in memory, but parsing it on
every request is wasteful.  :class:`DatasetCache` keeps the last parsed
:class:`Dataset` together with the file's ``st_mtime_ns`` and only
re-parses when that timestamp changes.

Parsing is pure, so a refresh is safe to repeat; the ``asyncio.Lock``
merely stops concurrent requests from re-parsing the same version twice.
The cached dataset is replaced by a single assignment, and a failed
refresh leaves the previous dataset in place.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from src.interfaces.spreadsheet_reader import ISpreadsheetReader
from src.models.columns import ColumnMapping
from src.models.release import Dataset
from src.services.record_normalizer import RecordNormalizer
from src.utils.errors import DataUnavailableError
from src.utils.logging import get_logger

logger: structlog.BoundLogger = get_logger(__name__)


class DatasetCache:
    """Holds the current Dataset for one backing workbook.

    Parameters
    ----------
    path:
        Location of the release workbook.
    reader:
        Spreadsheet reader used to load the workbook.
    columns:
        Expected header names; resolved against each file's header row.
    """

    def __init__(
        self,
        path: Path,
        reader: ISpreadsheetReader,
        columns: ColumnMapping | None = None,
    ) -> None:
        self._path = Path(path)
        self._reader = reader
        self._columns = columns or ColumnMapping()
        self._dataset: Dataset | None = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def current(self) -> Dataset | None:
        """The last successfully parsed dataset, without checking the file."""
        return self._dataset

    async def get(self) -> Dataset:
        """Return the dataset for the file's current version.

        Raises
        ------
        DataUnavailableError
            If the file is missing or unreadable.
        """
        version = self._stat_version()
        cached = self._dataset
        if cached is not None and cached.source_version == version:
            logger.debug("cache_hit", path=str(self._path), version=version)
            return cached

        async with self._lock:
            # Another request may have refreshed while we waited.
            version = self._stat_version()
            cached = self._dataset
            if cached is not None and cached.source_version == version:
                return cached

            logger.debug("cache_miss", path=str(self._path), version=version)
            dataset = await asyncio.to_thread(self._parse, version)
            self._dataset = dataset
            logger.info(
                "dataset_refreshed",
                path=str(self._path),
                provider=self._reader.get_provider_name(),
                version=version,
                records=len(dataset.records),
            )
            return dataset

    def invalidate(self) -> None:
        """Drop the cached dataset so the next get() re-parses."""
        self._dataset = None

    def _stat_version(self) -> int:
        try:
            return self._path.stat().st_mtime_ns
        except FileNotFoundError as exc:
            raise DataUnavailableError(
                message=f"Data file not found: {self._path.name}",
                source=str(self._path),
            ) from exc
        except OSError as exc:
            raise DataUnavailableError(
                message=f"Cannot access data file {self._path.name}: {exc}",
                source=str(self._path),
            ) from exc

    def _parse(self, version: int) -> Dataset:
        sheet = self._reader.read(self._path)
        normalizer = RecordNormalizer(self._columns.resolve(sheet.headers))
        return Dataset(
            records=normalizer.normalize_rows(sheet.rows),
            source_version=version,
            source_path=str(self._path),
        )
