"""Unit tests for DatasetCache and the openpyxl spreadsheet reader."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.interfaces.spreadsheet_reader import ISpreadsheetReader, SheetData
from src.models.columns import ColumnMapping
from src.providers.cache.dataset_cache import DatasetCache
from src.providers.spreadsheet.openpyxl_reader import OpenpyxlSpreadsheetReader
from src.utils.errors import DataUnavailableError

HEADERS = ["Artist Name", "Release Name", "Artist Country", "Release Date"]


def _bump_mtime(path: Path, seconds: int = 10) -> None:
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + seconds * 1_000_000_000))


# ======================================================================
# OpenpyxlSpreadsheetReader
# ======================================================================


class TestOpenpyxlSpreadsheetReader:
    def test_reads_headers_and_rows(self, tmp_path: Path, write_workbook) -> None:
        path = write_workbook(
            tmp_path / "releases.xlsx",
            HEADERS,
            [["Fairuz", "Eh Fi Amal", "Lebanon", datetime(2010, 10, 7)]],
        )
        sheet = OpenpyxlSpreadsheetReader().read(path)
        assert sheet.headers == tuple(HEADERS)
        assert len(sheet.rows) == 1
        assert sheet.rows[0]["Artist Name"] == "Fairuz"
        assert sheet.rows[0]["Release Date"] == datetime(2010, 10, 7)

    def test_blank_cells_become_empty_strings(self, tmp_path: Path, write_workbook) -> None:
        path = write_workbook(tmp_path / "r.xlsx", HEADERS, [["Fairuz", "Eh Fi Amal", None, None]])
        row = OpenpyxlSpreadsheetReader().read(path).rows[0]
        assert row["Artist Country"] == ""
        assert row["Release Date"] == ""

    def test_numeric_cells_stay_numeric(self, tmp_path: Path, write_workbook) -> None:
        path = write_workbook(tmp_path / "r.xlsx", HEADERS, [["A", "X", "France", 45000]])
        assert OpenpyxlSpreadsheetReader().read(path).rows[0]["Release Date"] == 45000

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataUnavailableError):
            OpenpyxlSpreadsheetReader().read(tmp_path / "missing.xlsx")

    def test_provider_name(self) -> None:
        assert OpenpyxlSpreadsheetReader().get_provider_name() == "openpyxl"

    def test_not_a_workbook(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"definitely not a zip archive")
        with pytest.raises(DataUnavailableError):
            OpenpyxlSpreadsheetReader().read(path)


# ======================================================================
# DatasetCache
# ======================================================================


class TestDatasetCache:
    @pytest.mark.asyncio
    async def test_parses_example_workbook(self, example_workbook: Path) -> None:
        cache = DatasetCache(example_workbook, OpenpyxlSpreadsheetReader())
        dataset = await cache.get()
        assert [(r.artist, r.release) for r in dataset.records] == [("A", "X"), ("B", "Y"), ("A", "Z")]
        assert dataset.records[0].date == datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert dataset.records[1].date is None
        assert dataset.records[0].label == "Label One"
        assert dataset.source_version == example_workbook.stat().st_mtime_ns

    @pytest.mark.asyncio
    async def test_unchanged_file_is_served_from_cache(self, example_workbook: Path) -> None:
        reader = MagicMock(wraps=OpenpyxlSpreadsheetReader())
        cache = DatasetCache(example_workbook, reader)
        first = await cache.get()
        second = await cache.get()
        assert first is second
        assert reader.read.call_count == 1
        # Only the refresh reports which reader parsed the file.
        assert reader.get_provider_name.call_count == 1

    @pytest.mark.asyncio
    async def test_changed_mtime_triggers_reparse(
        self, example_workbook: Path, write_workbook
    ) -> None:
        cache = DatasetCache(example_workbook, OpenpyxlSpreadsheetReader())
        first = await cache.get()

        write_workbook(example_workbook, HEADERS, [["New", "Record", "Egypt", datetime(2024, 1, 1)]])
        _bump_mtime(example_workbook)

        second = await cache.get()
        assert second is not first
        assert [r.artist for r in second.records] == ["New"]

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        cache = DatasetCache(tmp_path / "NewReleases.xlsx", OpenpyxlSpreadsheetReader())
        with pytest.raises(DataUnavailableError):
            await cache.get()
        assert cache.current is None

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_dataset(self, example_workbook: Path) -> None:
        cache = DatasetCache(example_workbook, OpenpyxlSpreadsheetReader())
        first = await cache.get()

        example_workbook.write_bytes(b"corrupted upload")
        _bump_mtime(example_workbook)
        with pytest.raises(DataUnavailableError):
            await cache.get()
        assert cache.current is first

        example_workbook.unlink()
        with pytest.raises(DataUnavailableError):
            await cache.get()
        assert cache.current is first

    @pytest.mark.asyncio
    async def test_columns_resolved_per_file(self, tmp_path: Path) -> None:
        reader = MagicMock(spec=ISpreadsheetReader)
        reader.read.return_value = SheetData(
            headers=("Artist", "Title", "Country", "Date"),
            rows=({"Artist": "Nancy Ajram", "Title": "Ya Tabtab", "Country": "Lebanon", "Date": 45000},),
        )
        path = tmp_path / "custom.xlsx"
        path.write_bytes(b"")
        columns = ColumnMapping(artist="Artist", release="Title", country="Country", date="Date")

        dataset = await DatasetCache(path, reader, columns).get()
        record = dataset.records[0]
        assert record.release == "Ya Tabtab"
        assert record.date == datetime(2023, 3, 15, tzinfo=timezone.utc)
        assert record.label == ""

    @pytest.mark.asyncio
    async def test_invalidate_forces_reparse(self, example_workbook: Path) -> None:
        reader = MagicMock(wraps=OpenpyxlSpreadsheetReader())
        cache = DatasetCache(example_workbook, reader)
        await cache.get()
        cache.invalidate()
        assert cache.current is None
        await cache.get()
        assert reader.read.call_count == 2
