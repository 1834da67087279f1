"""Shared pytest fixtures for the releaseBoard test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from src.models.release import ReleaseRecord

RELEASE_HEADERS = ["Artist Name", "Release Name", "Artist Country", "Release Date", "Label Name", "Gender"]

WorkbookWriter = Callable[[Path, Sequence[str], Sequence[Sequence[Any]]], Path]


def _write_workbook(path: Path, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> Path:
    """Write a single-sheet workbook with a header row."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(list(headers))
    for row in rows:
        sheet.append(list(row))
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path


@pytest.fixture
def write_workbook() -> WorkbookWriter:
    """Return a helper that writes ``(path, headers, rows)`` to an .xlsx file."""
    return _write_workbook


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Record fixtures
# ---------------------------------------------------------------------------


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def example_records() -> list[ReleaseRecord]:
    """Three records: two dated (France / Germany) and one undated."""
    return [
        ReleaseRecord(artist="A", release="X", country="France", date=utc(2023, 1, 1)),
        ReleaseRecord(artist="B", release="Y", country="France", date=None),
        ReleaseRecord(artist="A", release="Z", country="Germany", date=utc(2023, 6, 1)),
    ]


@pytest.fixture
def catalog_records() -> list[ReleaseRecord]:
    """A larger mixed set covering labels, genders and alias countries."""
    return [
        ReleaseRecord(artist="Amr Diab", release="Sahran", country="Egypt",
                      date=utc(2020, 2, 14), label="Nay", gender="Male"),
        ReleaseRecord(artist="Elissa", release="Sahranin", country="Lebanon",
                      date=utc(2021, 7, 1), label="Rotana", gender="F"),
        ReleaseRecord(artist="Amr Diab", release="Ayam", country="Egypt",
                      date=None, label="Nay", gender="m"),
        ReleaseRecord(artist="Balqees", release="Majnoon", country="UAE",
                      date=utc(2022, 3, 3), label="Rotana", gender="female"),
        ReleaseRecord(artist="Mohammed Assaf", release="Dammi Falastini", country="Palestine",
                      date=utc(2019, 11, 20), label="", gender=""),
        ReleaseRecord(artist="Hussain Al Jassmi", release="Boshret Kheir", country="U.A.E.",
                      date=utc(2014, 5, 1), label="Platinum", gender="Male"),
        ReleaseRecord(artist="Cairokee", release="Roma", country="",
                      date=None, label="", gender="band"),
    ]


@pytest.fixture
def example_workbook(data_dir: Path, write_workbook: WorkbookWriter) -> Path:
    """NewReleases.xlsx holding the three example records."""
    return write_workbook(
        data_dir / "NewReleases.xlsx",
        RELEASE_HEADERS,
        [
            ["A", "X", "France", datetime(2023, 1, 1), "Label One", "Male"],
            ["B", "Y", "France", None, "Label Two", "Female"],
            ["A", "Z", "Germany", datetime(2023, 6, 1), "Label One", ""],
        ],
    )
