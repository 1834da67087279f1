"""releaseBoard domain models — re-exports all public model classes.

Organised across three submodules by concern:
    - columns.py  — header-name tables for the release and summary workbooks
    - release.py  — release records, filter/sort specs, pipeline results
    - summary.py  — summary kinds and their row shapes
"""

from __future__ import annotations

from src.models.columns import ColumnMapping, SummaryColumns
from src.models.release import (
    Dataset,
    FilterSpec,
    GenderCounts,
    LabelCount,
    ReleaseOptions,
    ReleasePage,
    ReleaseRecord,
    ReleaseStats,
    SortDirection,
    SortField,
    SortSpec,
)
from src.models.summary import (
    DEFAULT_SUMMARY_FILES,
    CountryYearRow,
    SummaryKind,
    SummaryRow,
    TopArtistRow,
    TopCountryRow,
)

__all__ = [
    "ColumnMapping",
    "SummaryColumns",
    "Dataset",
    "FilterSpec",
    "GenderCounts",
    "LabelCount",
    "ReleaseOptions",
    "ReleasePage",
    "ReleaseRecord",
    "ReleaseStats",
    "SortDirection",
    "SortField",
    "SortSpec",
    "DEFAULT_SUMMARY_FILES",
    "CountryYearRow",
    "SummaryKind",
    "SummaryRow",
    "TopArtistRow",
    "TopCountryRow",
]
