"""Pydantic v2 models for release records and the query pipeline.

All models use frozen config (immutable): once the normalizer has produced
a record, nothing downstream can change it, and every pipeline stage
returns new sequences rather than mutating its input.

The models split into three groups:
    - ReleaseRecord / Dataset   -- what the spreadsheet holds
    - FilterSpec / SortSpec     -- what a request asks for
    - ReleasePage / ReleaseStats / ReleaseOptions -- what the pipeline returns
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReleaseRecord(BaseModel):
    """One normalised release row.

    ``artist`` and ``release`` are guaranteed non-empty by the normalizer.
    ``date`` is ``None`` for undated records (missing or unparseable cell).
    """

    model_config = ConfigDict(frozen=True)

    artist: str = Field(min_length=1)
    release: str = Field(min_length=1)
    country: str = ""
    date: datetime | None = None
    label: str = ""
    gender: str = ""


class Dataset(BaseModel):
    """The full parsed record set for one version of the backing file."""

    model_config = ConfigDict(frozen=True)

    records: tuple[ReleaseRecord, ...] = ()
    # st_mtime_ns of the file the records were parsed from.
    source_version: int
    source_path: str


class SortField(str, Enum):
    """Fields a release listing can be ordered by."""

    ARTIST = "artist"
    RELEASE = "release"
    COUNTRY = "country"
    DATE = "date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterSpec(BaseModel):
    """Declarative release filter.

    Set members and ``query`` are stored lower-cased; matching against them
    is case-insensitive.  Empty sets and an empty query mean "no constraint".
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    countries: frozenset[str] = frozenset()
    labels: frozenset[str] = frozenset()
    genders: frozenset[str] = frozenset()
    start: datetime | None = None
    end: datetime | None = None
    include_undated: bool = True


class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.DATE
    direction: SortDirection = SortDirection.DESC

    @classmethod
    def from_params(cls, sort_by: str | None, sort_dir: str | None) -> SortSpec:
        """Build a SortSpec from raw query values.

        Unknown fields fall back to ``date``; any direction other than
        ``asc`` sorts descending.
        """
        try:
            field = SortField((sort_by or "").strip().lower())
        except ValueError:
            field = SortField.DATE
        direction = (
            SortDirection.ASC
            if (sort_dir or "").strip().lower() == SortDirection.ASC.value
            else SortDirection.DESC
        )
        return cls(field=field, direction=direction)


class ReleasePage(BaseModel):
    """One page of a sorted, filtered listing."""

    model_config = ConfigDict(frozen=True)

    # Filtered size before pagination.
    total: int = Field(ge=0)
    # Number of items actually on this page.
    count: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)
    items: tuple[ReleaseRecord, ...] = ()


class LabelCount(BaseModel):
    """A grouped count, e.g. releases per artist."""

    model_config = ConfigDict(frozen=True)

    label: str
    count: int = Field(ge=0)


class GenderCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    male: int = 0
    female: int = 0
    other: int = 0


class ReleaseStats(BaseModel):
    """Aggregates over an entire filtered set (pagination does not apply)."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    top_artists: tuple[LabelCount, ...] = ()
    top_countries: tuple[LabelCount, ...] = ()
    gender_counts: GenderCounts = Field(default_factory=GenderCounts)


class ReleaseOptions(BaseModel):
    """Values the front-end needs to populate its filter controls."""

    model_config = ConfigDict(frozen=True)

    countries: tuple[str, ...] = ()
    min_date: datetime | None = None
    max_date: datetime | None = None
