"""Pydantic response schemas for the releaseBoard API.

These models define the JSON contract of every endpoint.  The front-end
expects camelCase keys (``sortBy``, ``topArtists``, ``minDate``), so the
schemas declare snake_case attributes with a camelCase alias generator;
FastAPI serialises ``response_model`` output by alias.

Dates are pre-rendered strings (``2023-01-01T00:00:00.000Z``) rather than
``datetime`` fields so the millisecond format stays fixed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.models.release import ReleaseOptions, ReleasePage, ReleaseRecord, ReleaseStats, SortSpec
from src.utils.dates import to_iso_z


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReleaseItem(_CamelModel):
    """One release row in a listing."""

    artist: str
    release: str
    country: str
    date: str | None = Field(default=None, description="ISO-8601 instant, or null when undated")

    @classmethod
    def from_record(cls, record: ReleaseRecord) -> ReleaseItem:
        return cls(
            artist=record.artist,
            release=record.release,
            country=record.country,
            date=to_iso_z(record.date),
        )


class ReleasesResponse(_CamelModel):
    """Response for ``GET /api/releases``."""

    total: int = Field(description="Filtered count before pagination")
    count: int = Field(description="Rows on this page")
    offset: int
    limit: int
    sort_by: str
    sort_dir: str
    results: list[ReleaseItem] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: ReleasePage, sort: SortSpec) -> ReleasesResponse:
        return cls(
            total=page.total,
            count=page.count,
            offset=page.offset,
            limit=page.limit,
            sort_by=sort.field.value,
            sort_dir=sort.direction.value,
            results=[ReleaseItem.from_record(r) for r in page.items],
        )


class CountEntry(_CamelModel):
    label: str
    count: int


class GenderCountsResponse(_CamelModel):
    male: int = 0
    female: int = 0
    other: int = 0


class ReleaseStatsResponse(_CamelModel):
    """Response for ``GET /api/release-stats``."""

    total: int
    top_artists: list[CountEntry] = Field(default_factory=list)
    top_countries: list[CountEntry] = Field(default_factory=list)
    gender_counts: GenderCountsResponse = Field(default_factory=GenderCountsResponse)

    @classmethod
    def from_stats(cls, stats: ReleaseStats) -> ReleaseStatsResponse:
        return cls(
            total=stats.total,
            top_artists=[CountEntry(label=c.label, count=c.count) for c in stats.top_artists],
            top_countries=[CountEntry(label=c.label, count=c.count) for c in stats.top_countries],
            gender_counts=GenderCountsResponse(**stats.gender_counts.model_dump()),
        )


class OptionsResponse(_CamelModel):
    """Response for ``GET /api/options``."""

    countries: list[str] = Field(default_factory=list)
    min_date: str | None = None
    max_date: str | None = None

    @classmethod
    def from_options(cls, options: ReleaseOptions) -> OptionsResponse:
        return cls(
            countries=list(options.countries),
            min_date=to_iso_z(options.min_date),
            max_date=to_iso_z(options.max_date),
        )


class SummaryResponse(BaseModel):
    """Response for ``GET /api/summary``; row shape depends on ``kind``."""

    results: list[dict[str, Any]] = Field(default_factory=list)


class DatasetHealth(BaseModel):
    path: str
    loaded: bool
    records: int


class HealthResponse(BaseModel):
    """Response for ``GET /api/health``."""

    status: str
    version: str
    dataset: DatasetHealth


class ErrorResponse(BaseModel):
    """Standard error envelope returned by all error responses."""

    error: str
    detail: str | None = None
