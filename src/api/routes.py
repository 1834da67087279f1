"""FastAPI routes for the releaseBoard API.

# ─── API ROUTE MAP ─────────────────────────────────────────────────────
#
# Endpoint               Method  Description
# ─────────────────────────────────────────────────────────────────────
# /api/releases          GET     Filtered, sorted, paginated release list
# /api/release-stats     GET     Top artists / countries, gender counts
# /api/options           GET     Canonical countries + dataset date range
# /api/summary           GET     Pre-aggregated summary workbook rows
# /api/health            GET     Liveness + dataset cache status
#
# Every route also answers OPTIONS with 204 (see middleware.py).
#
# Services are read from ``app.state`` (populated by the lifespan in
# main.py) through small Depends() helpers, so tests can mount the router
# on a bare FastAPI app with hand-built services.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.schemas import (
    DatasetHealth,
    ErrorResponse,
    HealthResponse,
    OptionsResponse,
    ReleaseStatsResponse,
    ReleasesResponse,
    SummaryResponse,
)
from src.models.release import FilterSpec, SortSpec
from src.services.release_query_service import ReleaseQueryService
from src.services.summary_service import SummaryService
from src.utils.query_params import (
    parse_bool_flag,
    parse_date_bound,
    parse_leading_int,
    parse_multi_value,
)


API_VERSION = "1.0.0"

router = APIRouter(prefix="/api")


# ---------------------------------------------------------------------------
# Dependency helpers
# ---------------------------------------------------------------------------


def _get_release_service(request: Request) -> ReleaseQueryService:
    return request.app.state.release_service


def _get_summary_service(request: Request) -> SummaryService:
    return request.app.state.summary_service


def release_filters(
    q: Annotated[str | None, Query(description="Case-insensitive artist substring")] = None,
    country: Annotated[list[str] | None, Query(description="Repeated or comma-separated")] = None,
    label: Annotated[list[str] | None, Query()] = None,
    gender: Annotated[list[str] | None, Query()] = None,
    start: Annotated[str | None, Query(description="Inclusive lower date bound")] = None,
    end: Annotated[str | None, Query(description="Inclusive upper date bound")] = None,
    include_undated: Annotated[str | None, Query(alias="includeUndated")] = None,
) -> FilterSpec:
    """Normalise the shared filter parameters into a FilterSpec."""
    return FilterSpec(
        query=(q or "").lower(),
        countries=parse_multi_value(country),
        labels=parse_multi_value(label),
        genders=parse_multi_value(gender),
        start=parse_date_bound(start, "start"),
        end=parse_date_bound(end, "end"),
        include_undated=parse_bool_flag(include_undated, default=True),
    )


ReleaseServiceDep = Annotated[ReleaseQueryService, Depends(_get_release_service)]
SummaryServiceDep = Annotated[SummaryService, Depends(_get_summary_service)]
FiltersDep = Annotated[FilterSpec, Depends(release_filters)]


# ---------------------------------------------------------------------------
# Releases
# ---------------------------------------------------------------------------


@router.get(
    "/releases",
    response_model=ReleasesResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List releases",
)
async def list_releases(
    service: ReleaseServiceDep,
    filters: FiltersDep,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_dir: Annotated[str | None, Query(alias="sortDir")] = None,
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
) -> ReleasesResponse:
    """Return one page of releases matching the filters.

    Undated releases are included unless ``includeUndated=false`` and sort
    after every dated release when ordering by date.
    """
    sort = SortSpec.from_params(sort_by, sort_dir)
    page = await service.list_releases(
        filters,
        sort,
        offset=parse_leading_int(offset),
        limit=parse_leading_int(limit),
    )
    return ReleasesResponse.from_page(page, sort)


@router.get(
    "/release-stats",
    response_model=ReleaseStatsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Aggregate statistics for the filtered release set",
)
async def release_stats(
    service: ReleaseServiceDep,
    filters: FiltersDep,
) -> ReleaseStatsResponse:
    """Aggregate over the whole filtered set; sorting and paging do not apply."""
    stats = await service.release_stats(filters)
    return ReleaseStatsResponse.from_stats(stats)


@router.get(
    "/options",
    response_model=OptionsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Filter options",
)
async def options(service: ReleaseServiceDep) -> OptionsResponse:
    """Canonical country names and the dataset's date range."""
    return OptionsResponse.from_options(await service.options())


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


@router.get(
    "/summary",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Pre-aggregated summary rows",
)
async def summary(
    service: SummaryServiceDep,
    kind: Annotated[str, Query(description="top-artists | country-year | top-countries")] = "",
) -> SummaryResponse:
    """Pass through a summary workbook.

    Unknown ``kind`` -> 400; summary file not uploaded yet -> 404.
    """
    rows = await service.get(kind)
    return SummaryResponse(results=[row.model_dump() for row in rows])


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(service: ReleaseServiceDep) -> HealthResponse:
    """Report liveness and whether the dataset cache is warm.

    Never touches the workbook, so it stays cheap and succeeds even when
    the data file is missing.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        dataset=DatasetHealth(**service.dataset_info()),
    )
