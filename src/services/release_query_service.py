"""Release query pipeline shared by the listing, stats and options endpoints.

Every endpoint goes through the same steps:

    DatasetCache.get()  ->  apply_filters()  ->  sort_records() + paginate()
                                             ->  aggregate_releases()

so filter semantics are identical across ``/releases`` and
``/release-stats``.

Design pattern: Service (receives the dataset cache via constructor;
holds no per-request state).
"""

from __future__ import annotations

from typing import Any

import structlog

from src.models.release import (
    FilterSpec,
    ReleaseOptions,
    ReleasePage,
    ReleaseStats,
    SortSpec,
)
from src.providers.cache.dataset_cache import DatasetCache
from src.services.filter_engine import apply_filters
from src.services.release_aggregator import DEFAULT_TOP_N, aggregate_releases
from src.services.release_sorter import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    paginate,
    sort_records,
)
from src.utils.country_canonicalizer import canonicalize_country
from src.utils.logging import get_logger

logger: structlog.BoundLogger = get_logger(__name__)


class ReleaseQueryService:
    """Runs filter / sort / paginate / aggregate over the cached dataset."""

    def __init__(
        self,
        cache: DatasetCache,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        self._cache = cache
        self._default_limit = default_limit
        self._max_limit = max_limit
        self._top_n = top_n

    async def list_releases(
        self,
        filters: FilterSpec,
        sort: SortSpec,
        offset: int | None = None,
        limit: int | None = None,
    ) -> ReleasePage:
        """Return one page of filtered, sorted releases."""
        dataset = await self._cache.get()
        filtered = apply_filters(dataset.records, filters)
        ordered = sort_records(filtered, sort)
        page = paginate(
            ordered,
            offset,
            limit,
            default_limit=self._default_limit,
            max_limit=self._max_limit,
        )
        logger.debug(
            "releases_listed",
            total=page.total,
            count=page.count,
            offset=page.offset,
            sort_by=sort.field.value,
        )
        return page

    async def release_stats(self, filters: FilterSpec) -> ReleaseStats:
        """Aggregate the entire filtered set."""
        dataset = await self._cache.get()
        return aggregate_releases(apply_filters(dataset.records, filters), self._top_n)

    async def options(self) -> ReleaseOptions:
        """Distinct canonical countries and the date range of the whole dataset."""
        dataset = await self._cache.get()

        countries: set[str] = set()
        dates = []
        for record in dataset.records:
            canonical = canonicalize_country(record.country)
            if canonical:
                countries.add(canonical)
            if record.date is not None:
                dates.append(record.date)

        return ReleaseOptions(
            countries=tuple(sorted(countries, key=lambda c: (c.casefold(), c))),
            min_date=min(dates) if dates else None,
            max_date=max(dates) if dates else None,
        )

    def dataset_info(self) -> dict[str, Any]:
        """Describe the cached dataset without touching the file."""
        current = self._cache.current
        return {
            "path": str(self._cache.path),
            "loaded": current is not None,
            "records": len(current.records) if current is not None else 0,
        }
