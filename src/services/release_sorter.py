"""Sorting and pagination for release listings.

Ordering rules:
    - ``date``: dated records ordered by instant; undated records always
      come after every dated record, whatever the direction.
    - ``artist`` / ``release`` / ``country``: plain code-point comparison of
      the trimmed text (no locale collation, no natural-number ordering).

Both directions are stable: records that compare equal keep their input
order.  ``sorted(..., reverse=True)`` preserves the relative order of equal
keys, so flipping direction never reorders ties.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.models.release import ReleasePage, ReleaseRecord, SortDirection, SortField, SortSpec

DEFAULT_PAGE_LIMIT = 100
MAX_PAGE_LIMIT = 1000


def sort_records(records: Sequence[ReleaseRecord], spec: SortSpec) -> list[ReleaseRecord]:
    """Return a new list of *records* ordered according to *spec*."""
    descending = spec.direction == SortDirection.DESC

    if spec.field == SortField.DATE:
        dated = [r for r in records if r.date is not None]
        undated = [r for r in records if r.date is None]
        dated.sort(key=lambda r: r.date, reverse=descending)
        return dated + undated

    attr = spec.field.value
    return sorted(records, key=lambda r: getattr(r, attr), reverse=descending)


def clamp_offset(offset: int | None) -> int:
    """Offsets below zero (or missing) become 0."""
    if offset is None:
        return 0
    return max(offset, 0)


def clamp_limit(
    limit: int | None,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> int:
    """Resolve the page size.

    Missing or zero falls back to *default_limit*; the result is clamped
    to ``[1, max_limit]``.
    """
    if not limit:
        limit = default_limit
    return max(1, min(limit, max_limit))


def paginate(
    records: Sequence[ReleaseRecord],
    offset: int | None = None,
    limit: int | None = None,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> ReleasePage:
    """Slice ``[offset, offset + limit)`` out of *records*.

    ``total`` reports the full length of *records* so clients can page
    through without re-counting.
    """
    start = clamp_offset(offset)
    size = clamp_limit(limit, default_limit=default_limit, max_limit=max_limit)
    page = tuple(records[start:start + size])
    return ReleasePage(
        total=len(records),
        count=len(page),
        offset=start,
        limit=size,
        items=page,
    )
