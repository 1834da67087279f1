"""Filter engine for release records.

Pure functions: the output depends only on the records and the
FilterSpec, preserves input order, and never mutates records.

Country, label and gender filters match the raw (uncanonicalised) cell
value, case-insensitively.  Canonical country names are only used when
listing filter options.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.models.release import FilterSpec, ReleaseRecord


def _in_set(value: str, allowed: frozenset[str]) -> bool:
    return not allowed or value.lower() in allowed


def matches(record: ReleaseRecord, spec: FilterSpec) -> bool:
    """Return ``True`` if *record* passes every predicate of *spec*.

    Predicates run in a fixed order (text query, country, label, gender,
    date) and stop at the first failure.
    """
    if spec.query and spec.query not in record.artist.lower():
        return False
    if not _in_set(record.country, spec.countries):
        return False
    if not _in_set(record.label, spec.labels):
        return False
    if not _in_set(record.gender, spec.genders):
        return False

    # Undated records ignore start/end entirely.
    if record.date is None:
        return spec.include_undated
    if spec.start is not None and record.date < spec.start:
        return False
    if spec.end is not None and record.date > spec.end:
        return False
    return True


def apply_filters(records: Iterable[ReleaseRecord], spec: FilterSpec) -> list[ReleaseRecord]:
    """Return the records that pass *spec*, in their original order."""
    return [record for record in records if matches(record, spec)]
