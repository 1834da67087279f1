"""Grouped counts over a filtered release set.

Stats always cover the whole filtered set; sorting and pagination of the
listing endpoint do not apply here.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from src.models.release import GenderCounts, LabelCount, ReleaseRecord, ReleaseStats

DEFAULT_TOP_N = 5
UNKNOWN_COUNTRY = "Unknown"

_MALE = frozenset({"male", "m"})
_FEMALE = frozenset({"female", "f"})


def top_counts(counter: Counter[str], n: int = DEFAULT_TOP_N) -> tuple[LabelCount, ...]:
    """Return the *n* largest groups, ties in first-seen order.

    Counter keeps insertion order and ``sorted`` is stable, so sorting on
    the negated count alone leaves equal counts in first-seen order.
    """
    ranked = sorted(counter.items(), key=lambda item: -item[1])
    return tuple(LabelCount(label=label, count=count) for label, count in ranked[:n])


def count_genders(records: Sequence[ReleaseRecord]) -> GenderCounts:
    """Bucket records into male / female / other by their gender cell."""
    male = female = other = 0
    for record in records:
        value = record.gender.strip().lower()
        if value in _MALE:
            male += 1
        elif value in _FEMALE:
            female += 1
        else:
            other += 1
    return GenderCounts(male=male, female=female, other=other)


def aggregate_releases(records: Sequence[ReleaseRecord], top_n: int = DEFAULT_TOP_N) -> ReleaseStats:
    """Compute top artists, top countries and gender counts for *records*."""
    by_artist: Counter[str] = Counter()
    by_country: Counter[str] = Counter()
    for record in records:
        by_artist[record.artist] += 1
        by_country[record.country or UNKNOWN_COUNTRY] += 1

    return ReleaseStats(
        total=len(records),
        top_artists=top_counts(by_artist, top_n),
        top_countries=top_counts(by_country, top_n),
        gender_counts=count_genders(records),
    )
