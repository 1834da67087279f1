"""Unit tests for release aggregation."""

from __future__ import annotations

from collections import Counter

from src.models.release import ReleaseRecord
from src.services.release_aggregator import aggregate_releases, count_genders, top_counts


class TestAggregateReleases:
    def test_totals_and_groups(self, catalog_records: list[ReleaseRecord]) -> None:
        stats = aggregate_releases(catalog_records)
        assert stats.total == 7
        assert [(c.label, c.count) for c in stats.top_artists[:1]] == [("Amr Diab", 2)]
        assert stats.top_countries[0].label == "Egypt"
        assert stats.top_countries[0].count == 2

    def test_missing_country_is_unknown(self, catalog_records: list[ReleaseRecord]) -> None:
        labels = [c.label for c in aggregate_releases(catalog_records, top_n=10).top_countries]
        assert "Unknown" in labels
        assert "" not in labels

    def test_raw_country_values_are_not_canonicalised(
        self, catalog_records: list[ReleaseRecord]
    ) -> None:
        labels = [c.label for c in aggregate_releases(catalog_records, top_n=10).top_countries]
        assert "UAE" in labels
        assert "U.A.E." in labels
        assert "United Arab Emirates" not in labels

    def test_top_n_limits_groups(self, catalog_records: list[ReleaseRecord]) -> None:
        stats = aggregate_releases(catalog_records)
        assert len(stats.top_artists) == 5
        assert sum(c.count for c in stats.top_artists) <= stats.total

    def test_gender_counts_sum_to_total(self, catalog_records: list[ReleaseRecord]) -> None:
        stats = aggregate_releases(catalog_records)
        counts = stats.gender_counts
        assert (counts.male, counts.female, counts.other) == (3, 2, 2)
        assert counts.male + counts.female + counts.other == stats.total

    def test_empty_input(self) -> None:
        stats = aggregate_releases([])
        assert stats.total == 0
        assert stats.top_artists == ()
        assert stats.top_countries == ()
        assert stats.gender_counts.other == 0


class TestTopCounts:
    def test_ties_keep_first_seen_order(self) -> None:
        counter: Counter[str] = Counter()
        for key in ["c", "a", "b", "a", "b", "d"]:
            counter[key] += 1
        assert [(c.label, c.count) for c in top_counts(counter, 3)] == [("a", 2), ("b", 2), ("c", 1)]

    def test_descending_count(self) -> None:
        counter = Counter({"x": 1, "y": 3, "z": 2})
        assert [c.label for c in top_counts(counter)] == ["y", "z", "x"]


class TestCountGenders:
    def test_buckets(self) -> None:
        records = [
            ReleaseRecord(artist="a", release="1", gender=value)
            for value in ["Male", "M", " m ", "FEMALE", "f", "Female", "", "mixed", "non-binary"]
        ]
        counts = count_genders(records)
        assert (counts.male, counts.female, counts.other) == (3, 3, 3)
