"""Tests for time-series re-bucketing."""

import math

import pytest

from consultlens.core.aggregator import summarize
from consultlens.core.binning import rebucket, series_range_label
from consultlens.core.exceptions import InvalidBucketSizeError
from consultlens.core.models import SentimentCount, TimePeriodEntry

from conftest import make_series


class TestRebucket:
    """Test fixed-size chunking and labels."""

    def test_weekly_scenario(self):
        weekly = rebucket(make_series(28), 7)

        assert len(weekly) == 4
        assert all(e.counts == SentimentCount(210, 70, 35) for e in weekly)
        assert weekly[0].period_label == "day-01 → day-07"
        assert weekly[-1].period_label == "day-22 → day-28"

        summary = summarize(weekly)
        assert summary.total == 1260
        assert summary.net_sentiment == 700

    def test_short_final_chunk(self, mixed_series):
        buckets = rebucket(mixed_series, 2)

        assert [b.period_label for b in buckets] == [
            "2025-01-01 → 2025-01-02",
            "2025-01-03 → 2025-01-04",
            "2025-01-05 → 2025-01-05",
        ]
        assert buckets[0].counts == SentimentCount(5, 6, 7)
        assert buckets[1].counts == SentimentCount(8, 1, 4)
        assert buckets[2].counts == SentimentCount(2, 8, 0)

    def test_single_entry_buckets(self, mixed_series):
        buckets = rebucket(mixed_series, 1)

        assert [b.counts for b in buckets] == [e.counts for e in mixed_series]
        assert buckets[1].period_label == "2025-01-02 → 2025-01-02"

    def test_bucket_larger_than_series(self, mixed_series):
        buckets = rebucket(mixed_series, 50)

        assert len(buckets) == 1
        assert buckets[0].period_label == "2025-01-01 → 2025-01-05"
        assert buckets[0].counts == summarize(mixed_series).totals_by_class

    @pytest.mark.parametrize("length,size", [(0, 3), (1, 1), (10, 3), (100, 7), (35, 7), (36, 7)])
    def test_entry_count_and_totals(self, length, size):
        series = make_series(length, 3, 2, 1)
        buckets = rebucket(series, size)

        assert len(buckets) == math.ceil(length / size)
        assert summarize(buckets) == summarize(series)

    def test_rebucketing_twice_changes_shape(self):
        series = make_series(28)
        weekly = rebucket(series, 7)
        fortnightly = rebucket(weekly, 2)

        assert len(fortnightly) == 2
        assert fortnightly != weekly
        assert fortnightly[0].period_label == "day-01 → day-07 → day-08 → day-14"
        assert summarize(fortnightly) == summarize(series)

    def test_deterministic(self, mixed_series):
        assert rebucket(mixed_series, 2) == rebucket(mixed_series, 2)

    def test_does_not_mutate_input(self, mixed_series):
        before = list(mixed_series)
        rebucket(mixed_series, 2)
        assert mixed_series == before

    @pytest.mark.parametrize("size", [0, -1, 1.5, True])
    def test_invalid_bucket_size(self, mixed_series, size):
        with pytest.raises(InvalidBucketSizeError):
            rebucket(mixed_series, size)

    def test_invalid_bucket_size_is_value_error(self):
        with pytest.raises(ValueError):
            rebucket([], 0)


def test_series_range_label(mixed_series):
    assert series_range_label(mixed_series) == "2025-01-01 → 2025-01-05"
    assert series_range_label([]) == ""
    assert series_range_label([TimePeriodEntry("only", SentimentCount.zero())]) == "only → only"
