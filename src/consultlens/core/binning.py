"""Fixed-size re-bucketing of a time series."""

from typing import List, Sequence

from .aggregator import sum_counts
from .constants import DisplayConstants
from .exceptions import InvalidBucketSizeError
from .models import TimePeriodEntry


def range_label(first: str, last: str) -> str:
    return f"{first}{DisplayConstants.RANGE_SEPARATOR}{last}"


def series_range_label(series: Sequence[TimePeriodEntry]) -> str:
    """Label spanning the whole series, "" when it is empty."""
    if not series:
        return ""
    return range_label(series[0].period_label, series[-1].period_label)


def rebucket(series: Sequence[TimePeriodEntry], bucket_size: int) -> List[TimePeriodEntry]:
    """Group consecutive entries into chunks of ``bucket_size`` and sum them.

    The last chunk is shorter when the length is not a multiple of the bucket
    size. Each bucket is labelled "<first label> → <last label>", including
    single-entry buckets. Whether to bucket at all is left to the caller.
    """
    if isinstance(bucket_size, bool) or not isinstance(bucket_size, int) or bucket_size < 1:
        raise InvalidBucketSizeError(
            f"bucket_size must be a positive integer, got {bucket_size!r}",
            details={"bucket_size": bucket_size},
        )

    buckets = []
    for start in range(0, len(series), bucket_size):
        chunk = series[start:start + bucket_size]
        buckets.append(TimePeriodEntry(
            period_label=range_label(chunk[0].period_label, chunk[-1].period_label),
            counts=sum_counts(entry.counts for entry in chunk),
        ))
    return buckets
