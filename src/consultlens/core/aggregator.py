"""Totals, percentages and net sentiment over a time series."""

from typing import Dict, Iterable, List

from .constants import DisplayConstants
from .models import DonutSlice, DonutSummary, SentimentClass, SentimentCount, TimePeriodEntry
from ..utils.formatting import percent_of


def sum_counts(counts: Iterable[SentimentCount]) -> SentimentCount:
    """Field-wise sum of any number of counts."""
    total = SentimentCount.zero()
    for c in counts:
        total = total + c
    return total


def summarize(series: Iterable[TimePeriodEntry]) -> DonutSummary:
    """Sum every entry of a series into a donut summary.

    An empty series gives an all-zero summary.
    """
    totals = sum_counts(entry.counts for entry in series)
    return DonutSummary(
        totals_by_class=totals,
        total=totals.total,
        net_sentiment=totals.positive - totals.negative,
    )


def donut_slices(summary: DonutSummary) -> List[DonutSlice]:
    """One slice per class, positive first."""
    return [
        DonutSlice(
            name=DisplayConstants.SLICE_NAMES[c.value],
            key=c,
            value=summary.totals_by_class.get(c),
        )
        for c in SentimentClass
    ]


def percent_breakdown(counts: SentimentCount) -> Dict[str, int]:
    """Share of each class within a single count, e.g. for a trend tooltip."""
    total = counts.total
    return {c.value: percent_of(counts.get(c), total) for c in SentimentClass}


__all__ = [
    "donut_slices",
    "percent_breakdown",
    "percent_of",
    "sum_counts",
    "summarize",
]
