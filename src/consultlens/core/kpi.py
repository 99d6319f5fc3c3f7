"""Headline KPI figures."""

from typing import Sequence

from .aggregator import summarize
from .binning import series_range_label
from .models import Comment, KpiSummary, TimePeriodEntry
from ..utils.formatting import format_compact, format_signed, percent_of

DEFAULT_LOW_CONFIDENCE_THRESHOLD = 0.7


def low_confidence_rate(comments: Sequence[Comment], threshold: float = DEFAULT_LOW_CONFIDENCE_THRESHOLD) -> int:
    """Percent of comments whose confidence is strictly below ``threshold``."""
    low = sum(1 for c in comments if c.confidence < threshold)
    return percent_of(low, len(comments))


def build_kpis(
    series: Sequence[TimePeriodEntry],
    comments: Sequence[Comment],
    threshold: float = DEFAULT_LOW_CONFIDENCE_THRESHOLD,
) -> KpiSummary:
    summary = summarize(series)
    totals = summary.totals_by_class
    return KpiSummary(
        total=summary.total,
        total_display=format_compact(summary.total),
        positive_pct=percent_of(totals.positive, summary.total),
        negative_pct=percent_of(totals.negative, summary.total),
        net_sentiment=summary.net_sentiment,
        net_display=format_signed(summary.net_sentiment),
        low_confidence_rate=low_confidence_rate(comments, threshold),
        range_label=series_range_label(series),
    )
