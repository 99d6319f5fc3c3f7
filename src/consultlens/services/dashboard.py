"""Assembles dashboard view models and tracks the selected sentiment filter."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.aggregator import donut_slices, summarize
from ..core.binning import rebucket
from ..core.config import settings
from ..core.constants import TrendConstants
from ..core.filtering import parse_filter, project_comments, project_series
from ..core.kpi import build_kpis
from ..core.models import (
    Comment,
    DonutSlice,
    DonutSummary,
    HotspotRow,
    KpiSummary,
    SentimentClass,
    SentimentFilter,
    TimePeriodEntry,
)
from ..core.ranking import hotspots
from .data_source import SentimentDataSource

logger = logging.getLogger(__name__)


def should_rebucket(length: int, threshold: int) -> bool:
    """Bucketing policy: coarsen the trend once it is longer than ``threshold``."""
    return length > threshold


@dataclass
class DashboardView:
    """Everything a renderer needs for one frame."""
    selected_filter: SentimentFilter
    summary: DonutSummary
    slices: List[DonutSlice]
    kpis: KpiSummary
    trend: List[TimePeriodEntry]
    trend_granularity: str
    hotspots: List[HotspotRow]
    feed: List[Comment] = field(default_factory=list)


def build_dashboard_view(
    source: SentimentDataSource,
    selector=SentimentFilter.ALL,
    *,
    bucket_size: Optional[int] = None,
    weekly_threshold: Optional[int] = None,
    low_confidence_threshold: Optional[float] = None,
) -> DashboardView:
    """Run every aggregation for one render cycle.

    The donut and KPIs always describe the whole corpus so every slice stays
    clickable; the trend and the feed follow the selected filter.
    """
    selected = parse_filter(selector)
    bucket_size = settings.bucket_size if bucket_size is None else bucket_size
    weekly_threshold = settings.weekly_threshold if weekly_threshold is None else weekly_threshold
    threshold = settings.low_confidence_threshold if low_confidence_threshold is None else low_confidence_threshold

    series = source.time_series()
    topics = source.topic_distributions()
    comments = source.comments()

    summary = summarize(series)
    trend = project_series(series, selected)
    granularity = TrendConstants.DAILY
    if should_rebucket(len(trend), weekly_threshold):
        trend = rebucket(trend, bucket_size)
        granularity = TrendConstants.WEEKLY

    logger.debug(f"Built view from {source.name}: filter={selected.value}, "
                 f"{len(series)} periods -> {len(trend)} {granularity} points")

    return DashboardView(
        selected_filter=selected,
        summary=summary,
        slices=donut_slices(summary),
        kpis=build_kpis(series, comments, threshold),
        trend=trend,
        trend_granularity=granularity,
        hotspots=hotspots(topics),
        feed=project_comments(comments, selected),
    )


class DashboardSession:
    """Holds the filter selection for one viewing session.

    Nothing is persisted; a new session starts from "all".
    """

    def __init__(self, source: SentimentDataSource, **view_options):
        self.source = source
        self.view_options = view_options
        self.selected_filter = SentimentFilter.ALL

    def set_filter(self, value) -> SentimentFilter:
        self.selected_filter = parse_filter(value)
        logger.info(f"Sentiment filter set to {self.selected_filter.value}")
        return self.selected_filter

    def select_slice(self, sentiment_class: SentimentClass) -> SentimentFilter:
        """Clicking a donut slice filters to that slice's class."""
        return self.set_filter(sentiment_class)

    def reset(self) -> SentimentFilter:
        return self.set_filter(SentimentFilter.ALL)

    def view(self) -> DashboardView:
        return build_dashboard_view(self.source, self.selected_filter, **self.view_options)
