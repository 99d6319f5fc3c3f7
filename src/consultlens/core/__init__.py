"""Core aggregation modules for ConsultLens."""

from .models import *
from .config import settings
from .aggregator import summarize, percent_of, donut_slices, percent_breakdown
from .binning import rebucket, series_range_label
from .filtering import parse_filter, project, project_series, project_comments
from .ranking import controversy_index, rank, hotspots, to_diverging
from .kpi import low_confidence_rate, build_kpis

__all__ = [
    "settings",
    "SentimentClass",
    "SentimentFilter",
    "SentimentCount",
    "TimePeriodEntry",
    "TopicDistribution",
    "Comment",
    "DonutSummary",
    "DonutSlice",
    "HotspotRow",
    "KpiSummary",
    "summarize",
    "percent_of",
    "donut_slices",
    "percent_breakdown",
    "rebucket",
    "series_range_label",
    "parse_filter",
    "project",
    "project_series",
    "project_comments",
    "controversy_index",
    "rank",
    "hotspots",
    "to_diverging",
    "low_confidence_rate",
    "build_kpis",
]
