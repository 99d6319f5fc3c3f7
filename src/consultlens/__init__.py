"""ConsultLens - sentiment aggregation for public-consultation comments."""

__version__ = "1.0.0"
__author__ = "ConsultLens Team"

from .core.models import *
from .core.config import settings
from .core.aggregator import summarize, percent_of
from .core.binning import rebucket
from .core.filtering import project, project_series, project_comments
from .core.ranking import rank, hotspots
from .core.kpi import low_confidence_rate
from .utils.formatting import format_compact
from .services.dashboard import DashboardSession, build_dashboard_view
from .services.data_source import create_data_source

__all__ = [
    "settings",
    "summarize",
    "percent_of",
    "rebucket",
    "project",
    "project_series",
    "project_comments",
    "rank",
    "hotspots",
    "low_confidence_rate",
    "format_compact",
    "DashboardSession",
    "build_dashboard_view",
    "create_data_source",
]
