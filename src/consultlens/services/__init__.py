"""Services for ConsultLens."""

from .data_source import (
    SentimentDataSource,
    StaticDataSource,
    FileDataSource,
    DemoDataSource,
    create_data_source,
)
from .dashboard import DashboardSession, DashboardView, build_dashboard_view

__all__ = [
    "SentimentDataSource",
    "StaticDataSource",
    "FileDataSource",
    "DemoDataSource",
    "create_data_source",
    "DashboardSession",
    "DashboardView",
    "build_dashboard_view",
]
