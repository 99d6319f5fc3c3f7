"""Data preparation for export."""

import datetime
import json
from typing import Any, Dict, List

from ..core.constants import FileConstants
from ..core.models import Comment, SentimentCount, TimePeriodEntry


def _counts_dict(counts: SentimentCount) -> Dict[str, int]:
    return {
        "positive": counts.positive,
        "neutral": counts.neutral,
        "negative": counts.negative,
    }


def series_to_records(series: List[TimePeriodEntry]) -> List[Dict[str, Any]]:
    return [{"period_label": e.period_label, **_counts_dict(e.counts)} for e in series]


def comments_to_records(comments: List[Comment]) -> List[Dict[str, Any]]:
    return [
        {
            "id": c.id,
            "author": c.author,
            "text": c.text,
            "sentiment_class": c.sentiment_class.value,
            "confidence": c.confidence,
            "created_at": c.created_at.isoformat(),
        }
        for c in comments
    ]


def prepare_export(view) -> Dict[str, Any]:
    """Convert a DashboardView into JSON-serializable data."""
    kpis = view.kpis

    export_data = {
        "filter": view.selected_filter.value,
        "summary": {
            "total": view.summary.total,
            "net_sentiment": view.summary.net_sentiment,
            **_counts_dict(view.summary.totals_by_class),
        },
        "slices": [
            {"name": s.name, "key": s.key.value, "value": s.value}
            for s in view.slices
        ],
        "kpis": {
            "total": kpis.total,
            "total_display": kpis.total_display,
            "positive_pct": kpis.positive_pct,
            "negative_pct": kpis.negative_pct,
            "net_sentiment": kpis.net_sentiment,
            "net_display": kpis.net_display,
            "low_confidence_rate": kpis.low_confidence_rate,
            "range": kpis.range_label,
        },
        "trend": {
            "granularity": view.trend_granularity,
            "points": series_to_records(view.trend),
        },
        "hotspots": [
            {
                "topic": h.topic,
                "controversy": h.controversy,
                "negative": h.negative_magnitude,
                "positive": h.positive_magnitude,
                "neutral": h.neutral,
            }
            for h in view.hotspots
        ],
        "feed": comments_to_records(view.feed),
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
