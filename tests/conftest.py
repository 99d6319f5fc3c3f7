"""Shared sample data for ConsultLens tests."""

from datetime import datetime, timedelta

import pytest

from consultlens.core.models import (
    Comment,
    SentimentClass,
    SentimentCount,
    TimePeriodEntry,
    TopicDistribution,
)

ANCHOR = datetime(2025, 3, 1, 12, 0)


def make_series(days, positive=30, neutral=10, negative=5):
    """Constant daily series labelled day-01, day-02, ..."""
    return [
        TimePeriodEntry(f"day-{i + 1:02d}", SentimentCount(positive, neutral, negative))
        for i in range(days)
    ]


def make_comment(cid, sentiment, confidence, minutes_ago=0, author="Tester", text="Comment text"):
    return Comment(
        id=cid,
        author=author,
        text=text,
        sentiment_class=SentimentClass(sentiment),
        confidence=confidence,
        created_at=ANCHOR - timedelta(minutes=minutes_ago),
    )


@pytest.fixture
def mixed_series():
    return [
        TimePeriodEntry("2025-01-01", SentimentCount(5, 2, 1)),
        TimePeriodEntry("2025-01-02", SentimentCount(0, 4, 6)),
        TimePeriodEntry("2025-01-03", SentimentCount(7, 0, 3)),
        TimePeriodEntry("2025-01-04", SentimentCount(1, 1, 1)),
        TimePeriodEntry("2025-01-05", SentimentCount(2, 8, 0)),
    ]


@pytest.fixture
def consultation_topics():
    return [
        TopicDistribution("Definitions", 40, 30, 30),
        TopicDistribution("Compliance", 33, 40, 27),
        TopicDistribution("Penalties", 28, 32, 40),
        TopicDistribution("Jurisdiction", 45, 25, 30),
        TopicDistribution("Privacy", 35, 20, 45),
        TopicDistribution("Timelines", 30, 50, 20),
    ]


@pytest.fixture
def recent_comments():
    return [
        make_comment("c1", "neutral", 0.72, 20),
        make_comment("c2", "positive", 0.89, 60),
        make_comment("c3", "negative", 0.83, 360),
        make_comment("c4", "negative", 0.61, 1560),
    ]
