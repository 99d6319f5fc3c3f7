"""Data models for ConsultLens."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List


class SentimentClass(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SentimentFilter(Enum):
    ALL = "all"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    @property
    def sentiment_class(self):
        """The class this filter selects, or None for ALL."""
        if self is SentimentFilter.ALL:
            return None
        return SentimentClass(self.value)


@dataclass(frozen=True)
class SentimentCount:
    """Per-class comment counts."""
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @classmethod
    def zero(cls) -> "SentimentCount":
        return cls(0, 0, 0)

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def get(self, sentiment_class: SentimentClass) -> int:
        return getattr(self, sentiment_class.value)

    def only(self, sentiment_class: SentimentClass) -> "SentimentCount":
        """Keep one class, zero the other two."""
        kept = {c.value: 0 for c in SentimentClass}
        kept[sentiment_class.value] = self.get(sentiment_class)
        return SentimentCount(**kept)

    def __add__(self, other: "SentimentCount") -> "SentimentCount":
        if not isinstance(other, SentimentCount):
            return NotImplemented
        return SentimentCount(
            positive=self.positive + other.positive,
            neutral=self.neutral + other.neutral,
            negative=self.negative + other.negative,
        )


@dataclass(frozen=True)
class TimePeriodEntry:
    """One time bucket: a day, or an aggregated run of days."""
    period_label: str
    counts: SentimentCount


# Chronologically ascending, in caller-supplied order
TimeSeries = List[TimePeriodEntry]


@dataclass(frozen=True)
class TopicDistribution:
    """Sentiment split of one topic, in percent (rows sum to 100)."""
    topic: str
    positive: int
    neutral: int
    negative: int


@dataclass(frozen=True)
class Comment:
    """A pre-labelled consultation comment."""
    id: str
    author: str
    text: str
    sentiment_class: SentimentClass
    confidence: float
    created_at: datetime


@dataclass(frozen=True)
class DonutSummary:
    """Totals across a whole series."""
    totals_by_class: SentimentCount
    total: int
    net_sentiment: int


@dataclass(frozen=True)
class DonutSlice:
    name: str
    key: SentimentClass
    value: int


@dataclass(frozen=True)
class HotspotRow:
    """A ranked topic with signed magnitudes for a diverging layout."""
    topic: str
    controversy: int
    negative_magnitude: int
    positive_magnitude: int
    neutral: int


@dataclass(frozen=True)
class KpiSummary:
    """Headline figures shown above the charts."""
    total: int
    total_display: str
    positive_pct: int
    negative_pct: int
    net_sentiment: int
    net_display: str
    low_confidence_rate: int
    range_label: str
