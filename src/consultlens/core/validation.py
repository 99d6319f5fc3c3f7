"""Boundary validation for records entering the system.

The aggregation functions assume well-formed input. Data sources call these
helpers once, when raw records are turned into models, and fail fast.
"""

from datetime import datetime
from typing import Any, Iterable, List, Mapping

from .exceptions import DataValidationError
from .models import Comment, SentimentClass, SentimentCount, TimePeriodEntry, TopicDistribution

TOPIC_PERCENT_TOTAL = 100


def _non_negative_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(f"{field} must be an integer", field=field, value=value)
    if value < 0:
        raise DataValidationError(f"{field} must not be negative", field=field, value=value)
    return value


def validate_counts(counts: SentimentCount) -> SentimentCount:
    for c in SentimentClass:
        _non_negative_int(counts.get(c), c.value)
    return counts


def validate_series(series: Iterable[TimePeriodEntry]) -> List[TimePeriodEntry]:
    checked = []
    for entry in series:
        if not isinstance(entry.period_label, str):
            raise DataValidationError("period_label must be a string",
                                      field="period_label", value=entry.period_label)
        validate_counts(entry.counts)
        checked.append(entry)
    return checked


def validate_topic(topic: TopicDistribution) -> TopicDistribution:
    """Percentages must be non-negative integers summing to 100."""
    for c in SentimentClass:
        _non_negative_int(getattr(topic, c.value), f"{topic.topic}.{c.value}")
    total = topic.positive + topic.neutral + topic.negative
    if total != TOPIC_PERCENT_TOTAL:
        raise DataValidationError(
            f"Topic '{topic.topic}' percentages sum to {total}, expected {TOPIC_PERCENT_TOTAL}",
            field=topic.topic,
            value=total,
        )
    return topic


def validate_topics(topics: Iterable[TopicDistribution]) -> List[TopicDistribution]:
    checked = []
    seen = set()
    for topic in topics:
        if topic.topic in seen:
            raise DataValidationError(f"Duplicate topic '{topic.topic}'", field="topic", value=topic.topic)
        seen.add(topic.topic)
        checked.append(validate_topic(topic))
    return checked


def validate_comment(comment: Comment) -> Comment:
    if not isinstance(comment.sentiment_class, SentimentClass):
        raise DataValidationError("Unknown sentiment class",
                                  field="sentiment_class", value=comment.sentiment_class)
    confidence = comment.confidence
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)) or not 0.0 <= confidence <= 1.0:
        raise DataValidationError("confidence must be a number in [0, 1]",
                                  field="confidence", value=confidence)
    if not isinstance(comment.created_at, datetime):
        raise DataValidationError("created_at must be a datetime",
                                  field="created_at", value=comment.created_at)
    return comment


def validate_comments(comments: Iterable[Comment]) -> List[Comment]:
    checked = []
    seen = set()
    for comment in comments:
        if comment.id in seen:
            raise DataValidationError(f"Duplicate comment id '{comment.id}'", field="id", value=comment.id)
        seen.add(comment.id)
        checked.append(validate_comment(comment))
    return checked


def parse_sentiment_class(value: Any) -> SentimentClass:
    if isinstance(value, SentimentClass):
        return value
    try:
        return SentimentClass(str(value).strip().lower())
    except ValueError:
        raise DataValidationError(f"Unknown sentiment class: {value!r}",
                                  field="sentiment_class", value=value)


def parse_counts(raw: Mapping[str, Any]) -> SentimentCount:
    """Build counts from a mapping; missing classes count as zero."""
    return SentimentCount(**{c.value: raw.get(c.value, 0) for c in SentimentClass})
