"""Controversy ranking of topics and diverging values for hotspot views."""

from typing import Iterable, List

from .models import HotspotRow, TopicDistribution


def controversy_index(topic: TopicDistribution) -> int:
    """Percentage-point gap between positive and negative; lower is more contested."""
    return abs(topic.positive - topic.negative)


def rank(topics: Iterable[TopicDistribution]) -> List[TopicDistribution]:
    """Most contested topics first. Equal scores keep their input order."""
    # sorted() is stable
    return sorted(topics, key=controversy_index)


def to_diverging(topic: TopicDistribution) -> HotspotRow:
    return HotspotRow(
        topic=topic.topic,
        controversy=controversy_index(topic),
        negative_magnitude=-topic.negative,
        positive_magnitude=topic.positive,
        neutral=topic.neutral,
    )


def hotspots(topics: Iterable[TopicDistribution]) -> List[HotspotRow]:
    """Ranked topics with negative values signed below zero."""
    return [to_diverging(t) for t in rank(topics)]
