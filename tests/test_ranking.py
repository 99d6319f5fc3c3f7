"""Tests for controversy ranking."""

from consultlens.core.models import TopicDistribution
from consultlens.core.ranking import controversy_index, hotspots, rank, to_diverging


class TestRank:
    """Test ordering by controversy index."""

    def test_worked_example(self):
        topics = [
            TopicDistribution("Definitions", 40, 30, 30),
            TopicDistribution("Compliance", 33, 40, 27),
            TopicDistribution("Penalties", 28, 32, 40),
        ]

        assert [controversy_index(t) for t in topics] == [10, 6, 12]
        assert [t.topic for t in rank(topics)] == ["Compliance", "Definitions", "Penalties"]

    def test_ties_keep_input_order(self, consultation_topics):
        ranked = rank(consultation_topics)

        assert [t.topic for t in ranked] == [
            "Compliance", "Definitions", "Privacy", "Timelines", "Penalties", "Jurisdiction",
        ]

    def test_sorted_and_same_length(self, consultation_topics):
        ranked = rank(consultation_topics)
        scores = [controversy_index(t) for t in ranked]

        assert len(ranked) == len(consultation_topics)
        assert scores == sorted(scores)

    def test_does_not_mutate_input(self, consultation_topics):
        before = list(consultation_topics)
        rank(consultation_topics)
        assert consultation_topics == before

    def test_empty(self):
        assert rank([]) == []


def test_to_diverging_signs():
    row = to_diverging(TopicDistribution("Privacy", 35, 20, 45))

    assert row.topic == "Privacy"
    assert row.negative_magnitude == -45
    assert row.positive_magnitude == 35
    assert row.neutral == 20
    assert row.controversy == 10


def test_hotspots_follow_rank(consultation_topics):
    rows = hotspots(consultation_topics)

    assert [r.topic for r in rows] == [t.topic for t in rank(consultation_topics)]
    assert all(r.negative_magnitude <= 0 <= r.positive_magnitude for r in rows)
