"""Basic usage examples for ConsultLens."""

from consultlens import (
    DashboardSession,
    create_data_source,
    format_compact,
    hotspots,
    project_series,
    rebucket,
    summarize,
)
from consultlens.core.models import SentimentClass


def example_snapshot():
    """Example: overall snapshot of the demo corpus."""
    print("📊 Overall snapshot")

    source = create_data_source()
    summary = summarize(source.time_series())

    print(f"  Total comments: {format_compact(summary.total)}")
    print(f"  Net sentiment: {summary.net_sentiment:+d}")


def example_weekly_negative_trend():
    """Example: weekly trend of negative comments only."""
    print("\n📉 Weekly negative trend")

    source = create_data_source()
    negative = project_series(source.time_series(), "negative")
    for week in rebucket(negative, 7):
        print(f"  {week.period_label}: {week.counts.negative}")


def example_hotspots():
    """Example: most contested topics."""
    print("\n🔥 Topic hotspots")

    source = create_data_source()
    for row in hotspots(source.topic_distributions()):
        print(f"  {row.topic}: {row.negative_magnitude} / +{row.positive_magnitude}")


def example_session():
    """Example: clicking a donut slice filters the feed."""
    print("\n🖱️ Session")

    session = DashboardSession(create_data_source())
    session.select_slice(SentimentClass.NEGATIVE)
    view = session.view()
    print(f"  Filter: {view.selected_filter.value}, {len(view.feed)} comments in feed")


if __name__ == "__main__":
    example_snapshot()
    example_weekly_negative_trend()
    example_hotspots()
    example_session()
