"""Command-line interface for ConsultLens."""

import argparse
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants
from .core.exceptions import ConsultLensError
from .core.models import SentimentFilter
from .services.dashboard import build_dashboard_view
from .services.data_source import create_data_source
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)

FILTER_CHOICES = [f.value for f in SentimentFilter]


def non_negative_int(value):
    """argparse type for counts that may be zero but not negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _view(args, **options):
    source = create_data_source(args.data)
    return build_dashboard_view(source, args.filter, **options)


def cmd_summary(args):
    """Summary command."""
    view = _view(args)
    kpis = view.kpis

    print(f"Range: {kpis.range_label or '-'}")
    print(f"Total: {kpis.total_display}  "
          f"Positive: {kpis.positive_pct}%  Negative: {kpis.negative_pct}%  "
          f"Net: {kpis.net_display}  Low-confidence: {kpis.low_confidence_rate}%")
    print("\nSnapshot:")
    for s in view.slices:
        print(f"  {s.name}: {s.value}")


def cmd_trend(args):
    """Trend command."""
    view = _view(args, bucket_size=args.bucket_size, weekly_threshold=args.threshold)

    print(f"Trend ({view.trend_granularity}, filter={view.selected_filter.value}):")
    for entry in view.trend:
        c = entry.counts
        print(f"  {entry.period_label}: +{c.positive} ={c.neutral} -{c.negative} (total {c.total})")


def cmd_hotspots(args):
    """Hotspots command."""
    view = _view(args)

    print("Topics by controversy (most contested first):")
    for i, row in enumerate(view.hotspots, 1):
        print(f"  {i}. {row.topic}: index {row.controversy} "
              f"(neg {row.negative_magnitude}, pos +{row.positive_magnitude}, neu {row.neutral})")


def cmd_feed(args):
    """Feed command."""
    view = _view(args)
    limit = settings.feed_limit if args.limit is None else args.limit

    if not view.feed:
        print("No comments match the filter.")
        return

    for c in view.feed[:limit]:
        print(f"[{c.created_at:%Y-%m-%d %H:%M}] {c.sentiment_class.value} "
              f"({round(c.confidence * 100)}%) {c.author}: {c.text}")


def cmd_export(args):
    """Export command."""
    view = _view(args)
    data = prepare_export(view)
    export_to_json(data, args.out)
    print(f"Results exported to {args.out}")


def build_parser():
    parser = argparse.ArgumentParser(description="ConsultLens - Consultation Sentiment Aggregation")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--data', help='JSON or YAML dataset (demo data when omitted)')
    common.add_argument('--filter', choices=FILTER_CHOICES, default='all', help='Sentiment filter')

    subparsers.add_parser('summary', parents=[common], help='Show KPIs and donut totals')

    trend_parser = subparsers.add_parser('trend', parents=[common], help='Show the sentiment trend')
    trend_parser.add_argument('--bucket-size', type=int, default=None, help='Entries per bucket')
    trend_parser.add_argument('--threshold', type=int, default=None,
                              help='Re-bucket when the series is longer than this')

    subparsers.add_parser('hotspots', parents=[common], help='Rank topics by controversy')

    feed_parser = subparsers.add_parser('feed', parents=[common], help='Show the comment feed')
    feed_parser.add_argument('--limit', type=non_negative_int, default=None, help='Maximum comments to show')

    export_parser = subparsers.add_parser('export', parents=[common], help='Export the view model as JSON')
    export_parser.add_argument('--out', required=True, help='Output JSON file')

    return parser


COMMANDS = {
    'summary': cmd_summary,
    'trend': cmd_trend,
    'hotspots': cmd_hotspots,
    'feed': cmd_feed,
    'export': cmd_export,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except (ConsultLensError, OSError) as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
