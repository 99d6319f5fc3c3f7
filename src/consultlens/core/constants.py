"""Constants and configuration values for ConsultLens."""

# Display Constants
class DisplayConstants:
    """Constants related to labels and number formatting."""

    RANGE_SEPARATOR = " → "  # joins first and last period label
    COMPACT_THRESHOLD = 1000  # values at or above render as "1.2k"
    COMPACT_SUFFIX = "k"
    SLICE_NAMES = {
        "positive": "Positive",
        "neutral": "Neutral",
        "negative": "Negative",
    }

# Trend Constants
class TrendConstants:
    """Granularity names for the trend series."""

    DAILY = "daily"
    WEEKLY = "weekly"

# Mock Data Constants
class DemoDataConstants:
    """Constants for demo data generation."""

    POSITIVE_RANGE = (20, 69)  # inclusive daily count range
    NEGATIVE_RANGE = (10, 44)
    NEUTRAL_RANGE = (5, 24)
    DATE_FORMAT = "%d/%m/%Y"

    TOPICS = [
        ("Definitions", 40, 30, 30),
        ("Compliance", 33, 40, 27),
        ("Penalties", 28, 32, 40),
        ("Jurisdiction", 45, 25, 30),
        ("Privacy", 35, 20, 45),
        ("Timelines", 30, 50, 20),
    ]

    # (id, author, text, sentiment, confidence, minutes ago)
    COMMENTS = [
        ("c1", "Anita S.", "Section 7 is clear but clause (2) is confusing; please clarify scope.",
         "neutral", 0.72, 20),
        ("c2", "Govind P.", "Love the compliance simplification, this will reduce SME burden a lot.",
         "positive", 0.89, 60),
        ("c3", "Rita D.", "The penalties are disproportionate; consider graded warnings first.",
         "negative", 0.83, 60 * 6),
        ("c4", "A. Kumar", "Ambiguous definitions could invite litigation; examples may help.",
         "negative", 0.61, 60 * 26),
    ]

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    JSON_SUFFIXES = (".json",)
    YAML_SUFFIXES = (".yaml", ".yml")
    EXPORT_VERSION = "1.0.0"
