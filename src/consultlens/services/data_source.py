"""Data sources supplying time series, topic distributions and comments."""

import json
import logging
import random
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from ..core.config import settings
from ..core.constants import DemoDataConstants, FileConstants
from ..core.exceptions import DataSourceError, DataValidationError
from ..core.models import Comment, TimePeriodEntry, TopicDistribution
from ..core.validation import (
    parse_counts,
    parse_sentiment_class,
    validate_comments,
    validate_series,
    validate_topics,
)

logger = logging.getLogger(__name__)


class SentimentDataSource(ABC):
    """Provider of the raw collections the dashboard aggregates.

    Returned collections are treated as read-only by every consumer.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def time_series(self) -> List[TimePeriodEntry]:
        """Daily sentiment counts, oldest first."""

    @abstractmethod
    def topic_distributions(self) -> List[TopicDistribution]:
        """Per-topic sentiment split in percent."""

    @abstractmethod
    def comments(self) -> List[Comment]:
        """Recent comments, newest first."""


class StaticDataSource(SentimentDataSource):
    """Wraps collections that are already in memory."""

    def __init__(
        self,
        series: Sequence[TimePeriodEntry] = (),
        topics: Sequence[TopicDistribution] = (),
        comments: Sequence[Comment] = (),
        validate: bool = False,
    ):
        if validate:
            series = validate_series(series)
            topics = validate_topics(topics)
            comments = validate_comments(comments)
        self._series = tuple(series)
        self._topics = tuple(topics)
        self._comments = tuple(comments)

    def time_series(self) -> List[TimePeriodEntry]:
        return list(self._series)

    def topic_distributions(self) -> List[TopicDistribution]:
        return list(self._topics)

    def comments(self) -> List[Comment]:
        return list(self._comments)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        # YAML loads bare dates as date objects
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    raise DataValidationError(f"Invalid timestamp: {value!r}", field="created_at", value=value)


def _require(raw: Mapping[str, Any], *keys: str) -> Any:
    """First present key of ``keys``."""
    for key in keys:
        if key in raw:
            return raw[key]
    raise DataValidationError(f"Missing field '{keys[0]}'", field=keys[0], value=dict(raw))


def series_from_records(records: Sequence[Mapping[str, Any]]) -> List[TimePeriodEntry]:
    return [
        TimePeriodEntry(
            period_label=str(_require(r, "period_label", "date", "label")),
            counts=parse_counts(r.get("counts", r)),
        )
        for r in records
    ]


def topics_from_records(records: Sequence[Mapping[str, Any]]) -> List[TopicDistribution]:
    topics = []
    for r in records:
        counts = parse_counts(r.get("counts", r))
        topics.append(TopicDistribution(
            topic=str(_require(r, "topic")),
            positive=counts.positive,
            neutral=counts.neutral,
            negative=counts.negative,
        ))
    return topics


def comments_from_records(records: Sequence[Mapping[str, Any]]) -> List[Comment]:
    return [
        Comment(
            id=str(_require(r, "id")),
            author=str(r.get("author", "")),
            text=str(r.get("text", "")),
            sentiment_class=parse_sentiment_class(_require(r, "sentiment_class", "sentiment")),
            confidence=_require(r, "confidence"),
            created_at=_parse_timestamp(_require(r, "created_at", "createdAt")),
        )
        for r in records
    ]


class FileDataSource(SentimentDataSource):
    """Loads a JSON or YAML dataset with time_series, topics and comments keys."""

    def __init__(self, path, validate: Optional[bool] = None):
        self.path = Path(path)
        self.validate = settings.validate_input if validate is None else validate
        self._loaded: Optional[Dict[str, list]] = None

    @property
    def name(self) -> str:
        return str(self.path)

    def _read(self) -> Dict[str, Any]:
        suffix = self.path.suffix.lower()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                if suffix in FileConstants.YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                elif suffix in FileConstants.JSON_SUFFIXES:
                    data = json.load(f)
                else:
                    raise DataSourceError(f"Unsupported dataset format '{suffix}'", source=str(self.path))
        except FileNotFoundError as e:
            raise DataSourceError(f"Dataset {self.path} not found", source=str(self.path)) from e
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Invalid dataset {self.path}: {e}", source=str(self.path)) from e
        except OSError as e:
            raise DataSourceError(f"Cannot read dataset {self.path}: {e}", source=str(self.path)) from e

        if not isinstance(data, dict):
            raise DataSourceError(f"Dataset {self.path} must be a mapping", source=str(self.path))
        return data

    def _section(self, data: Dict[str, Any], key: str) -> List[Mapping[str, Any]]:
        """A list of record mappings; absent or null sections are empty."""
        records = data.get(key)
        if records is None:
            return []
        if not isinstance(records, list):
            raise DataSourceError(f"Section '{key}' in {self.path} must be a list",
                                  source=str(self.path), details={"section": key})
        for i, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise DataSourceError(f"Record {i} of '{key}' in {self.path} must be a mapping",
                                      source=str(self.path), details={"section": key, "index": i})
        return records

    def _load(self) -> Dict[str, list]:
        if self._loaded is not None:
            return self._loaded

        data = self._read()
        series = series_from_records(self._section(data, "time_series"))
        topics = topics_from_records(self._section(data, "topics"))
        comments = comments_from_records(self._section(data, "comments"))
        if self.validate:
            series = validate_series(series)
            topics = validate_topics(topics)
            comments = validate_comments(comments)

        logger.info(f"Loaded {len(series)} periods, {len(topics)} topics, "
                    f"{len(comments)} comments from {self.path}")
        self._loaded = {"series": series, "topics": topics, "comments": comments}
        return self._loaded

    def time_series(self) -> List[TimePeriodEntry]:
        return list(self._load()["series"])

    def topic_distributions(self) -> List[TopicDistribution]:
        return list(self._load()["topics"])

    def comments(self) -> List[Comment]:
        return list(self._load()["comments"])


class DemoDataSource(SentimentDataSource):
    """Seeded synthetic data shaped like a live consultation."""

    def __init__(self, days: Optional[int] = None, seed: Optional[int] = None,
                 anchor: Optional[datetime] = None):
        self.days = settings.demo_days if days is None else days
        self.seed = settings.demo_seed if seed is None else seed
        self.anchor = anchor or datetime.now().replace(second=0, microsecond=0)

    def time_series(self) -> List[TimePeriodEntry]:
        rng = random.Random(self.seed)
        series = []
        for i in range(self.days):
            day = self.anchor - timedelta(days=self.days - 1 - i)
            counts = parse_counts({
                "positive": rng.randint(*DemoDataConstants.POSITIVE_RANGE),
                "negative": rng.randint(*DemoDataConstants.NEGATIVE_RANGE),
                "neutral": rng.randint(*DemoDataConstants.NEUTRAL_RANGE),
            })
            series.append(TimePeriodEntry(day.strftime(DemoDataConstants.DATE_FORMAT), counts))
        return series

    def topic_distributions(self) -> List[TopicDistribution]:
        return [TopicDistribution(*row) for row in DemoDataConstants.TOPICS]

    def comments(self) -> List[Comment]:
        return [
            Comment(
                id=cid,
                author=author,
                text=text,
                sentiment_class=parse_sentiment_class(sentiment),
                confidence=confidence,
                created_at=self.anchor - timedelta(minutes=minutes_ago),
            )
            for cid, author, text, sentiment, confidence, minutes_ago in DemoDataConstants.COMMENTS
        ]


def create_data_source(path=None) -> SentimentDataSource:
    """File source when a path is given or configured, demo data otherwise."""
    path = path or settings.data_file
    if path:
        logger.debug(f"Using dataset file {path}")
        return FileDataSource(path)
    logger.debug("No dataset configured, using demo data")
    return DemoDataSource()
