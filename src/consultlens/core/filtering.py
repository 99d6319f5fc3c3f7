"""Filter engine: project series and comment feeds onto a sentiment selector."""

from typing import List, Sequence, Union

from .exceptions import InvalidFilterError
from .models import Comment, SentimentClass, SentimentFilter, TimePeriodEntry


def parse_filter(value: Union[str, SentimentFilter, SentimentClass, None]) -> SentimentFilter:
    """Coerce a UI value into a SentimentFilter.

    ``None`` and empty strings mean "all".
    """
    if isinstance(value, SentimentFilter):
        return value
    if isinstance(value, SentimentClass):
        return SentimentFilter(value.value)
    if value is None or (isinstance(value, str) and not value.strip()):
        return SentimentFilter.ALL
    if isinstance(value, str):
        try:
            return SentimentFilter(value.strip().lower())
        except ValueError:
            pass
    raise InvalidFilterError(
        f"Unknown sentiment filter: {value!r}",
        details={"allowed": [f.value for f in SentimentFilter]},
    )


def project_series(series: Sequence[TimePeriodEntry], selector) -> List[TimePeriodEntry]:
    """Zero every class but the selected one, keeping labels and length.

    With ``all`` the result is an equal copy of the input.
    """
    selected = parse_filter(selector).sentiment_class
    if selected is None:
        return list(series)
    return [
        TimePeriodEntry(period_label=entry.period_label, counts=entry.counts.only(selected))
        for entry in series
    ]


def project_comments(comments: Sequence[Comment], selector) -> List[Comment]:
    """Keep only comments of the selected class, in their original order."""
    selected = parse_filter(selector).sentiment_class
    if selected is None:
        return list(comments)
    return [c for c in comments if c.sentiment_class is selected]


def project(data, selector):
    """Dispatch to project_series or project_comments by element type."""
    items = list(data)
    if not items:
        parse_filter(selector)
        return []
    if isinstance(items[0], Comment):
        return project_comments(items, selector)
    if isinstance(items[0], TimePeriodEntry):
        return project_series(items, selector)
    raise TypeError(f"Cannot project items of type {type(items[0]).__name__}")
