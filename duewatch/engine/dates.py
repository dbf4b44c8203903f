"""Date normalization helpers for overdue evaluation.

Everything is reduced to calendar-date granularity before comparison, so a
task due today is never overdue regardless of the time of day.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

from duewatch.models.resolved_time import ResolvedTime


def parse_due_date(value: Any) -> Optional[date]:
    """Parse a task due date into a calendar date.

    Accepts ``date``, ``datetime`` (time of day dropped, no timezone
    conversion) and ISO-8601 strings, either date-only or full datetimes.

    Args:
        value: Raw due date as supplied by the task store

    Returns:
        The calendar date, or None if the value is absent or malformed.
        Malformed input is expected and never raises.
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def to_calendar_date(value: Union[date, datetime, ResolvedTime]) -> date:
    """Normalize a point in time to its calendar date.

    Raises:
        TypeError: If value is not a date, datetime or ResolvedTime
    """
    if isinstance(value, ResolvedTime):
        return value.as_date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date, datetime or ResolvedTime, got {type(value).__name__}")


def whole_days_between(later: date, earlier: date) -> int:
    """Number of whole calendar days from earlier to later."""
    return (later - earlier).days
