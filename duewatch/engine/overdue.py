"""Overdue evaluation for duewatch.

Classifies a task as not overdue, overdue or severely overdue relative to an
explicitly supplied "now". Every function here is pure: the same
(due date, completed, now) triple always yields the same classification, and
nothing reads the wall clock.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Union

from duewatch.engine.dates import parse_due_date, to_calendar_date, whole_days_between
from duewatch.models.constants import SEVERE_OVERDUE_DAYS
from duewatch.models.overdue import OverdueClassification, NOT_OVERDUE
from duewatch.models.resolved_time import ResolvedTime
from duewatch.models.task import Task

Now = Union[date, datetime, ResolvedTime]


def classify(due_date: Any, completed: bool, now: Now) -> OverdueClassification:
    """Classify a task's overdue status.

    Steps, each short-circuiting:
    1. Completed tasks are never overdue.
    2. Absent or malformed due dates are never overdue.
    3. Both dates are normalized to calendar-date granularity.
    4. Due today or later is not overdue.
    5. Otherwise overdue by whole days; severe from SEVERE_OVERDUE_DAYS on.

    Args:
        due_date: Task due date in any shape the task store supplies
        completed: Whether the task is completed
        now: Resolved current time (date, datetime or ResolvedTime)

    Returns:
        OverdueClassification for the task
    """
    if completed:
        return NOT_OVERDUE

    due = parse_due_date(due_date)
    if due is None:
        return NOT_OVERDUE

    today = to_calendar_date(now)
    if due >= today:
        return NOT_OVERDUE

    days_overdue = whole_days_between(today, due)
    return OverdueClassification(
        is_overdue=True,
        is_severe=days_overdue >= SEVERE_OVERDUE_DAYS,
        days_overdue=days_overdue,
    )


def classify_task(task: Task, now: Now) -> OverdueClassification:
    """Classify a single task."""
    return classify(task.due_date, task.completed, now)


def classify_tasks(tasks: Iterable[Task], now: Now) -> Dict[str, OverdueClassification]:
    """Classify many tasks against the same "now".

    Results are recomputed on every call and keyed by task id.
    """
    return {task.id: classify_task(task, now) for task in tasks}


def should_prompt_archive(classification: OverdueClassification) -> bool:
    """Whether the rendering layer may offer to archive the task.

    Only severely overdue tasks qualify. Archiving itself is left to the caller.
    """
    return classification.is_severe


def overdue_label(classification: OverdueClassification) -> Optional[str]:
    """Text indicator for an overdue task, or None when nothing should render."""
    if not classification.is_overdue:
        return None
    days = classification.days_overdue
    unit = "day" if days == 1 else "days"
    return f"Overdue by {days} {unit}"
