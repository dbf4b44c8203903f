"""Data models for duewatch."""

from duewatch.models.task import Task
from duewatch.models.resolved_time import ResolvedTime, TimeOrigin
from duewatch.models.overdue import OverdueClassification, NOT_OVERDUE

__all__ = [
    "Task",
    "ResolvedTime",
    "TimeOrigin",
    "OverdueClassification",
    "NOT_OVERDUE",
]
