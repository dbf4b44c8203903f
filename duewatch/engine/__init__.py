"""Overdue evaluation engine for duewatch."""

from duewatch.engine.dates import parse_due_date, to_calendar_date, whole_days_between
from duewatch.engine.overdue import (
    classify,
    classify_task,
    classify_tasks,
    should_prompt_archive,
    overdue_label,
)

__all__ = [
    "parse_due_date",
    "to_calendar_date",
    "whole_days_between",
    "classify",
    "classify_task",
    "classify_tasks",
    "should_prompt_archive",
    "overdue_label",
]
