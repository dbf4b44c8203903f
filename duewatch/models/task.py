"""Task data model for duewatch."""

from typing import Any
from pydantic import BaseModel, Field


class Task(BaseModel):
    """Task as supplied by the task store.

    Only ``due_date`` and ``completed`` matter for overdue evaluation.
    ``due_date`` is kept exactly as the store handed it over. No coercion
    happens here (a number is not read as a Unix timestamp), so malformed
    values reach the evaluator and are treated as "no due date".
    """

    id: str = Field(..., description="Task identifier")
    title: str = Field("", description="Task title")
    due_date: Any = Field(
        None,
        description="Due date: date, datetime or ISO-8601 string (time of day is ignored)",
    )
    completed: bool = Field(False, description="Whether the task is completed")
