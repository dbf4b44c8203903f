"""Overdue classification model for duewatch."""

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class OverdueClassification(BaseModel):
    """Derived overdue status of a single task. Never persisted."""

    is_overdue: bool = Field(False, description="Due date is strictly before today")
    is_severe: bool = Field(False, description="Overdue by the severe threshold or more")
    days_overdue: Optional[int] = Field(None, ge=1, description="Whole days overdue (null if not overdue)")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @model_validator(mode="after")
    def _check_consistency(self) -> "OverdueClassification":
        if self.is_severe and not self.is_overdue:
            raise ValueError("is_severe requires is_overdue")
        if self.is_overdue != (self.days_overdue is not None):
            raise ValueError("days_overdue must be set exactly when is_overdue is true")
        return self


NOT_OVERDUE = OverdueClassification()
