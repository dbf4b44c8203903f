"""Resolved "now" for a session."""

from datetime import date, datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field

from duewatch.models.constants import MAX_EPOCH_MS


class TimeOrigin(str, Enum):
    """Where a resolved time came from. Diagnostic only."""
    REMOTE = "remote"
    LOCAL_FALLBACK = "local-fallback"


class ResolvedTime(BaseModel):
    """Authoritative current instant, resolved once per session."""

    epoch_ms: int = Field(..., ge=0, le=MAX_EPOCH_MS, description="Instant as epoch milliseconds")
    origin: TimeOrigin = Field(..., description="Remote authority or local clock fallback")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def instant(self) -> datetime:
        """The instant as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.epoch_ms / 1000, tz=timezone.utc)

    def as_date(self) -> date:
        """Calendar date of the instant on the host's local calendar."""
        return datetime.fromtimestamp(self.epoch_ms / 1000).date()
