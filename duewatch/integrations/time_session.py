"""Session-scoped resolved time for duewatch."""

from typing import Optional

from duewatch.integrations.time_authority import TimeAuthorityClient, resolve_now
from duewatch.models.resolved_time import ResolvedTime


class TimeSession:
    """Holds the single ResolvedTime of one session.

    Time is resolved on first access and never refreshed. Start a new
    session to resolve again.
    """

    def __init__(self, client: Optional[TimeAuthorityClient] = None):
        self._client = client
        self._resolved: Optional[ResolvedTime] = None

    @property
    def is_resolved(self) -> bool:
        """Whether this session has already resolved its time."""
        return self._resolved is not None

    @property
    def now(self) -> ResolvedTime:
        """The session's ResolvedTime, resolved on first access."""
        if self._resolved is None:
            self._resolved = resolve_now(self._client)
        return self._resolved
