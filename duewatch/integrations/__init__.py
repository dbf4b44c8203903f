"""External integrations for duewatch."""

from duewatch.integrations.time_authority import (
    TimeAuthorityClient,
    TimeAuthorityError,
    resolve_now,
    local_now,
)
from duewatch.integrations.time_session import TimeSession

__all__ = [
    "TimeAuthorityClient",
    "TimeAuthorityError",
    "resolve_now",
    "local_now",
    "TimeSession",
]
