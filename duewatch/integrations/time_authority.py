"""Remote time authority integration for duewatch.

Resolves the current instant from a remote authority, falling back to the
local clock whenever the authority cannot be reached or answers badly. The
fallback is absorbed here: callers always get a usable ResolvedTime.
"""

import logging
import math
import os
import time
from typing import Any, Optional

import requests
from dotenv import load_dotenv

from duewatch.models.constants import (
    DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC,
    MAX_EPOCH_MS,
    TIME_AUTHORITY_FIELD,
)
from duewatch.models.resolved_time import ResolvedTime, TimeOrigin

load_dotenv()

logger = logging.getLogger(__name__)


class TimeAuthorityError(Exception):
    """Remote time could not be obtained or was not usable."""


def _timeout_from_env() -> float:
    raw = os.getenv("TIME_AUTHORITY_TIMEOUT_SEC")
    if raw is None or raw.strip() == "":
        return DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid TIME_AUTHORITY_TIMEOUT_SEC={raw!r}; using {DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC}s")
        return DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC
    if value <= 0 or not math.isfinite(value):
        return DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC
    return value


def _parse_epoch_ms(payload: Any) -> int:
    """Extract epoch milliseconds from an authority response body.

    Raises:
        TimeAuthorityError: If the body does not carry a usable timestamp
    """
    if not isinstance(payload, dict) or TIME_AUTHORITY_FIELD not in payload:
        raise TimeAuthorityError(f"Response missing '{TIME_AUTHORITY_FIELD}' field")

    value = payload[TIME_AUTHORITY_FIELD]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TimeAuthorityError(f"'{TIME_AUTHORITY_FIELD}' is not numeric: {value!r}")
    if not math.isfinite(value) or value < 0 or value > MAX_EPOCH_MS:
        raise TimeAuthorityError(f"'{TIME_AUTHORITY_FIELD}' is out of range: {value!r}")
    return int(value)


def local_now() -> ResolvedTime:
    """Current instant from the local clock, marked as a fallback."""
    return ResolvedTime(epoch_ms=int(time.time() * 1000), origin=TimeOrigin.LOCAL_FALLBACK)


class TimeAuthorityClient:
    """Client for the remote time authority."""

    def __init__(self, base_url: Optional[str] = None, timeout_sec: Optional[float] = None):
        """Initialize time authority client.

        Args:
            base_url: Full URL of the authority endpoint. If None, reads from
                TIME_AUTHORITY_URL env var.
            timeout_sec: Request timeout. If None, reads from
                TIME_AUTHORITY_TIMEOUT_SEC env var (default 5 seconds).

        Note:
            A missing URL is not an error at construction time. Every
            resolution then falls back to the local clock.
        """
        self.base_url = base_url or os.getenv("TIME_AUTHORITY_URL")
        self.timeout_sec = timeout_sec if timeout_sec is not None else _timeout_from_env()

    def fetch_epoch_ms(self) -> int:
        """Fetch the current instant from the authority.

        Returns:
            Epoch milliseconds reported by the authority

        Raises:
            TimeAuthorityError: On missing configuration, network failure,
                timeout, non-success status or malformed body
        """
        if not self.base_url:
            raise TimeAuthorityError("TIME_AUTHORITY_URL is not configured")

        try:
            response = requests.get(self.base_url, timeout=self.timeout_sec)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise TimeAuthorityError(f"Request to time authority failed: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise TimeAuthorityError(f"Time authority returned invalid JSON: {e}") from e

        return _parse_epoch_ms(payload)

    def resolve_now(self) -> ResolvedTime:
        """Resolve the current instant, falling back to the local clock.

        Never raises. Each call makes at most one request and caches nothing.
        """
        try:
            epoch_ms = self.fetch_epoch_ms()
        except TimeAuthorityError as e:
            logger.warning(f"Falling back to local clock (authority={self.base_url!r}): {e}")
            return local_now()

        logger.debug(f"Resolved time from authority: {epoch_ms}")
        return ResolvedTime(epoch_ms=epoch_ms, origin=TimeOrigin.REMOTE)


def resolve_now(client: Optional[TimeAuthorityClient] = None) -> ResolvedTime:
    """Resolve the current instant using the given or an env-configured client."""
    return (client or TimeAuthorityClient()).resolve_now()
