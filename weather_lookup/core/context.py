"""Process-wide context shared by request handlers."""

import time
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

from weather_lookup.config import Settings


@dataclass(frozen=True)
class AppContext:
    """Everything a request needs from startup, injected instead of read from globals.

    Built once by the lifespan and stored on ``app.state.context``.
    """

    settings: Settings
    http_client: httpx.AsyncClient
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _started_monotonic: float = field(default_factory=time.monotonic, repr=False)

    def uptime_seconds(self) -> float:
        """Seconds since startup, measured on the monotonic clock."""
        return max(time.monotonic() - self._started_monotonic, 0.0)
