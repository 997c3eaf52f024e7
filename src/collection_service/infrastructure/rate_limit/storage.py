"""In-memory fixed-window counters for rate limiting."""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock


@dataclass
class Window:
    """Request count for one key within one window."""

    started_at: float
    count: int = 0


@dataclass
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_seconds: int


class FixedWindowRateLimiter:
    """Thread-safe fixed-window counter keyed by client address."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, Window] = {}
        self._lock = Lock()
        self._last_cleanup = clock()

    def hit(self, key: str) -> RateLimitDecision:
        """Count one request for key and decide whether it is allowed."""
        now = self._clock()
        with self._lock:
            if now - self._last_cleanup > self._window_seconds:
                self._cleanup_expired(now)

            window = self._windows.get(key)
            if window is None or now - window.started_at >= self._window_seconds:
                window = Window(started_at=now)
                self._windows[key] = window

            window.count += 1
            reset = max(0, math.ceil(window.started_at + self._window_seconds - now))
            allowed = window.count <= self._max_requests
            return RateLimitDecision(
                allowed=allowed,
                limit=self._max_requests,
                remaining=max(0, self._max_requests - window.count),
                reset_seconds=reset,
            )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _cleanup_expired(self, now: float) -> None:
        expired = [
            k for k, w in self._windows.items() if now - w.started_at >= self._window_seconds
        ]
        for k in expired:
            del self._windows[k]
        self._last_cleanup = now
