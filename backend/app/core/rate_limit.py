"""Per-client request limits for the full recommendation endpoint."""

from __future__ import annotations

import math
import time
from collections import defaultdict, deque
from collections.abc import Callable

from fastapi import HTTPException, Request, status

from app.config import settings


class RateLimiter:
    """Sliding-window limiter keyed by client IP.

    Parameters
    ----------
    max_requests : int
        Requests allowed per client inside one window.
    window_seconds : float
        Window length.
    enabled : bool
        When False, :meth:`check` never rejects.
    clock : callable
        Monotonic time source in seconds.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.enabled = enabled
        self._clock = clock
        self._hits: dict[str, deque[float]] = defaultdict(deque)
        self._last_sweep = 0.0

    @staticmethod
    def client_key(request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def _expire(self, hits: deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        """Forget clients with no hits left in the window, at most once per window."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        cutoff = now - self.window_seconds
        for key in [k for k, hits in self._hits.items() if not hits or hits[-1] <= cutoff]:
            del self._hits[key]

    def check(self, request: Request) -> None:
        """Record one hit, raising 429 with ``Retry-After`` when over the limit."""
        if not self.enabled:
            return

        now = self._clock()
        self._sweep(now)
        hits = self._hits[self.client_key(request)]
        self._expire(hits, now)

        if len(hits) >= self.max_requests:
            retry_after = max(1, math.ceil(hits[0] + self.window_seconds - now))
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=(
                    f"Rate limit exceeded: {self.max_requests} recommendations "
                    f"per {self.window_seconds:g}s."
                ),
                headers={"Retry-After": str(retry_after)},
            )
        hits.append(now)

    def reset(self) -> None:
        self._hits.clear()
        self._last_sweep = 0.0


recommend_limiter = RateLimiter(
    max_requests=settings.recommend_rate_limit,
    window_seconds=settings.recommend_rate_window_seconds,
    enabled=settings.recommend_rate_limit_enabled,
)
