"""In-memory sliding-window rate limiter keyed by caller address."""

from __future__ import annotations

import asyncio
import math
import time
from collections import deque
from typing import Callable, Deque, Dict

from app.errors import RateLimitExceeded


class SlidingWindowRateLimiter:
    """
    Allow at most ``max_requests`` hits per key within ``window_seconds``.

    State lives in process memory, so limits are per worker.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._next_sweep = clock() + window_seconds
        self._lock = asyncio.Lock()

    async def hit(self, key: str) -> int:
        """
        Record a request for ``key``.

        Returns:
            Number of requests still allowed in the current window

        Raises:
            RateLimitExceeded: if the key is already at its limit
        """
        async with self._lock:
            now = self._clock()
            if now >= self._next_sweep:
                self._sweep(now)

            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= now - self.window_seconds:
                hits.popleft()

            if len(hits) >= self.max_requests:
                retry_after = max(1, math.ceil(hits[0] + self.window_seconds - now))
                raise RateLimitExceeded(retry_after)

            hits.append(now)
            return self.max_requests - len(hits)

    def _sweep(self, now: float) -> None:
        """Forget keys whose newest hit has left the window"""
        cutoff = now - self.window_seconds
        expired = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in expired:
            del self._hits[key]
        self._next_sweep = now + self.window_seconds

    async def reset(self) -> None:
        async with self._lock:
            self._hits.clear()
