"""
Rate limiting middleware (in-memory sliding window).

Limits calls per key within a rolling window. Over-limit calls return a
failure ExecutionResult without calling ``next()``: the executor never runs
and no ExecutionError is raised.

Features:
- Sliding window per key (timestamps in a deque)
- Pluggable key generator (default: context user id, else "anonymous")
- Safe under concurrent calls (state serialized by an asyncio.Lock)
"""

import asyncio
import math
import time
from collections import deque
from collections.abc import Callable, Mapping

from exo_config.settings import Settings
from exo_obs.logging import get_logger
from exo_tools.base import ExecutionResult
from exo_tools.middleware.chain import Middleware, MiddlewareCall

logger = get_logger(__name__)

KeyGenerator = Callable[[MiddlewareCall], str]


def default_key(call: MiddlewareCall) -> str:
    """Rate-limit key from ``context["user"]["id"]``."""
    user = call.context.get("user")
    if isinstance(user, Mapping):
        user_id = user.get("id")
    else:
        user_id = getattr(user, "id", None)
    return str(user_id) if user_id else "anonymous"


class RateLimiter:
    """Sliding-window limiter; instances are middleware."""

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        key_generator: KeyGenerator = default_key,
        clock: Callable[[], float] = time.monotonic,
    ):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        self.limit = limit
        self.window_seconds = window_seconds
        self.key_generator = key_generator
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()
        self._lock = asyncio.Lock()

    async def acquire(self, key: str) -> float | None:
        """Record a hit for ``key``.

        Returns:
            None if allowed, otherwise seconds until the oldest hit expires
        """
        async with self._lock:
            now = self._clock()
            cutoff = now - self.window_seconds
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            hits = self._hits.setdefault(key, deque())

            # Remove old entries (outside window)
            while hits and hits[0] <= cutoff:
                hits.popleft()

            if len(hits) >= self.limit:
                return hits[0] + self.window_seconds - now

            hits.append(now)
            return None

    def _sweep(self, cutoff: float) -> None:
        """Drop keys with no hits inside the window."""
        idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in idle:
            del self._hits[key]

    def tracked_keys(self) -> int:
        return len(self._hits)

    async def __call__(self, call: MiddlewareCall) -> ExecutionResult:
        key = self.key_generator(call)
        retry_after = await self.acquire(key)
        if retry_after is None:
            return await call.next()

        logger.warning(
            "tool_rate_limited",
            tool_name=call.tool_name,
            key=key,
            retry_after=round(retry_after, 3),
        )
        return ExecutionResult(
            success=False,
            error=(
                f"Rate limit exceeded for {call.tool_name}. "
                f"Try again in {math.ceil(retry_after)}s."
            ),
        )


def create_rate_limiter(
    limit: int | None = None,
    window_seconds: float | None = None,
    key_generator: KeyGenerator = default_key,
    settings: Settings | None = None,
) -> Middleware:
    """
    Create a rate limiting middleware.

    Args:
        limit: Calls allowed per key in the window (default RATE_LIMIT_MAX_CALLS)
        window_seconds: Window length (default RATE_LIMIT_WINDOW_SECONDS)
        key_generator: Maps a call to its rate-limit key
        settings: Settings override

    Example:
        limiter = create_rate_limiter(limit=2, window_seconds=5, key_generator=lambda _: "global")
    """
    if limit is None or window_seconds is None:
        settings = settings or Settings()
        limit = limit if limit is not None else settings.RATE_LIMIT_MAX_CALLS
        if window_seconds is None:
            window_seconds = settings.RATE_LIMIT_WINDOW_SECONDS
    return RateLimiter(limit=limit, window_seconds=window_seconds, key_generator=key_generator)
