"""Timeout middleware.

Races the rest of the chain against a deadline. On expiry the inner task is
cancelled and ``TimeoutError`` propagates; the tool wraps it in an
ExecutionError like any other executor failure.
"""

import asyncio

from exo_config.settings import Settings
from exo_tools.base import ExecutionResult
from exo_tools.middleware.chain import Middleware, MiddlewareCall


def create_timeout_middleware(
    seconds: float | None = None, settings: Settings | None = None
) -> Middleware:
    """Create a middleware failing calls that exceed ``seconds``
    (default TOOL_TIMEOUT_SECONDS)."""
    if seconds is None:
        seconds = (settings or Settings()).TOOL_TIMEOUT_SECONDS
    if seconds <= 0:
        raise ValueError("seconds must be > 0")

    async def timeout_middleware(call: MiddlewareCall) -> ExecutionResult:
        try:
            return await asyncio.wait_for(call.next(), timeout=seconds)
        except asyncio.TimeoutError:
            raise TimeoutError(
                f"Tool {call.tool_name} timed out after {seconds}s"
            ) from None

    return timeout_middleware
