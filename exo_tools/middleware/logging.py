"""Logging middleware.

Records every attempt that reaches it, with timing and outcome. Place it
after a rate limiter to keep rejected calls out of the log.
"""

import time

from exo_obs.logging import get_logger
from exo_tools.base import ExecutionResult
from exo_tools.middleware.chain import Middleware, MiddlewareCall


def create_logging_middleware(logger_name: str = "exo.middleware") -> Middleware:
    """Create a middleware logging call start and finish."""
    logger = get_logger(logger_name)

    async def logging_middleware(call: MiddlewareCall) -> ExecutionResult:
        logger.info("tool_call_intercepted", tool_name=call.tool_name)
        start = time.perf_counter()
        try:
            result = await call.next()
        except Exception as e:
            logger.warning(
                "tool_call_raised",
                tool_name=call.tool_name,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error=str(e),
            )
            raise
        logger.info(
            "tool_call_finished",
            tool_name=call.tool_name,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            success=result.success,
        )
        return result

    return logging_middleware
