"""Tool middleware: chain composition and built-in interceptors."""

from exo_tools.middleware.chain import Middleware, MiddlewareCall, build_chain
from exo_tools.middleware.logging import create_logging_middleware
from exo_tools.middleware.rate_limit import RateLimiter, create_rate_limiter
from exo_tools.middleware.timeout import create_timeout_middleware

__all__ = [
    "Middleware",
    "MiddlewareCall",
    "RateLimiter",
    "build_chain",
    "create_logging_middleware",
    "create_rate_limiter",
    "create_timeout_middleware",
]
