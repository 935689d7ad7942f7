"""Lifecycle Hooks.

Best-effort observers notified at call start, on success and on failure.
Each hook invocation is guarded on its own: a failing hook is logged at
debug level and discarded, it never changes the call outcome and never
prevents the next hook from running.
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from exo_obs.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StartEvent:
    tool_name: str
    args: Any
    context: Mapping[str, Any]


@dataclass(frozen=True)
class SuccessEvent:
    tool_name: str
    result: Any
    duration: float  # ms
    context: Mapping[str, Any]


@dataclass(frozen=True)
class ErrorEvent:
    tool_name: str
    error: BaseException
    duration: float  # ms
    context: Mapping[str, Any]


Hook = Callable[[Any], None | Awaitable[None]]


@dataclass(frozen=True)
class ToolHooks:
    """Optional lifecycle callbacks. Each may be sync or async."""

    on_start: Callable[[StartEvent], None | Awaitable[None]] | None = None
    on_success: Callable[[SuccessEvent], None | Awaitable[None]] | None = None
    on_error: Callable[[ErrorEvent], None | Awaitable[None]] | None = None


async def fire(hook: Hook | None, event: Any) -> None:
    """Invoke a single hook, swallowing anything it raises."""
    if hook is None:
        return
    try:
        outcome = hook(event)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as e:
        logger.debug(
            "tool_hook_failed",
            tool_name=event.tool_name,
            hook=getattr(hook, "__name__", repr(hook)),
            error=str(e),
        )


async def fire_start(hooks: tuple[ToolHooks, ...], event: StartEvent) -> None:
    for h in hooks:
        await fire(h.on_start, event)


async def fire_success(hooks: tuple[ToolHooks, ...], event: SuccessEvent) -> None:
    for h in hooks:
        await fire(h.on_success, event)


async def fire_error(hooks: tuple[ToolHooks, ...], event: ErrorEvent) -> None:
    for h in hooks:
        await fire(h.on_error, event)


def create_logging_hooks(prefix: str = "[exo]", logger_name: str = "exo.tools") -> ToolHooks:
    """
    Hooks that emit one structlog record per lifecycle event.

    Args:
        prefix: Tag added to every record as ``prefix``
        logger_name: Logger to write to

    Returns:
        ToolHooks: Ready to attach to a tool
    """
    log = get_logger(logger_name).bind(prefix=prefix)

    def on_start(event: StartEvent) -> None:
        log.info("tool_started", tool_name=event.tool_name, args=_loggable(event.args))

    def on_success(event: SuccessEvent) -> None:
        log.info(
            "tool_succeeded",
            tool_name=event.tool_name,
            duration_ms=round(event.duration, 2),
        )

    def on_error(event: ErrorEvent) -> None:
        log.error(
            "tool_failed",
            tool_name=event.tool_name,
            duration_ms=round(event.duration, 2),
            error=str(event.error),
            error_type=type(event.error).__name__,
        )

    return ToolHooks(on_start=on_start, on_success=on_success, on_error=on_error)


def _loggable(args: Any) -> Any:
    dump = getattr(args, "model_dump", None)
    return dump() if callable(dump) else args
