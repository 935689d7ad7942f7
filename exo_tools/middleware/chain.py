"""Middleware Chain.

Middleware are async callables taking a single ``MiddlewareCall``. The list
is folded right-to-left once, when the tool is constructed, so the first
declared middleware is the outermost wrapper: it sees the call first and
the result last. The executor sits at the innermost position.

A middleware may:
- inspect or rewrite ``call.args`` before ``await call.next()``
- time or observe ``next()``
- translate or suppress errors raised by later stages
- veto execution by returning (or raising) without calling ``next()``
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from exo_tools.base import ExecutionResult, Executor

Handler = Callable[[Any, Mapping[str, Any]], Awaitable[ExecutionResult]]

_KEEP = object()


@dataclass
class MiddlewareCall:
    """One middleware's view of the in-flight call."""

    tool_name: str
    args: Any
    context: Mapping[str, Any]
    _inner: Handler = field(repr=False)

    async def next(self, args: Any = _KEEP) -> ExecutionResult:
        """Run the rest of the chain.

        Uses ``args`` when given (``None`` included), otherwise the current
        ``self.args`` so in-place mutation and reassignment both reach the
        executor.
        """
        if args is not _KEEP:
            self.args = args
        return await self._inner(self.args, self.context)


Middleware = Callable[[MiddlewareCall], Awaitable[ExecutionResult | Any]]


def as_result(value: Any) -> ExecutionResult:
    """Treat anything that is not already a result as successful data."""
    if isinstance(value, ExecutionResult):
        return value
    return ExecutionResult(success=True, data=value)


def terminal(executor: Executor) -> Handler:
    """Innermost stage: run the executor, awaiting it if needed."""

    async def invoke(args: Any, context: Mapping[str, Any]) -> ExecutionResult:
        value = executor(args, context)
        if inspect.isawaitable(value):
            value = await value
        return ExecutionResult(success=True, data=value)

    return invoke


def _wrap(tool_name: str, middleware: Middleware, inner: Handler) -> Handler:
    async def layer(args: Any, context: Mapping[str, Any]) -> ExecutionResult:
        call = MiddlewareCall(tool_name=tool_name, args=args, context=context, _inner=inner)
        return as_result(await middleware(call))

    return layer


def build_chain(
    tool_name: str,
    middleware: Sequence[Middleware],
    innermost: Handler,
) -> Handler:
    """Fold ``middleware`` around ``innermost``, first element outermost."""
    handler = innermost
    for mw in reversed(middleware):
        handler = _wrap(tool_name, mw, handler)
    return handler
