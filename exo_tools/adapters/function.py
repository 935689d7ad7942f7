"""Plain async function adapter.

For agent loops that dispatch model tool calls themselves: the returned
function takes the raw argument mapping and resolves to the executor's
data, or raises.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from exo_tools.base import ExecutionOptions
from exo_tools.errors import ExecutionError
from exo_tools.tool import Tool


def to_function(
    tool: Tool,
    context: Mapping[str, Any] | None = None,
    options: ExecutionOptions | None = None,
) -> Callable[[Any], Awaitable[Any]]:
    """
    Bind ``context``/``options`` and return ``async (raw_args) -> data``.

    Engine errors propagate unchanged. A failure result returned by a
    middleware (e.g. rate limited) is raised as ExecutionError.
    """
    bound_context = dict(context) if context else {}

    async def call(raw_args: Any) -> Any:
        result = await tool.execute(raw_args, bound_context, options)
        if not result.success:
            raise ExecutionError(tool.name, message=result.error or "Execution failed")
        return result.data

    call.__name__ = tool.name
    call.__doc__ = tool.description
    return call
