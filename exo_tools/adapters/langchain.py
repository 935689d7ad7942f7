"""LangChain adapter.

Produces the keyword set accepted by
``langchain_core.tools.StructuredTool.from_function`` without importing
LangChain:

    StructuredTool.from_function(**to_langchain_tool(tool).as_kwargs())

Execution still goes through ``Tool.execute``, so validation, policy,
middleware and hooks apply exactly as for direct calls.
"""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from exo_tools.adapters.function import to_function
from exo_tools.tool import Tool


@dataclass(frozen=True)
class LangChainToolSpec:
    name: str
    description: str
    args_schema: Any
    coroutine: Callable[..., Awaitable[Any]]

    def as_kwargs(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "args_schema": self.args_schema,
            "coroutine": self.coroutine,
        }


def to_langchain_tool(
    tool: Tool, context: Mapping[str, Any] | None = None
) -> LangChainToolSpec:
    """Wrap a tool for LangChain; ``context`` is bound to every call."""
    call = to_function(tool, context)

    async def coroutine(**kwargs: Any) -> Any:
        return await call(kwargs)

    return LangChainToolSpec(
        name=tool.name,
        description=tool.description,
        args_schema=tool.schema,
        coroutine=coroutine,
    )


def to_langchain_tools(
    tools: Iterable[Tool], context: Mapping[str, Any] | None = None
) -> list[LangChainToolSpec]:
    return [to_langchain_tool(t, context) for t in tools]
