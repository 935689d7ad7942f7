"""Tool Registry.

Name-based lookup and dispatch, plus provider tool sets for every
registered tool.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from exo_obs.logging import get_logger
from exo_tools.adapters.langchain import LangChainToolSpec, to_langchain_tool
from exo_tools.base import ExecutionOptions, ExecutionResult, RiskLevel
from exo_tools.errors import DuplicateToolError, ToolNotFoundError
from exo_tools.specs import to_anthropic_spec, to_openai_spec
from exo_tools.tool import Tool

logger = get_logger(__name__)


class ToolRegistry:
    """Tool registry with unique names and risk-based lookup."""

    def __init__(self, tools: Iterable[Tool] = ()):
        """Initialize registry.

        Raises:
            DuplicateToolError: Two tools share a name
        """
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        """Register a tool. Names must be unique."""
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        logger.debug("tool_registered", tool_name=tool.name, risk_level=tool.risk_level.value)

    def get(self, name: str) -> Tool | None:
        """Get tool by name."""
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def names(self) -> list[str]:
        return list(self._tools)

    def filter_by_risk(self, risk_level: RiskLevel) -> list[Tool]:
        """Filter tools by risk level."""
        return [t for t in self._tools.values() if t.risk_level == risk_level]

    async def process(
        self,
        name: str,
        args: Any,
        context: Mapping[str, Any] | None = None,
        options: ExecutionOptions | Mapping[str, Any] | None = None,
    ) -> ExecutionResult:
        """
        Execute a registered tool by name.

        Raises:
            ToolNotFoundError: No tool with that name
            ValidationError, RiskViolationError, ConfirmationRequiredError,
            ExecutionError: From the tool itself
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name, self.names())
        return await tool.execute(args, context, options)

    def openai_tool_set(self, strict: bool = False) -> list[dict[str, Any]]:
        return [to_openai_spec(t, strict=strict) for t in self._tools.values()]

    def anthropic_tool_set(self) -> list[dict[str, Any]]:
        return [to_anthropic_spec(t) for t in self._tools.values()]

    def langchain_tools(self, context: Mapping[str, Any] | None = None) -> list[LangChainToolSpec]:
        return [to_langchain_tool(t, context) for t in self._tools.values()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "tools": [t.to_dict() for t in self._tools.values()],
            "count": len(self._tools),
        }

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)
