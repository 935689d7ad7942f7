"""Tool Adapters.

Available adapters:
- function: plain ``async (raw_args) -> data`` callable
- langchain: StructuredTool-compatible keyword set
"""

from exo_tools.adapters.function import to_function
from exo_tools.adapters.langchain import (
    LangChainToolSpec,
    to_langchain_tool,
    to_langchain_tools,
)

__all__ = ["LangChainToolSpec", "to_function", "to_langchain_tool", "to_langchain_tools"]
