"""Provider tool specifications.

Converts a tool's schema into the JSON shapes expected by OpenAI function
calling and the Anthropic messages API. The schema is always derived from
the same source used for runtime validation, so the two cannot drift.
"""

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from exo_tools.tool import Tool


def parameters_schema(tool: "Tool") -> dict[str, Any]:
    """JSON schema for the tool's arguments, without the top-level title."""
    schema = copy.deepcopy(tool.validator.json_schema())
    schema.pop("title", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


def to_openai_spec(tool: "Tool", strict: bool = False) -> dict[str, Any]:
    """
    OpenAI chat completions tool spec.

    With ``strict=True`` (Structured Outputs) every object schema, nested
    ones and ``$defs`` included, gets ``additionalProperties: false`` and all
    of its properties marked required.
    """
    params = parameters_schema(tool)
    function: dict[str, Any] = {
        "name": tool.name,
        "description": tool.description,
        "parameters": params,
    }
    if strict:
        _make_strict(params)
        function["strict"] = True
    return {"type": "function", "function": function}


def to_anthropic_spec(tool: "Tool") -> dict[str, Any]:
    """Anthropic messages API tool spec."""
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": parameters_schema(tool),
    }


def _make_strict(node: Any) -> None:
    if isinstance(node, dict):
        if node.get("type") == "object" and "properties" in node:
            node["additionalProperties"] = False
            node["required"] = list(node["properties"])
        for value in node.values():
            _make_strict(value)
    elif isinstance(node, list):
        for item in node:
            _make_strict(item)
