"""Exo Tool System.

Safe execution of LLM-callable tools: schema validation, risk-based access
control, confirmation gating, middleware and lifecycle hooks.
"""

from exo_tools.base import (
    ExecutionMetadata,
    ExecutionOptions,
    ExecutionResult,
    RiskLevel,
    ToolConfig,
)
from exo_tools.errors import (
    ConfirmationRequiredError,
    DuplicateToolError,
    ExecutionError,
    ExoError,
    FieldError,
    RiskViolationError,
    ToolNotFoundError,
    ValidationError,
)
from exo_tools.hooks import ErrorEvent, StartEvent, SuccessEvent, ToolHooks, create_logging_hooks
from exo_tools.middleware import (
    Middleware,
    MiddlewareCall,
    create_logging_middleware,
    create_rate_limiter,
    create_timeout_middleware,
)
from exo_tools.registry import ToolRegistry
from exo_tools.schemas import PydanticSchema, SchemaValidator, ValidationResult
from exo_tools.specs import to_anthropic_spec, to_openai_spec
from exo_tools.tool import Tool, create_tool

__all__ = [
    "ConfirmationRequiredError",
    "DuplicateToolError",
    "ErrorEvent",
    "ExecutionError",
    "ExecutionMetadata",
    "ExecutionOptions",
    "ExecutionResult",
    "ExoError",
    "FieldError",
    "Middleware",
    "MiddlewareCall",
    "PydanticSchema",
    "RiskLevel",
    "RiskViolationError",
    "SchemaValidator",
    "StartEvent",
    "SuccessEvent",
    "Tool",
    "ToolConfig",
    "ToolHooks",
    "ToolNotFoundError",
    "ToolRegistry",
    "ValidationError",
    "ValidationResult",
    "create_logging_hooks",
    "create_logging_middleware",
    "create_rate_limiter",
    "create_timeout_middleware",
    "create_tool",
    "to_anthropic_spec",
    "to_openai_spec",
]
