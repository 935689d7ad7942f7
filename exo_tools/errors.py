"""Exo tool errors.

Structured exception hierarchy raised by the execution engine and registry.
Every error carries a stable ``code`` so callers can branch on policy
failures versus business failures without parsing messages.
"""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """Single field-level validation failure."""

    field: str
    message: str


class ExoError(Exception):
    """Base exception for all Exo errors."""

    code: str = "EXO_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable representation."""
        return {
            "name": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "context": self.context,
        }


class ValidationError(ExoError):
    """Raw arguments failed schema validation."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field_errors: list[FieldError],
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.field_errors = field_errors

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "field_errors": [e.model_dump() for e in self.field_errors],
        }


class RiskViolationError(ExoError):
    """High-risk tool called without admin role or sudo."""

    code = "RISK_VIOLATION"

    def __init__(
        self,
        tool_name: str,
        required_role: str = "admin",
        actual_role: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            f'Risk violation: Tool "{tool_name}" requires "{required_role}" role, '
            f'but user has "{actual_role or "none"}"',
            context=context,
        )
        self.tool_name = tool_name
        self.required_role = required_role
        self.actual_role = actual_role

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "tool_name": self.tool_name,
            "required_role": self.required_role,
            "actual_role": self.actual_role,
        }


class ConfirmationRequiredError(ExoError):
    """Tool needs explicit confirmation; replay with ``confirmed=True``.

    ``pending_args`` holds the validated arguments so the caller can re-issue
    the exact same call once a human has approved it.
    """

    code = "CONFIRMATION_REQUIRED"

    def __init__(
        self,
        tool_name: str,
        pending_args: dict[str, Any],
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            f'Confirmation required: Tool "{tool_name}" requires explicit user '
            "confirmation before execution",
            context=context,
        )
        self.tool_name = tool_name
        self.pending_args = pending_args

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "tool_name": self.tool_name,
            "pending_args": self.pending_args,
        }


class ExecutionError(ExoError):
    """Executor or middleware failed for a non-policy reason."""

    code = "EXECUTION_ERROR"

    def __init__(
        self,
        tool_name: str,
        cause: BaseException | None = None,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        if message is None:
            message = f'Tool "{tool_name}" execution failed: {cause}'
        super().__init__(message, context=context)
        self.tool_name = tool_name
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "tool_name": self.tool_name,
            "cause": (
                {"name": type(self.cause).__name__, "message": str(self.cause)}
                if self.cause is not None
                else None
            ),
        }


class DuplicateToolError(ExoError):
    """A tool with the same name is already registered."""

    code = "DUPLICATE_TOOL"

    def __init__(self, tool_name: str):
        super().__init__(
            f'Tool "{tool_name}" is already registered. Each tool must have a unique name.'
        )
        self.tool_name = tool_name


class ToolNotFoundError(ExoError):
    """No tool registered under the requested name."""

    code = "TOOL_NOT_FOUND"

    def __init__(self, tool_name: str, available: list[str]):
        super().__init__(
            f'Tool "{tool_name}" not found. Available tools: {", ".join(available)}'
        )
        self.tool_name = tool_name
        self.available = available
