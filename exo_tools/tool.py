"""Tool Unit.

Binds name, description, schema, safety config, middleware, hooks and the
underlying function into one invocable unit. Every caller (direct, registry
or adapter) goes through ``Tool.execute`` and gets the same contract:
an ``ExecutionResult`` on success, a structured ``ExoError`` raised on
failure.

Order per call (fixed):
    validate -> access policy -> confirmation gate -> on_start
    -> middleware chain -> executor -> on_success | on_error
"""

import time
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from exo_obs.logging import get_logger
from exo_tools.base import (
    ExecutionMetadata,
    ExecutionOptions,
    ExecutionResult,
    Executor,
    RiskLevel,
    ToolConfig,
)
from exo_tools.errors import (
    ConfirmationRequiredError,
    ExecutionError,
    ExoError,
    RiskViolationError,
    ValidationError,
)
from exo_tools.hooks import (
    ErrorEvent,
    StartEvent,
    SuccessEvent,
    ToolHooks,
    fire_error,
    fire_start,
    fire_success,
)
from exo_tools.middleware.chain import Middleware, build_chain, terminal
from exo_tools.policies.access import ADMIN_ROLE, check_access, resolve_role
from exo_tools.policies.confirmation import check_confirmation
from exo_tools.schemas import SchemaValidator, ValidationResult, as_validator

logger = get_logger(__name__)


class Tool:
    """A named, schema-validated callable exposed to agents."""

    __slots__ = (
        "name",
        "description",
        "schema",
        "validator",
        "executor",
        "config",
        "middleware",
        "hooks",
        "_chain",
        "_frozen",
    )

    def __init__(
        self,
        name: str,
        description: str,
        schema: type[BaseModel] | SchemaValidator,
        executor: Executor,
        config: ToolConfig | None = None,
        middleware: Sequence[Middleware] = (),
        hooks: ToolHooks | Sequence[ToolHooks] | None = None,
    ):
        """Initialize Tool.

        Args:
            name: Unique tool name (non-empty)
            description: What the tool does, shown to the model (non-empty)
            schema: Pydantic model class or SchemaValidator for arguments
            executor: ``(args, context) -> value`` (sync or async)
            config: Risk/confirmation/retry settings
            middleware: Interceptors, first element outermost
            hooks: One or more ToolHooks, fired in order

        Raises:
            ValueError: Empty name or description
        """
        if not name or not name.strip():
            raise ValueError("Tool name is required and cannot be empty")
        if not description or not description.strip():
            raise ValueError("Tool description is required and cannot be empty")

        if hooks is None:
            hooks = ()
        elif isinstance(hooks, ToolHooks):
            hooks = (hooks,)

        self.name = name
        self.description = description
        self.schema = schema
        self.validator = as_validator(schema)
        self.executor = executor
        self.config = config or ToolConfig()
        self.middleware = tuple(middleware)
        self.hooks = tuple(hooks)
        self._chain = build_chain(name, self.middleware, terminal(executor))
        self._frozen = True

    def __setattr__(self, key: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"Tool {self.name!r} is immutable; cannot set {key!r}")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"Tool {self.name!r} is immutable; cannot delete {key!r}")
        object.__delattr__(self, key)

    @property
    def risk_level(self) -> RiskLevel:
        return self.config.risk_level

    def validate(self, raw_args: Any) -> ValidationResult:
        """Validate raw arguments against the tool schema. Never raises."""
        return self.validator.validate(raw_args)

    async def execute(
        self,
        raw_args: Any,
        context: Mapping[str, Any] | None = None,
        options: ExecutionOptions | Mapping[str, Any] | None = None,
    ) -> ExecutionResult:
        """Execute the tool with safety checks.

        Args:
            raw_args: Untyped arguments, typically model-produced JSON
            context: Caller identity and session data, passed through unchanged
            options: Per-call ``sudo`` / ``confirmed`` flags

        Returns:
            ExecutionResult with data and metadata

        Raises:
            ValidationError: Arguments failed schema validation
            RiskViolationError: HIGH risk without admin role or sudo
            ConfirmationRequiredError: Confirmation required but not given
            ExecutionError: Executor or middleware failed
        """
        if context is None:
            context = {}
        options = _as_options(options)

        # 1. Validate (no hooks for validation failures)
        validation = self.validator.validate(raw_args)
        if not validation.success:
            field_errors = validation.errors or []
            logger.debug(
                "tool_validation_failed",
                tool_name=self.name,
                fields=[e.field for e in field_errors],
            )
            raise ValidationError(
                f'Invalid arguments for tool "{self.name}"',
                field_errors,
                context={"tool_name": self.name},
            )
        args = validation.data

        # 2. Access policy runs before anything observable
        if not check_access(self.config.risk_level, context, options):
            actual_role = resolve_role(context)
            logger.debug(
                "tool_access_denied",
                tool_name=self.name,
                risk_level=self.config.risk_level.value,
                actual_role=actual_role,
            )
            raise RiskViolationError(self.name, ADMIN_ROLE, actual_role)

        # 3. Confirmation gate
        if not check_confirmation(self.config.requires_confirmation, options):
            logger.debug("tool_confirmation_required", tool_name=self.name)
            raise ConfirmationRequiredError(self.name, _pending(args))

        # 4. on_start
        await fire_start(self.hooks, StartEvent(self.name, args, context))

        # 5. Middleware chain -> executor
        start = time.perf_counter()
        try:
            result = await self._chain(args, context)
        except Exception as e:
            duration = _elapsed_ms(start)
            error = e if isinstance(e, ExoError) else ExecutionError(self.name, e)
            logger.debug(
                "tool_execution_failed",
                tool_name=self.name,
                duration_ms=round(duration, 2),
                error_type=type(e).__name__,
            )
            await fire_error(self.hooks, ErrorEvent(self.name, e, duration, context))
            if error is e:
                raise
            raise error from e

        duration = _elapsed_ms(start)
        result = result.model_copy(
            update={
                "metadata": ExecutionMetadata(
                    tool_name=self.name,
                    risk_level=self.config.risk_level,
                    execution_time=duration,
                )
            }
        )

        # 6. Terminal hook, exactly one per completed call
        if result.success:
            await fire_success(
                self.hooks, SuccessEvent(self.name, result.data, duration, context)
            )
        else:
            # Middleware short-circuited with a failure value; returned, not raised
            failure = ExecutionError(self.name, message=result.error or "Execution failed")
            await fire_error(self.hooks, ErrorEvent(self.name, failure, duration, context))

        logger.debug(
            "tool_execution_completed",
            tool_name=self.name,
            success=result.success,
            duration_ms=round(duration, 2),
        )
        return result

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable representation."""
        return {
            "name": self.name,
            "description": self.description,
            "config": self.config.model_dump(mode="json"),
        }

    def __repr__(self) -> str:
        return f"Tool({self.name})"


def create_tool(
    name: str,
    description: str,
    schema: type[BaseModel] | SchemaValidator,
    executor: Executor,
    *,
    risk_level: RiskLevel = RiskLevel.LOW,
    requires_confirmation: bool = False,
    retryable: bool = True,
    max_retries: int = 3,
    middleware: Sequence[Middleware] = (),
    hooks: ToolHooks | Sequence[ToolHooks] | None = None,
) -> Tool:
    """
    Create a tool.

    Example:
        class WeatherInput(BaseModel):
            city: str

        async def get_weather(args: WeatherInput, ctx: dict) -> dict:
            return {"temperature": 22}

        tool = create_tool("get_weather", "Get weather for a city", WeatherInput, get_weather)
        result = await tool.execute({"city": "Paris"})
    """
    config = ToolConfig(
        risk_level=risk_level,
        requires_confirmation=requires_confirmation,
        retryable=retryable,
        max_retries=max_retries,
    )
    return Tool(
        name=name,
        description=description,
        schema=schema,
        executor=executor,
        config=config,
        middleware=middleware,
        hooks=hooks,
    )


def _as_options(options: ExecutionOptions | Mapping[str, Any] | None) -> ExecutionOptions:
    if options is None:
        return ExecutionOptions()
    if isinstance(options, ExecutionOptions):
        return options
    return ExecutionOptions.model_validate(dict(options))


def _pending(args: Any) -> Any:
    dump = getattr(args, "model_dump", None)
    return dump(by_alias=True) if callable(dump) else args


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
