"""Tool Interface & Metadata.

Static tool configuration, per-call options and the normalized result
returned by every successful execution.
"""

from collections.abc import Awaitable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """Static risk classification gating who may invoke a tool."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ToolConfig(BaseModel):
    """Tool safety and retry configuration.

    ``retryable`` and ``max_retries`` are advisory: the engine never retries,
    callers and adapters read them to decide.
    """

    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel = RiskLevel.LOW
    requires_confirmation: bool = False
    retryable: bool = True
    max_retries: int = Field(3, ge=0)


class ExecutionOptions(BaseModel):
    """Per-call options. Never persisted."""

    sudo: bool = False
    confirmed: bool = False


class ExecutionMetadata(BaseModel):
    """Metadata attached to every execution result."""

    tool_name: str
    risk_level: RiskLevel
    execution_time: float = Field(..., description="Milliseconds")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ExecutionResult(BaseModel):
    """Outcome of a tool call.

    The engine returns results only for successful calls. A ``success=False``
    result reaches the caller only when a middleware deliberately short-circuits
    with one (e.g. the rate limiter).
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: ExecutionMetadata | None = None


class Executor(Protocol):
    """Underlying tool function: validated args + context -> result."""

    def __call__(self, args: Any, context: Mapping[str, Any]) -> Any | Awaitable[Any]:
        ...
