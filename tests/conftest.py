"""Pytest fixtures.

Shared schemas, tools, contexts and a recording hook set.
"""

from typing import Literal

import pytest
from pydantic import BaseModel, Field

from exo_tools import RiskLevel, ToolHooks, create_tool


# ============================================================================
# SCHEMAS
# ============================================================================


class WeatherInput(BaseModel):
    city: str = Field(..., min_length=1, description="The city to get weather for")


class TransferInput(BaseModel):
    amount: float = Field(..., gt=0, description="Amount to transfer")
    to_account: str = Field(..., description="Target account ID")


class EmptyInput(BaseModel):
    pass


class SearchInput(BaseModel):
    query: str
    limit: int = 10
    units: Literal["celsius", "fahrenheit"] | None = None


# ============================================================================
# HOOK RECORDER
# ============================================================================


class RecordingHooks:
    """Collects lifecycle events in call order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def methods(self) -> list[str]:
        return [name for name, _ in self.calls]

    def events(self, name: str) -> list[object]:
        return [event for method, event in self.calls if method == name]

    def as_hooks(self) -> ToolHooks:
        return ToolHooks(
            on_start=lambda e: self.calls.append(("on_start", e)),
            on_success=lambda e: self.calls.append(("on_success", e)),
            on_error=lambda e: self.calls.append(("on_error", e)),
        )


@pytest.fixture
def recorder():
    """Recording hooks."""
    return RecordingHooks()


# ============================================================================
# CONTEXTS
# ============================================================================


@pytest.fixture
def user_ctx():
    """Normal authenticated user."""
    return {"user": {"id": "user_123", "role": "user"}, "session_id": "sess_abc"}


@pytest.fixture
def admin_ctx():
    """Admin user."""
    return {"user": {"id": "admin_001", "role": "admin"}, "session_id": "sess_xyz"}


# ============================================================================
# TOOLS
# ============================================================================


@pytest.fixture
def weather_tool():
    """LOW risk weather lookup."""

    async def get_weather(args: WeatherInput, ctx: dict) -> dict:
        return {"temperature": 22}

    return create_tool(
        "get_weather",
        "Retrieves the current weather for a specified city.",
        WeatherInput,
        get_weather,
    )


@pytest.fixture
def nuke_tool():
    """HIGH risk destructive operation."""

    async def nuke(args: EmptyInput, ctx: dict) -> dict:
        return {"deleted": True}

    return create_tool(
        "nuke_database",
        "Deletes all data from the database.",
        EmptyInput,
        nuke,
        risk_level=RiskLevel.HIGH,
    )


@pytest.fixture
def transfer_calls():
    """Records executor invocations of the transfer tool."""
    return []


@pytest.fixture
def transfer_tool(transfer_calls):
    """MEDIUM risk, confirmation required."""

    async def transfer(args: TransferInput, ctx: dict) -> dict:
        transfer_calls.append(args.model_dump())
        return {"transaction_id": "tx_123", "amount": args.amount, "to_account": args.to_account}

    return create_tool(
        "transfer_money",
        "Transfers money between accounts.",
        TransferInput,
        transfer,
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    )
