"""Adapter Tests.

Adapters forward to Tool.execute, so hooks, policy and validation apply
exactly as for direct calls.
"""

import pytest

from exo_tools import (
    ExecutionError,
    RiskViolationError,
    ValidationError,
    create_rate_limiter,
    create_tool,
)
from exo_tools.adapters import LangChainToolSpec, to_function, to_langchain_tool, to_langchain_tools
from tests.conftest import EmptyInput, WeatherInput


@pytest.fixture
def upper_tool(recorder):
    return create_tool(
        "upper",
        "Uppercases a city",
        WeatherInput,
        lambda a, c: {"output": a.city.upper()},
        hooks=recorder.as_hooks(),
    )


class TestFunctionAdapter:
    """Tests for to_function()."""

    @pytest.mark.asyncio
    async def test_returns_data(self, upper_tool, recorder):
        """Test success resolves to data and fires hooks."""
        call = to_function(upper_tool)

        assert await call({"city": "test"}) == {"output": "TEST"}
        assert recorder.methods() == ["on_start", "on_success"]
        assert call.__name__ == "upper"

    @pytest.mark.asyncio
    async def test_validation_error_propagates(self, upper_tool):
        with pytest.raises(ValidationError):
            await to_function(upper_tool)({})

    @pytest.mark.asyncio
    async def test_binds_context(self, nuke_tool, admin_ctx, user_ctx):
        """Test bound context reaches the policy check."""
        assert await to_function(nuke_tool, admin_ctx)({}) == {"deleted": True}

        with pytest.raises(RiskViolationError):
            await to_function(nuke_tool, user_ctx)({})

    @pytest.mark.asyncio
    async def test_failure_result_raised(self):
        """Test a middleware failure result becomes an ExecutionError."""
        limiter = create_rate_limiter(limit=1, window_seconds=60, key_generator=lambda c: "g")
        tool = create_tool("limited", "Limited", EmptyInput, lambda a, c: "ok",
                           middleware=[limiter])
        call = to_function(tool)

        assert await call({}) == "ok"
        with pytest.raises(ExecutionError, match="Rate limit exceeded"):
            await call({})

    @pytest.mark.asyncio
    async def test_executor_error_fires_on_error(self, recorder):
        def failing(args, ctx):
            raise RuntimeError("Adapter failure")

        tool = create_tool("failing", "Fails", EmptyInput, failing, hooks=recorder.as_hooks())

        with pytest.raises(ExecutionError):
            await to_function(tool)({})

        assert recorder.methods() == ["on_start", "on_error"]


class TestLangChainAdapter:
    """Tests for to_langchain_tool()."""

    def test_structure(self, upper_tool):
        spec = to_langchain_tool(upper_tool)

        assert isinstance(spec, LangChainToolSpec)
        assert spec.name == "upper"
        assert spec.description == "Uppercases a city"
        assert spec.args_schema is WeatherInput
        assert set(spec.as_kwargs()) == {"name", "description", "args_schema", "coroutine"}

    @pytest.mark.asyncio
    async def test_coroutine_takes_kwargs(self, upper_tool, recorder):
        """Test LangChain-style keyword invocation."""
        spec = to_langchain_tool(upper_tool)

        assert await spec.coroutine(city="tokyo") == {"output": "TOKYO"}
        assert recorder.methods() == ["on_start", "on_success"]

    @pytest.mark.asyncio
    async def test_validation_error(self, upper_tool):
        with pytest.raises(ValidationError):
            await to_langchain_tool(upper_tool).coroutine(city=123)

    @pytest.mark.asyncio
    async def test_passes_context(self):
        captured = {}

        def executor(args, ctx):
            captured.update(ctx)
            return {"ok": True}

        tool = create_tool("ctx", "Context passing", EmptyInput, executor)
        await to_langchain_tool(tool, {"user": {"id": "user_1", "role": "admin"}}).coroutine()

        assert captured == {"user": {"id": "user_1", "role": "admin"}}

    def test_batch(self, upper_tool, weather_tool):
        specs = to_langchain_tools([upper_tool, weather_tool])

        assert [s.name for s in specs] == ["upper", "get_weather"]
