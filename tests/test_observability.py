"""Observability Tests.

structlog setup, Prometheus metrics hooks and OpenTelemetry tracing.
"""

import pytest
import structlog
from opentelemetry import trace
from prometheus_client import REGISTRY

from exo_config.settings import Settings
from exo_obs.logging import setup_logging
from exo_obs.metrics import create_metrics_hooks
from exo_obs.tracing import setup_tracing, tracing_middleware
from exo_tools import ExecutionError, ExecutionResult, create_tool
from tests.conftest import EmptyInput


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLogging:
    """Tests for setup_logging()."""

    def test_json_renderer(self, reset_structlog):
        setup_logging(Settings(LOG_FORMAT="json"))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_text_renderer(self, reset_structlog):
        setup_logging(Settings(LOG_FORMAT="text"))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)


class TestMetricsHooks:
    """Tests for create_metrics_hooks()."""

    @pytest.mark.asyncio
    async def test_records_success(self):
        before = _sample("exo_tool_executions_total", tool_name="metered", status="success")
        count_before = _sample("exo_tool_execution_duration_seconds_count", tool_name="metered")
        tool = create_tool("metered", "Metered", EmptyInput, lambda a, c: "ok",
                           hooks=create_metrics_hooks(Settings()))

        await tool.execute({})

        assert _sample("exo_tool_executions_total", tool_name="metered", status="success") \
            == before + 1
        assert _sample("exo_tool_execution_duration_seconds_count", tool_name="metered") \
            == count_before + 1

    @pytest.mark.asyncio
    async def test_records_failure(self):
        def failing(args, ctx):
            raise RuntimeError("boom")

        before = _sample("exo_tool_executions_total", tool_name="metered_fail", status="failure")
        tool = create_tool("metered_fail", "Metered", EmptyInput, failing,
                           hooks=create_metrics_hooks(Settings()))

        with pytest.raises(ExecutionError):
            await tool.execute({})

        assert _sample("exo_tool_executions_total", tool_name="metered_fail", status="failure") \
            == before + 1

    def test_disabled(self):
        hooks = create_metrics_hooks(Settings(METRICS_ENABLED=False))

        assert hooks.on_success is None
        assert hooks.on_error is None


class TestTracing:
    """Tests for tracing setup and middleware."""

    def test_setup_disabled_is_noop(self):
        provider = trace.get_tracer_provider()

        setup_tracing(Settings(OTEL_TRACES_ENABLED=False))

        assert trace.get_tracer_provider() is provider

    @pytest.mark.asyncio
    async def test_middleware_passes_result_through(self):
        tool = create_tool("traced", "Traced", EmptyInput, lambda a, c: {"ok": True},
                           middleware=[tracing_middleware])

        result = await tool.execute({})

        assert result.data == {"ok": True}

    @pytest.mark.asyncio
    async def test_middleware_passes_failure_through(self):
        async def veto(call):
            return ExecutionResult(success=False, error="denied")

        tool = create_tool("traced", "Traced", EmptyInput, lambda a, c: None,
                           middleware=[tracing_middleware, veto])

        result = await tool.execute({})

        assert result.success is False
        assert result.error == "denied"
