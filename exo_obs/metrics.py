"""
Prometheus Metrics Registration.

Tool execution counters and latency, recorded through lifecycle hooks so
they cover direct calls, registry dispatch and adapters alike.
"""

from prometheus_client import Counter, Histogram

from exo_config.settings import Settings
from exo_tools.hooks import ErrorEvent, SuccessEvent, ToolHooks

# ============================================================================
# COUNTERS
# ============================================================================

tool_executions_total = Counter(
    "exo_tool_executions_total",
    "Total tool executions",
    ["tool_name", "status"],  # success, failure
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_execution_duration = Histogram(
    "exo_tool_execution_duration_seconds",
    "Tool execution duration",
    ["tool_name"],
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)


def create_metrics_hooks(settings: Settings | None = None) -> ToolHooks:
    """
    Hooks recording one counter increment and one latency sample per call.

    Returns empty hooks when METRICS_ENABLED is false.
    """
    settings = settings or Settings()
    if not settings.METRICS_ENABLED:
        return ToolHooks()

    def on_success(event: SuccessEvent) -> None:
        tool_executions_total.labels(tool_name=event.tool_name, status="success").inc()
        tool_execution_duration.labels(tool_name=event.tool_name).observe(event.duration / 1000)

    def on_error(event: ErrorEvent) -> None:
        tool_executions_total.labels(tool_name=event.tool_name, status="failure").inc()
        tool_execution_duration.labels(tool_name=event.tool_name).observe(event.duration / 1000)

    return ToolHooks(on_success=on_success, on_error=on_error)
