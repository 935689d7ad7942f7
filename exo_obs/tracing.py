"""
Distributed Tracing Setup (OpenTelemetry).

Exports: OTLP (Jaeger/Tempo/Collector)
Spans: one per tool call via ``tracing_middleware``
"""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode

from exo_config.settings import Settings
from exo_obs.logging import get_logger
from exo_tools.base import ExecutionResult
from exo_tools.middleware.chain import MiddlewareCall

logger = get_logger(__name__)

tracer = trace.get_tracer("exo_tools")


def setup_tracing(settings: Settings) -> None:
    """
    Setup OpenTelemetry distributed tracing.

    No-op unless OTEL_TRACES_ENABLED is set.
    """
    if not settings.OTEL_TRACES_ENABLED:
        return

    resource = Resource.create(
        {
            "service.name": settings.OTEL_SERVICE_NAME,
            "service.version": "0.1.0",
            "deployment.environment": settings.ENVIRONMENT,
        }
    )

    provider = TracerProvider(resource=resource)
    otlp_exporter = OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    trace.set_tracer_provider(provider)

    logger.info("otel_tracing_enabled", service_name=settings.OTEL_SERVICE_NAME)


async def tracing_middleware(call: MiddlewareCall) -> ExecutionResult:
    """Wrap the rest of the chain in a ``tool.execute`` span."""
    with tracer.start_as_current_span(
        "tool.execute", attributes={"tool.name": call.tool_name}
    ) as span:
        result = await call.next()
        span.set_attribute("tool.success", result.success)
        if not result.success:
            span.set_status(Status(StatusCode.ERROR, result.error or ""))
        return result
