"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Only ambient concerns live here (logging, telemetry, built-in middleware
defaults). Per-tool safety configuration is declared on the tool itself.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings documented in .env.example.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # OPENTELEMETRY
    # ========================================================================
    OTEL_EXPORTER_OTLP_ENDPOINT: str = Field(default="http://localhost:4317")
    OTEL_SERVICE_NAME: str = Field(default="exo-tools")
    OTEL_TRACES_ENABLED: bool = Field(default=False)

    # ========================================================================
    # PROMETHEUS
    # ========================================================================
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Record tool execution counters/histograms via metrics hooks",
    )

    # ========================================================================
    # BUILT-IN MIDDLEWARE DEFAULTS
    # ========================================================================
    RATE_LIMIT_MAX_CALLS: int = Field(
        default=60, ge=1, description="Calls allowed per key within the window"
    )
    RATE_LIMIT_WINDOW_SECONDS: float = Field(
        default=60.0, gt=0, description="Sliding window length (seconds)"
    )
    TOOL_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, description="Default deadline for the timeout middleware"
    )

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )
