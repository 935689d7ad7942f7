"""
Exo Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from exo_config.settings import Settings

__all__ = ["Settings"]
