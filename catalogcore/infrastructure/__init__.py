"""Infrastructure layer - settings and logging."""

from catalogcore.infrastructure.config import Settings, settings
from catalogcore.infrastructure.logging import configure_logging

__all__ = ["Settings", "settings", "configure_logging"]
