"""Runtime wiring: settings resolution and logging setup."""

from .logging import configure_logging
from .settings import EnvironmentSettings

__all__ = ["EnvironmentSettings", "configure_logging"]
