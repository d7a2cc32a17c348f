"""
Chinchillo Configuration.

Environment variables, settings, and logging configuration.
"""

from chinchillo.config.logging_config import configure_logging
from chinchillo.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
