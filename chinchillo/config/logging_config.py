"""
Chinchillo - Logging Configuration

Log records go to stderr; stdout carries the MCP stdio transport.
"""

import logging
import sys

from chinchillo.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Install a stderr handler at the configured level."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
