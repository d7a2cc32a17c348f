"""MCP server for Chinchillo - exposes one match of Chinchiro as an MCP tool.

FastMCP handles the protocol and the stdio transport. The tool body is a
plain function and can be called without starting a server.
"""

import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from chinchillo.config import Settings, configure_logging, get_settings
from chinchillo.engine import ChinchilloEngine
from chinchillo.engine.validators import validate_roll_count

logger = logging.getLogger(__name__)

TOOL_NAME = "playChinchillo"
TOOL_DESCRIPTION = (
    "You can do chinchillo. If you win, nothing happens. "
    "See the rules here: https://casinotop5.jp/chinchiro/"
)
COUNT_DESCRIPTION = "Enter a number from 1~3 for the number of times to shake it back."

# ---------------------------------------------------------------------------
# Core tool function (no FastMCP dependency)
# ---------------------------------------------------------------------------


def tool_play_chinchillo(count: int, *, settings: Settings | None = None) -> str:
    """Play one match with ``count`` rolls per side and return the narration.

    Raises ValueError if ``count`` is outside 1..``settings.max_roll_count``.
    """
    settings = settings or get_settings()
    count = validate_roll_count(count, max_count=settings.max_roll_count)
    result = ChinchilloEngine.play(count)
    logger.info(
        "%s called with count=%d: winner=%s", TOOL_NAME, count, result.winner.name
    )
    return result.description


# ---------------------------------------------------------------------------
# FastMCP server factory
# ---------------------------------------------------------------------------


def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """Create and return a FastMCP server with the chinchillo tool registered."""
    settings = settings or get_settings()
    mcp = FastMCP(settings.server_name, instructions="Chinchiro dice game against the computer")

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def play_chinchillo(
        count: Annotated[
            int,
            Field(ge=1, le=settings.max_roll_count, description=COUNT_DESCRIPTION),
        ],
    ) -> str:
        return tool_play_chinchillo(count, settings=settings)

    return mcp


def main() -> None:
    """Entry point: configure logging and serve over stdio until the client leaves."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting server.")
    try:
        create_mcp_server(settings).run()
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)
