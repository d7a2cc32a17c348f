"""
Chinchillo MCP server.

Exposes the match engine as a single tool over the Model Context Protocol.
"""

from chinchillo.server.mcp_server import create_mcp_server, main, tool_play_chinchillo

__all__ = ["create_mcp_server", "main", "tool_play_chinchillo"]
