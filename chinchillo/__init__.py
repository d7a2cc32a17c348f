"""
Chinchillo - Chinchiro dice game served as a tool over MCP.
"""

__version__ = "1.0.0"
