"""
MCP tool implementations.

Tools are organized by domain:
- session - Generation, export, playback and session settings
"""

from chuk_mcp_jam.tools.session import register_session_tools

__all__ = [
    "register_session_tools",
]
