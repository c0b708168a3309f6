# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created
# ============================================================================
"""
iMessage AppleScript MCP server.

Exposes Messages.app sending and Contacts.app lookup as MCP tools and
resources, driven through osascript.
"""

from .dispatcher import RequestDispatcher
from .executor import AppleScriptExecutor, AppleScriptError

__version__ = "0.1.0"

__all__ = [
    "RequestDispatcher",
    "AppleScriptExecutor",
    "AppleScriptError",
]
