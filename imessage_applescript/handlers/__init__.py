# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created handlers package
# ============================================================================
"""
MCP Request Handlers Package

Organized by domain:
- messaging: send_imessage
- contacts: contacts://all, search_contacts
"""

from . import messaging
from . import contacts

__all__ = [
    "messaging",
    "contacts",
]
