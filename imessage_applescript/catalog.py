# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created
# ============================================================================
"""
Static resource and tool descriptors advertised by the server.
"""

from mcp import types

CONTACTS_URI = "contacts://all"

SEND_IMESSAGE = "send_imessage"
SEARCH_CONTACTS = "search_contacts"

RESOURCES = (
    types.Resource(
        uri=CONTACTS_URI,
        mimeType="application/json",
        name="All Contacts",
        description="List of all contacts from the Contacts app",
    ),
)

TOOLS = (
    types.Tool(
        name=SEND_IMESSAGE,
        description="Send an iMessage using Messages app",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient": {
                    "type": "string",
                    "description": "Phone number or email of the recipient"
                },
                "message": {
                    "type": "string",
                    "description": "Message content to send"
                }
            },
            "required": ["recipient", "message"]
        }
    ),
    types.Tool(
        name=SEARCH_CONTACTS,
        description="Search contacts by name, phone, or email",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query"
                }
            },
            "required": ["query"]
        }
    ),
)


def list_resources() -> list[types.Resource]:
    """Return the resource catalog."""
    return list(RESOURCES)


def list_tools() -> list[types.Tool]:
    """Return the tool catalog."""
    return list(TOOLS)
