# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created
# ============================================================================
"""
Response formatting utilities for MCP request handlers.

Provides standardized builders for tool and resource results.
"""

from mcp import types


def text_content(text: str) -> types.TextContent:
    """Create a single text content item."""
    return types.TextContent(type="text", text=text)


def text_response(text: str) -> types.CallToolResult:
    """Create a successful tool result carrying one text item."""
    return types.CallToolResult(content=[text_content(text)])


def error_response(error: str, prefix: str = "Error") -> types.CallToolResult:
    """
    Create a tool result flagged with isError.

    The request itself succeeds at the protocol level; callers have to
    check isError to notice the failure.

    Args:
        error: Error message
        prefix: Prefix for the error (default: "Error")
    """
    return types.CallToolResult(
        content=[text_content(f"{prefix}: {error}")],
        isError=True,
    )


def json_resource(uri: str, text: str) -> types.ReadResourceResult:
    """Create a resource read result with one application/json entry."""
    return types.ReadResourceResult(
        contents=[
            types.TextResourceContents(
                uri=uri,
                mimeType="application/json",
                text=text,
            )
        ]
    )
