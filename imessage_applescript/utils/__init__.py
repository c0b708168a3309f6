# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created utils package
# ============================================================================
"""
MCP Server Utilities

Shared validation, response formatting, and error handling utilities
for the iMessage AppleScript MCP server.
"""

from .validation import (
    validate_non_empty_string,
    validate_required_strings,
    validate_string,
    coerce_legacy_query,
)

from .responses import (
    text_content,
    text_response,
    error_response,
    json_resource,
)

from .errors import (
    ServerError,
    ValidationError,
    UnknownResourceError,
    UnknownToolError,
    ResourceReadError,
    get_error_message,
    log_automation_failure,
)

__all__ = [
    # Validation
    "validate_non_empty_string",
    "validate_required_strings",
    "validate_string",
    "coerce_legacy_query",
    # Responses
    "text_content",
    "text_response",
    "error_response",
    "json_resource",
    # Errors
    "ServerError",
    "ValidationError",
    "UnknownResourceError",
    "UnknownToolError",
    "ResourceReadError",
    "get_error_message",
    "log_automation_failure",
]
