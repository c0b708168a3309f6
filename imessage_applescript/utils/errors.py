# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created
# ============================================================================
"""
Error types and error-message helpers for the MCP request handlers.

Validation and unknown-identifier errors are raised and surface as
protocol-level errors. AppleScript failures inside a tool call are turned
into tool results flagged with isError instead.
"""

import logging

logger = logging.getLogger(__name__)

AUTOMATION_HELP = (
    "Troubleshooting:\n"
    "- Ensure Messages.app and Contacts.app can be launched\n"
    "- Check Automation permissions in System Settings → Privacy & Security\n"
    "- Verify the phone number or handle is correct"
)


class ServerError(Exception):
    """Base class for errors raised by the server."""


class ValidationError(ServerError, ValueError):
    """A required tool argument is missing or malformed."""


class UnknownResourceError(ServerError, LookupError):
    """The requested resource URI is not in the catalog."""

    def __init__(self, uri: str):
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri


class UnknownToolError(ServerError, LookupError):
    """The requested tool name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__("Unknown tool")
        self.name = name


class ResourceReadError(ServerError):
    """Reading a known resource failed."""


def get_error_message(error) -> str:
    """
    Normalize an exception (or anything else that was raised) into a message.

    Args:
        error: Exception instance, string, or arbitrary object

    Returns:
        Human readable message
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


def log_automation_failure(error: Exception, operation: str = "") -> str:
    """
    Log an AppleScript failure with troubleshooting hints.

    Args:
        error: The exception that was raised
        operation: Description of what operation was being performed

    Returns:
        The normalized error message
    """
    message = get_error_message(error)
    prefix = f"AppleScript failure during {operation}" if operation else "AppleScript failure"
    logger.error(f"{prefix}: {message}\n{AUTOMATION_HELP}")
    return message
