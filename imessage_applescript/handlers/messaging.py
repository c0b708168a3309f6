# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created
# ============================================================================
"""
Messaging Handlers

Handles tools for sending iMessages:
- send_imessage: Send to a phone number or iMessage handle
"""

import logging
from mcp import types

from ..applescript import build_send_message_script
from ..executor import AppleScriptError
from ..utils.errors import ValidationError, log_automation_failure
from ..utils.responses import text_response, error_response
from ..utils.validation import validate_required_strings

logger = logging.getLogger(__name__)


async def handle_send_imessage(
    arguments: dict,
    executor
) -> types.CallToolResult:
    """
    Handle send_imessage tool call.

    Args:
        arguments: {"recipient": str, "message": str}
        executor: AppleScriptExecutor instance

    Returns:
        Confirmation, or an isError result if Messages rejected the send

    Raises:
        ValidationError: recipient or message is missing or empty
    """
    values, errors = validate_required_strings(arguments, "recipient", "message")
    if errors:
        logger.warning(f"send_imessage rejected: {'; '.join(errors)}")
        raise ValidationError("Recipient and message are required")

    recipient = values["recipient"]
    # Keep the body as typed; only the emptiness check uses the stripped value
    message = arguments["message"]

    script = build_send_message_script(recipient, message)

    try:
        await executor.run(script)
    except AppleScriptError as e:
        error = log_automation_failure(e, f"send to {recipient}")
        return error_response(error, "Failed to send message")

    logger.info(f"Message sent successfully to {recipient}")
    return text_response(f"Message sent successfully to {recipient}")
