# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/19/2026 - Strict query mode accepts empty and padded queries as given
# 10/18/2026 - Created
# ============================================================================
"""
Contacts Handlers

Handles reading and searching the macOS Contacts app:
- contacts://all resource: every contact as JSON
- search_contacts: contacts whose name contains a query
"""

import logging
from mcp import types

from ..applescript import build_list_contacts_script, build_search_contacts_script
from ..executor import AppleScriptError
from ..utils.errors import ValidationError, ResourceReadError, log_automation_failure
from ..utils.responses import text_response, error_response, json_resource
from ..utils.validation import validate_string, coerce_legacy_query

logger = logging.getLogger(__name__)


async def read_all_contacts(uri: str, executor) -> types.ReadResourceResult:
    """
    Read the full contact list.

    Args:
        uri: The resource URI being read (echoed back in the result)
        executor: AppleScriptExecutor instance

    Returns:
        One application/json entry holding the script output

    Raises:
        ResourceReadError: the Contacts script failed
    """
    try:
        contacts = await executor.run(build_list_contacts_script())
    except AppleScriptError as e:
        error = log_automation_failure(e, "contact listing")
        raise ResourceReadError(f"Failed to fetch contacts: {error}") from e

    return json_resource(uri, contacts)


def _extract_query(arguments: dict, require_query: bool) -> str:
    if not require_query:
        return coerce_legacy_query(arguments)

    # Empty and padded queries are searched as given
    query, error = validate_string(arguments.get("query"), "query")
    if error:
        raise ValidationError(error)
    return query.lower()


async def handle_search_contacts(
    arguments: dict,
    executor,
    require_query: bool = True
) -> types.CallToolResult:
    """
    Handle search_contacts tool call.

    Args:
        arguments: {"query": str}
        executor: AppleScriptExecutor instance
        require_query: Reject a missing/non-string query. When False a
            missing query is searched for as the text "undefined".

    Returns:
        JSON array of matching contacts, or an isError result

    Raises:
        ValidationError: query is missing and require_query is set
    """
    query = _extract_query(arguments, require_query)
    logger.info(f"Searching contacts for '{query}'")

    try:
        results = await executor.run(build_search_contacts_script(query))
    except AppleScriptError as e:
        error = log_automation_failure(e, "contact search")
        return error_response(error, "Search failed")

    return text_response(results)
