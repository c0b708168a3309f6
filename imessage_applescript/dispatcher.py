# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created with resource and tool registries
# ============================================================================
"""
Request dispatcher for the iMessage AppleScript MCP server.

Maps the four MCP request kinds (list/read resources, list/call tools) onto
the handler modules. The accepted identifiers are exactly those in the
catalog; anything else is rejected before a script is built.
"""

import logging
from typing import Any, Optional

from mcp import types

from . import catalog
from .handlers import contacts, messaging
from .utils.errors import UnknownResourceError, UnknownToolError

logger = logging.getLogger(__name__)


class RequestDispatcher:
    """
    Stateless dispatcher built once at startup.

    Holds the executor and search settings and routes each request to its
    handler through the resource and tool registries.
    """

    def __init__(self, executor, require_query: bool = True):
        """
        Initialize RequestDispatcher.

        Args:
            executor: AppleScriptExecutor (or anything with an async run(script))
            require_query: Reject search_contacts calls without a query
        """
        self.executor = executor
        self.require_query = require_query

        # uri -> reader(uri, executor)
        self.resource_registry = {
            catalog.CONTACTS_URI: contacts.read_all_contacts,
        }
        # name -> handler(arguments)
        self.tool_registry = {
            catalog.SEND_IMESSAGE: self._send_imessage,
            catalog.SEARCH_CONTACTS: self._search_contacts,
        }

    @classmethod
    def from_config(cls, config: dict, executor) -> "RequestDispatcher":
        """Create a dispatcher using the "search" config section."""
        return cls(
            executor,
            require_query=config.get("search", {}).get("require_query", True),
        )

    async def list_resources(self) -> list[types.Resource]:
        """List available MCP resources."""
        return catalog.list_resources()

    async def read_resource(self, uri) -> types.ReadResourceResult:
        """
        Read a resource by URI.

        Raises:
            UnknownResourceError: uri is not in the catalog
            ResourceReadError: the underlying script failed
        """
        uri = str(uri)
        logger.info(f"Resource read: {uri}")

        reader = self.resource_registry.get(uri)
        if reader is None:
            logger.warning(f"Rejected unknown resource: {uri}")
            raise UnknownResourceError(uri)

        return await reader(uri, self.executor)

    async def list_tools(self) -> list[types.Tool]:
        """List available MCP tools."""
        return catalog.list_tools()

    async def call_tool(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None
    ) -> types.CallToolResult:
        """
        Handle MCP tool calls using the tool registry.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result; execution failures come back with isError set

        Raises:
            UnknownToolError: name is not in the catalog
            ValidationError: required arguments are missing
        """
        arguments = arguments or {}
        logger.info(f"Tool called: {name} with args: {sorted(arguments)}")

        handler = self.tool_registry.get(name)
        if handler is None:
            logger.warning(f"Rejected unknown tool: {name}")
            raise UnknownToolError(name)

        return await handler(arguments)

    async def _send_imessage(self, arguments: dict) -> types.CallToolResult:
        return await messaging.handle_send_imessage(arguments, self.executor)

    async def _search_contacts(self, arguments: dict) -> types.CallToolResult:
        return await contacts.handle_search_contacts(
            arguments, self.executor, require_query=self.require_query
        )
