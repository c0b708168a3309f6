#!/usr/bin/env python3
# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created, call_tool handler installed directly for protocol errors
# ============================================================================
"""
iMessage AppleScript MCP Server.

Sends iMessages through Messages.app and reads/searches Contacts.app by
running AppleScript with osascript.

Resources:
- contacts://all: every contact as a JSON array

Tools:
- send_imessage: Send an iMessage to a phone number or email
- search_contacts: Search contacts by name

Usage:
    python -m imessage_applescript
"""

import asyncio
import logging

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .config import load_config, setup_logging
from .dispatcher import RequestDispatcher
from .executor import AppleScriptExecutor
from .utils.errors import ServerError, ValidationError, UnknownResourceError, UnknownToolError

logger = logging.getLogger(__name__)


def to_protocol_error(error: ServerError) -> McpError:
    """Translate a server error into an MCP protocol error."""
    if isinstance(error, (ValidationError, UnknownResourceError, UnknownToolError)):
        code = types.INVALID_PARAMS
    else:
        code = types.INTERNAL_ERROR
    return McpError(types.ErrorData(code=code, message=str(error)))


def create_server(dispatcher: RequestDispatcher, config: dict) -> Server:
    """
    Build an MCP server whose handlers delegate to dispatcher.

    Args:
        dispatcher: RequestDispatcher instance
        config: Loaded configuration

    Returns:
        Configured mcp Server
    """
    app = Server(config["server_name"], version=config["version"])

    @app.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        return await dispatcher.list_resources()

    @app.read_resource()
    async def handle_read_resource(uri) -> list[ReadResourceContents]:
        try:
            result = await dispatcher.read_resource(uri)
        except ServerError as e:
            raise to_protocol_error(e) from e
        return [
            ReadResourceContents(content=item.text, mime_type=item.mimeType)
            for item in result.contents
        ]

    @app.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return await dispatcher.list_tools()

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        except ServerError as e:
            logger.error(f"Error executing tool {req.params.name}: {e}")
            raise to_protocol_error(e) from e
        return types.ServerResult(result)

    # Server.call_tool() turns raised exceptions into isError results; unknown
    # tools and invalid arguments have to fail the whole request
    app.request_handlers[types.CallToolRequest] = handle_call_tool

    return app


async def serve(config: dict) -> None:
    """Run the MCP server over stdio until the host disconnects."""
    logger.info("Starting iMessage AppleScript MCP Server...")
    logger.info(f"Server name: {config['server_name']}")
    logger.info(f"Version: {config['version']}")

    executor = AppleScriptExecutor.from_config(config)
    if not executor.is_available():
        logger.warning(f"{executor.osascript_path} not found - every tool call will fail")
        logger.warning("This server only works on macOS")

    dispatcher = RequestDispatcher.from_config(config, executor)
    app = create_server(dispatcher, config)

    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def main():
    """Console entry point."""
    config = load_config()
    setup_logging(config)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
