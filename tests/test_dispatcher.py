"""
Tests for RequestDispatcher.

The executor is replaced with an AsyncMock so the full request/response
cycle runs without osascript.
"""

import pytest
from unittest.mock import AsyncMock

from imessage_applescript.dispatcher import RequestDispatcher
from imessage_applescript.executor import AppleScriptError
from imessage_applescript.utils.errors import (
    ValidationError,
    UnknownResourceError,
    UnknownToolError,
    ResourceReadError,
)

CONTACTS_JSON = '[{"name":"Marissa Lee","phones":["555-0123"],"emails":["m@example.com"]}]'


@pytest.fixture
def executor():
    executor = AsyncMock()
    executor.run.return_value = CONTACTS_JSON
    return executor


@pytest.fixture
def dispatcher(executor):
    return RequestDispatcher(executor)


def sent_script(executor) -> str:
    return executor.run.call_args.args[0]


# =============================================================================
# Catalog
# =============================================================================

@pytest.mark.asyncio
async def test_list_resources(dispatcher):
    resources = await dispatcher.list_resources()

    assert len(resources) == 1
    assert str(resources[0].uri) == "contacts://all"
    assert resources[0].mimeType == "application/json"
    assert resources[0].name == "All Contacts"


@pytest.mark.asyncio
async def test_list_tools(dispatcher):
    tools = await dispatcher.list_tools()

    assert [tool.name for tool in tools] == ["send_imessage", "search_contacts"]
    assert tools[0].inputSchema["required"] == ["recipient", "message"]
    assert tools[1].inputSchema["required"] == ["query"]


@pytest.mark.asyncio
async def test_catalog_matches_accepted_identifiers(dispatcher):
    resources = await dispatcher.list_resources()
    tools = await dispatcher.list_tools()

    assert {str(r.uri) for r in resources} == set(dispatcher.resource_registry)
    assert {t.name for t in tools} == set(dispatcher.tool_registry)


@pytest.mark.asyncio
async def test_listings_are_stable(dispatcher, executor):
    first_resources = await dispatcher.list_resources()
    first_tools = await dispatcher.list_tools()

    for _ in range(3):
        resources = await dispatcher.list_resources()
        tools = await dispatcher.list_tools()
        assert [r.model_dump_json() for r in resources] == [r.model_dump_json() for r in first_resources]
        assert [t.model_dump_json() for t in tools] == [t.model_dump_json() for t in first_tools]

    executor.run.assert_not_called()


# =============================================================================
# read_resource
# =============================================================================

@pytest.mark.asyncio
async def test_read_contacts(dispatcher, executor):
    result = await dispatcher.read_resource("contacts://all")

    assert len(result.contents) == 1
    assert result.contents[0].text == CONTACTS_JSON
    assert result.contents[0].mimeType == "application/json"
    assert str(result.contents[0].uri) == "contacts://all"
    assert "repeat with p in every person" in sent_script(executor)
    assert "contains" not in sent_script(executor)


@pytest.mark.asyncio
async def test_read_unknown_resource(dispatcher, executor):
    with pytest.raises(UnknownResourceError, match="Unknown resource: contacts://bogus"):
        await dispatcher.read_resource("contacts://bogus")

    executor.run.assert_not_called()


@pytest.mark.asyncio
async def test_read_contacts_failure(dispatcher, executor):
    executor.run.side_effect = AppleScriptError("Contacts got an error")

    with pytest.raises(ResourceReadError) as exc_info:
        await dispatcher.read_resource("contacts://all")

    assert str(exc_info.value) == "Failed to fetch contacts: AppleScript error: Contacts got an error"


# =============================================================================
# send_imessage
# =============================================================================

@pytest.mark.asyncio
async def test_send_requires_arguments(dispatcher, executor):
    with pytest.raises(ValidationError) as exc_info:
        await dispatcher.call_tool("send_imessage", {})

    message = str(exc_info.value).lower()
    assert "recipient" in message
    assert "message" in message
    executor.run.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [
    {"recipient": "555-0123"},
    {"message": "hello"},
    {"recipient": "", "message": "hello"},
    {"recipient": "555-0123", "message": "   "},
])
async def test_send_rejects_missing_or_empty(dispatcher, executor, arguments):
    with pytest.raises(ValidationError):
        await dispatcher.call_tool("send_imessage", arguments)

    executor.run.assert_not_called()


@pytest.mark.asyncio
async def test_send_message(dispatcher, executor):
    executor.run.return_value = ""

    result = await dispatcher.call_tool(
        "send_imessage", {"recipient": "555-0123", "message": 'Say "hi"'}
    )

    assert 'Say \\"hi\\"' in sent_script(executor)
    assert 'buddy "555-0123"' in sent_script(executor)
    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "Message sent successfully to 555-0123"


@pytest.mark.asyncio
async def test_send_failure_is_tool_result(dispatcher, executor):
    executor.run.side_effect = AppleScriptError("Can't get buddy id")

    result = await dispatcher.call_tool(
        "send_imessage", {"recipient": "555-0123", "message": "hello"}
    )

    assert result.isError is True
    assert result.content[0].text == "Failed to send message: AppleScript error: Can't get buddy id"


# =============================================================================
# search_contacts
# =============================================================================

@pytest.mark.asyncio
async def test_search_lowercases_query(dispatcher, executor):
    result = await dispatcher.call_tool("search_contacts", {"query": "Marissa"})

    assert 'contains "marissa"' in sent_script(executor)
    assert "Marissa" not in sent_script(executor)
    assert result.isError is False
    assert result.content[0].text == CONTACTS_JSON


@pytest.mark.asyncio
async def test_search_failure_is_tool_result(dispatcher, executor):
    executor.run.side_effect = AppleScriptError("Contacts is not running")

    result = await dispatcher.call_tool("search_contacts", {"query": "Marissa"})

    assert result.isError is True
    assert result.content[0].type == "text"
    assert result.content[0].text == "Search failed: AppleScript error: Contacts is not running"


@pytest.mark.asyncio
async def test_search_requires_query_by_default(dispatcher, executor):
    with pytest.raises(ValidationError, match="query"):
        await dispatcher.call_tool("search_contacts", {})

    executor.run.assert_not_called()


@pytest.mark.asyncio
async def test_search_legacy_missing_query(executor):
    dispatcher = RequestDispatcher(executor, require_query=False)

    result = await dispatcher.call_tool("search_contacts", {})

    assert 'contains "undefined"' in sent_script(executor)
    assert result.isError is False


@pytest.mark.asyncio
async def test_search_legacy_stringifies_query(executor):
    dispatcher = RequestDispatcher(executor, require_query=False)

    await dispatcher.call_tool("search_contacts", {"query": 555})

    assert 'contains "555"' in sent_script(executor)


@pytest.mark.asyncio
async def test_search_legacy_null_query(executor):
    dispatcher = RequestDispatcher(executor, require_query=False)

    await dispatcher.call_tool("search_contacts", {"query": None})

    assert 'contains "null"' in sent_script(executor)


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "  "])
async def test_search_accepts_empty_query(dispatcher, executor, query):
    result = await dispatcher.call_tool("search_contacts", {"query": query})

    assert f'contains "{query}"' in sent_script(executor)
    assert result.isError is False


@pytest.mark.asyncio
async def test_search_keeps_padding(dispatcher, executor):
    await dispatcher.call_tool("search_contacts", {"query": " Lee"})

    assert 'contains " lee"' in sent_script(executor)


@pytest.mark.asyncio
async def test_search_rejects_non_string_query(dispatcher, executor):
    with pytest.raises(ValidationError, match="must be a string"):
        await dispatcher.call_tool("search_contacts", {"query": 42})

    executor.run.assert_not_called()


def test_from_config(executor):
    dispatcher = RequestDispatcher.from_config({"search": {"require_query": False}}, executor)

    assert dispatcher.require_query is False
    assert dispatcher.executor is executor


# =============================================================================
# Unknown tools
# =============================================================================

@pytest.mark.asyncio
async def test_unknown_tool(dispatcher, executor):
    with pytest.raises(UnknownToolError) as exc_info:
        await dispatcher.call_tool("unknown_tool", {})

    assert str(exc_info.value) == "Unknown tool"
    executor.run.assert_not_called()


@pytest.mark.asyncio
async def test_none_arguments(dispatcher, executor):
    with pytest.raises(ValidationError):
        await dispatcher.call_tool("send_imessage", None)

    executor.run.assert_not_called()
