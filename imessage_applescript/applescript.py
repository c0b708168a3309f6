# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/19/2026 - jsonEscape also escapes return, linefeed and tab
# 10/18/2026 - Created with central escaping and Contacts/Messages scripts
# ============================================================================
"""
AppleScript builders for the Contacts and Messages apps.

Every value interpolated into a script goes through escape_applescript_string
so user data cannot break out of its quoted string. The Contacts scripts
assemble their own JSON output; contact fields are escaped on the
AppleScript side by the jsonEscape handler.
"""

import textwrap

# Backslashes first, so the escapes added afterwards are not doubled
JSON_ESCAPE_HANDLER = r'''
on replaceText(theText, searchText, replacementText)
    set AppleScript's text item delimiters to searchText
    set theParts to text items of theText
    set AppleScript's text item delimiters to replacementText
    set theText to theParts as text
    set AppleScript's text item delimiters to ""
    return theText
end replaceText

on jsonEscape(theText)
    set theText to theText as text
    set theText to my replaceText(theText, "\\", "\\\\")
    set theText to my replaceText(theText, "\"", "\\\"")
    set theText to my replaceText(theText, return, "\\r")
    set theText to my replaceText(theText, linefeed, "\\n")
    set theText to my replaceText(theText, tab, "\\t")
    return theText
end jsonEscape
'''

# Appends {"name": ..., "phones": [...], "emails": [...]} for person p
CONTACT_RECORD = r'''
set output to output & "{\"name\":\"" & my jsonEscape(name of p) & "\",\"phones\":["
set firstPhone to true
repeat with ph in phones of p
    if not firstPhone then set output to output & ","
    set output to output & "\"" & my jsonEscape(value of ph) & "\""
    set firstPhone to false
end repeat
set output to output & "],\"emails\":["
set firstEmail to true
repeat with em in emails of p
    if not firstEmail then set output to output & ","
    set output to output & "\"" & my jsonEscape(value of em) & "\""
    set firstEmail to false
end repeat
set output to output & "]}"
'''


def escape_applescript_string(s: str) -> str:
    r"""
    Escape a string for safe use in AppleScript.

    AppleScript strings use backslash escapes, so we must:
    1. Escape backslashes first (\ -> \\)
    2. Then escape double quotes (" -> \")

    Args:
        s: The string to escape

    Returns:
        Escaped string safe for AppleScript double-quoted strings

    Examples:
        >>> escape_applescript_string('Say "hi"')
        'Say \\"hi\\"'
    """
    if s is None:
        return ""
    return s.replace('\\', '\\\\').replace('"', '\\"')


def _indent(block: str, spaces: int) -> str:
    return textwrap.indent(block.strip("\n"), " " * spaces)


def build_list_contacts_script() -> str:
    """Build a script that prints every contact as a JSON array."""
    return f'''{JSON_ESCAPE_HANDLER}
tell application "Contacts"
    set output to "["
    set isFirst to true
    repeat with p in every person
        if not isFirst then set output to output & ","
{_indent(CONTACT_RECORD, 8)}
        set isFirst to false
    end repeat
    return output & "]"
end tell
'''


def build_search_contacts_script(query: str) -> str:
    """
    Build a script that prints contacts whose name contains query.

    The query is expected to be lower-cased by the caller; AppleScript's
    contains does the matching.

    Args:
        query: Search text

    Returns:
        AppleScript source
    """
    escaped_query = escape_applescript_string(query)
    return f'''{JSON_ESCAPE_HANDLER}
tell application "Contacts"
    set output to "["
    set isFirst to true
    repeat with p in every person
        if ((name of p as text) contains "{escaped_query}") then
            if not isFirst then set output to output & ","
{_indent(CONTACT_RECORD, 12)}
            set isFirst to false
        end if
    end repeat
    return output & "]"
end tell
'''


def build_send_message_script(recipient: str, message: str) -> str:
    """
    Build a script that sends message to recipient over iMessage.

    Args:
        recipient: Phone number or iMessage handle (email)
        message: Message text to send

    Returns:
        AppleScript source
    """
    escaped_message = escape_applescript_string(message)
    escaped_recipient = escape_applescript_string(recipient)
    return f'''
tell application "Messages"
    send "{escaped_message}" to buddy "{escaped_recipient}" of (service 1 whose service type = iMessage)
end tell
'''
