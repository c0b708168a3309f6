# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/19/2026 - Added validate_string; legacy query coercion handles null and integral floats
# 10/18/2026 - Created
# ============================================================================
"""
Validation utilities for MCP tool arguments.

Provides standardized validation functions that return (value, error) tuples.
"""


def validate_non_empty_string(value, name: str) -> tuple[str | None, str | None]:
    """
    Validate that a value is a non-empty string.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Tuple of (validated_value, error_message). If valid, error_message is None.
    """
    if value is None:
        return None, f"Missing required parameter: {name}"

    if not isinstance(value, str):
        return None, f"Invalid {name}: must be a string, got {type(value).__name__}"

    stripped = value.strip()
    if not stripped:
        return None, f"Invalid {name}: cannot be empty"

    return stripped, None


def validate_required_strings(arguments: dict, *names: str) -> tuple[dict, list[str]]:
    """
    Validate several required string arguments at once.

    Args:
        arguments: The arguments dict from the tool call
        names: Parameter names that must be non-empty strings

    Returns:
        Tuple of (validated_values, errors). validated_values maps each valid
        name to its stripped value; errors lists one message per invalid name.
    """
    values = {}
    errors = []
    for name in names:
        value, error = validate_non_empty_string(arguments.get(name), name)
        if error:
            errors.append(error)
        else:
            values[name] = value
    return values, errors


def validate_string(value, name: str) -> tuple[str | None, str | None]:
    """
    Validate that a value is a string, leaving it unmodified.

    Unlike validate_non_empty_string, empty and padded strings are accepted
    as given.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Tuple of (validated_value, error_message). If valid, error_message is None.
    """
    if value is None:
        return None, f"Missing required parameter: {name}"

    if not isinstance(value, str):
        return None, f"Invalid {name}: must be a string, got {type(value).__name__}"

    return value, None


def coerce_legacy_query(arguments: dict, name: str = "query") -> str:
    """
    Coerce a search query the way the first release of the server did.

    An absent key became the text "undefined" and a JSON null became "null".
    Booleans and integral floats are spelled as JSON writes them ("true",
    "1" rather than "True", "1.0"). The result is lower-cased.
    """
    if name not in arguments:
        return "undefined"

    value = arguments[name]
    if value is None:
        text = "null"
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    return text.lower()
