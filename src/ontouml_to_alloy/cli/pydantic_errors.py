"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "string_type": "Must be a string",
    "bool_type": "Must be true or false",
    "bool_parsing": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be an object/dictionary",
    "model_type": "Must be an object/dictionary",
    "enum": "Must be one of the allowed values",
    "literal_error": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "union_tag_invalid": "Unknown element type",
    "union_tag_not_found": "Element has no 'type' field",
    "json_invalid": "Invalid JSON format",
}

# Element types allowed inside a package
PACKAGE_CONTENT_TYPES = "Package, Class, Relation, Generalization, GeneralizationSet"


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    msg = error["msg"]
    ctx = error.get("ctx", {})

    # Ensure ctx is a dict (it can be None)
    if ctx is None:
        ctx = {}

    # Check for specific translations, fallback to Pydantic's message
    base_msg = ERROR_TRANSLATIONS.get(error_type, msg)

    # Add context-specific details
    if error_type in ("enum", "literal_error"):
        expected = ctx.get("expected", "unknown")
        base_msg = f"Must be one of: {expected}"

    elif error_type == "union_tag_invalid":
        tag = ctx.get("tag", "unknown")
        base_msg = f"Unknown element type '{tag}'"

    elif error_type == "value_error":
        # Messages raised by our own BeforeValidators are already readable
        base_msg = msg.removeprefix("Value error, ")

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Discriminator tags (e.g. "Class") are kept, so a path reads like
    ``model.contents[2].Class.properties[0].cardinality``.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    error_type = error["type"]
    ctx = error.get("ctx", {})

    # Ensure ctx is a dict
    if ctx is None:
        ctx = {}

    suggestions: dict[str, str] = {
        "missing": "Add the required field to the model file",
        "enum": f"Use one of the allowed values: {ctx.get('expected', 'check documentation')}",
        "literal_error": (
            f"Use one of the allowed values: {ctx.get('expected', 'check documentation')}"
        ),
        "union_tag_invalid": f"Package contents must have type {PACKAGE_CONTENT_TYPES}",
        "union_tag_not_found": f"Add a 'type' field ({PACKAGE_CONTENT_TYPES})",
        "json_invalid": "Validate your JSON/YAML syntax",
    }

    return suggestions.get(error_type)
