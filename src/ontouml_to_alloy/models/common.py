"""Common types and validators for Pydantic models."""

from __future__ import annotations

from typing import Annotated, Any
from uuid import uuid4

from pydantic import BeforeValidator

# Preferred languages when a multilingual text carries several entries
PREFERRED_LANGUAGES = ("en", "en-US", "en-GB")


def parse_multilingual_text(value: Any) -> str | None:
    """Collapse a multilingual text value into a single string.

    OntoUML files store names either as plain strings or as a mapping
    from language tag to text.

    Args:
    ----
        value: Input value - can be None, str, or dict like {"en": "Person"}

    Returns:
    -------
        The selected text, or None when no text is present

    Raises:
    ------
        ValueError: If the value is neither a string nor a language mapping

    Examples:
    --------
        >>> parse_multilingual_text("Person")
        'Person'
        >>> parse_multilingual_text({"pt": "Pessoa", "en": "Person"})
        'Person'
        >>> parse_multilingual_text({"pt": "Pessoa"})
        'Pessoa'
        >>> parse_multilingual_text(None) is None
        True

    """
    if value is None or isinstance(value, str):
        return value

    if isinstance(value, dict):
        if not value:
            return None
        for language in PREFERRED_LANGUAGES:
            if language in value:
                return str(value[language])
        return str(next(iter(value.values())))

    raise ValueError(f"Cannot parse {type(value).__name__} as text: {value}")


def new_element_id() -> str:
    """Generate an identifier for elements created without one."""
    return uuid4().hex


def none_to_empty_list(value: Any) -> Any:
    """Treat an explicit null collection as an empty one."""
    return [] if value is None else value


def parse_cardinality_text(value: Any) -> str | None:
    """Normalize a cardinality value to its textual form.

    Args:
    ----
        value: None, str ("1..*"), int (3), or a mapping with
            "lowerBound"/"upperBound" keys.

    Returns:
    -------
        Textual cardinality such as "0..1", or None when absent

    Raises:
    ------
        ValueError: If the value has an unsupported shape

    Examples:
    --------
        >>> parse_cardinality_text(1)
        '1'
        >>> parse_cardinality_text({"lowerBound": "0", "upperBound": "*"})
        '0..*'

    """
    if value is None or isinstance(value, str):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Cannot parse bool as cardinality: {value}")

    if isinstance(value, int):
        return str(value)

    if isinstance(value, dict):
        lower = value.get("lowerBound")
        upper = value.get("upperBound")
        if lower is None and upper is None:
            return None
        return f"{'0' if lower is None else lower}..{'*' if upper is None else upper}"

    raise ValueError(f"Cannot parse {type(value).__name__} as cardinality: {value}")


# Text type that accepts both "Person" and {"en": "Person"}
MultilingualText = Annotated[str | None, BeforeValidator(parse_multilingual_text)]

# Cardinality accepting "1..*", 1, or {"lowerBound": 1, "upperBound": "*"}
CardinalityText = Annotated[str | None, BeforeValidator(parse_cardinality_text)]
