"""Multiplicity translation.

Maps OntoUML cardinality text to Alloy quantifier keywords. Anything that
is not one of the four canonical multiplicities is "custom" and needs an
explicit multiplicity fact, which callers emit from the bounds returned
by get_custom_cardinality().
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Keyword for each canonical (lower, upper) pair; None means unbounded
CANONICAL_KEYWORDS: dict[tuple[int, int | None], str] = {
    (0, 1): "lone",
    (1, 1): "one",
    (0, None): "set",
    (1, None): "some",
}

# Keyword used in declarations whose bounds are enforced by facts
CUSTOM_KEYWORD = "set"

_CARDINALITY_PATTERN = re.compile(r"^\s*(\d+|\*)\s*(?:\.\.\s*(\d+|\*)\s*)?$")


class CardinalityError(ValueError):
    """Raised for cardinality text that cannot be parsed."""


@dataclass(frozen=True)
class Cardinality:
    """Parsed multiplicity bounds.

    Attributes
    ----------
        lower: Lower bound.
        upper: Upper bound, None when unbounded.

    """

    lower: int
    upper: int | None

    @property
    def keyword(self) -> str | None:
        """Canonical keyword, or None for a custom multiplicity."""
        return CANONICAL_KEYWORDS.get((self.lower, self.upper))

    @property
    def is_custom(self) -> bool:
        return self.keyword is None


def parse_cardinality(text: str | None) -> Cardinality:
    """Parse cardinality text.

    Args:
    ----
        text: "1", "0..1", "2..*", "*" or None. None and "" mean "0..*".

    Returns:
    -------
        The parsed bounds.

    Raises:
    ------
        CardinalityError: If the text is malformed or lower > upper.

    Examples:
    --------
        >>> parse_cardinality("1..*")
        Cardinality(lower=1, upper=None)
        >>> parse_cardinality("3")
        Cardinality(lower=3, upper=3)

    """
    if text is None or not text.strip():
        return Cardinality(0, None)

    match = _CARDINALITY_PATTERN.match(text)
    if match is None:
        raise CardinalityError(f"Malformed cardinality: '{text}'")

    first, second = match.groups()
    if second is None:
        if first == "*":
            return Cardinality(0, None)
        return Cardinality(int(first), int(first))

    if first == "*":
        raise CardinalityError(f"Lower bound cannot be unbounded: '{text}'")

    lower = int(first)
    upper = None if second == "*" else int(second)
    if upper is not None and lower > upper:
        raise CardinalityError(f"Lower bound exceeds upper bound: '{text}'")

    return Cardinality(lower, upper)


def get_cardinality_keyword(text: str | None) -> str | None:
    """Return the canonical keyword for the text, None if it is custom."""
    return parse_cardinality(text).keyword


def get_declaration_keyword(text: str | None) -> str:
    """Return the keyword to use in a field declaration.

    Custom multiplicities are declared with ``set``; their bounds come
    from separate multiplicity facts.
    """
    return get_cardinality_keyword(text) or CUSTOM_KEYWORD


def is_custom_cardinality(text: str | None) -> bool:
    """Check whether the text needs an explicit multiplicity fact."""
    return parse_cardinality(text).is_custom


def get_custom_cardinality(text: str | None) -> tuple[int | None, int | None]:
    """Return the (lower, upper) bounds to enforce with facts.

    A lower bound of 0 and an unbounded upper bound are both reported as
    None, since neither needs a constraint.
    """
    cardinality = parse_cardinality(text)
    return (cardinality.lower or None, cardinality.upper)
