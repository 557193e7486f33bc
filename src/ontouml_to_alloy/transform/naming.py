"""Identifier normalization and alias resolution.

Every identifier written to the Alloy output is produced here. Raw model
names are never emitted directly: they are stripped of characters Alloy
does not accept, moved away from reserved words and made unique within a
transformation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ontouml_to_alloy.models.elements import OntoumlElement

# Characters removed from element names
FORBIDDEN_CHARACTERS: tuple[str, ...] = (
    " ", "!", "@", "#", "$", "%", "&", "*", "(", ")", "-", "+", "=",
    "{", "}", "[", "]", "|", "\\", "/", ":", ";", '"', "'", "<", ">",
    ",", ".", "?", "~", "`",
)

# Alloy keywords plus identifiers declared by the generated module itself
RESERVED_KEYWORDS: tuple[str, ...] = (
    "abstract", "all", "and", "as", "assert", "but", "check", "disj",
    "else", "enum", "exactly", "expect", "extends", "fact", "for", "fun",
    "iden", "iff", "implies", "in", "Int", "int", "let", "lone", "module",
    "no", "none", "not", "one", "open", "or", "pred", "private", "run",
    "seq", "set", "sig", "some", "sum", "this", "univ", "var",
    # Names used by the world structure and library imports
    "World", "Endurant", "Object", "Aspect", "Datatype", "exists",
    "isSeq", "select13", "rigidity", "antirigidity", "visible",
)


@dataclass(frozen=True)
class NamingRules:
    """Identifier grammar used when normalizing names.

    Attributes
    ----------
        forbidden_characters: Characters stripped from names.
        reserved_keywords: Names that must be suffixed with the kind tag.

    """

    forbidden_characters: frozenset[str] = frozenset(FORBIDDEN_CHARACTERS)
    reserved_keywords: frozenset[str] = frozenset(RESERVED_KEYWORDS)

    def strip_forbidden(self, name: str) -> str:
        """Remove forbidden characters and whitespace, keeping the rest as is."""
        return "".join(
            char
            for char in name
            if char not in self.forbidden_characters and not char.isspace()
        )

    def is_reserved(self, name: str) -> bool:
        """Check for an exact, case-sensitive keyword match."""
        return name in self.reserved_keywords


DEFAULT_NAMING_RULES = NamingRules()


def get_kind_tag(element: OntoumlElement) -> str:
    """Return the lowercase kind tag of an element (e.g. "class")."""
    return element.type.lower()


@dataclass
class NameRegistry:
    """Per-run registry of normalized names and aliases.

    Normalized names and aliases share one used-name set, so an alias
    never equals a normalized element name and vice versa. Both are
    cached per element, which makes repeated lookups stable.

    Example:
    -------
        >>> registry = NameRegistry()
        >>> registry.normalize_name(person)
        'Person'
        >>> registry.normalize_name(other_person)
        'Person1'

    """

    rules: NamingRules = DEFAULT_NAMING_RULES
    used_names: set[str] = field(default_factory=set)
    _normalized: dict[OntoumlElement, str] = field(default_factory=dict, init=False, repr=False)
    _aliases: dict[OntoumlElement, str] = field(default_factory=dict, init=False, repr=False)
    _alias_counters: dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def is_used(self, name: str) -> bool:
        """Check whether a name or alias was already issued."""
        return name in self.used_names

    def normalize_name(self, element: OntoumlElement) -> str:
        """Return the normalized identifier of an element.

        Args:
        ----
            element: Any model element, named or not.

        Returns:
        -------
            A legal identifier, unique among all names and aliases issued
            by this registry.

        """
        cached = self._normalized.get(element)
        if cached is not None:
            return cached

        kind = get_kind_tag(element)
        candidate = self.rules.strip_forbidden(element.name or "")

        if not candidate:
            candidate = kind
        if self.rules.is_reserved(candidate):
            candidate = f"{candidate}_{kind}"
        if candidate[0].isdigit():
            candidate = f"{kind}_{candidate}"

        normalized = self._first_free(candidate, start=1)
        self.used_names.add(normalized)
        self._normalized[element] = normalized
        return normalized

    def get_valid_alias(self, element: OntoumlElement, base: str) -> str:
        """Return an accessor alias for an element.

        Args:
        ----
            element: Element the alias is issued for (property or relation).
            base: Preferred alias, usually a normalized name or "relation".

        Returns:
        -------
            ``base`` when unused, otherwise ``base`` with the smallest free
            positive suffix. The same element always gets the same alias.

        """
        cached = self._aliases.get(element)
        if cached is not None:
            return cached

        alias = self._first_free(base, start=self._alias_counters.get(base, 1))
        if alias != base:
            self._alias_counters[base] = int(alias[len(base):]) + 1

        self.used_names.add(alias)
        self._aliases[element] = alias
        return alias

    def get_alias(self, element: OntoumlElement) -> str | None:
        """Return the alias already issued for an element, if any."""
        return self._aliases.get(element)

    def _first_free(self, base: str, start: int) -> str:
        if base not in self.used_names:
            return base

        suffix = start
        while f"{base}{suffix}" in self.used_names:
            suffix += 1
        return f"{base}{suffix}"
