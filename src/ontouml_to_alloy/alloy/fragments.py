"""Alloy text fragments emitted by the transformation.

Each fragment renders to a self-contained block of Alloy text. Fragments
are kept as small dataclasses rather than raw strings so tests and the
writer can inspect names and constraints without parsing text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Indentation used inside every emitted block
INDENT = " " * 8


@dataclass(frozen=True)
class AlloyFact:
    """A named fact block.

    Attributes
    ----------
        name: Fact label (e.g. "multiplicity", "ordering", "rigid").
        constraints: One constraint per line inside the block.

    """

    name: str
    constraints: tuple[str, ...]

    def render(self) -> str:
        """Render as ``fact name { ... }``."""
        body = "\n".join(INDENT + constraint for constraint in self.constraints)
        return f"fact {self.name} {{\n{body}\n}}"


@dataclass(frozen=True)
class AlloyFunction:
    """A named, parameterized function.

    Attributes
    ----------
        name: Function name (an alias minted for a property).
        parameters: (name, type) pairs, in declaration order.
        return_type: Declared result type expression.
        body: Result expression.

    """

    name: str
    parameters: tuple[tuple[str, str], ...]
    return_type: str
    body: str

    def render(self) -> str:
        """Render as ``fun name [params] : type { body }``."""
        params = ", ".join(f"{name}: {type_}" for name, type_ in self.parameters)
        return f"fun {self.name} [{params}] : {self.return_type} {{\n{INDENT}{self.body}\n}}"


@dataclass(frozen=True)
class AlloyEnum:
    """An enumeration signature."""

    name: str
    literals: tuple[str, ...] = ()

    def render(self) -> str:
        """Render as ``enum Name { a, b }``."""
        return f"enum {self.name} {{ {', '.join(self.literals)} }}"


@dataclass
class AlloyDatatype:
    """A datatype signature with its inline fields.

    Datatype instances are not world-relative, so their fields are
    declared directly on the signature instead of on World.

    The dataclass is mutable so fields can be appended while properties
    and relations are transformed.
    """

    name: str
    fields: list[str] = field(default_factory=list)

    def add_field(self, declaration: str) -> None:
        """Append an inline field declaration."""
        self.fields.append(declaration)

    @property
    def field_names(self) -> list[str]:
        """Names of the declared fields."""
        return [declaration.split(":", 1)[0].strip() for declaration in self.fields]

    def render(self) -> str:
        """Render as ``sig Name in Datatype { fields }``."""
        if not self.fields:
            return f"sig {self.name} in Datatype {{}}"
        body = (",\n" + INDENT).join(self.fields)
        return f"sig {self.name} in Datatype {{\n{INDENT}{body}\n}}"
