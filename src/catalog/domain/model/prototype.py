"""Prototype: a reusable template of properties and option types.

Creating a product from a prototype pre-populates the product's property
names and the option types its variants are described by.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.exceptions import ValidationError


@dataclass
class Prototype:

    id: str
    name: str
    properties: list[str] = field(default_factory=list)
    option_types: list[str] = field(default_factory=list)

    @staticmethod
    def create(
        id: str,
        name: str,
        properties: list[str] | None = None,
        option_types: list[str] | None = None,
    ) -> Prototype:
        if not name or not name.strip():
            raise ValidationError("Prototype name is required")
        return Prototype(
            id=id,
            name=name.strip(),
            properties=_clean(properties),
            option_types=_clean(option_types),
        )


def _clean(names: list[str] | None) -> list[str]:
    """Strip blanks and duplicates, keeping first-seen order."""
    seen: list[str] = []
    for name in names or []:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen
