"""Query filters over products.

Each scope is a plain predicate factory so handlers can combine them
over whatever ``ProductRepository.list_all()`` returns.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable

from catalog.domain.model.product import Product

ProductFilter = Callable[[Product], bool]


def available(at: datetime | None = None) -> ProductFilter:
    """Products whose availability date has passed."""
    at = at or datetime.now(timezone.utc)
    return lambda product: product.is_available(at)


def not_deleted() -> ProductFilter:
    return lambda product: not product.is_deleted


def active(at: datetime | None = None) -> ProductFilter:
    """Available and not soft-deleted."""
    at = at or datetime.now(timezone.utc)
    return lambda product: product.is_active(at)


def with_property_value(property_name: str, value: str) -> ProductFilter:
    return lambda product: product.properties.get(property_name) == value


def apply(products: Iterable[Product], *filters: ProductFilter) -> list[Product]:
    return [p for p in products if all(f(p) for f in filters)]
