"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. A product is stored together with its master, its
variants and their inventory units; deleting it deletes all of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_permalink(self, permalink: str) -> Product | None:
        """Return a product by its permalink, or None if not found."""

    @abstractmethod
    def get_by_variant_id(self, variant_id: str) -> Product | None:
        """Return the product owning the given variant, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, deleted ones included."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product along with its variants and inventory units."""
