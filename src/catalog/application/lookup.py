"""Shared product lookup for the use-case handlers."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


def find_product(repo: ProductRepository, ref: str) -> Product:
    """Resolve a product by ID, falling back to its permalink."""
    product = repo.get_by_id(ref) or repo.get_by_permalink(ref)
    if product is None:
        raise EntityNotFoundError(f"Product '{ref}' not found")
    return product
