"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product
from catalog.domain.model.variant import Variant


@dataclass(frozen=True)
class VariantDTO:

    id: str
    is_master: bool
    sku: str
    price: str  # formatted, e.g. "$19.99"
    options: str
    on_hand: int
    backordered: int
    in_stock: bool


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    permalink: str
    price: str
    sku: str
    on_hand: int
    has_stock: bool
    has_variants: bool
    available_on: str | None
    deleted: bool
    master: VariantDTO
    variants: list[VariantDTO]
    properties: dict[str, str]
    tax_category_id: str | None = None
    shipping_category_id: str | None = None


@dataclass(frozen=True)
class InventoryLineDTO:
    """One row of the inventory report: a variant and its unit counts."""

    product_name: str
    variant: str
    variant_id: str
    on_hand: int
    backordered: int


def variant_to_dto(variant: Variant) -> VariantDTO:
    return VariantDTO(
        id=variant.id,
        is_master=variant.is_master,
        sku=variant.sku,
        price=str(variant.price),
        options=variant.label,
        on_hand=variant.on_hand,
        backordered=variant.backordered,
        in_stock=variant.in_stock,
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        permalink=product.permalink,
        price=str(product.price),
        sku=product.sku,
        on_hand=product.on_hand,
        has_stock=product.has_stock,
        has_variants=product.has_variants,
        available_on=(
            product.available_on.strftime("%Y-%m-%d %H:%M UTC")
            if product.available_on
            else None
        ),
        deleted=product.is_deleted,
        master=variant_to_dto(product.master),
        variants=[variant_to_dto(v) for v in product.variants],
        properties=dict(product.properties),
        tax_category_id=product.tax_category_id,
        shipping_category_id=product.shipping_category_id,
    )
