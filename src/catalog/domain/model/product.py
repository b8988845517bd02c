"""Product aggregate.

A product is an entity for sale in the store. Descriptive data that does not
change between variations (name, permalink, description, availability,
categories) lives here. Price, SKU and dimensions live on the master variant
and are forwarded transparently, so in the simple case a product behaves as if
it carried them itself.

Inventory is never held by the product. ``on_hand`` is derived from the
master (no variants) or summed across the non-master variants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from django.utils.text import slugify

from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)
from catalog.domain.model.prototype import Prototype
from catalog.domain.model.value_objects import Dimensions, Money
from catalog.domain.model.variant import Variant


def permalink_for(name: str) -> str:
    """URL-safe slug derived from a product name."""
    slug = slugify(name)
    if not slug:
        raise ValidationError(f"Cannot derive a permalink from {name!r}")
    return slug


@dataclass
class Product:
    """Aggregate root for a catalog product and its variants.

    Use ``Product.create()`` for new products. The ``__init__`` is kept
    plain so the repository can reconstitute persisted products.
    """

    id: str
    name: str
    permalink: str
    master: Variant
    variants: list[Variant] = field(default_factory=list)
    description: str = ""
    available_on: datetime | None = None
    deleted_at: datetime | None = None
    tax_category_id: str | None = None
    shipping_category_id: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    option_types: list[str] = field(default_factory=list)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        sku: str = "",
        dimensions: Dimensions | None = None,
        description: str = "",
        available_on: datetime | None = None,
        permalink: str | None = None,
        tax_category_id: str | None = None,
        shipping_category_id: str | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        name = name.strip()
        master = Variant(
            product_id=id,
            price=price,
            sku=sku,
            is_master=True,
            dimensions=dimensions or Dimensions(),
        )
        return Product(
            id=id,
            name=name,
            permalink=permalink or permalink_for(name),
            master=master,
            description=description,
            available_on=available_on,
            tax_category_id=tax_category_id or None,
            shipping_category_id=shipping_category_id or None,
        )

    # --- Attributes forwarded to the master variant ---------------------------

    @property
    def price(self) -> Money:
        return self.master.price

    @price.setter
    def price(self, value: Money) -> None:
        self.master.price = value

    @property
    def sku(self) -> str:
        return self.master.sku

    @sku.setter
    def sku(self, value: str) -> None:
        self.master.sku = value

    @property
    def dimensions(self) -> Dimensions:
        return self.master.dimensions

    @dimensions.setter
    def dimensions(self, value: Dimensions) -> None:
        self.master.dimensions = value

    @property
    def weight(self):
        return self.master.dimensions.weight

    @property
    def height(self):
        return self.master.dimensions.height

    @property
    def width(self):
        return self.master.dimensions.width

    @property
    def depth(self):
        return self.master.dimensions.depth

    # --- Inventory queries ----------------------------------------------------

    @property
    def has_variants(self) -> bool:
        """True if any non-master variant exists."""
        return bool(self.variants)

    @property
    def on_hand(self) -> int:
        if self.has_variants:
            return sum(v.on_hand for v in self.variants)
        return self.master.on_hand

    @property
    def has_stock(self) -> bool:
        return self.master.in_stock or any(v.in_stock for v in self.variants)

    @property
    def all_variants(self) -> list[Variant]:
        return [self.master, *self.variants]

    def stock_variant(self) -> Variant:
        """The variant that product-level on-hand changes apply to.

        Only defined while the product has no variants; otherwise the caller
        must name the variant explicitly.
        """
        if self.has_variants:
            raise InvalidOperationError(
                f"Product '{self.name}' has variants — set on_hand on a "
                f"specific variant instead"
            )
        return self.master

    def find_variant(self, variant_id: str) -> Variant:
        for variant in self.all_variants:
            if variant.id == variant_id:
                return variant
        raise EntityNotFoundError(
            f"Variant '{variant_id}' not found on product '{self.name}'"
        )

    # --- Mutations ------------------------------------------------------------

    def rename(self, new_name: str) -> None:
        """Change the display name. The permalink stays as it was."""
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def add_variant(
        self,
        option_values: dict[str, str] | None = None,
        price: Money | None = None,
        sku: str = "",
        dimensions: Dimensions | None = None,
    ) -> Variant:
        """Create a non-master variant. Price defaults to the master price.

        The caller is responsible for reconciling the master's stock to zero
        once the first variant exists.
        """
        option_values = dict(option_values or {})
        if self.option_types:
            unknown = sorted(set(option_values) - set(self.option_types))
            if unknown:
                raise ValidationError(
                    f"Unknown option type(s) for '{self.name}': {', '.join(unknown)}"
                )
        variant = Variant(
            product_id=self.id,
            price=price or self.price,
            sku=sku,
            dimensions=dimensions or self.dimensions,
            option_values=option_values,
        )
        self.variants.append(variant)
        return variant

    def remove_variant(self, variant_id: str) -> Variant:
        variant = self.find_variant(variant_id)
        if variant.is_master:
            raise InvalidOperationError("The master variant cannot be removed")
        self.variants.remove(variant)
        return variant

    def apply_prototype(self, prototype: Prototype) -> None:
        """Copy a prototype's properties and option types onto this product."""
        for name in prototype.properties:
            self.properties.setdefault(name, "")
        self.option_types = list(prototype.option_types)

    def set_property(self, name: str, value: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Property name is required")
        self.properties[name.strip()] = value

    # --- Availability / soft delete -------------------------------------------

    def is_available(self, at: datetime | None = None) -> bool:
        at = at or datetime.now(timezone.utc)
        return self.available_on is not None and self.available_on <= at

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_active(self, at: datetime | None = None) -> bool:
        return self.is_available(at) and not self.is_deleted

    def soft_delete(self, at: datetime | None = None) -> None:
        if self.is_deleted:
            raise ValidationError(f"Product '{self.name}' is already deleted")
        self.deleted_at = at or datetime.now(timezone.utc)

    def to_param(self) -> str:
        return self.permalink or permalink_for(self.name)
