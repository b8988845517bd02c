"""Domain service: Inventory Reconciliation.

Brings a variant's collection of InventoryUnit records in line with a
requested on-hand level. The service only mutates the in-memory aggregate;
the application layer wraps each call in a unit of work so the read,
the delta computation and the writes commit or roll back together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog.domain.exceptions import InvalidOperationError, ValidationError
from catalog.domain.model.inventory_unit import InventoryState
from catalog.domain.model.product import Product
from catalog.domain.model.variant import Variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryAdjustment:
    """What a single reconciliation did to a variant."""

    variant_id: str
    previous_on_hand: int
    new_on_hand: int
    backorders_filled: int = 0
    units_created: int = 0
    units_destroyed: int = 0

    @property
    def changed(self) -> bool:
        return self.previous_on_hand != self.new_on_hand


def coerce_quantity(quantity: object) -> int | None:
    """Interpret a requested on-hand level.

    Returns None for anything that is not an integer (including booleans,
    floats and non-numeric strings). Integral strings such as ``"7"`` are
    accepted the way form input usually arrives.
    """
    if isinstance(quantity, bool):
        return None
    if isinstance(quantity, int):
        return quantity
    if isinstance(quantity, str):
        text = quantity.strip()
        if text.lstrip("-").isdecimal() and text.count("-") <= 1:
            try:
                return int(text)
            except ValueError:
                return None
    return None


class InventoryReconciler:

    def set_on_hand(self, variant: Variant, quantity: object) -> InventoryAdjustment | None:
        """Make ``variant.on_hand`` equal to ``quantity``.

        - Non-integer or missing quantity: no-op, returns None.
        - Negative quantity: ValidationError, nothing is changed.
        - Growing: backordered units are filled first, then new on-hand
          units are created for the remainder.
        - Shrinking: exactly the difference in on-hand units is destroyed.
        """
        level = coerce_quantity(quantity)
        if level is None:
            logger.debug("Ignoring non-integer on_hand %r for variant %s", quantity, variant.id)
            return None
        if level < 0:
            raise ValidationError(f"on_hand cannot be negative, got {level}")

        previous = variant.on_hand
        delta = level - previous
        filled = created = destroyed = 0

        if delta > 0:
            for unit in variant.units_in_state(InventoryState.BACKORDERED)[:delta]:
                unit.fill_backorder()
                filled += 1
            created = delta - filled
            variant.create_on_hand(created)
        elif delta < 0:
            destroyed = len(variant.destroy_on_hand(-delta))

        adjustment = InventoryAdjustment(
            variant_id=variant.id,
            previous_on_hand=previous,
            new_on_hand=variant.on_hand,
            backorders_filled=filled,
            units_created=created,
            units_destroyed=destroyed,
        )
        if adjustment.changed:
            logger.info(
                "Variant %s on_hand %d -> %d (filled=%d created=%d destroyed=%d)",
                variant.id, previous, adjustment.new_on_hand, filled, created, destroyed,
            )
        return adjustment

    def set_product_on_hand(self, product: Product, quantity: object) -> InventoryAdjustment | None:
        """Product-level on_hand, only meaningful while there are no variants."""
        if coerce_quantity(quantity) is None:
            return None
        return self.set_on_hand(product.stock_variant(), quantity)

    def set_variant_on_hand(
        self, product: Product, variant_id: str, quantity: object
    ) -> InventoryAdjustment | None:
        """On-hand for one named variant of ``product``.

        The master may not hold stock once non-master variants exist.
        """
        variant = product.find_variant(variant_id)
        level = coerce_quantity(quantity)
        if variant.is_master and product.has_variants and level is not None and level > 0:
            raise InvalidOperationError(
                f"Product '{product.name}' has variants — its master cannot hold stock"
            )
        return self.set_on_hand(variant, quantity)

    def zero_master(self, product: Product) -> InventoryAdjustment | None:
        """Drop the master's on-hand units once a product has variants."""
        if not product.has_variants or product.master.on_hand == 0:
            return None
        return self.set_on_hand(product.master, 0)
