"""Variant entity — a purchasable option combination of a product.

Every product owns exactly one master variant, which carries the canonical
price, SKU and dimensions. Other variants add option values (size, colour,
...) and each holds its own inventory units.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from catalog.domain.exceptions import InsufficientStockError, ValidationError
from catalog.domain.model.inventory_unit import InventoryState, InventoryUnit
from catalog.domain.model.value_objects import Dimensions, Money


@dataclass
class Variant:

    product_id: str
    price: Money
    sku: str = ""
    is_master: bool = False
    dimensions: Dimensions = field(default_factory=Dimensions)
    option_values: dict[str, str] = field(default_factory=dict)
    inventory_units: list[InventoryUnit] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if self.is_master and self.option_values:
            raise ValidationError("The master variant cannot carry option values")

    # --- Stock queries --------------------------------------------------------

    @property
    def on_hand(self) -> int:
        return sum(1 for unit in self.inventory_units if unit.is_on_hand)

    @property
    def backordered(self) -> int:
        return sum(1 for unit in self.inventory_units if unit.is_backordered)

    @property
    def in_stock(self) -> bool:
        return self.on_hand > 0

    def units_in_state(self, state: InventoryState) -> list[InventoryUnit]:
        return [unit for unit in self.inventory_units if unit.state == state]

    # --- Unit creation / destruction ------------------------------------------

    def create_on_hand(self, count: int) -> list[InventoryUnit]:
        """Add ``count`` brand-new on-hand units."""
        if count < 0:
            raise ValidationError("Unit count cannot be negative")
        units = [InventoryUnit(variant_id=self.id) for _ in range(count)]
        self.inventory_units.extend(units)
        return units

    def create_backordered(self, count: int) -> list[InventoryUnit]:
        """Add ``count`` units promised to customers before stock exists."""
        if count <= 0:
            raise ValidationError("Backorder count must be positive")
        units = [
            InventoryUnit(variant_id=self.id, state=InventoryState.BACKORDERED)
            for _ in range(count)
        ]
        self.inventory_units.extend(units)
        return units

    def destroy_on_hand(self, count: int) -> list[InventoryUnit]:
        """Remove exactly ``count`` on-hand units.

        Raises InsufficientStockError if fewer than ``count`` are on hand.
        """
        if count < 0:
            raise ValidationError("Unit count cannot be negative")
        if count > self.on_hand:
            raise InsufficientStockError(
                f"Cannot destroy {count} units of variant {self.label} "
                f"— only {self.on_hand} on hand"
            )
        doomed = self.units_in_state(InventoryState.ON_HAND)[:count]
        doomed_ids = {unit.id for unit in doomed}
        self.inventory_units = [
            unit for unit in self.inventory_units if unit.id not in doomed_ids
        ]
        return doomed

    def sell(self, count: int) -> list[InventoryUnit]:
        """Mark ``count`` on-hand units as sold."""
        if count <= 0:
            raise ValidationError("Sell quantity must be positive")
        if count > self.on_hand:
            raise InsufficientStockError(
                f"Cannot sell {count} units of variant {self.label} "
                f"— only {self.on_hand} on hand"
            )
        units = self.units_in_state(InventoryState.ON_HAND)[:count]
        for unit in units:
            unit.sell()
        return units

    # --- Display --------------------------------------------------------------

    @property
    def label(self) -> str:
        if self.is_master:
            return "master"
        if self.option_values:
            return ", ".join(f"{k}={v}" for k, v in sorted(self.option_values.items()))
        return self.sku or self.id
