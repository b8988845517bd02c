"""InventoryUnit: one physical (or promised) item of a variant.

A variant's stock is not a counter but a collection of these records.
The on-hand count is the number of units currently in the ON_HAND state.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum

from catalog.domain.exceptions import ValidationError


class InventoryState(Enum):
    ON_HAND = "on_hand"
    BACKORDERED = "backordered"
    SOLD = "sold"


@dataclass
class InventoryUnit:
    """A single unit of inventory.

    Allowed transitions:
    - BACKORDERED -> ON_HAND via ``fill_backorder()``
    - ON_HAND -> SOLD via ``sell()``

    Nothing ever returns to ON_HAND from SOLD.
    """

    variant_id: str
    state: InventoryState = InventoryState.ON_HAND
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def is_on_hand(self) -> bool:
        return self.state == InventoryState.ON_HAND

    @property
    def is_backordered(self) -> bool:
        return self.state == InventoryState.BACKORDERED

    def fill_backorder(self) -> None:
        if self.state != InventoryState.BACKORDERED:
            raise ValidationError(
                f"Cannot fill unit {self.id} — current state is {self.state.value}, "
                f"expected backordered"
            )
        self.state = InventoryState.ON_HAND

    def sell(self) -> None:
        if self.state != InventoryState.ON_HAND:
            raise ValidationError(
                f"Cannot sell unit {self.id} — current state is {self.state.value}, "
                f"expected on_hand"
            )
        self.state = InventoryState.SOLD
