"""Unit tests for InventoryUnit state transitions."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.inventory_unit import InventoryState, InventoryUnit


class TestInventoryUnitTransitions:

    def test_new_unit_is_on_hand(self):
        unit = InventoryUnit(variant_id="v1")
        assert unit.state == InventoryState.ON_HAND
        assert unit.is_on_hand

    def test_fill_backorder_moves_to_on_hand(self):
        unit = InventoryUnit(variant_id="v1", state=InventoryState.BACKORDERED)
        unit.fill_backorder()
        assert unit.is_on_hand

    def test_fill_on_hand_unit_rejected(self):
        unit = InventoryUnit(variant_id="v1")
        with pytest.raises(ValidationError, match="expected backordered"):
            unit.fill_backorder()

    def test_sell_on_hand_unit(self):
        unit = InventoryUnit(variant_id="v1")
        unit.sell()
        assert unit.state == InventoryState.SOLD

    def test_sold_unit_never_returns_to_on_hand(self):
        unit = InventoryUnit(variant_id="v1", state=InventoryState.SOLD)
        with pytest.raises(ValidationError):
            unit.fill_backorder()
        with pytest.raises(ValidationError, match="expected on_hand"):
            unit.sell()

    def test_units_get_distinct_ids(self):
        assert InventoryUnit(variant_id="v1").id != InventoryUnit(variant_id="v1").id
