"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Dimensions, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("19.99"))
        assert m.amount == Decimal("19.99")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── Dimensions ───────────────────────────────────────────────────────────────


class TestDimensions:

    def test_all_measures_optional(self):
        d = Dimensions.of()
        assert d == Dimensions(None, None, None, None)

    def test_of_coerces_to_decimal(self):
        d = Dimensions.of(weight="1.5", height=10)
        assert d.weight == Decimal("1.5")
        assert d.height == Decimal("10")
        assert d.width is None

    def test_negative_measure_rejected(self):
        with pytest.raises(ValidationError, match="Weight cannot be negative"):
            Dimensions.of(weight="-2")

    @pytest.mark.parametrize("raw", ["nan", "sNaN", "inf"])
    def test_non_finite_measure_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid weight"):
            Dimensions.of(weight=raw)

    def test_replace_keeps_other_measures(self):
        d = Dimensions.of(weight="1", depth="3").replace(depth="4")
        assert d.weight == Decimal("1")
        assert d.depth == Decimal("4")

    def test_replace_unknown_measure_rejected(self):
        with pytest.raises(ValidationError, match="Unknown dimension"):
            Dimensions.of().replace(volume="1")
