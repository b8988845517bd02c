"""Unit tests for the product query scopes."""

from datetime import datetime, timedelta, timezone

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository import scopes

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _product(pid: str, available_on=None, deleted_at=None) -> Product:
    p = Product.create(id=pid, name=f"Item {pid}", price=Money.of("5"), available_on=available_on)
    p.deleted_at = deleted_at
    return p


def _catalog() -> list[Product]:
    return [
        _product("1", available_on=NOW - timedelta(days=1)),
        _product("2", available_on=NOW + timedelta(weeks=2)),
        _product("3", available_on=NOW - timedelta(days=1), deleted_at=NOW),
        _product("4"),
    ]


def _ids(products: list[Product]) -> list[str]:
    return [p.id for p in products]


class TestScopes:

    def test_available(self):
        assert _ids(scopes.apply(_catalog(), scopes.available(NOW))) == ["1", "3"]

    def test_not_deleted(self):
        assert _ids(scopes.apply(_catalog(), scopes.not_deleted())) == ["1", "2", "4"]

    def test_active(self):
        assert _ids(scopes.apply(_catalog(), scopes.active(NOW))) == ["1"]

    def test_with_property_value(self):
        catalog = _catalog()
        catalog[1].set_property("Material", "Wool")
        catalog[3].set_property("Material", "Cotton")
        result = scopes.apply(catalog, scopes.with_property_value("Material", "Wool"))
        assert _ids(result) == ["2"]

    def test_filters_combine(self):
        catalog = _catalog()
        catalog[0].set_property("Material", "Wool")
        catalog[2].set_property("Material", "Wool")
        result = scopes.apply(
            catalog, scopes.not_deleted(), scopes.with_property_value("Material", "Wool")
        )
        assert _ids(result) == ["1"]

    def test_no_filters_returns_everything(self):
        assert len(scopes.apply(_catalog())) == 4
