"""Integration tests for the RemoveVariant use case."""

import pytest

from catalog.application.remove_variant import RemoveVariantHandler
from catalog.domain.exceptions import EntityNotFoundError, InvalidOperationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _setup():
    product = Product.create(id="1", name="Foo Bar", price=Money.of("19.99"))
    medium = product.add_variant({"Size": "M"})
    medium.create_on_hand(3)
    large = product.add_variant({"Size": "L"})
    large.create_on_hand(1)
    uow = FakeUnitOfWork(products=[product])
    return RemoveVariantHandler(uow), uow, product


class TestRemoveVariant:

    def test_removes_variant_and_its_stock(self):
        handler, uow, product = _setup()
        medium_id = product.variants[0].id
        dto = handler.handle(medium_id)
        saved = uow.products.get_by_id("1")
        assert [v.option_values for v in saved.variants] == [{"Size": "L"}]
        assert saved.on_hand == 1
        assert dto.on_hand == 1
        assert uow.products.get_by_variant_id(medium_id) is None
        assert uow.commits == 1

    def test_removing_last_variant_leaves_master_only(self):
        handler, uow, product = _setup()
        for variant_id in [v.id for v in product.variants]:
            handler.handle(variant_id)
        saved = uow.products.get_by_id("1")
        assert not saved.has_variants
        assert saved.on_hand == 0

    def test_master_cannot_be_removed(self):
        handler, uow, product = _setup()
        with pytest.raises(InvalidOperationError, match="master variant"):
            handler.handle(product.master.id)
        assert len(uow.products.get_by_id("1").variants) == 2
        assert uow.commits == 0

    def test_unknown_variant(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("nope")
