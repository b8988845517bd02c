"""In-memory fake repositories and unit of work for testing.

These implement the same abstract interfaces as the JSON implementations
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from catalog.domain.model.product import Product
from catalog.domain.model.prototype import Prototype
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.prototype_repository import PrototypeRepository
from catalog.domain.repository.unit_of_work import UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        if not self._store:
            return "1"
        return str(max(int(pid) for pid in self._store) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_permalink(self, permalink: str) -> Product | None:
        for p in self._store.values():
            if p.permalink == permalink:
                return p
        return None

    def get_by_variant_id(self, variant_id: str) -> Product | None:
        for p in self._store.values():
            if any(v.id == variant_id for v in p.all_variants):
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakePrototypeRepository(PrototypeRepository):

    def __init__(self, prototypes: list[Prototype] | None = None) -> None:
        self._store: dict[str, Prototype] = {}
        for p in prototypes or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        if not self._store:
            return "1"
        return str(max(int(pid) for pid in self._store) + 1)

    def get_by_id(self, prototype_id: str) -> Prototype | None:
        return self._store.get(prototype_id)

    def get_by_name(self, name: str) -> Prototype | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Prototype]:
        return list(self._store.values())

    def save(self, prototype: Prototype) -> None:
        self._store[prototype.id] = prototype


class FakeUnitOfWork(UnitOfWork):
    """Snapshots both stores on entry and on commit; rollback restores the snapshot."""

    def __init__(
        self,
        products: list[Product] | None = None,
        prototypes: list[Prototype] | None = None,
    ) -> None:
        self.products = FakeProductRepository(products)
        self.prototypes = FakePrototypeRepository(prototypes)
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: tuple[dict, dict] | None = None

    def _begin(self) -> None:
        self._take_snapshot()

    def commit(self) -> None:
        self.commits += 1
        self._take_snapshot()

    def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is not None:
            products, prototypes = self._snapshot
            self.products._store = copy.deepcopy(products)
            self.prototypes._store = copy.deepcopy(prototypes)

    def _take_snapshot(self) -> None:
        self._snapshot = (
            copy.deepcopy(self.products._store),
            copy.deepcopy(self.prototypes._store),
        )
