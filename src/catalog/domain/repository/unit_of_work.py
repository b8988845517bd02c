"""Abstract unit of work — the transaction boundary for repository changes.

Usage::

    with uow:
        product = uow.products.get_by_id("1")
        ...
        uow.products.save(product)
        uow.commit()

Leaving the block rolls back every change made since the last
``commit()``, whether the block ended normally or with an exception.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.prototype_repository import PrototypeRepository


class UnitOfWork(ABC):

    products: ProductRepository
    prototypes: PrototypeRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Make the changes so far durable; they survive a later rollback."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since the last commit."""

    @abstractmethod
    def _begin(self) -> None:
        """Acquire the transaction scope."""

    def _end(self) -> None:
        """Release the transaction scope."""
