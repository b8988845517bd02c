"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from catalog.application.dto import InventoryLineDTO
from catalog.domain.repository import scopes
from catalog.domain.repository.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[InventoryLineDTO]:
        """One line per stock-holding variant of every non-deleted product.

        Products with variants list their non-master variants only.
        """
        with self._uow as uow:
            products = scopes.apply(uow.products.list_all(), scopes.not_deleted())
            return [
                InventoryLineDTO(
                    product_name=product.name,
                    variant=variant.label,
                    variant_id=variant.id,
                    on_hand=variant.on_hand,
                    backordered=variant.backordered,
                )
                for product in products
                for variant in (product.variants or [product.master])
            ]
