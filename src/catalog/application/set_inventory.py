"""Application service: Set Inventory use case.

Sets the on-hand level either for a product as a whole (only while it has
no variants) or for one specific variant. The read, the reconciliation and
the write run in a single unit of work, and the product is re-read after
the commit so the returned aggregates reflect the stored units.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.application.lookup import find_product
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.repository.unit_of_work import UnitOfWork
from catalog.domain.service.inventory_reconciler import (
    InventoryAdjustment,
    InventoryReconciler,
)


class SetInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._reconciler = InventoryReconciler()

    def handle(
        self,
        quantity: object,
        product_ref: str | None = None,
        variant_id: str | None = None,
    ) -> tuple[ProductDTO, InventoryAdjustment | None]:
        """Reconcile inventory to ``quantity``.

        Args:
            quantity: Target on-hand level. Non-integers are ignored.
            product_ref: Product ID or permalink; targets the master.
            variant_id: A specific variant; wins over ``product_ref``.
        """
        with self._uow as uow:
            if variant_id is not None:
                product = uow.products.get_by_variant_id(variant_id)
                if product is None:
                    raise EntityNotFoundError(f"Variant '{variant_id}' not found")
                adjustment = self._reconciler.set_variant_on_hand(
                    product, variant_id, quantity
                )
            elif product_ref is not None:
                product = find_product(uow.products, product_ref)
                adjustment = self._reconciler.set_product_on_hand(product, quantity)
            else:
                raise ValidationError("A product or a variant must be given")

            uow.products.save(product)
            uow.commit()
            product = uow.products.get_by_id(product.id)

        return product_to_dto(product), adjustment
