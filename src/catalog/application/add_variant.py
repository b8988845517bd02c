"""Application service: Add Variant use case.

Once a product has a non-master variant its master may no longer hold
stock, so the master is reconciled to zero in the same unit of work.
"""

from __future__ import annotations

import logging

from catalog.application.dto import VariantDTO, variant_to_dto
from catalog.application.lookup import find_product
from catalog.domain.model.value_objects import Dimensions, Money
from catalog.domain.repository.unit_of_work import UnitOfWork
from catalog.domain.service.inventory_reconciler import InventoryReconciler

logger = logging.getLogger(__name__)


class AddVariantHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._reconciler = InventoryReconciler()

    def handle(
        self,
        product_ref: str,
        option_values: dict[str, str] | None = None,
        price: str | None = None,
        sku: str = "",
        on_hand: object = None,
        dimensions: Dimensions | None = None,
    ) -> VariantDTO:
        with self._uow as uow:
            product = find_product(uow.products, product_ref)

            variant = product.add_variant(
                option_values=option_values,
                price=Money.of(price) if price is not None else None,
                sku=sku,
                dimensions=dimensions,
            )
            self._reconciler.zero_master(product)
            self._reconciler.set_on_hand(variant, on_hand)

            uow.products.save(product)
            uow.commit()

        logger.info("Added variant %s (%s) to product %s", variant.id, variant.label, product.id)
        return variant_to_dto(variant)
