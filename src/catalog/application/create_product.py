"""Application service: Create Product use case.

Creates the product and its master variant, applies a prototype if one
was named, then sets the initial on-hand level on the master. All of it
happens in one unit of work.
"""

from __future__ import annotations

import logging
from datetime import datetime

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product, permalink_for
from catalog.domain.model.value_objects import Dimensions, Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.unit_of_work import UnitOfWork
from catalog.domain.service.inventory_reconciler import InventoryReconciler

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._reconciler = InventoryReconciler()

    def handle(
        self,
        name: str,
        price: str,
        sku: str = "",
        on_hand: object = None,
        prototype_id: str | None = None,
        description: str = "",
        available_on: datetime | None = None,
        dimensions: Dimensions | None = None,
        tax_category_id: str | None = None,
        shipping_category_id: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        Steps:
        1. Validate the name and derive a unique permalink.
        2. Build the product and its master variant.
        3. Copy properties and option types from the prototype, if any.
        4. Reconcile the master's inventory to ``on_hand``.
        5. Persist and return the re-read product.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        with self._uow as uow:
            product = Product.create(
                id=uow.products.next_id(),
                name=name,
                price=Money.of(price),
                sku=sku,
                dimensions=dimensions,
                description=description,
                available_on=available_on,
                permalink=self._unique_permalink(uow.products, name),
                tax_category_id=tax_category_id,
                shipping_category_id=shipping_category_id,
            )

            if prototype_id:
                prototype = uow.prototypes.get_by_id(prototype_id)
                if prototype is None:
                    raise EntityNotFoundError(f"Prototype '{prototype_id}' not found")
                product.apply_prototype(prototype)

            self._reconciler.set_product_on_hand(product, on_hand)

            uow.products.save(product)
            uow.commit()
            product = uow.products.get_by_id(product.id)

        logger.info("Created product %s '%s'", product.id, product.name)
        return product_to_dto(product)

    @staticmethod
    def _unique_permalink(repo: ProductRepository, name: str) -> str:
        base = permalink_for(name)
        candidate = base
        n = 1
        while repo.get_by_permalink(candidate) is not None:
            n += 1
            candidate = f"{base}-{n}"
        return candidate
