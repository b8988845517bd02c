"""Application service: Delete Product use case.

By default a product is soft-deleted: it keeps its variants and units but
drops out of the ``active`` and ``not_deleted`` listings. ``destroy=True``
removes the product, its variants and their inventory units.
"""

from __future__ import annotations

import logging

from catalog.application.lookup import find_product
from catalog.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_ref: str, destroy: bool = False) -> None:
        with self._uow as uow:
            product = find_product(uow.products, product_ref)
            if destroy:
                uow.products.delete(product.id)
            else:
                product.soft_delete()
                uow.products.save(product)
            uow.commit()

        logger.info(
            "%s product %s '%s'",
            "Destroyed" if destroy else "Soft-deleted",
            product.id,
            product.name,
        )
