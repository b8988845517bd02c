"""Application service: Remove Variant use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RemoveVariantHandler:
    """Detach a non-master variant, and its inventory units, from its product."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, variant_id: str) -> ProductDTO:
        with self._uow as uow:
            product = uow.products.get_by_variant_id(variant_id)
            if product is None:
                raise EntityNotFoundError(f"Variant '{variant_id}' not found")

            variant = product.remove_variant(variant_id)
            uow.products.save(product)
            uow.commit()

            saved = uow.products.get_by_id(product.id)

        logger.info(
            "Removed variant %s (%d unit(s)) from product %s",
            variant.id,
            len(variant.inventory_units),
            product.id,
        )
        return product_to_dto(saved)
