"""Application service: Sell Units use case.

Marks on-hand units as sold. This is the hook through which checkout
(outside this package) consumes stock.
"""

from __future__ import annotations

from catalog.application.dto import VariantDTO, variant_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.unit_of_work import UnitOfWork


class SellUnitsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, variant_id: str, count: int) -> VariantDTO:
        with self._uow as uow:
            product = uow.products.get_by_variant_id(variant_id)
            if product is None:
                raise EntityNotFoundError(f"Variant '{variant_id}' not found")
            variant = product.find_variant(variant_id)
            variant.sell(count)
            uow.products.save(product)
            uow.commit()

        return variant_to_dto(variant)
