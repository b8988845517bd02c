"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.application.lookup import find_product
from catalog.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_ref: str) -> ProductDTO:
        with self._uow as uow:
            return product_to_dto(find_product(uow.products, product_ref))
