"""Application service: List Products use case (query)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.repository import scopes
from catalog.domain.repository.unit_of_work import UnitOfWork


class ProductScope(Enum):
    ALL = "all"
    ACTIVE = "active"
    AVAILABLE = "available"
    NOT_DELETED = "not_deleted"


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        scope: ProductScope = ProductScope.NOT_DELETED,
        at: datetime | None = None,
        property_value: tuple[str, str] | None = None,
    ) -> list[ProductDTO]:
        filters = []
        if scope == ProductScope.ACTIVE:
            filters.append(scopes.active(at))
        elif scope == ProductScope.AVAILABLE:
            filters.append(scopes.available(at))
        elif scope == ProductScope.NOT_DELETED:
            filters.append(scopes.not_deleted())
        if property_value is not None:
            filters.append(scopes.with_property_value(*property_value))

        with self._uow as uow:
            products = scopes.apply(uow.products.list_all(), *filters)
            return [product_to_dto(p) for p in products]
