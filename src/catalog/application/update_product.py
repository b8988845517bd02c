"""Application service: Update Product use case.

Price, SKU and dimensions go through the product's forwarding
properties, so they land on the master variant.
"""

from __future__ import annotations

from datetime import datetime

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.application.lookup import find_product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_ref: str,
        name: str | None = None,
        price: str | None = None,
        sku: str | None = None,
        available_on: datetime | None = None,
        properties: dict[str, str] | None = None,
        tax_category_id: str | None = None,
        shipping_category_id: str | None = None,
        **dimensions,
    ) -> ProductDTO:
        """Apply whichever changes were given. The permalink never changes.

        An empty tax or shipping category ID clears that category.
        """
        with self._uow as uow:
            product = find_product(uow.products, product_ref)

            if name is not None:
                product.rename(name)
            if price is not None:
                product.update_price(Money.of(price))
            if sku is not None:
                product.sku = sku
            if available_on is not None:
                product.available_on = available_on
            if tax_category_id is not None:
                product.tax_category_id = tax_category_id or None
            if shipping_category_id is not None:
                product.shipping_category_id = shipping_category_id or None
            for key, value in (properties or {}).items():
                product.set_property(key, value)
            changed_dims = {k: v for k, v in dimensions.items() if v is not None}
            if changed_dims:
                product.dimensions = product.dimensions.replace(**changed_dims)

            uow.products.save(product)
            uow.commit()

        return product_to_dto(product)
