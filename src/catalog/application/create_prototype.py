"""Application service: Create Prototype use case."""

from __future__ import annotations

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.prototype import Prototype
from catalog.domain.repository.unit_of_work import UnitOfWork


class CreatePrototypeHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        properties: list[str] | None = None,
        option_types: list[str] | None = None,
    ) -> Prototype:
        with self._uow as uow:
            if name and uow.prototypes.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Prototype '{name}' already exists")
            prototype = Prototype.create(
                id=uow.prototypes.next_id(),
                name=name,
                properties=properties,
                option_types=option_types,
            )
            uow.prototypes.save(prototype)
            uow.commit()
        return prototype
