"""JSON-file-backed implementation of ProductRepository.

Each product is stored as one record holding its master variant, its
other variants and every inventory unit, so destroying a product removes
them all.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.inventory_unit import InventoryState, InventoryUnit
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Dimensions, Money
from catalog.domain.model.variant import Variant
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        records = self._load_raw()
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_permalink(self, permalink: str) -> Product | None:
        for raw in self._load_raw():
            if raw["permalink"] == permalink:
                return self._to_domain(raw)
        return None

    def get_by_variant_id(self, variant_id: str) -> Product | None:
        for raw in self._load_raw():
            variant_ids = [raw["master"]["id"]] + [v["id"] for v in raw["variants"]]
            if variant_id in variant_ids:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))
        self._persist_raw(records)

    def delete(self, product_id: str) -> None:
        records = [r for r in self._load_raw() if r["id"] != product_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _to_raw(cls, product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "permalink": product.permalink,
            "description": product.description,
            "available_on": _iso(product.available_on),
            "deleted_at": _iso(product.deleted_at),
            "tax_category_id": product.tax_category_id,
            "shipping_category_id": product.shipping_category_id,
            "properties": dict(product.properties),
            "option_types": list(product.option_types),
            "master": cls._variant_to_raw(product.master),
            "variants": [cls._variant_to_raw(v) for v in product.variants],
        }

    @staticmethod
    def _variant_to_raw(variant: Variant) -> dict:
        dims = variant.dimensions
        return {
            "id": variant.id,
            "is_master": variant.is_master,
            "price": str(variant.price.amount),
            "currency": variant.price.currency,
            "sku": variant.sku,
            "weight": _dec(dims.weight),
            "height": _dec(dims.height),
            "width": _dec(dims.width),
            "depth": _dec(dims.depth),
            "option_values": dict(variant.option_values),
            "inventory_units": [
                {"id": unit.id, "state": unit.state.value}
                for unit in variant.inventory_units
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            permalink=raw["permalink"],
            master=cls._variant_to_domain(raw["master"], raw["id"]),
            variants=[cls._variant_to_domain(v, raw["id"]) for v in raw["variants"]],
            description=raw.get("description", ""),
            available_on=_parse_dt(raw.get("available_on")),
            deleted_at=_parse_dt(raw.get("deleted_at")),
            tax_category_id=raw.get("tax_category_id"),
            shipping_category_id=raw.get("shipping_category_id"),
            properties=dict(raw.get("properties", {})),
            option_types=list(raw.get("option_types", [])),
        )

    @staticmethod
    def _variant_to_domain(raw: dict, product_id: str) -> Variant:
        return Variant(
            id=raw["id"],
            product_id=product_id,
            is_master=raw["is_master"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            sku=raw.get("sku", ""),
            dimensions=Dimensions.of(
                weight=raw.get("weight"),
                height=raw.get("height"),
                width=raw.get("width"),
                depth=raw.get("depth"),
            ),
            option_values=dict(raw.get("option_values", {})),
            inventory_units=[
                InventoryUnit(
                    id=u["id"],
                    variant_id=raw["id"],
                    state=InventoryState(u["state"]),
                )
                for u in raw.get("inventory_units", [])
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _dec(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None
