"""JSON-file-backed implementation of PrototypeRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.prototype import Prototype
from catalog.domain.repository.prototype_repository import PrototypeRepository


class JsonPrototypeRepository(PrototypeRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PrototypeRepository interface ----------------------------------------

    def next_id(self) -> str:
        prototypes = self._load()
        if not prototypes:
            return "1"
        return str(max(int(pid) for pid in prototypes) + 1)

    def get_by_id(self, prototype_id: str) -> Prototype | None:
        return self._load().get(prototype_id)

    def get_by_name(self, name: str) -> Prototype | None:
        for prototype in self._load().values():
            if prototype.name.lower() == name.lower():
                return prototype
        return None

    def list_all(self) -> list[Prototype]:
        return list(self._load().values())

    def save(self, prototype: Prototype) -> None:
        prototypes = self._load()
        prototypes[prototype.id] = prototype
        self._persist(prototypes)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Prototype]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Prototype(
                id=item["id"],
                name=item["name"],
                properties=list(item.get("properties", [])),
                option_types=list(item.get("option_types", [])),
            )
            for item in raw
        }

    def _persist(self, prototypes: dict[str, Prototype]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "properties": p.properties,
                "option_types": p.option_types,
            }
            for p in prototypes.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
