"""Abstract repository for Prototype records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.prototype import Prototype


class PrototypeRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique prototype ID."""

    @abstractmethod
    def get_by_id(self, prototype_id: str) -> Prototype | None:
        """Return a prototype by its ID, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> Prototype | None:
        """Return a prototype by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Prototype]:
        """Return every prototype."""

    @abstractmethod
    def save(self, prototype: Prototype) -> None:
        """Persist a new or updated prototype."""
