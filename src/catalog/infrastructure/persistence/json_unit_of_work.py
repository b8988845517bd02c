"""JSON-file-backed unit of work.

Repositories write straight to their files, so the transaction works on
the files themselves: their contents are captured on entry and written
back on rollback. A process-wide re-entrant lock per data directory
serializes concurrent units of work against the same files.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from catalog.domain.repository.unit_of_work import UnitOfWork
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_prototype_repository import (
    JsonPrototypeRepository,
)

logger = logging.getLogger(__name__)

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(data_dir: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(data_dir, threading.RLock())


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir.resolve()
        self._lock = _lock_for(self._data_dir)
        self.products = JsonProductRepository(self._data_dir / "products.json")
        self.prototypes = JsonPrototypeRepository(self._data_dir / "prototypes.json")
        self._snapshot: dict[Path, str] = {}

    @property
    def _files(self) -> list[Path]:
        return [
            self._data_dir / "products.json",
            self._data_dir / "prototypes.json",
        ]

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self._snapshot = {
                path: path.read_text(encoding="utf-8") for path in self._files
            }
        except BaseException:
            self._lock.release()
            raise

    def commit(self) -> None:
        self._snapshot = {
            path: path.read_text(encoding="utf-8") for path in self._files
        }

    def rollback(self) -> None:
        for path, content in self._snapshot.items():
            if path.read_text(encoding="utf-8") != content:
                logger.warning("Rolling back uncommitted changes to %s", path.name)
                path.write_text(content, encoding="utf-8")

    def _end(self) -> None:
        self._snapshot = {}
        self._lock.release()
