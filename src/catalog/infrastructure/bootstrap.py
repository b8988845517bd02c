"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "CATALOG_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_data_dir_override: Path | None = None


def configure(data_dir: str | Path | None) -> None:
    """Point every repository at ``data_dir`` (None restores the default)."""
    global _data_dir_override
    _data_dir_override = Path(data_dir) if data_dir else None


def data_dir() -> Path:
    if _data_dir_override is not None:
        return _data_dir_override
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return _DEFAULT_DATA_DIR


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(data_dir())
