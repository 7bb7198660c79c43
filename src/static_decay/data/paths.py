"""Helpers for resolving content table locations."""
from __future__ import annotations

from pathlib import Path

_DEFINITIONS_DIR = Path(__file__).resolve().parent / "definitions"


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing the item, recipe and zone tables.

    The shipped tables live inside the package so installed copies find them.
    """
    if base_path is not None:
        return Path(base_path)
    return _DEFINITIONS_DIR
