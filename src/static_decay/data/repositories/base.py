"""Base repository implementation for the JSON content tables."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Generic, Type, TypeVar

from static_decay.data.errors import DataValidationError
from static_decay.data.json_loader import load_json
from static_decay.data import paths

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories.

    Definitions are loaded lazily on first access and kept in file order.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
        return self._definitions

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        definitions = self._ensure_loaded()
        try:
            return definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions in the order the table declares them."""
        return list(self._ensure_loaded().values())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> list[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_enum(enum_type: Type[E], value: object, context: str) -> E:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        try:
            return enum_type(value)
        except ValueError as exc:
            allowed = sorted(member.value for member in enum_type)
            raise DataValidationError(f"{context} must be one of {allowed} (found '{value}').") from exc

    @staticmethod
    def _assert_allowed_fields(
        payload: dict[str, object],
        required: set[str],
        optional: set[str],
        context: str,
    ) -> None:
        actual_keys = set(payload.keys())
        missing = required - actual_keys
        unknown = actual_keys - required - optional
        pieces = []
        if missing:
            pieces.append(f"missing fields: {sorted(missing)}")
        if unknown:
            pieces.append(f"unknown fields: {sorted(unknown)}")
        if pieces:
            raise DataValidationError(f"{context} has schema issues ({'; '.join(pieces)}).")
