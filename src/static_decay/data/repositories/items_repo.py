"""Items repository."""
from __future__ import annotations

from typing import Dict

from static_decay.data.errors import DataReferenceError, DataValidationError
from static_decay.data.repositories.base import RepositoryBase
from static_decay.domain.defs import EffectId, ItemDef, ItemKind


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates item definitions keyed by their unique name."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def find(self, name: str) -> ItemDef | None:
        """Case-insensitive lookup; returns None for unknown names."""
        definitions = self._ensure_loaded()
        if name in definitions:
            return definitions[name]
        wanted = name.strip().casefold()
        for item_name, item in definitions.items():
            if item_name.casefold() == wanted:
                return item
        return None

    def require_known(self, value: object, context: str) -> str:
        """Resolve a name used by another table to the canonical item name."""
        name = self._require_str(value, context)
        item = self.find(name)
        if item is None:
            raise DataReferenceError(f"{context} references unknown item '{name}'.")
        return item.name

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        seen: set[str] = set()
        for name, payload in raw.items():
            if not name.strip():
                raise DataValidationError("Item names must not be empty.")
            if name.casefold() in seen:
                raise DataValidationError(f"Duplicate item name '{name}' (names are case-insensitive).")
            seen.add(name.casefold())

            context = f"item '{name}'"
            item_data = self._require_mapping(payload, context)
            self._assert_allowed_fields(item_data, {"kind", "description"}, {"damage", "effect"}, context)
            kind = self._require_enum(ItemKind, item_data["kind"], f"{context} kind")
            description = self._require_str(item_data["description"], f"{context} description")

            damage = 0
            effect: EffectId | None = None
            if kind is ItemKind.WEAPON:
                damage = self._require_int(item_data.get("damage"), f"{context} damage")
                if damage <= 0:
                    raise DataValidationError(f"{context} damage must be positive.")
            elif "damage" in item_data:
                raise DataValidationError(f"{context} is not a weapon and cannot define damage.")

            if kind is ItemKind.CONSUMABLE:
                effect = self._require_enum(EffectId, item_data.get("effect"), f"{context} effect")
            elif "effect" in item_data:
                raise DataValidationError(f"{context} is not a consumable and cannot define an effect.")

            items[name] = ItemDef(
                name=name,
                description=description,
                kind=kind,
                damage=damage,
                effect=effect,
            )
        return items
