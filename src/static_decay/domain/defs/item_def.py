"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .effect_def import EffectId


class ItemKind(Enum):
    """Closed set of item variants."""

    WEAPON = "weapon"
    CONSUMABLE = "consumable"
    RESOURCE = "resource"
    QUEST = "quest"


@dataclass(frozen=True, slots=True)
class ItemDef:
    """Immutable item definition; the name is the item's identity."""

    name: str
    description: str
    kind: ItemKind
    damage: int = 0
    effect: EffectId | None = None

    @property
    def is_consumable(self) -> bool:
        return self.kind is ItemKind.CONSUMABLE
