"""Domain definition exports."""

from .effect_def import EffectId
from .item_def import ItemDef, ItemKind
from .recipe_def import RecipeDef
from .zone_def import (
    CreatureSpawnDef,
    DoorDef,
    InteractableDef,
    InteractableKind,
    StoryDef,
    ZoneDef,
)

__all__ = [
    "CreatureSpawnDef",
    "DoorDef",
    "EffectId",
    "InteractableDef",
    "InteractableKind",
    "ItemDef",
    "ItemKind",
    "RecipeDef",
    "StoryDef",
    "ZoneDef",
]
