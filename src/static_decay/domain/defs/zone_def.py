"""Zone content definitions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from static_decay.core.types import Position
from static_decay.domain.entities import CreatureKind


class InteractableKind(Enum):
    """Type tag of a fixed-position object the player can inspect."""

    CONTAINER = "container"
    STORY = "story"
    DOOR = "door"
    ENDGAME = "endgame"
    CACHE = "cache"


@dataclass(frozen=True, slots=True)
class InteractableDef:
    """Placement of an interactable inside a zone layout."""

    x: int
    y: int
    kind: InteractableKind
    text: str
    item: str | None = None


@dataclass(frozen=True, slots=True)
class CreatureSpawnDef:
    """Creature placement inside a zone layout."""

    kind: CreatureKind
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class StoryDef:
    """Flavor text read at a zone's story marker, plus an optional found item."""

    text: str
    grant: str | None = None
    grant_text: str | None = None


@dataclass(frozen=True, slots=True)
class DoorDef:
    """Exit of a zone toward the next one in the sequence."""

    key_item: str
    opened_text: str
    locked_text: str


@dataclass(frozen=True, slots=True)
class ZoneDef:
    """Static description of one story beat's map."""

    id: str
    name: str
    layout: Tuple[str, ...]
    spawn: Position
    entry_text: str
    creatures: Tuple[CreatureSpawnDef, ...] = ()
    interactables: Tuple[InteractableDef, ...] = ()
    story: StoryDef | None = None
    door: DoorDef | None = None
    drains_sanity: bool = False

    @property
    def width(self) -> int:
        return len(self.layout[0]) if self.layout else 0

    @property
    def height(self) -> int:
        return len(self.layout)
