"""Runtime zone model: static grid plus mutable overlays."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from static_decay.core.types import Position
from static_decay.domain.defs import InteractableKind
from static_decay.domain.entities import Creature, CreatureKind

FLOOR = "."
WALL = "#"


@dataclass(slots=True)
class Interactable:
    """Structured interactable record: a type tag plus its text."""

    kind: InteractableKind
    text: str
    item: str | None = None


@dataclass(slots=True)
class GameZone:
    """One discrete map area with its own grid, creatures and interactables."""

    zone_id: str
    name: str
    width: int
    height: int
    tiles: List[List[str]]
    creatures: List[Creature] = field(default_factory=list)
    interactables: Dict[Position, Interactable] = field(default_factory=dict)
    visited: List[List[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.visited:
            self.visited = [[False] * self.width for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> str:
        """Return the tile symbol; anything off the grid reads as a wall."""
        if self.in_bounds(x, y):
            return self.tiles[y][x]
        return WALL

    def is_wall(self, x: int, y: int) -> bool:
        return self.get_tile(x, y) == WALL

    def is_visited(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.visited[y][x]

    def mark_visited(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            self.visited[y][x] = True

    def reveal_around(self, x: int, y: int, radius: int = 1) -> None:
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                self.mark_visited(x + dx, y + dy)

    def creature_at(self, x: int, y: int) -> Creature | None:
        for creature in self.creatures:
            if creature.x == x and creature.y == y:
                return creature
        return None

    def interactable_at(self, x: int, y: int) -> Interactable | None:
        return self.interactables.get((x, y))

    def remove_interactable(self, x: int, y: int) -> None:
        """Drop the interactable and leave a passable tile behind."""
        if not self.in_bounds(x, y):
            return
        self.interactables.pop((x, y), None)
        self.tiles[y][x] = FLOOR

    def remove_creature(self, creature: Creature) -> None:
        self.creatures = [other for other in self.creatures if other is not creature]

    def has_anomaly(self) -> bool:
        return any(creature.kind is CreatureKind.ANOMALY for creature in self.creatures)
