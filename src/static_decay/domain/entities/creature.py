"""Creature runtime models and their fixed archetypes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CreatureKind(Enum):
    """Closed set of creature variants."""

    ANOMALY = "anomaly"
    SHAMBLER = "shambler"
    STALKER = "stalker"
    WHISPERER = "whisperer"


@dataclass(frozen=True, slots=True)
class CreatureArchetype:
    """Fixed base stats shared by every creature of a kind."""

    name: str
    max_hp: int
    attack: int
    sanity_damage: int = 0


ARCHETYPES: dict[CreatureKind, CreatureArchetype] = {
    CreatureKind.ANOMALY: CreatureArchetype(name="Anomaly", max_hp=200, attack=0),
    CreatureKind.SHAMBLER: CreatureArchetype(name="Shambler", max_hp=30, attack=10),
    CreatureKind.STALKER: CreatureArchetype(name="Stalker", max_hp=50, attack=15),
    CreatureKind.WHISPERER: CreatureArchetype(name="Whisperer", max_hp=20, attack=5, sanity_damage=20),
}


@dataclass(slots=True, eq=False)
class Creature:
    """A creature placed in a zone. Compared by identity, not by value."""

    kind: CreatureKind
    x: int
    y: int
    hp: int | None = None

    def __post_init__(self) -> None:
        max_hp = self.archetype.max_hp
        self.hp = max_hp if self.hp is None else max(0, min(max_hp, self.hp))

    @property
    def archetype(self) -> CreatureArchetype:
        return ARCHETYPES[self.kind]

    @property
    def name(self) -> str:
        return self.archetype.name

    @property
    def attack(self) -> int:
        return self.archetype.attack

    @property
    def sanity_damage(self) -> int:
        return self.archetype.sanity_damage

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def is_stationary(self) -> bool:
        match self.kind:
            case CreatureKind.ANOMALY:
                return True
            case CreatureKind.SHAMBLER | CreatureKind.STALKER | CreatureKind.WHISPERER:
                return False

    @property
    def map_symbol(self) -> str:
        match self.kind:
            case CreatureKind.ANOMALY:
                return "A"
            case _:
                return "M"

    def take_damage(self, amount: int) -> None:
        self.hp = max(0, self.hp - amount)
