"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field

from static_decay.domain.inventory import Inventory

STAT_MAX = 100
STARVATION_DAMAGE = 5


def _clamp(value: int) -> int:
    return max(0, min(STAT_MAX, value))


@dataclass(slots=True)
class Player:
    """The survivor: three depleting resources, a position and an inventory."""

    x: int
    y: int
    hp: int = STAT_MAX
    hunger: int = STAT_MAX
    sanity: int = STAT_MAX
    inventory: Inventory = field(default_factory=Inventory)
    equipped_weapon: str | None = None

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def take_damage(self, amount: int) -> None:
        self.hp = _clamp(self.hp - amount)

    def heal(self, amount: int) -> None:
        self.hp = _clamp(self.hp + amount)

    def eat(self, amount: int) -> None:
        self.hunger = _clamp(self.hunger + amount)

    def lose_hunger(self, amount: int) -> bool:
        """Drain hunger; return True when the drain went below zero and starvation hurt."""
        remaining = self.hunger - amount
        if remaining < 0:
            self.hunger = 0
            self.take_damage(STARVATION_DAMAGE)
            return True
        self.hunger = _clamp(remaining)
        return False

    def lose_sanity(self, amount: int) -> None:
        self.sanity = _clamp(self.sanity - amount)

    def gain_sanity(self, amount: int) -> None:
        self.sanity = _clamp(self.sanity + amount)

    def add_item(self, item_name: str, count: int = 1) -> None:
        self.inventory.add(item_name, count)

    def remove_item(self, item_name: str, count: int = 1) -> bool:
        return self.inventory.remove(item_name, count)

    def has_item(self, item_name: str) -> bool:
        return self.inventory.has(item_name)
