"""Player inventory structure."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple


@dataclass(slots=True)
class Inventory:
    """Item name to count mapping that never keeps a zero count."""

    items: Dict[str, int] = field(default_factory=dict)

    def add(self, item_name: str, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        self.items[item_name] = self.items.get(item_name, 0) + quantity

    def remove(self, item_name: str, quantity: int = 1) -> bool:
        """Remove ``quantity`` units; return False and change nothing if too few are held."""
        if quantity <= 0:
            return True
        current = self.items.get(item_name, 0)
        if current < quantity:
            return False
        new_value = current - quantity
        if new_value == 0:
            self.items.pop(item_name, None)
        else:
            self.items[item_name] = new_value
        return True

    def count(self, item_name: str) -> int:
        return self.items.get(item_name, 0)

    def find_name(self, item_name: str) -> str | None:
        """Return the stored name matching ``item_name`` case-insensitively."""
        wanted = item_name.strip().casefold()
        for name in self.items:
            if name.casefold() == wanted:
                return name
        return None

    def has(self, item_name: str) -> bool:
        return self.find_name(item_name) is not None

    def is_empty(self) -> bool:
        return not self.items

    def entries(self) -> Iterator[Tuple[str, int]]:
        return iter(self.items.items())
