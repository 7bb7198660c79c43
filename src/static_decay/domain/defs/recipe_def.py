"""Crafting recipe definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class RecipeDef:
    """Maps ingredient names to required counts and names the crafted result."""

    recipe_id: str
    result: str
    ingredients: Dict[str, int] = field(default_factory=dict)

    def describe_ingredients(self) -> str:
        return ", ".join(f"{name} x{count}" for name, count in self.ingredients.items())
