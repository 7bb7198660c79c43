"""Inventory, equipment and crafting services."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from static_decay.data.repositories import ItemsRepository, RecipesRepository
from static_decay.domain.defs import ItemDef, ItemKind, RecipeDef
from static_decay.domain.item_effects import apply_item_effect
from static_decay.domain.state import GameState

InventoryFailureReason = Literal[
    "inventory_empty",
    "not_in_inventory",
    "not_usable",
    "no_recipes",
    "invalid_recipe",
    "missing_ingredients",
]


@dataclass(slots=True)
class InventoryEntryView:
    name: str
    count: int
    description: str
    kind: ItemKind
    equipped: bool


@dataclass(slots=True)
class RecipeView:
    index: int
    result: str
    ingredients: str
    craftable: bool


@dataclass(slots=True)
class InventoryEvent:
    """Base class for inventory and crafting events."""


@dataclass(slots=True)
class ItemUsedEvent(InventoryEvent):
    item_name: str
    message: str


@dataclass(slots=True)
class WeaponEquippedEvent(InventoryEvent):
    item_name: str
    damage: int


@dataclass(slots=True)
class ItemCraftedEvent(InventoryEvent):
    recipe_id: str
    item_name: str


@dataclass(slots=True)
class InventoryActionFailedEvent(InventoryEvent):
    reason: InventoryFailureReason
    message: str


class InventoryService:
    """Service responsible for using, equipping and crafting items."""

    def __init__(self, items_repo: ItemsRepository, recipes_repo: RecipesRepository) -> None:
        self._items_repo = items_repo
        self._recipes_repo = recipes_repo

    # ------------------------------------------------------------------ Views
    def build_inventory_view(self, state: GameState) -> List[InventoryEntryView]:
        views: List[InventoryEntryView] = []
        for name, count in state.player.inventory.entries():
            item = self._items_repo.get(name)
            views.append(
                InventoryEntryView(
                    name=name,
                    count=count,
                    description=item.description,
                    kind=item.kind,
                    equipped=state.player.equipped_weapon == name,
                )
            )
        return views

    def build_recipe_views(self, state: GameState) -> List[RecipeView]:
        return [
            RecipeView(
                index=index,
                result=recipe.result,
                ingredients=recipe.describe_ingredients(),
                craftable=self.can_craft(state, recipe),
            )
            for index, recipe in enumerate(self._recipes_repo.all())
        ]

    def consumables(self, state: GameState) -> List[ItemDef]:
        """Return the consumable items the player currently holds."""
        held = (self._items_repo.get(name) for name, _ in state.player.inventory.entries())
        return [item for item in held if item.is_consumable]

    # ---------------------------------------------------------------- Actions
    def use_or_equip(self, state: GameState, item_name: str) -> List[InventoryEvent]:
        """Consume a consumable or equip a weapon picked by case-insensitive name."""
        player = state.player
        if player.inventory.is_empty():
            return [self._fail(state, "inventory_empty", "Your inventory is empty.")]

        held_name = player.inventory.find_name(item_name)
        if held_name is None:
            return [
                self._fail(state, "not_in_inventory", f"You don't have an item named '{item_name.strip()}'.")
            ]

        item = self._items_repo.get(held_name)
        if item.kind is ItemKind.CONSUMABLE:
            message = self.consume(state, item)
            return [ItemUsedEvent(item_name=item.name, message=message)]
        if item.kind is ItemKind.WEAPON:
            player.equipped_weapon = item.name
            state.log(f"You equipped the {item.name}.")
            return [WeaponEquippedEvent(item_name=item.name, damage=item.damage)]
        return [self._fail(state, "not_usable", f"You can't use or equip '{item.name}' in this way.")]

    def consume(self, state: GameState, item: ItemDef) -> str:
        """Remove one unit of a held consumable, apply its effect and log the result."""
        if item.effect is None:
            raise ValueError(f"Item '{item.name}' has no effect to apply.")
        if not state.player.remove_item(item.name):
            raise ValueError(f"Item '{item.name}' is not in the inventory.")
        message = apply_item_effect(state.player, item.effect)
        state.log(message)
        return message

    def has_recipes(self) -> bool:
        return bool(self._recipes_repo.all())

    def can_craft(self, state: GameState, recipe: RecipeDef) -> bool:
        inventory = state.player.inventory
        return all(inventory.count(name) >= count for name, count in recipe.ingredients.items())

    def craft(self, state: GameState, recipe_index: int) -> List[InventoryEvent]:
        """Craft the recipe at ``recipe_index``; ingredients are only taken once all are present."""
        recipes = self._recipes_repo.all()
        if not recipes:
            return [self._fail(state, "no_recipes", "There are no crafting recipes available.")]
        if not 0 <= recipe_index < len(recipes):
            return [self._fail(state, "invalid_recipe", "Invalid recipe number.")]

        recipe = recipes[recipe_index]
        if not self.can_craft(state, recipe):
            return [
                self._fail(
                    state,
                    "missing_ingredients",
                    f"You don't have the required ingredients for {recipe.result}.",
                )
            ]

        for name, count in recipe.ingredients.items():
            state.player.remove_item(name, count)
        state.player.add_item(recipe.result)
        state.log(f"You successfully crafted a {recipe.result}!")
        return [ItemCraftedEvent(recipe_id=recipe.recipe_id, item_name=recipe.result)]

    @staticmethod
    def _fail(state: GameState, reason: InventoryFailureReason, message: str) -> InventoryActionFailedEvent:
        state.log(message)
        return InventoryActionFailedEvent(reason=reason, message=message)
