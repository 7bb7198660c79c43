"""Crafting recipes repository."""
from __future__ import annotations

from typing import Dict

from static_decay.data.errors import DataValidationError
from static_decay.data.repositories.base import RepositoryBase
from static_decay.data.repositories.items_repo import ItemsRepository
from static_decay.domain.defs import RecipeDef


class RecipesRepository(RepositoryBase[RecipeDef]):
    """Loads recipes in their declared order and checks they name known items."""

    def __init__(self, base_path=None, *, items_repo: ItemsRepository | None = None) -> None:
        super().__init__("recipes.json", base_path)
        self._items_repo = items_repo or ItemsRepository(base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RecipeDef]:
        entries = self._require_list(raw.get("recipes"), "recipes.json.recipes")
        recipes: Dict[str, RecipeDef] = {}
        for index, entry in enumerate(entries):
            context = f"recipes[{index}]"
            recipe_map = self._require_mapping(entry, context)
            self._assert_allowed_fields(recipe_map, {"id", "result", "ingredients"}, set(), context)
            recipe_id = self._require_str(recipe_map["id"], f"{context} id").strip()
            if not recipe_id:
                raise DataValidationError(f"{context} id must not be empty.")
            if recipe_id in recipes:
                raise DataValidationError(f"Duplicate recipe id '{recipe_id}'.")

            result = self._items_repo.require_known(recipe_map["result"], f"recipe '{recipe_id}' result")
            raw_ingredients = self._require_mapping(recipe_map["ingredients"], f"recipe '{recipe_id}' ingredients")
            if not raw_ingredients:
                raise DataValidationError(f"recipe '{recipe_id}' must list at least one ingredient.")
            ingredients: Dict[str, int] = {}
            for ingredient, count in raw_ingredients.items():
                name = self._items_repo.require_known(ingredient, f"recipe '{recipe_id}' ingredient")
                amount = self._require_int(count, f"recipe '{recipe_id}' ingredient '{name}' count")
                if amount <= 0:
                    raise DataValidationError(f"recipe '{recipe_id}' ingredient '{name}' count must be positive.")
                ingredients[name] = amount

            recipes[recipe_id] = RecipeDef(recipe_id=recipe_id, result=result, ingredients=ingredients)
        return recipes
