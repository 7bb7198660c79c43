"""Repository exports."""

from .items_repo import ItemsRepository
from .recipes_repo import RecipesRepository
from .zones_repo import ZonesRepository

__all__ = [
    "ItemsRepository",
    "RecipesRepository",
    "ZonesRepository",
]
