"""Service layer exports."""

from .combat_service import CombatService
from .errors import FactoryError
from .game_service import GameService, GameView
from .interaction_service import InteractionService
from .inventory_service import InventoryService
from .world_service import WorldService
from .controllers import CombatAction, PlayerAction, TurnController, TurnResult

__all__ = [
    "CombatAction",
    "CombatService",
    "FactoryError",
    "GameService",
    "GameView",
    "InteractionService",
    "InventoryService",
    "PlayerAction",
    "TurnController",
    "TurnResult",
    "WorldService",
]
