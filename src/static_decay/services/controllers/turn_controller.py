"""UI-agnostic turn controller that sequences one full game turn."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from static_decay.core.types import Direction
from static_decay.domain.state import GameState
from static_decay.services.combat_service import CombatEndedEvent, CombatService
from static_decay.services.interaction_service import InteractionService
from static_decay.services.inventory_service import InventoryService
from static_decay.services.world_service import CreatureEncounteredEvent, WorldService

ActionType = Literal["move", "inventory", "craft", "look", "quit", "empty", "invalid"]
CombatActionType = Literal["attack", "item", "run", "empty", "invalid"]

_MOVE_KEYS: dict[str, Direction] = {"W": "north", "A": "west", "S": "south", "D": "east"}
_ACTION_KEYS: dict[str, ActionType] = {"I": "inventory", "C": "craft", "L": "look", "Q": "quit"}
_COMBAT_KEYS: dict[str, CombatActionType] = {"A": "attack", "I": "item", "R": "run"}


@dataclass(slots=True)
class PlayerAction:
    """Structured decision for one turn.

    ``item_name`` and ``recipe_index`` carry the sub-prompt selection for the
    inventory and craft actions; ``None`` means the player backed out.
    """

    action_type: ActionType
    direction: Direction | None = None
    item_name: str | None = None
    recipe_index: int | None = None


@dataclass(slots=True)
class CombatAction:
    action_type: CombatActionType
    item_name: str | None = None


@dataclass(slots=True)
class TurnResult:
    """Events produced while resolving input, and whether the turn has closed."""

    events: List[object] = field(default_factory=list)
    turn_complete: bool = False


def parse_command(raw: str) -> PlayerAction:
    """Map a typed command onto an action using its first character."""
    token = raw.strip().upper()
    if not token:
        return PlayerAction(action_type="empty")
    key = token[0]
    if key in _MOVE_KEYS:
        return PlayerAction(action_type="move", direction=_MOVE_KEYS[key])
    return PlayerAction(action_type=_ACTION_KEYS.get(key, "invalid"))


def parse_combat_command(raw: str) -> CombatAction:
    token = raw.strip().upper()
    if not token:
        return CombatAction(action_type="empty")
    return CombatAction(action_type=_COMBAT_KEYS.get(token[0], "invalid"))


class TurnController:
    """
    Drives the turn state machine: player action, optional combat, creature pass, decay.

    A turn that starts an encounter stays open until the encounter is over; the
    creature pass and decay then run once, unless the game has ended.
    """

    def __init__(
        self,
        world_service: WorldService,
        interaction_service: InteractionService,
        inventory_service: InventoryService,
        combat_service: CombatService,
    ) -> None:
        self._world = world_service
        self._interaction = interaction_service
        self._inventory = inventory_service
        self._combat = combat_service

    def take_turn(self, state: GameState, action: PlayerAction) -> TurnResult:
        if state.game_over:
            raise ValueError("The game is over; no further turns can be taken.")
        if state.in_combat:
            raise ValueError("Finish the current combat before taking another action.")

        events: List[object] = []
        if action.action_type == "move":
            if action.direction is None:
                raise ValueError("Move action requires a direction.")
            world_events = self._world.move(state, action.direction)
            events.extend(world_events)
            encounter = next(
                (event for event in world_events if isinstance(event, CreatureEncounteredEvent)), None
            )
            if encounter is not None:
                events.extend(self._combat.start_combat(state, encounter.creature))
                return TurnResult(events=events, turn_complete=False)
        elif action.action_type == "inventory":
            events.extend(self._handle_inventory(state, action.item_name))
        elif action.action_type == "craft":
            events.extend(self._handle_craft(state, action.recipe_index))
        elif action.action_type == "look":
            events.extend(self._interaction.look(state))
        elif action.action_type == "quit":
            state.log("You give up hope.")
            state.finish("quit")
        elif action.action_type == "empty":
            state.log("No command entered.")
        else:
            state.log("Invalid command.")

        events.extend(self._close_turn(state))
        return TurnResult(events=events, turn_complete=True)

    def take_combat_action(self, state: GameState, action: CombatAction) -> TurnResult:
        if not state.in_combat:
            raise ValueError("No combat in progress.")

        if action.action_type == "attack":
            events: List[object] = list(self._combat.attack(state))
        elif action.action_type == "item":
            events = list(self._combat.use_item(state, action.item_name))
        elif action.action_type == "run":
            events = list(self._combat.run(state))
        else:
            events = list(self._combat.invalid_action(state, empty=action.action_type == "empty"))

        if not any(isinstance(event, CombatEndedEvent) for event in events):
            return TurnResult(events=events, turn_complete=False)

        state.combat = None
        events.extend(self._close_turn(state))
        return TurnResult(events=events, turn_complete=True)

    def _handle_inventory(self, state: GameState, item_name: str | None) -> List[object]:
        if state.player.inventory.is_empty():
            state.log("Your inventory is empty.")
            return []
        if item_name is None or not item_name.strip():
            return []
        return list(self._inventory.use_or_equip(state, item_name))

    def _handle_craft(self, state: GameState, recipe_index: int | None) -> List[object]:
        if not self._inventory.has_recipes():
            state.log("There are no crafting recipes available.")
            return []
        if recipe_index is None:
            return []
        return list(self._inventory.craft(state, recipe_index))

    def _close_turn(self, state: GameState) -> List[object]:
        events: List[object] = []
        if not state.game_over:
            events.extend(self._world.creature_turn(state))
            events.extend(self._world.apply_decay(state))
        state.turn += 1
        return events
