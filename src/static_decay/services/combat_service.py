"""Combat service resolving one player-versus-creature encounter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from static_decay.data.repositories import ItemsRepository
from static_decay.domain.combat_models import CombatOutcome, CombatPhase, CombatState
from static_decay.domain.defs import ItemDef
from static_decay.domain.entities import Creature
from static_decay.domain.state import GameState
from static_decay.services.inventory_service import InventoryService

BASE_DAMAGE = 5
ESCAPE_CHANCE = 40


@dataclass(slots=True)
class CombatView:
    """Presentation view for the current encounter."""

    creature_name: str
    creature_hp: int
    creature_max_hp: int
    player_hp: int
    rounds: int
    usable_items: List[str]


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class CombatStartedEvent(CombatEvent):
    creature_name: str


@dataclass(slots=True)
class PlayerAttackEvent(CombatEvent):
    damage: int
    creature_hp: int


@dataclass(slots=True)
class CombatItemUsedEvent(CombatEvent):
    item_name: str
    message: str


@dataclass(slots=True)
class EscapeAttemptEvent(CombatEvent):
    success: bool


@dataclass(slots=True)
class CreatureAttackEvent(CombatEvent):
    creature_name: str
    damage: int
    sanity_damage: int
    player_hp: int
    player_sanity: int


@dataclass(slots=True)
class CombatActionSkippedEvent(CombatEvent):
    """The player's choice did not use up the round."""

    reason: str


@dataclass(slots=True)
class CombatEndedEvent(CombatEvent):
    outcome: CombatOutcome
    creature_name: str


class CombatService:
    """Turn-by-turn resolver: the player acts, then a surviving creature reacts."""

    def __init__(self, items_repo: ItemsRepository, inventory_service: InventoryService) -> None:
        self._items_repo = items_repo
        self._inventory_service = inventory_service

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_combat(self, state: GameState, creature: Creature) -> List[CombatEvent]:
        state.combat = CombatState(creature=creature)
        state.log(f"You encounter a {creature.name}!")
        return [CombatStartedEvent(creature_name=creature.name)]

    def get_combat_view(self, state: GameState) -> CombatView:
        combat = self._require_combat(state)
        creature = combat.creature
        return CombatView(
            creature_name=creature.name,
            creature_hp=creature.hp,
            creature_max_hp=creature.archetype.max_hp,
            player_hp=state.player.hp,
            rounds=combat.rounds,
            usable_items=[item.name for item in self.usable_items(state)],
        )

    def usable_items(self, state: GameState) -> List[ItemDef]:
        return self._inventory_service.consumables(state)

    # -----------------------
    # Player Actions
    # -----------------------
    def attack(self, state: GameState) -> List[CombatEvent]:
        combat = self._begin_action(state)
        weapon = self._equipped_weapon(state)
        damage = weapon.damage if weapon is not None else BASE_DAMAGE
        creature = combat.creature
        creature.take_damage(damage)
        state.log(f"You attack the {creature.name} for {damage} damage.")
        events: List[CombatEvent] = [PlayerAttackEvent(damage=damage, creature_hp=creature.hp)]
        return events + self._finish_round(state, combat)

    def use_item(self, state: GameState, item_name: str | None) -> List[CombatEvent]:
        """Use a consumable by name; ``None`` cancels without spending the round."""
        combat = self._begin_action(state)
        consumables = self.usable_items(state)
        if not consumables:
            return self._skip(state, combat, "no_items", "You have no consumable items to use in combat.")
        if item_name is None or not item_name.strip():
            return self._skip(state, combat, "cancelled", "Cancelled using item.")

        wanted = item_name.strip().casefold()
        item = next((candidate for candidate in consumables if candidate.name.casefold() == wanted), None)
        if item is None:
            return self._skip(state, combat, "unknown_item", "Invalid item or you don't have it.")

        message = self._inventory_service.consume(state, item)
        events: List[CombatEvent] = [CombatItemUsedEvent(item_name=item.name, message=message)]
        return events + self._finish_round(state, combat)

    def run(self, state: GameState) -> List[CombatEvent]:
        combat = self._begin_action(state)
        if state.rng.chance(ESCAPE_CHANCE):
            state.log("You successfully escaped!")
            combat.phase = CombatPhase.OVER
            combat.outcome = CombatOutcome.ESCAPED
            combat.rounds += 1
            return [
                EscapeAttemptEvent(success=True),
                CombatEndedEvent(outcome=CombatOutcome.ESCAPED, creature_name=combat.creature.name),
            ]
        state.log("You failed to escape!")
        events: List[CombatEvent] = [EscapeAttemptEvent(success=False)]
        return events + self._finish_round(state, combat)

    def invalid_action(self, state: GameState, empty: bool = False) -> List[CombatEvent]:
        combat = self._begin_action(state)
        if empty:
            return self._skip(state, combat, "no_action", "No action taken.")
        return self._skip(state, combat, "invalid_action", "Invalid combat action.")

    # -----------------------
    # Round Resolution
    # -----------------------
    def _finish_round(self, state: GameState, combat: CombatState) -> List[CombatEvent]:
        events: List[CombatEvent] = []
        combat.rounds += 1
        creature = combat.creature
        if creature.is_alive:
            combat.phase = CombatPhase.CREATURE_REACTS
            events.append(self._creature_reacts(state, creature))
        return events + self._check_outcome(state, combat)

    def _creature_reacts(self, state: GameState, creature: Creature) -> CreatureAttackEvent:
        player = state.player
        if creature.sanity_damage > 0:
            player.lose_sanity(creature.sanity_damage)
            state.log(
                f"The {creature.name}'s whispers echo in your mind! You lose {creature.sanity_damage} sanity."
            )
        if creature.attack > 0:
            player.take_damage(creature.attack)
            state.log(f"The {creature.name} attacks you for {creature.attack} damage.")
        return CreatureAttackEvent(
            creature_name=creature.name,
            damage=creature.attack,
            sanity_damage=creature.sanity_damage,
            player_hp=player.hp,
            player_sanity=player.sanity,
        )

    def _check_outcome(self, state: GameState, combat: CombatState) -> List[CombatEvent]:
        creature = combat.creature
        outcome: CombatOutcome | None = None
        if not state.player.is_alive:
            outcome = CombatOutcome.PLAYER_DEFEATED
            state.log(f"You have been defeated by the {creature.name}!")
            state.finish("lost")
        elif not creature.is_alive:
            outcome = CombatOutcome.CREATURE_DEFEATED
            state.zone.remove_creature(creature)
            if not state.game_over:
                state.log(f"You defeated the {creature.name}!")

        if outcome is None:
            combat.phase = CombatPhase.CHOOSING_ACTION
            return []
        combat.phase = CombatPhase.OVER
        combat.outcome = outcome
        return [CombatEndedEvent(outcome=outcome, creature_name=creature.name)]

    def _skip(self, state: GameState, combat: CombatState, reason: str, message: str) -> List[CombatEvent]:
        state.log(message)
        combat.phase = CombatPhase.CHOOSING_ACTION
        return [CombatActionSkippedEvent(reason=reason)]

    def _begin_action(self, state: GameState) -> CombatState:
        combat = self._require_combat(state)
        if combat.is_over:
            raise ValueError("Combat is already over.")
        combat.phase = CombatPhase.RESOLVING_PLAYER_ACTION
        return combat

    @staticmethod
    def _require_combat(state: GameState) -> CombatState:
        if state.combat is None:
            raise ValueError("No combat in progress.")
        return state.combat

    def _equipped_weapon(self, state: GameState) -> ItemDef | None:
        name = state.player.equipped_weapon
        if name is None:
            return None
        return self._items_repo.get(name)
