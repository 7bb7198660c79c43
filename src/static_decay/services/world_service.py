"""Movement, creature turns, passive decay and zone transitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from static_decay.core.types import DIRECTION_DELTAS, Direction, Position
from static_decay.data.repositories import ZonesRepository
from static_decay.domain.defs import ZoneDef
from static_decay.domain.entities import Creature
from static_decay.domain.state import GameState
from static_decay.services.factories import create_zone_by_id, next_zone_id

MOVE_HUNGER_COST = 1
SANITY_DRAIN = 2
CREATURE_SIGHT_RANGE = 5


@dataclass(slots=True)
class WorldEvent:
    """Base class for world events."""


@dataclass(slots=True)
class PlayerMovedEvent(WorldEvent):
    x: int
    y: int
    starved: bool = False


@dataclass(slots=True)
class MoveBlockedEvent(WorldEvent):
    reason: Literal["edge", "wall"]


@dataclass(slots=True)
class CreatureEncounteredEvent(WorldEvent):
    creature: Creature


@dataclass(slots=True)
class CreatureMovedEvent(WorldEvent):
    creature_name: str
    from_position: Position
    to_position: Position


@dataclass(slots=True)
class ZoneEnteredEvent(WorldEvent):
    zone_id: str
    zone_name: str


@dataclass(slots=True)
class SanityDrainedEvent(WorldEvent):
    amount: int
    sanity: int


@dataclass(slots=True)
class PlayerSuccumbedEvent(WorldEvent):
    """The player ended a turn with no health left."""


class WorldService:
    """Owns movement rules, the creature pass and between-turn stat decay."""

    def __init__(self, zones_repo: ZonesRepository) -> None:
        self._zones_repo = zones_repo

    def zone_def(self, state: GameState) -> ZoneDef:
        return self._zones_repo.get(state.zone.zone_id)

    # ---------------------------------------------------------------- Movement
    def move(self, state: GameState, direction: Direction) -> List[WorldEvent]:
        """Try to step one tile; a creature on the target tile starts an encounter instead."""
        dx, dy = DIRECTION_DELTAS[direction]
        player = state.player
        zone = state.zone
        new_x, new_y = player.x + dx, player.y + dy

        if not zone.in_bounds(new_x, new_y):
            state.log("You can't go that way (edge of the world).")
            return [MoveBlockedEvent(reason="edge")]

        creature = zone.creature_at(new_x, new_y)
        if creature is not None:
            return [CreatureEncounteredEvent(creature=creature)]

        if zone.is_wall(new_x, new_y):
            state.log("A wall blocks your path.")
            return [MoveBlockedEvent(reason="wall")]

        player.move_to(new_x, new_y)
        starved = player.lose_hunger(MOVE_HUNGER_COST)
        if starved:
            state.log("You are starving! You lose 5 HP")
        zone.reveal_around(new_x, new_y)

        interactable = zone.interactable_at(new_x, new_y)
        if interactable is not None:
            state.log(f"You see something: {interactable.text}")
        return [PlayerMovedEvent(x=new_x, y=new_y, starved=starved)]

    # ----------------------------------------------------------- Creature pass
    def creature_turn(self, state: GameState) -> List[WorldEvent]:
        """Move every mobile creature within sight one greedy step toward the player."""
        events: List[WorldEvent] = []
        player = state.player
        zone = state.zone
        for creature in list(zone.creatures):
            if creature.is_stationary:
                continue
            distance = abs(creature.x - player.x) + abs(creature.y - player.y)
            if not 0 < distance < CREATURE_SIGHT_RANGE:
                continue

            dx = _step_toward(creature.x, player.x)
            dy = _step_toward(creature.y, player.y)
            origin = (creature.x, creature.y)
            if dx != 0 and self._can_step(state, creature, creature.x + dx, creature.y):
                creature.x += dx
            elif dy != 0 and self._can_step(state, creature, creature.x, creature.y + dy):
                creature.y += dy
            else:
                continue
            events.append(
                CreatureMovedEvent(
                    creature_name=creature.name,
                    from_position=origin,
                    to_position=(creature.x, creature.y),
                )
            )
        return events

    @staticmethod
    def _can_step(state: GameState, creature: Creature, x: int, y: int) -> bool:
        zone = state.zone
        if zone.is_wall(x, y):
            return False
        if (x, y) == state.player.position:
            return False
        occupant = zone.creature_at(x, y)
        return occupant is None or occupant is creature

    # ------------------------------------------------------------------- Decay
    def apply_decay(self, state: GameState) -> List[WorldEvent]:
        """Between-turn upkeep: the final health check, then zone sanity drain."""
        player = state.player
        if not player.is_alive:
            if state.finish("lost"):
                state.log("Your wounds are too severe. You succumb to the darkness.")
            return [PlayerSuccumbedEvent()]

        if not self.zone_def(state).drains_sanity or player.sanity <= 0:
            return []
        state.log("The oppressive atmosphere wears on your mind.")
        player.lose_sanity(SANITY_DRAIN)
        if player.sanity == 0:
            state.log("Your mind shatters under the strain!")
        return [SanityDrainedEvent(amount=SANITY_DRAIN, sanity=player.sanity)]

    # ------------------------------------------------------------ Transitions
    def enter_zone(self, state: GameState, zone_id: str) -> List[WorldEvent]:
        """Discard the current zone and place the player at the new zone's spawn."""
        state.zone = create_zone_by_id(zone_id, self._zones_repo)
        zone_def = self._zones_repo.get(zone_id)
        spawn_x, spawn_y = zone_def.spawn
        state.player.move_to(spawn_x, spawn_y)
        state.zone.reveal_around(spawn_x, spawn_y)
        state.log(zone_def.entry_text)
        return [ZoneEnteredEvent(zone_id=zone_def.id, zone_name=zone_def.name)]

    def next_zone_id(self, state: GameState) -> str | None:
        return next_zone_id(self._zones_repo, state.zone.zone_id)


def _step_toward(origin: int, target: int) -> int:
    if target < origin:
        return -1
    if target > origin:
        return 1
    return 0
