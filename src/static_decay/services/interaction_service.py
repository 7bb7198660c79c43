"""Look/interact handling for the interactable on the player's tile."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from static_decay.data.repositories import ItemsRepository
from static_decay.domain.defs import InteractableKind
from static_decay.domain.state import GameState
from static_decay.domain.zone import Interactable
from static_decay.services.world_service import WorldEvent, WorldService

# Indexed by a roll of 0-4; the last slot is the empty search.
CONTAINER_FINDS: Tuple[Tuple[str, str], ...] = (
    ("Canned Food", "You found canned food!"),
    ("Dirty Rags", "You found some dirty rags!"),
    ("Scrap Metal", "You found scrap metal!"),
    ("Chemicals", "You found chemicals!"),
)
CONTAINER_ROLL_MAX = 4

VICTORY_TEXT = (
    "With the Anomaly gone, you approach the console. You find enough working parts to send a "
    "simple, repeating message: ...'is anyone out there? We are alive. We are at...' You give the "
    "coordinates. You've done it. You've sent a message of hope into the static."
)
SHIELDED_TEXT = "The broadcast equipment is shielded by a strange psychic energy. You can't get close!"


@dataclass(slots=True)
class InteractionEvent:
    """Base class for look/interact events."""


@dataclass(slots=True)
class NothingHereEvent(InteractionEvent):
    pass


@dataclass(slots=True)
class ItemFoundEvent(InteractionEvent):
    item_name: str
    source: InteractableKind


@dataclass(slots=True)
class ContainerEmptyEvent(InteractionEvent):
    pass


@dataclass(slots=True)
class StoryReadEvent(InteractionEvent):
    zone_id: str
    text: str


@dataclass(slots=True)
class DoorOpenedEvent(InteractionEvent):
    from_zone_id: str
    to_zone_id: str
    world_events: List[WorldEvent] = field(default_factory=list)


@dataclass(slots=True)
class DoorLockedEvent(InteractionEvent):
    key_item: str | None


@dataclass(slots=True)
class EndgameEvent(InteractionEvent):
    success: bool


class InteractionService:
    """Dispatches on the interactable's type tag at the player's position."""

    def __init__(self, items_repo: ItemsRepository, world_service: WorldService) -> None:
        self._items_repo = items_repo
        self._world_service = world_service

    def look(self, state: GameState) -> List[InteractionEvent]:
        player = state.player
        interactable = state.zone.interactable_at(player.x, player.y)
        if interactable is None:
            state.log("There's nothing interesting here.")
            return [NothingHereEvent()]

        state.log(interactable.text)
        if interactable.kind is InteractableKind.CONTAINER:
            return self._search_container(state, interactable)
        if interactable.kind is InteractableKind.STORY:
            return self._read_story(state)
        if interactable.kind is InteractableKind.DOOR:
            return self._open_door(state)
        if interactable.kind is InteractableKind.ENDGAME:
            return self._use_endgame(state)
        if interactable.kind is InteractableKind.CACHE:
            return self._take_cache(state, interactable)
        state.log(f"You examine the {_object_name(interactable.text)}, but nothing happens.")
        return [NothingHereEvent()]

    def _search_container(self, state: GameState, interactable: Interactable) -> List[InteractionEvent]:
        state.log(f"You search the {_object_name(interactable.text)}...")
        roll = state.rng.randint(0, CONTAINER_ROLL_MAX)
        events: List[InteractionEvent] = []
        if roll < len(CONTAINER_FINDS):
            item_name, message = CONTAINER_FINDS[roll]
            state.player.add_item(self._items_repo.get(item_name).name)
            state.log(message)
            events.append(ItemFoundEvent(item_name=item_name, source=InteractableKind.CONTAINER))
        else:
            state.log("...it's empty.")
            events.append(ContainerEmptyEvent())
        state.zone.remove_interactable(state.player.x, state.player.y)
        return events

    def _read_story(self, state: GameState) -> List[InteractionEvent]:
        story = self._world_service.zone_def(state).story
        events: List[InteractionEvent] = []
        if story is not None:
            state.log(story.text)
            events.append(StoryReadEvent(zone_id=state.zone.zone_id, text=story.text))
            if story.grant is not None:
                state.player.add_item(story.grant)
                if story.grant_text:
                    state.log(story.grant_text)
                events.append(ItemFoundEvent(item_name=story.grant, source=InteractableKind.STORY))
        state.zone.remove_interactable(state.player.x, state.player.y)
        return events

    def _open_door(self, state: GameState) -> List[InteractionEvent]:
        door = self._world_service.zone_def(state).door
        next_zone_id = self._world_service.next_zone_id(state)
        if door is None or next_zone_id is None:
            state.log("It won't budge.")
            return [DoorLockedEvent(key_item=None)]
        if not state.player.has_item(door.key_item):
            state.log(door.locked_text)
            return [DoorLockedEvent(key_item=door.key_item)]

        from_zone_id = state.zone.zone_id
        state.log(door.opened_text)
        world_events = self._world_service.enter_zone(state, next_zone_id)
        return [DoorOpenedEvent(from_zone_id=from_zone_id, to_zone_id=next_zone_id, world_events=world_events)]

    def _use_endgame(self, state: GameState) -> List[InteractionEvent]:
        if state.zone.has_anomaly():
            state.log(SHIELDED_TEXT)
            return [EndgameEvent(success=False)]
        state.log(VICTORY_TEXT)
        state.finish("won")
        return [EndgameEvent(success=True)]

    def _take_cache(self, state: GameState, interactable: Interactable) -> List[InteractionEvent]:
        events: List[InteractionEvent] = []
        if interactable.item is not None:
            state.player.add_item(interactable.item)
            state.log(f"You take the {interactable.item}.")
            events.append(ItemFoundEvent(item_name=interactable.item, source=InteractableKind.CACHE))
        state.zone.remove_interactable(state.player.x, state.player.y)
        return events


def _object_name(text: str) -> str:
    """'A rusted locker.' -> 'rusted locker'."""
    name = text.strip().rstrip(".").lower()
    for article in ("a ", "an ", "the "):
        if name.startswith(article):
            return name[len(article):]
    return name
