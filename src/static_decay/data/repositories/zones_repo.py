"""Repository for the zone layouts that make up the story sequence."""
from __future__ import annotations

from typing import Dict, List, Tuple

from static_decay.data.errors import DataValidationError
from static_decay.data.repositories.base import RepositoryBase
from static_decay.data.repositories.items_repo import ItemsRepository
from static_decay.domain.defs import (
    CreatureSpawnDef,
    DoorDef,
    InteractableDef,
    InteractableKind,
    StoryDef,
    ZoneDef,
)
from static_decay.domain.entities import CreatureKind

_WALL = "#"


class ZonesRepository(RepositoryBase[ZoneDef]):
    """Loads zones in story order and validates their coordinates against the layout."""

    def __init__(self, base_path=None, *, items_repo: ItemsRepository | None = None) -> None:
        super().__init__("zones.json", base_path)
        self._items_repo = items_repo or ItemsRepository(base_path)

    def sequence(self) -> List[str]:
        """Return zone ids in the order the player travels through them."""
        return list(self._ensure_loaded().keys())

    def _build(self, raw: dict[str, object]) -> Dict[str, ZoneDef]:
        entries = self._require_list(raw.get("zones"), "zones.json.zones")
        if not entries:
            raise DataValidationError("zones.json must define at least one zone.")
        zones: Dict[str, ZoneDef] = {}
        for index, entry in enumerate(entries):
            zone_map = self._require_mapping(entry, f"zones[{index}]")
            zone_id = self._require_str(zone_map.get("id"), f"zones[{index}].id").strip()
            if not zone_id:
                raise DataValidationError(f"zones[{index}].id must not be empty.")
            if zone_id in zones:
                raise DataValidationError(f"Duplicate zone id '{zone_id}'.")
            zones[zone_id] = self._build_zone(zone_id, zone_map)
        return zones

    def _build_zone(self, zone_id: str, zone_map: dict[str, object]) -> ZoneDef:
        context = f"zone '{zone_id}'"
        self._assert_allowed_fields(
            zone_map,
            {"id", "name", "layout", "spawn", "entry_text"},
            {"creatures", "interactables", "story", "door", "drains_sanity"},
            context,
        )
        name = self._require_str(zone_map["name"], f"{context} name")
        layout = self._parse_layout(zone_map["layout"], context)
        width, height = len(layout[0]), len(layout)

        spawn = self._parse_position(zone_map["spawn"], f"{context} spawn")
        self._require_in_bounds(spawn, width, height, f"{context} spawn")
        if layout[spawn[1]][spawn[0]] == _WALL:
            raise DataValidationError(f"{context} spawn {spawn} is inside a wall.")

        creatures = self._parse_creatures(zone_map.get("creatures", []), layout, context)
        interactables = self._parse_interactables(zone_map.get("interactables", []), width, height, context)

        story = None
        if zone_map.get("story") is not None:
            story = self._parse_story(zone_map["story"], context)
        door = None
        if zone_map.get("door") is not None:
            door = self._parse_door(zone_map["door"], context)

        kinds = {interactable.kind for interactable in interactables}
        if InteractableKind.DOOR in kinds and door is None:
            raise DataValidationError(f"{context} places a door but defines no door settings.")
        if InteractableKind.STORY in kinds and story is None:
            raise DataValidationError(f"{context} places a story marker but defines no story.")

        drains_sanity = zone_map.get("drains_sanity", False)
        if not isinstance(drains_sanity, bool):
            raise DataValidationError(f"{context} drains_sanity must be a boolean.")

        return ZoneDef(
            id=zone_id,
            name=name,
            layout=layout,
            spawn=spawn,
            entry_text=self._require_str(zone_map["entry_text"], f"{context} entry_text"),
            creatures=creatures,
            interactables=interactables,
            story=story,
            door=door,
            drains_sanity=drains_sanity,
        )

    def _parse_layout(self, value: object, context: str) -> Tuple[str, ...]:
        rows = self._require_list(value, f"{context} layout")
        if not rows:
            raise DataValidationError(f"{context} layout must not be empty.")
        layout = tuple(self._require_str(row, f"{context} layout row") for row in rows)
        width = len(layout[0])
        if width == 0:
            raise DataValidationError(f"{context} layout rows must not be empty.")
        for row_index, row in enumerate(layout):
            if len(row) != width:
                raise DataValidationError(
                    f"{context} layout row {row_index} has width {len(row)}, expected {width}."
                )
        return layout

    def _parse_position(self, value: object, context: str) -> Tuple[int, int]:
        coords = self._require_list(value, context)
        if len(coords) != 2:
            raise DataValidationError(f"{context} must be an [x, y] pair.")
        return (self._require_int(coords[0], f"{context} x"), self._require_int(coords[1], f"{context} y"))

    @staticmethod
    def _require_in_bounds(position: Tuple[int, int], width: int, height: int, context: str) -> None:
        x, y = position
        if not (0 <= x < width and 0 <= y < height):
            raise DataValidationError(f"{context} {position} lies outside the {width}x{height} layout.")

    def _parse_creatures(
        self, value: object, layout: Tuple[str, ...], context: str
    ) -> Tuple[CreatureSpawnDef, ...]:
        width, height = len(layout[0]), len(layout)
        spawns: List[CreatureSpawnDef] = []
        occupied: set[Tuple[int, int]] = set()
        for index, entry in enumerate(self._require_list(value, f"{context} creatures")):
            entry_context = f"{context} creatures[{index}]"
            creature_map = self._require_mapping(entry, entry_context)
            self._assert_allowed_fields(creature_map, {"kind", "x", "y"}, set(), entry_context)
            kind = self._require_enum(CreatureKind, creature_map["kind"], f"{entry_context} kind")
            position = (
                self._require_int(creature_map["x"], f"{entry_context} x"),
                self._require_int(creature_map["y"], f"{entry_context} y"),
            )
            self._require_in_bounds(position, width, height, entry_context)
            if layout[position[1]][position[0]] == _WALL:
                raise DataValidationError(f"{entry_context} {position} is inside a wall.")
            if position in occupied:
                raise DataValidationError(f"{entry_context} shares tile {position} with another creature.")
            occupied.add(position)
            spawns.append(CreatureSpawnDef(kind=kind, x=position[0], y=position[1]))
        return tuple(spawns)

    def _parse_interactables(
        self, value: object, width: int, height: int, context: str
    ) -> Tuple[InteractableDef, ...]:
        interactables: List[InteractableDef] = []
        placed: set[Tuple[int, int]] = set()
        for index, entry in enumerate(self._require_list(value, f"{context} interactables")):
            entry_context = f"{context} interactables[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_allowed_fields(data, {"x", "y", "kind", "text"}, {"item"}, entry_context)
            position = (
                self._require_int(data["x"], f"{entry_context} x"),
                self._require_int(data["y"], f"{entry_context} y"),
            )
            self._require_in_bounds(position, width, height, entry_context)
            if position in placed:
                raise DataValidationError(f"{entry_context} shares tile {position} with another interactable.")
            placed.add(position)
            kind = self._require_enum(InteractableKind, data["kind"], f"{entry_context} kind")
            item = None
            if kind is InteractableKind.CACHE:
                item = self._items_repo.require_known(data.get("item"), f"{entry_context} item")
            elif "item" in data:
                raise DataValidationError(f"{entry_context} only caches may hold an item.")
            interactables.append(
                InteractableDef(
                    x=position[0],
                    y=position[1],
                    kind=kind,
                    text=self._require_str(data["text"], f"{entry_context} text"),
                    item=item,
                )
            )
        return tuple(interactables)

    def _parse_story(self, value: object, context: str) -> StoryDef:
        story_map = self._require_mapping(value, f"{context} story")
        self._assert_allowed_fields(story_map, {"text"}, {"grant", "grant_text"}, f"{context} story")
        grant = None
        grant_text = None
        if story_map.get("grant") is not None:
            grant = self._items_repo.require_known(story_map["grant"], f"{context} story grant")
            grant_text = self._require_str(story_map.get("grant_text"), f"{context} story grant_text")
        return StoryDef(
            text=self._require_str(story_map["text"], f"{context} story text"),
            grant=grant,
            grant_text=grant_text,
        )

    def _parse_door(self, value: object, context: str) -> DoorDef:
        door_map = self._require_mapping(value, f"{context} door")
        self._assert_allowed_fields(
            door_map, {"key_item", "opened_text", "locked_text"}, set(), f"{context} door"
        )
        return DoorDef(
            key_item=self._items_repo.require_known(door_map["key_item"], f"{context} door key_item"),
            opened_text=self._require_str(door_map["opened_text"], f"{context} door opened_text"),
            locked_text=self._require_str(door_map["locked_text"], f"{context} door locked_text"),
        )
