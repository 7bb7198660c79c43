"""Factory for turning zone definitions into runtime zones."""
from __future__ import annotations

from static_decay.data.repositories import ZonesRepository
from static_decay.domain.defs import ZoneDef
from static_decay.domain.entities import Creature
from static_decay.domain.zone import GameZone, Interactable
from static_decay.services.errors import FactoryError


def create_zone(zone_def: ZoneDef) -> GameZone:
    """Build a fresh, unvisited zone with its creatures and interactables."""
    creatures = [Creature(kind=spawn.kind, x=spawn.x, y=spawn.y) for spawn in zone_def.creatures]
    interactables = {
        (placed.x, placed.y): Interactable(kind=placed.kind, text=placed.text, item=placed.item)
        for placed in zone_def.interactables
    }
    return GameZone(
        zone_id=zone_def.id,
        name=zone_def.name,
        width=zone_def.width,
        height=zone_def.height,
        tiles=[list(row) for row in zone_def.layout],
        creatures=creatures,
        interactables=interactables,
    )


def create_zone_by_id(zone_id: str, zones_repo: ZonesRepository) -> GameZone:
    try:
        zone_def = zones_repo.get(zone_id)
    except KeyError as exc:
        raise FactoryError(f"Zone '{zone_id}' not found.") from exc
    return create_zone(zone_def)


def first_zone_id(zones_repo: ZonesRepository) -> str:
    sequence = zones_repo.sequence()
    if not sequence:
        raise FactoryError("No zones are defined.")
    return sequence[0]


def next_zone_id(zones_repo: ZonesRepository, zone_id: str) -> str | None:
    """Return the zone that follows ``zone_id`` in the story, or None at the end."""
    sequence = zones_repo.sequence()
    try:
        index = sequence.index(zone_id)
    except ValueError as exc:
        raise FactoryError(f"Zone '{zone_id}' is not part of the zone sequence.") from exc
    if index + 1 >= len(sequence):
        return None
    return sequence[index + 1]
