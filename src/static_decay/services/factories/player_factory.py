"""Factory for creating the player at a zone's spawn point."""
from __future__ import annotations

from static_decay.domain.defs import ZoneDef
from static_decay.domain.entities import Player


def create_player(zone_def: ZoneDef) -> Player:
    """Instantiate a healthy player with an empty inventory at the zone spawn."""
    x, y = zone_def.spawn
    return Player(x=x, y=y)
