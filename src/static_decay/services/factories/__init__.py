"""Factory helpers for runtime entities."""

from .player_factory import create_player
from .zone_factory import create_zone, create_zone_by_id, first_zone_id, next_zone_id

__all__ = [
    "create_player",
    "create_zone",
    "create_zone_by_id",
    "first_zone_id",
    "next_zone_id",
]
