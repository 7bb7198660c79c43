"""Runtime entity exports."""

from .creature import ARCHETYPES, Creature, CreatureArchetype, CreatureKind
from .player import STAT_MAX, Player

__all__ = [
    "ARCHETYPES",
    "Creature",
    "CreatureArchetype",
    "CreatureKind",
    "Player",
    "STAT_MAX",
]
