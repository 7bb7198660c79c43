"""Combat domain models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from static_decay.domain.entities import Creature


class CombatPhase(Enum):
    """Where an encounter currently is within its round."""

    CHOOSING_ACTION = "choosing_action"
    RESOLVING_PLAYER_ACTION = "resolving_player_action"
    CREATURE_REACTS = "creature_reacts"
    OVER = "over"


class CombatOutcome(Enum):
    ESCAPED = "escaped"
    PLAYER_DEFEATED = "player_defeated"
    CREATURE_DEFEATED = "creature_defeated"


@dataclass(slots=True)
class CombatState:
    """Tracks one player-versus-creature encounter."""

    creature: Creature
    phase: CombatPhase = CombatPhase.CHOOSING_ACTION
    outcome: CombatOutcome | None = None
    rounds: int = 0

    @property
    def is_over(self) -> bool:
        return self.phase is CombatPhase.OVER
