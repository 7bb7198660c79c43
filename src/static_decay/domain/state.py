"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from static_decay.core.rng import RNG
from static_decay.core.types import GameOutcome
from static_decay.domain.combat_models import CombatState
from static_decay.domain.entities import Player
from static_decay.domain.zone import GameZone


@dataclass
class GameState:
    """Every piece of mutable world state, passed explicitly to each service."""

    seed: int
    rng: RNG
    player: Player
    zone: GameZone
    message_log: List[str] = field(default_factory=list)
    outcome: GameOutcome | None = None
    combat: CombatState | None = None
    turn: int = 0

    @property
    def game_over(self) -> bool:
        return self.outcome is not None

    @property
    def in_combat(self) -> bool:
        return self.combat is not None and not self.combat.is_over

    def finish(self, outcome: GameOutcome) -> bool:
        """Set the terminal outcome once; later calls are ignored and return False."""
        if self.outcome is not None:
            return False
        self.outcome = outcome
        return True

    def log(self, message: str) -> None:
        self.message_log.append(message)

    def recent_messages(self, count: int) -> List[str]:
        if count <= 0:
            return []
        return self.message_log[-count:]
