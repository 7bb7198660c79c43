"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .turn_controller import (
    ActionType,
    CombatAction,
    CombatActionType,
    PlayerAction,
    TurnController,
    TurnResult,
    parse_combat_command,
    parse_command,
)

__all__ = [
    "ActionType",
    "CombatAction",
    "CombatActionType",
    "PlayerAction",
    "TurnController",
    "TurnResult",
    "parse_combat_command",
    "parse_command",
]
