"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Direction = Literal["north", "south", "west", "east"]
GameOutcome = Literal["won", "lost", "quit"]
Position = Tuple[int, int]

DIRECTION_DELTAS: dict[str, Position] = {
    "north": (0, -1),
    "south": (0, 1),
    "west": (-1, 0),
    "east": (1, 0),
}

__all__ = ["DIRECTION_DELTAS", "Direction", "GameOutcome", "Position"]
