"""Stable identifiers for consumable effects."""
from __future__ import annotations

from enum import Enum


class EffectId(Enum):
    """Names a consumable effect resolved through the effect table."""

    PATCH_WOUNDS = "patch_wounds"
    TREAT_WOUNDS = "treat_wounds"
    EAT_RATION = "eat_ration"
    READY_THROWABLE = "ready_throwable"
