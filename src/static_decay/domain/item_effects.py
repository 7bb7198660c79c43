"""Consumable effects, resolved by EffectId through a lookup table."""
from __future__ import annotations

from typing import Callable, Dict

from static_decay.domain.defs import EffectId
from static_decay.domain.entities import Player

ItemEffect = Callable[[Player], str]


def _patch_wounds(player: Player) -> str:
    player.heal(20)
    return "You apply the bandage. It stings, but you feel much better. (+20 HP)"


def _treat_wounds(player: Player) -> str:
    player.heal(75)
    return "You apply the med-kit. The relief is immediate. (+75 HP)"


def _eat_ration(player: Player) -> str:
    player.eat(40)
    return "It doesn't taste good, but it's food. (+40 HG)"


def _ready_throwable(player: Player) -> str:
    return "You get ready to throw the bottle."


ITEM_EFFECTS: Dict[EffectId, ItemEffect] = {
    EffectId.PATCH_WOUNDS: _patch_wounds,
    EffectId.TREAT_WOUNDS: _treat_wounds,
    EffectId.EAT_RATION: _eat_ration,
    EffectId.READY_THROWABLE: _ready_throwable,
}


def apply_item_effect(player: Player, effect_id: EffectId) -> str:
    """Apply the effect to the player and return the narration for the log."""
    return ITEM_EFFECTS[effect_id](player)
