"""Shared console rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from static_decay.core.rng import RNG
from static_decay.services.combat_service import CombatView
from static_decay.services.game_service import GameView
from static_decay.services.inventory_service import InventoryEntryView, RecipeView

SCRAMBLE_SYMBOLS = "!?#%$*&"
SCRAMBLE_PERCENT = 20
_CLEAR_SCREEN = "\u001b[H\u001b[2J"
COMMAND_HELP = "COMMANDS: [W/A/S/D] Move, [I]nventory, [C]raft, [L]ook, [Q]uit"


def debug_enabled() -> bool:
    """Return True only when STATIC_DECAY_DEBUG is explicitly set to '1'."""
    return os.getenv("STATIC_DECAY_DEBUG") == "1"


def scramble_text(text: str, rng: RNG, percent: int = SCRAMBLE_PERCENT) -> str:
    """Replace a share of letters and digits with noise; spacing and walls are kept."""
    return "".join(
        rng.choice(SCRAMBLE_SYMBOLS) if char.isalnum() and rng.chance(percent) else char
        for char in text
    )


def clear_screen() -> None:
    print(_CLEAR_SCREEN, end="", flush=True)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"--- {title} ---")


def render_game_view(view: GameView, *, distort: bool = False, rng: RNG | None = None) -> None:
    """Print stats, the fog-of-war map, the recent log and the command help."""
    stats = view.stats
    render_heading("Static Decay")
    print(
        f"HP: {stats.hp}/{stats.maximum} | Hunger: {stats.hunger}/{stats.maximum} "
        f"| Sanity: {stats.sanity}/{stats.maximum}"
    )
    if stats.equipped_weapon:
        print(f"Weapon: {stats.equipped_weapon}")
    print(f"{view.zone_name}" + (f" (turn {view.turn})" if debug_enabled() else ""))
    print("-" * 60)
    map_text = "\n".join(view.map_rows)
    if distort and not view.legible and rng is not None:
        map_text = scramble_text(map_text, rng, SCRAMBLE_PERCENT)
    print(map_text)
    print("-" * 30)
    print("LOG:")
    render_log_lines(view.messages)
    print("-" * 30)
    print(COMMAND_HELP)


def render_log_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(f"> {line}")


def render_combat_view(view: CombatView) -> None:
    render_heading("COMBAT")
    creature_hp = f"{view.creature_hp}"
    if debug_enabled():
        creature_hp = f"{view.creature_hp}/{view.creature_max_hp} (round {view.rounds + 1})"
    print(f"{view.creature_name} HP: {creature_hp}")
    print(f"Your HP: {view.player_hp}")
    print("Actions: [A]ttack, [I]tem, [R]un")


def render_inventory(entries: Sequence[InventoryEntryView]) -> None:
    render_heading("INVENTORY")
    for entry in entries:
        marker = " (equipped)" if entry.equipped else ""
        print(f"{entry.count} {entry.name}{marker} - {entry.description}")
    print("-" * 18)


def render_recipes(recipes: Sequence[RecipeView]) -> None:
    render_heading("CRAFTING")
    for recipe in recipes:
        marker = "*" if recipe.craftable else " "
        print(f"{marker}[{recipe.index}] {recipe.result} - Requires: {recipe.ingredients}")
    print("-" * 17)


def render_usable_items(names: Sequence[str]) -> None:
    render_heading("Usable Items")
    for name in names:
        print(f"- {name}")


def render_game_over(final_message: str | None, *, won: bool) -> None:
    print("=" * 18)
    print("GAME OVER")
    print("=" * 18)
    if won:
        print("CONGRATULATIONS! YOU HAVE BEATEN STATIC DECAY!")
    if final_message:
        print(final_message)
