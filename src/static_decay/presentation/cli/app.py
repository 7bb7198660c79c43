"""Console-driven UI loops for Static Decay."""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Dict, List, Literal

from static_decay.core.rng import RNG
from static_decay.data.repositories import ItemsRepository, RecipesRepository, ZonesRepository
from static_decay.domain.state import GameState
from static_decay.presentation.cli.config import MAX_LOG_LINES, load_config, save_config
from static_decay.presentation.cli.render import (
    clear_screen,
    debug_enabled,
    render_combat_view,
    render_game_over,
    render_game_view,
    render_heading,
    render_inventory,
    render_log_lines,
    render_recipes,
    render_usable_items,
)
from static_decay.services import (
    CombatService,
    GameService,
    InteractionService,
    InventoryService,
    TurnController,
    WorldService,
)
from static_decay.services.controllers import parse_combat_command, parse_command

MenuAction = Literal["new_game", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1
_BACK = "B"


@dataclass(slots=True)
class _Session:
    """Services and settings shared by every game started from the menu."""

    game_service: GameService
    inventory_service: InventoryService
    combat_service: CombatService
    controller: TurnController
    config: Dict[str, object]


def main() -> None:
    """Start the interactive CLI session."""
    session = _build_session()
    print("=== Static Decay ===")
    while True:
        action = _main_menu_loop()
        if action == "quit":
            break
        if action == "options":
            _run_options_menu(session)
            continue
        state = _start_new_game(session.game_service)
        _run_game_loop(session, state)
    print("Goodbye!")


def _main_menu_loop() -> MenuAction:
    while True:
        print()
        print("Main Menu")
        print("1. New Game")
        print("2. Options")
        print("3. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "options"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _build_session() -> _Session:
    """Construct the services with concrete repositories."""
    items_repo = ItemsRepository()
    recipes_repo = RecipesRepository(items_repo=items_repo)
    zones_repo = ZonesRepository(items_repo=items_repo)
    world_service = WorldService(zones_repo)
    inventory_service = InventoryService(items_repo, recipes_repo)
    combat_service = CombatService(items_repo, inventory_service)
    controller = TurnController(
        world_service,
        InteractionService(items_repo, world_service),
        inventory_service,
        combat_service,
    )
    return _Session(
        game_service=GameService(zones_repo),
        inventory_service=inventory_service,
        combat_service=combat_service,
        controller=controller,
        config=load_config(),
    )


def _run_options_menu(session: _Session) -> None:
    while True:
        print()
        render_heading("Options")
        print(f"1. Log lines: {session.config['log_lines']}")
        print(f"2. Map distortion: {session.config['map_distortion']}")
        print("3. Back")
        choice = input("Select an option: ").strip()
        if choice == "1":
            session.config["log_lines"] = _prompt_log_lines()
            save_config(session.config)
        elif choice == "2":
            session.config["map_distortion"] = "off" if session.config["map_distortion"] == "on" else "on"
            save_config(session.config)
        elif choice == "3":
            return
        else:
            print("Invalid selection. Please enter 1, 2 or 3.")


def _prompt_log_lines() -> int:
    while True:
        raw_value = input(f"Log lines to show (1-{MAX_LOG_LINES}): ").strip()
        try:
            value = int(raw_value)
        except ValueError:
            print("Invalid number.")
            continue
        if 1 <= value <= MAX_LOG_LINES:
            return value
        print(f"Please enter a number between 1 and {MAX_LOG_LINES}.")


def _start_new_game(game_service: GameService) -> GameState:
    seed = _prompt_seed()
    state = game_service.start_new_game(seed)
    print(f"Game started with seed: {seed}")
    return state


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _run_game_loop(session: _Session, state: GameState) -> None:
    """Play one game until it is won, lost or abandoned."""
    # Distortion noise uses its own stream so seeded games replay identically.
    noise_rng = RNG(secrets.randbelow(_MAX_RANDOM_SEED))
    log_lines = int(session.config["log_lines"])
    distort = session.config["map_distortion"] == "on"
    while not state.game_over:
        clear_screen()
        render_game_view(
            session.game_service.build_view(state, log_lines),
            distort=distort,
            rng=noise_rng,
        )
        if debug_enabled():
            print(f"[debug] position={state.player.position} seed={state.seed}")
        action = parse_command(input("> "))
        if action.action_type == "inventory":
            action.item_name = _prompt_inventory_choice(session, state)
        elif action.action_type == "craft":
            action.recipe_index = _prompt_recipe_choice(session, state)
        result = session.controller.take_turn(state, action)
        if not result.turn_complete:
            _run_combat_loop(session, state, log_lines)

    clear_screen()
    render_game_view(session.game_service.build_view(state, log_lines))
    final_messages = state.recent_messages(1)
    render_game_over(final_messages[0] if final_messages else None, won=state.outcome == "won")


def _prompt_inventory_choice(session: _Session, state: GameState) -> str | None:
    entries = session.inventory_service.build_inventory_view(state)
    if not entries:
        return None
    render_inventory(entries)
    raw_value = input("Enter item name to use/equip, or 'B' to go back: ").strip()
    if not raw_value or raw_value.upper() == _BACK:
        return None
    return raw_value


def _prompt_recipe_choice(session: _Session, state: GameState) -> int | None:
    recipes = session.inventory_service.build_recipe_views(state)
    if not recipes:
        return None
    render_recipes(recipes)
    raw_value = input("Enter recipe number to craft, or 'B' to go back: ").strip()
    if not raw_value or raw_value.upper() == _BACK:
        return None
    try:
        return int(raw_value)
    except ValueError:
        return -1


def _run_combat_loop(session: _Session, state: GameState, log_lines: int) -> None:
    """Resolve the open encounter one round at a time."""
    while state.in_combat:
        clear_screen()
        view = session.combat_service.get_combat_view(state)
        render_combat_view(view)
        print("LOG:")
        render_log_lines(state.recent_messages(log_lines))
        action = parse_combat_command(input("> "))
        if action.action_type == "item" and view.usable_items:
            action.item_name = _prompt_combat_item(view.usable_items)
        session.controller.take_combat_action(state, action)


def _prompt_combat_item(names: List[str]) -> str | None:
    render_usable_items(names)
    raw_value = input("Enter item name to use, or 'B' to go back: ").strip()
    if not raw_value or raw_value.upper() == _BACK:
        return None
    return raw_value
