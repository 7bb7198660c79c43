import pytest

from static_decay.domain.entities import Creature, CreatureKind
from static_decay.services.combat_service import CombatEndedEvent, CombatStartedEvent
from static_decay.services.controllers import (
    CombatAction,
    PlayerAction,
    parse_combat_command,
    parse_command,
)

from tests.helpers.builders import Services, make_state, make_zone
from tests.helpers.scripted_rng import ScriptedRNG


def test_parse_command_uses_first_character() -> None:
    assert parse_command("w") == PlayerAction(action_type="move", direction="north")
    assert parse_command(" Dash ") == PlayerAction(action_type="move", direction="east")
    assert parse_command("look").action_type == "look"
    assert parse_command("i").action_type == "inventory"
    assert parse_command("C").action_type == "craft"
    assert parse_command("q").action_type == "quit"
    assert parse_command("   ").action_type == "empty"
    assert parse_command("x").action_type == "invalid"


def test_parse_combat_command() -> None:
    assert parse_combat_command("a").action_type == "attack"
    assert parse_combat_command("Item").action_type == "item"
    assert parse_combat_command("r").action_type == "run"
    assert parse_combat_command("").action_type == "empty"
    assert parse_combat_command("z").action_type == "invalid"


def test_plain_move_closes_turn() -> None:
    services = Services()
    state = make_state()

    result = services.controller.take_turn(state, parse_command("d"))

    assert result.turn_complete
    assert state.player.position == (2, 1)
    assert state.turn == 1


def test_bumping_creature_keeps_turn_open_until_combat_ends() -> None:
    services = Services()
    shambler = Creature(kind=CreatureKind.SHAMBLER, x=2, y=1)
    stalker = Creature(kind=CreatureKind.STALKER, x=5, y=1)
    state = make_state(make_zone(creatures=[shambler, stalker]), rng=ScriptedRNG([0]))

    result = services.controller.take_turn(state, parse_command("d"))

    assert not result.turn_complete
    assert any(isinstance(event, CombatStartedEvent) for event in result.events)
    assert state.in_combat
    assert state.turn == 0
    assert (stalker.x, stalker.y) == (5, 1)

    result = services.controller.take_combat_action(state, CombatAction(action_type="run"))

    assert result.turn_complete
    assert any(isinstance(event, CombatEndedEvent) for event in result.events)
    assert state.combat is None
    assert state.turn == 1
    assert (stalker.x, stalker.y) == (4, 1)


def test_non_combat_action_during_combat_raises() -> None:
    services = Services()
    shambler = Creature(kind=CreatureKind.SHAMBLER, x=2, y=1)
    state = make_state(make_zone(creatures=[shambler]))
    services.controller.take_turn(state, parse_command("d"))

    with pytest.raises(ValueError):
        services.controller.take_turn(state, parse_command("l"))


def test_combat_action_without_combat_raises() -> None:
    services = Services()
    state = make_state()

    with pytest.raises(ValueError):
        services.controller.take_combat_action(state, CombatAction(action_type="attack"))


def test_quit_ends_game_and_skips_creature_pass() -> None:
    services = Services()
    shambler = Creature(kind=CreatureKind.SHAMBLER, x=4, y=1)
    state = make_state(make_zone(creatures=[shambler]))

    services.controller.take_turn(state, parse_command("q"))

    assert state.outcome == "quit"
    assert state.message_log[-1] == "You give up hope."
    assert (shambler.x, shambler.y) == (4, 1)

    with pytest.raises(ValueError):
        services.controller.take_turn(state, parse_command("w"))


def test_empty_and_invalid_commands_still_pass_the_turn() -> None:
    services = Services()
    shambler = Creature(kind=CreatureKind.SHAMBLER, x=4, y=1)
    state = make_state(make_zone(creatures=[shambler]))

    services.controller.take_turn(state, parse_command(""))
    assert "No command entered." in state.message_log
    services.controller.take_turn(state, parse_command("?"))
    assert "Invalid command." in state.message_log

    assert state.turn == 2
    assert (shambler.x, shambler.y) == (2, 1)


def test_inventory_with_nothing_held_logs_and_passes_turn() -> None:
    services = Services()
    state = make_state()

    result = services.controller.take_turn(state, PlayerAction(action_type="inventory", item_name="Bandage"))

    assert result.turn_complete
    assert state.message_log == ["Your inventory is empty."]


def test_cancelled_sub_prompts_log_nothing() -> None:
    services = Services()
    state = make_state()
    state.player.add_item("Wood")

    services.controller.take_turn(state, PlayerAction(action_type="inventory"))
    services.controller.take_turn(state, PlayerAction(action_type="craft"))

    assert state.message_log == []
    assert state.turn == 2


def test_craft_action_forwards_recipe_index() -> None:
    services = Services()
    state = make_state()
    state.player.add_item("Scrap Metal")
    state.player.add_item("Wood")

    services.controller.take_turn(state, PlayerAction(action_type="craft", recipe_index=1))

    assert state.player.has_item("Makeshift Shiv")
    assert not state.player.has_item("Wood")


def test_decay_runs_after_each_closed_turn() -> None:
    services = Services()
    state = make_state(make_zone(zone_id="subway"))

    services.controller.take_turn(state, parse_command("l"))

    assert state.player.sanity == 98
