from static_decay.services.inventory_service import (
    InventoryActionFailedEvent,
    ItemCraftedEvent,
    ItemUsedEvent,
    WeaponEquippedEvent,
)

from tests.helpers.builders import Services, make_state


def _make_state_and_service(*items: str):
    services = Services()
    state = make_state()
    for item in items:
        state.player.add_item(item)
    return state, services.inventory


def test_equip_weapon_leaves_inventory_untouched() -> None:
    state, inventory_service = _make_state_and_service("Makeshift Shiv")

    events = inventory_service.use_or_equip(state, "makeshift shiv")

    assert events == [WeaponEquippedEvent(item_name="Makeshift Shiv", damage=15)]
    assert state.player.equipped_weapon == "Makeshift Shiv"
    assert state.player.inventory.count("Makeshift Shiv") == 1


def test_use_consumable_removes_one_and_applies_effect() -> None:
    state, inventory_service = _make_state_and_service("Canned Food", "Canned Food")
    state.player.hunger = 30

    events = inventory_service.use_or_equip(state, "Canned Food")

    assert isinstance(events[0], ItemUsedEvent)
    assert state.player.hunger == 70
    assert state.player.inventory.count("Canned Food") == 1


def test_quest_items_cannot_be_used() -> None:
    state, inventory_service = _make_state_and_service("Crowbar")

    events = inventory_service.use_or_equip(state, "Crowbar")

    assert events[0].reason == "not_usable"
    assert state.message_log[-1] == "You can't use or equip 'Crowbar' in this way."
    assert state.player.has_item("Crowbar")


def test_unknown_item_name_is_reported() -> None:
    state, inventory_service = _make_state_and_service("Wood")

    events = inventory_service.use_or_equip(state, "Shotgun")

    assert events[0].reason == "not_in_inventory"
    assert state.message_log[-1] == "You don't have an item named 'Shotgun'."


def test_craft_consumes_ingredients_and_adds_result() -> None:
    state, inventory_service = _make_state_and_service("Dirty Rags", "Chemicals")

    events = inventory_service.craft(state, 0)

    assert events == [ItemCraftedEvent(recipe_id="bandage", item_name="Bandage")]
    assert dict(state.player.inventory.entries()) == {"Bandage": 1}
    assert state.message_log[-1] == "You successfully crafted a Bandage!"


def test_craft_is_atomic_when_ingredients_are_missing() -> None:
    state, inventory_service = _make_state_and_service("Dirty Rags")

    events = inventory_service.craft(state, 0)

    assert isinstance(events[0], InventoryActionFailedEvent)
    assert events[0].reason == "missing_ingredients"
    assert dict(state.player.inventory.entries()) == {"Dirty Rags": 1}


def test_craft_rejects_out_of_range_index() -> None:
    state, inventory_service = _make_state_and_service("Dirty Rags", "Chemicals")

    events = inventory_service.craft(state, -1)

    assert events[0].reason == "invalid_recipe"
    assert state.message_log[-1] == "Invalid recipe number."
    assert state.player.inventory.count("Chemicals") == 1


def test_recipe_views_flag_craftable_recipes() -> None:
    state, inventory_service = _make_state_and_service("Herbs", "Chemicals")

    views = inventory_service.build_recipe_views(state)

    assert [view.result for view in views] == ["Bandage", "Makeshift Shiv", "Med-kit"]
    assert [view.craftable for view in views] == [False, False, True]
    assert views[2].ingredients == "Herbs x1, Chemicals x1"


def test_inventory_view_marks_equipped_weapon() -> None:
    state, inventory_service = _make_state_and_service("9mm Pistol", "Ammo")
    state.player.equipped_weapon = "9mm Pistol"

    views = inventory_service.build_inventory_view(state)

    assert [(view.name, view.equipped) for view in views] == [("9mm Pistol", True), ("Ammo", False)]
