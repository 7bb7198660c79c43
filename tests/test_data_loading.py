import json
from pathlib import Path

import pytest

from static_decay.data.errors import DataLoadError, DataReferenceError, DataValidationError
from static_decay.data.repositories import ItemsRepository, RecipesRepository, ZonesRepository
from static_decay.domain.defs import EffectId, InteractableKind, ItemKind
from static_decay.domain.entities import CreatureKind

_ITEMS = {
    "Rusty Pipe": {"kind": "weapon", "description": "Heavy.", "damage": 12},
    "Bandage": {"kind": "consumable", "description": "Cloth.", "effect": "patch_wounds"},
    "Dirty Rags": {"kind": "resource", "description": "Filthy."},
    "Chemicals": {"kind": "resource", "description": "Volatile."},
    "Crowbar": {"kind": "quest", "description": "Pries."},
}


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(definitions_dir / "items.json", _ITEMS)
    return definitions_dir


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def _make_zone_payload(**overrides: object) -> dict:
    zone = {
        "id": "tunnel",
        "name": "Tunnel",
        "layout": ["#####", "#...#", "#####"],
        "spawn": [1, 1],
        "entry_text": "Dark.",
    }
    zone.update(overrides)
    return zone


def test_items_repo_parses_kinds_and_effects(tmp_path: Path) -> None:
    repo = ItemsRepository(base_path=_make_definitions_dir(tmp_path))

    pipe = repo.get("Rusty Pipe")
    bandage = repo.get("Bandage")

    assert pipe.kind is ItemKind.WEAPON
    assert pipe.damage == 12
    assert bandage.effect is EffectId.PATCH_WOUNDS
    assert [item.name for item in repo.all()] == list(_ITEMS)


def test_items_repo_find_is_case_insensitive(tmp_path: Path) -> None:
    repo = ItemsRepository(base_path=_make_definitions_dir(tmp_path))

    assert repo.find("rusty pipe").name == "Rusty Pipe"
    assert repo.find("Shotgun") is None


def test_items_repo_rejects_weapon_without_damage(tmp_path: Path) -> None:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(definitions_dir / "items.json", {"Stick": {"kind": "weapon", "description": "Thin."}})

    with pytest.raises(DataValidationError):
        ItemsRepository(base_path=definitions_dir).all()


def test_items_repo_rejects_unknown_effect(tmp_path: Path) -> None:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(
        definitions_dir / "items.json",
        {"Pill": {"kind": "consumable", "description": "?", "effect": "cure_everything"}},
    )

    with pytest.raises(DataValidationError):
        ItemsRepository(base_path=definitions_dir).all()


def test_items_repo_rejects_case_insensitive_duplicates(tmp_path: Path) -> None:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(
        definitions_dir / "items.json",
        {"Wood": {"kind": "resource", "description": "a"}, "wood": {"kind": "resource", "description": "b"}},
    )

    with pytest.raises(DataValidationError):
        ItemsRepository(base_path=definitions_dir).all()


def test_missing_table_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        ItemsRepository(base_path=tmp_path).all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "items.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DataLoadError) as excinfo:
        ItemsRepository(base_path=tmp_path).all()

    assert "line 1" in str(excinfo.value)


def test_recipes_repo_keeps_declared_order(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "recipes.json",
        {
            "recipes": [
                {"id": "bandage", "result": "Bandage", "ingredients": {"Dirty Rags": 1, "Chemicals": 1}},
                {"id": "pipe", "result": "Rusty Pipe", "ingredients": {"Crowbar": 2}},
            ]
        },
    )

    recipes = RecipesRepository(base_path=definitions_dir).all()

    assert [recipe.recipe_id for recipe in recipes] == ["bandage", "pipe"]
    assert recipes[0].describe_ingredients() == "Dirty Rags x1, Chemicals x1"


def test_recipes_repo_rejects_unknown_ingredient(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "recipes.json",
        {"recipes": [{"id": "bomb", "result": "Bandage", "ingredients": {"Gunpowder": 1}}]},
    )

    with pytest.raises(DataReferenceError):
        RecipesRepository(base_path=definitions_dir).all()


def test_zones_repo_parses_creatures_and_interactables(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(
        creatures=[{"kind": "shambler", "x": 3, "y": 1}],
        interactables=[{"x": 2, "y": 1, "kind": "cache", "text": "A toolbox.", "item": "crowbar"}],
        drains_sanity=True,
    )
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    zone_def = ZonesRepository(base_path=definitions_dir).get("tunnel")

    assert (zone_def.width, zone_def.height) == (5, 3)
    assert zone_def.creatures[0].kind is CreatureKind.SHAMBLER
    assert zone_def.interactables[0].kind is InteractableKind.CACHE
    assert zone_def.interactables[0].item == "Crowbar"
    assert zone_def.drains_sanity


def test_zones_repo_rejects_ragged_layout(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "zones.json",
        {"zones": [_make_zone_payload(layout=["#####", "#..#", "#####"])]},
    )

    with pytest.raises(DataValidationError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zones_repo_rejects_creature_out_of_bounds(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(creatures=[{"kind": "stalker", "x": 9, "y": 1}])
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    with pytest.raises(DataValidationError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zones_repo_rejects_spawn_in_wall(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "zones.json", {"zones": [_make_zone_payload(spawn=[0, 0])]})

    with pytest.raises(DataValidationError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zones_repo_rejects_unknown_creature_kind(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(creatures=[{"kind": "dragon", "x": 2, "y": 1}])
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    with pytest.raises(DataValidationError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zones_repo_rejects_door_key_for_unknown_item(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(
        interactables=[{"x": 3, "y": 1, "kind": "door", "text": "A door."}],
        door={"key_item": "Skeleton Key", "opened_text": "Open.", "locked_text": "Locked."},
    )
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    with pytest.raises(DataReferenceError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zones_repo_requires_door_settings_for_door_marker(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(interactables=[{"x": 3, "y": 1, "kind": "door", "text": "A door."}])
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    with pytest.raises(DataValidationError):
        ZonesRepository(base_path=definitions_dir).all()


def test_shipped_tables_load() -> None:
    items_repo = ItemsRepository()
    recipes_repo = RecipesRepository(items_repo=items_repo)
    zones_repo = ZonesRepository(items_repo=items_repo)

    assert len(items_repo.all()) == 15
    assert [recipe.result for recipe in recipes_repo.all()] == ["Bandage", "Makeshift Shiv", "Med-kit"]
    assert zones_repo.sequence() == ["subway", "city_center", "hospital", "radio_tower"]
    assert zones_repo.get("subway").drains_sanity
    assert zones_repo.get("hospital").drains_sanity
    assert not zones_repo.get("city_center").drains_sanity


def test_shipped_crowbar_is_obtainable_in_subway() -> None:
    subway = ZonesRepository().get("subway")

    caches = [entry for entry in subway.interactables if entry.kind is InteractableKind.CACHE]

    assert [cache.item for cache in caches] == [subway.door.key_item]


def test_items_repo_require_known_returns_canonical_name(tmp_path: Path) -> None:
    repo = ItemsRepository(base_path=_make_definitions_dir(tmp_path))

    assert repo.require_known("dirty rags", "ctx") == "Dirty Rags"
    with pytest.raises(DataReferenceError) as excinfo:
        repo.require_known("Gunpowder", "recipe 'bomb' ingredient")
    assert "recipe 'bomb' ingredient references unknown item 'Gunpowder'" in str(excinfo.value)
    with pytest.raises(DataValidationError):
        repo.require_known(None, "ctx")


def test_recipes_and_zones_share_item_resolution(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "recipes.json",
        {"recipes": [{"id": "bandage", "result": "bandage", "ingredients": {"DIRTY RAGS": 1}}]},
    )
    zone = _make_zone_payload(
        interactables=[{"x": 2, "y": 1, "kind": "story", "text": "A note."}],
        story={"text": "Scrawled words.", "grant": "crowbar", "grant_text": "You pocket a crowbar."},
    )
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    recipe = RecipesRepository(base_path=definitions_dir).all()[0]
    zone_def = ZonesRepository(base_path=definitions_dir).get("tunnel")

    assert recipe.result == "Bandage"
    assert recipe.ingredients == {"Dirty Rags": 1}
    assert zone_def.story.grant == "Crowbar"


def test_zones_repo_rejects_story_grant_for_unknown_item(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    zone = _make_zone_payload(story={"text": "Scrawled words.", "grant": "Radio", "grant_text": "Static."})
    _write_json(definitions_dir / "zones.json", {"zones": [zone]})

    with pytest.raises(DataReferenceError):
        ZonesRepository(base_path=definitions_dir).all()


def test_zone_sequence_follows_table_order(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "zones.json",
        {"zones": [_make_zone_payload(id="roof"), _make_zone_payload(id="basement"), _make_zone_payload(id="attic")]},
    )

    assert ZonesRepository(base_path=definitions_dir).sequence() == ["roof", "basement", "attic"]


def test_item_defs_expose_consumable_flag_only() -> None:
    repo = ItemsRepository()

    assert repo.get("Bandage").is_consumable
    assert not repo.get("9mm Pistol").is_consumable
    assert not hasattr(repo.get("9mm Pistol"), "is_weapon")


def _reachable_tiles(layout, start) -> set:
    frontier = [start]
    seen = {start}
    while frontier:
        x, y = frontier.pop()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if (nx, ny) in seen or not (0 <= ny < len(layout) and 0 <= nx < len(layout[0])):
                continue
            if layout[ny][nx] == "#":
                continue
            seen.add((nx, ny))
            frontier.append((nx, ny))
    return seen


def test_shipped_interactables_are_reachable_from_spawn() -> None:
    for zone_def in ZonesRepository().all():
        reachable = _reachable_tiles(zone_def.layout, zone_def.spawn)
        for interactable in zone_def.interactables:
            assert (interactable.x, interactable.y) in reachable, (zone_def.id, interactable.text)


def test_subway_journal_is_reached_through_opened_tile() -> None:
    subway = ZonesRepository().get("subway")

    assert subway.layout[3][6] == "."
    assert (6, 4) in _reachable_tiles(subway.layout, subway.spawn)
    assert (1, 5) in _reachable_tiles(subway.layout, subway.spawn)
