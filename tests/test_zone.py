from static_decay.domain.defs import InteractableKind
from static_decay.domain.entities import Creature, CreatureKind
from static_decay.domain.zone import FLOOR, WALL, Interactable

from tests.helpers.builders import make_zone


def test_out_of_bounds_reads_as_wall() -> None:
    zone = make_zone()

    assert zone.get_tile(-1, 0) == WALL
    assert zone.get_tile(zone.width, 1) == WALL
    assert zone.is_wall(0, 0)
    assert not zone.is_wall(1, 1)


def test_reveal_around_marks_three_by_three_and_clips_to_grid() -> None:
    zone = make_zone()

    zone.reveal_around(0, 0)

    assert zone.is_visited(0, 0)
    assert zone.is_visited(1, 1)
    assert not zone.is_visited(2, 2)
    assert not zone.is_visited(-1, -1)


def test_remove_interactable_leaves_floor() -> None:
    zone = make_zone(interactables={(2, 2): Interactable(kind=InteractableKind.CONTAINER, text="Crate")})
    zone.tiles[2][2] = "C"

    zone.remove_interactable(2, 2)

    assert zone.interactable_at(2, 2) is None
    assert zone.get_tile(2, 2) == FLOOR


def test_remove_creature_uses_identity() -> None:
    first = Creature(kind=CreatureKind.SHAMBLER, x=2, y=2)
    twin = Creature(kind=CreatureKind.SHAMBLER, x=2, y=2)
    zone = make_zone(creatures=[first, twin])

    zone.remove_creature(first)

    assert zone.creatures == [twin]


def test_has_anomaly() -> None:
    zone = make_zone(creatures=[Creature(kind=CreatureKind.ANOMALY, x=4, y=2)])
    assert zone.has_anomaly()

    zone.remove_creature(zone.creatures[0])
    assert not zone.has_anomaly()


def test_creature_defaults_and_symbols() -> None:
    anomaly = Creature(kind=CreatureKind.ANOMALY, x=0, y=0)
    whisperer = Creature(kind=CreatureKind.WHISPERER, x=0, y=0, hp=500)

    assert anomaly.hp == 200
    assert anomaly.is_stationary
    assert anomaly.map_symbol == "A"
    assert whisperer.hp == 20
    assert whisperer.sanity_damage == 20
    assert not whisperer.is_stationary
    assert whisperer.map_symbol == "M"
