from board.core.types import EMPTY, Pair, Single
from board.entities import Obstacle, Weapon

from conftest import make_player


def test_empty_cells_read_as_empty(occupancy):
    assert occupancy.get(3) is EMPTY
    assert not occupancy.get(3)
    assert not occupancy.is_taken(3)
    assert len(occupancy) == 0


def test_set_delete_clear(occupancy):
    wall = Obstacle()
    occupancy.set(2, Single(wall))
    occupancy.set(0, Single(Weapon(name="axe", damage=25)))
    assert occupancy.occupied_positions() == [0, 2]
    assert occupancy.get(2).entity is wall

    occupancy.delete(2)
    occupancy.delete(2)
    assert occupancy.occupied_positions() == [0]

    occupancy.clear()
    assert len(occupancy) == 0


def test_pair_occupant_helpers():
    player = make_player()
    weapon = Weapon(name="sword", damage=20)
    pair = Pair(weapon=weapon, player=player)

    assert pair.entities() == (weapon, player)
    assert pair.contains(player) and pair.contains(weapon)
    assert not pair.is_weapon_only
    assert Single(weapon).is_weapon_only
    assert not Single(player).is_weapon_only
