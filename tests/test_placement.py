import random

import pytest

from board.config import BoardConfig, WeaponTemplate
from board.core.errors import PlacementError
from board.core.types import Single
from board.entities import Obstacle, Player, Weapon, is_obstacle
from board.mechanics import PlacementEngine
from board.world import GridTopology, OccupancyMap

from conftest import make_player, put, wall

#  0  1  2  3
#  4  5  6  7
#  8  9 10 11
# 12 13 14 15


@pytest.fixture
def engine4(grid4, occupancy, rng):
    return PlacementEngine(grid4, occupancy, rng=rng)


class TestNonObstacleLegality:
    def test_player_next_to_weapon_is_illegal(self, engine4, occupancy):
        put(occupancy, 6, Weapon(name="axe", damage=25))
        assert not engine4.is_legal_position(make_player(), 5)

    def test_weapon_next_to_player_is_illegal(self, engine4, occupancy):
        put(occupancy, 1, make_player())
        assert not engine4.is_legal_position(Weapon(name="axe", damage=25), 5)

    def test_next_to_obstacle_or_diagonal_is_legal(self, engine4, occupancy):
        put(occupancy, 6, wall())
        put(occupancy, 10, make_player("ranger"))
        assert engine4.is_legal_position(make_player(), 5)


class TestObstacleLegality:
    def test_interior_with_at_most_one_neighbour(self, engine4, occupancy):
        assert engine4.is_legal_position(Obstacle(), 5)
        put(occupancy, 1, wall())
        assert engine4.is_legal_position(Obstacle(), 5)

    def test_interior_junction_is_illegal(self, engine4, occupancy):
        put(occupancy, 1, wall())
        put(occupancy, 4, wall())
        assert not engine4.is_legal_position(Obstacle(), 5)

    def test_corner_with_at_most_one_neighbour(self, engine4, occupancy):
        assert engine4.is_legal_position(Obstacle(), 0)
        put(occupancy, 1, wall())
        assert engine4.is_legal_position(Obstacle(), 0)

    def test_horizontal_edge_needs_horizontal_edge_neighbour(self, engine4, occupancy):
        assert not engine4.is_legal_position(Obstacle(), 1)
        put(occupancy, 5, wall())
        assert not engine4.is_legal_position(Obstacle(), 1)

    def test_horizontal_edge_chains_off_corner(self, engine4, occupancy):
        put(occupancy, 0, wall())
        assert engine4.is_legal_position(Obstacle(), 1)

    def test_vertical_edge_chains_off_horizontal_edge_only(self, engine4, occupancy):
        put(occupancy, 8, wall())
        assert not engine4.is_legal_position(Obstacle(), 4)

        other = OccupancyMap()
        put(other, 0, wall())
        engine = PlacementEngine(engine4.grid, other)
        assert engine.is_legal_position(Obstacle(), 4)

    def test_border_junction_needs_corner_obstacle(self, engine4, occupancy):
        put(occupancy, 1, wall())
        put(occupancy, 6, wall())
        assert not engine4.is_legal_position(Obstacle(), 2)

        put(occupancy, 3, wall())
        assert engine4.is_legal_position(Obstacle(), 2)

    def test_corner_junction_without_corner_neighbour(self, engine4, occupancy):
        put(occupancy, 1, wall())
        put(occupancy, 4, wall())
        assert not engine4.is_legal_position(Obstacle(), 0)

    def test_border_junction_ignores_corner_player(self, engine4, occupancy):
        put(occupancy, 3, make_player())
        put(occupancy, 1, wall())
        assert not engine4.is_legal_position(Obstacle(), 2)


def _place(seed, config):
    grid = GridTopology(config.board_size, config.row_len)
    occupancy = OccupancyMap()
    engine = PlacementEngine(grid, occupancy, rng=random.Random(seed))
    players = [config.make_player("knight"), config.make_player("ranger")]
    entities = engine.place_all(players, config.weapons, config.obstacles_num)
    return grid, occupancy, players, entities


@pytest.mark.parametrize("seed", range(10))
def test_place_all_fills_one_cell_per_entity(seed):
    config = BoardConfig.default()
    _grid, occupancy, players, entities = _place(seed, config)

    expected = len(players) + len(config.weapons) + config.obstacles_num
    assert len(entities) == expected
    assert len(occupancy) == expected
    assert len({e.position for e in entities}) == expected
    for entity in entities:
        assert occupancy.get(entity.position) == Single(entity)


@pytest.mark.parametrize("seed", range(10))
def test_players_and_weapons_never_touch(seed):
    grid, occupancy, _players, entities = _place(seed, BoardConfig.default())

    for entity in entities:
        if is_obstacle(entity):
            continue
        for adjacent in grid.adjacent_positions(entity.position):
            for neighbour in occupancy.get(adjacent).entities():
                assert is_obstacle(neighbour), (entity.label(), neighbour.label())


def test_player_weapon_is_stamped_with_player_position():
    _grid, occupancy, players, entities = _place(3, BoardConfig.default())

    for player in players:
        assert player.weapon.position == player.position
        assert player.weapon not in entities
    assert all(isinstance(occupancy.get(p.position).entity, Player) for p in players)


def test_catalog_weapons_are_built_in_order():
    config = BoardConfig.default()
    _grid, _occupancy, _players, entities = _place(5, config)

    weapons = [e for e in entities if isinstance(e, Weapon)]
    assert [(w.name, w.damage) for w in weapons] == [(t.name, t.damage) for t in config.weapons]


def test_same_seed_same_board():
    config = BoardConfig.default()
    first = [e.position for e in _place(42, config)[3]]
    second = [e.position for e in _place(42, config)[3]]
    assert first == second


def test_too_many_entities_fails_before_sampling():
    grid = GridTopology(board_size=4, row_len=2)
    engine = PlacementEngine(grid, OccupancyMap(), rng=random.Random(0))
    players = [make_player(f"p{i}") for i in range(3)]

    with pytest.raises(PlacementError):
        engine.place_all(players, [WeaponTemplate("axe", 25), WeaponTemplate("bow", 15)], 0)


def test_unsatisfiable_board_raises_instead_of_looping():
    # On a 2x2 board two players must sit diagonally, leaving no legal weapon cell.
    grid = GridTopology(board_size=4, row_len=2)
    occupancy = OccupancyMap()
    engine = PlacementEngine(grid, occupancy, rng=random.Random(0), max_attempts=200)

    with pytest.raises(PlacementError):
        engine.place_all([make_player("a"), make_player("b")], [WeaponTemplate("axe", 25)], 0)
    assert len(occupancy) == 2


def test_max_attempts_must_be_positive(grid4, occupancy):
    with pytest.raises(ValueError):
        PlacementEngine(grid4, occupancy, max_attempts=0)


def test_same_player_twice_is_rejected(grid4, occupancy, rng):
    engine = PlacementEngine(grid4, occupancy, rng=rng)
    knight = make_player()

    with pytest.raises(PlacementError):
        engine.place_all([knight, knight], [], 0)
    assert len(occupancy) == 0
    assert knight.position is None
