import pytest

from board.core.errors import BoardDesyncError, InvalidMoveError
from board.core.types import EMPTY, Pair, Single
from board.entities import Weapon
from board.mechanics import MovementResolver

from conftest import make_player, put, wall

# 0 1 2
# 3 4 5
# 6 7 8


@pytest.fixture
def resolver(grid3, occupancy):
    return MovementResolver(grid3, occupancy)


def test_encounters_are_reported_in_path_order(resolver, occupancy):
    player = put(occupancy, 0, make_player())
    sword = put(occupancy, 1, Weapon(name="sword", damage=20))
    rock = put(occupancy, 2, wall())

    result = resolver.resolve(player, 2)

    assert [e.position for e in result.encounters] == [1, 2]
    assert result.encounters[0].occupant == Single(sword)
    assert result.encounters[0].weapon is sword
    assert result.encounters[1].occupant == Single(rock)
    assert result.encounters[1].weapon is None
    assert all(e.player is player and e.destination == 2 for e in result.encounters)


def test_move_vacates_and_overwrites_non_weapon(resolver, occupancy):
    player = put(occupancy, 0, make_player())
    sword = put(occupancy, 1, Weapon(name="sword", damage=20))
    put(occupancy, 2, wall())

    resolver.resolve(player, 2)

    assert occupancy.get(0) is EMPTY
    assert occupancy.get(1) == Single(sword)
    assert occupancy.get(2) == Single(player)
    assert player.position == 2
    assert player.weapon.position == 2


def test_empty_path_has_no_encounters(resolver, occupancy):
    player = put(occupancy, 6, make_player())

    result = resolver.resolve(player, 0)

    assert result.encounters == []
    assert (result.old_position, result.new_position) == (6, 0)
    assert occupancy.occupied_positions() == [0]


def test_vertical_move_walks_by_row_length(resolver, occupancy):
    player = put(occupancy, 1, make_player())
    axe = put(occupancy, 4, Weapon(name="axe", damage=25))

    result = resolver.resolve(player, 7)

    assert [e.position for e in result.encounters] == [4]
    assert result.encounters[0].weapon is axe


def test_landing_on_weapon_co_locates_and_leaving_restores(resolver, occupancy):
    player = put(occupancy, 0, make_player())
    axe = put(occupancy, 3, Weapon(name="axe", damage=25))

    result = resolver.resolve(player, 3)
    assert occupancy.get(3) == Pair(weapon=axe, player=player)
    assert [e.weapon for e in result.encounters] == [axe]

    result = resolver.resolve(player, 5)
    assert occupancy.get(3) == Single(axe)
    assert occupancy.get(5) == Single(player)
    assert result.encounters == []
    assert axe.position == 3


def test_passing_another_player_on_a_weapon_is_reported(resolver, occupancy):
    other = put(occupancy, 1, make_player("ranger"))
    bow = Weapon(name="bow", damage=15)
    bow.move(1)
    occupancy.set(1, Pair(weapon=bow, player=other))
    player = put(occupancy, 0, make_player())

    result = resolver.resolve(player, 2)

    assert result.encounters[0].occupant == Pair(weapon=bow, player=other)
    assert result.encounters[0].weapon is bow


@pytest.mark.parametrize(
    "destination, code",
    [
        (0, "SAME_POSITION"),
        (9, "OUT_OF_BOUNDS"),
        (-1, "OUT_OF_BOUNDS"),
        (4, "NOT_STRAIGHT"),
        (5, "NOT_STRAIGHT"),
    ],
)
def test_malformed_moves_are_rejected_before_mutation(resolver, occupancy, destination, code):
    player = put(occupancy, 0, make_player())

    with pytest.raises(InvalidMoveError) as excinfo:
        resolver.resolve(player, destination)

    assert excinfo.value.code == code
    assert occupancy.get(0) == Single(player)
    assert player.position == 0


def test_row_wrap_is_not_a_straight_move(resolver, occupancy):
    player = put(occupancy, 2, make_player())
    with pytest.raises(InvalidMoveError) as excinfo:
        resolver.resolve(player, 3)
    assert excinfo.value.code == "NOT_STRAIGHT"


def test_unplaced_player_is_rejected(resolver):
    with pytest.raises(InvalidMoveError) as excinfo:
        resolver.resolve(make_player(), 1)
    assert excinfo.value.code == "UNPLACED"


def test_missing_occupant_is_a_desync(resolver, occupancy):
    player = make_player()
    player.move(0)

    with pytest.raises(BoardDesyncError):
        resolver.resolve(player, 1)


def test_someone_else_on_the_cell_is_a_desync(resolver, occupancy):
    player = make_player()
    player.move(0)
    put(occupancy, 0, make_player("impostor"))

    with pytest.raises(BoardDesyncError):
        resolver.resolve(player, 1)


class TestSwapWeapon:
    def test_swap_with_weapon_lying_alone(self, resolver, occupancy):
        player = put(occupancy, 0, make_player())
        dagger = player.weapon
        sword = put(occupancy, 1, Weapon(name="sword", damage=20))

        dropped = resolver.swap_weapon(player, sword)

        assert dropped is dagger
        assert player.weapon is sword
        assert sword.position == 0
        assert dagger.position == 1
        assert occupancy.get(1) == Single(dagger)

    def test_swap_while_standing_on_the_weapon(self, resolver, occupancy):
        player = put(occupancy, 0, make_player())
        dagger = player.weapon
        sword = put(occupancy, 1, Weapon(name="sword", damage=20))
        resolver.resolve(player, 1)

        resolver.swap_weapon(player, sword)

        assert occupancy.get(1) == Pair(weapon=dagger, player=player)
        assert player.weapon is sword

        resolver.resolve(player, 2)
        assert occupancy.get(1) == Single(dagger)
        assert sword.position == 2

    def test_swap_with_weapon_not_on_board(self, resolver, occupancy):
        player = put(occupancy, 0, make_player())
        with pytest.raises(BoardDesyncError):
            resolver.swap_weapon(player, Weapon(name="ghost", damage=1))
