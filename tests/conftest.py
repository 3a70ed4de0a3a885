from pathlib import Path
import random
import sys

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from board.core.types import Single
from board.entities import Obstacle, Player, Weapon, reset_entity_ids
from board.world import GridTopology, OccupancyMap


@pytest.fixture(autouse=True)
def _fresh_ids():
    reset_entity_ids()
    yield


@pytest.fixture
def grid3():
    return GridTopology(board_size=9, row_len=3)


@pytest.fixture
def grid4():
    return GridTopology(board_size=16, row_len=4)


@pytest.fixture
def occupancy():
    return OccupancyMap()


@pytest.fixture
def rng():
    return random.Random(1234)


def make_player(name="knight", weapon_name="dagger", damage=10):
    return Player(name=name, weapon=Weapon(name=weapon_name, damage=damage))


def put(occupancy, pos, entity):
    """Place an entity directly on a hand-built board."""
    entity.move(pos)
    if isinstance(entity, Player):
        entity.weapon.move(pos)
    occupancy.set(pos, Single(entity))
    return entity


def wall():
    return Obstacle()
