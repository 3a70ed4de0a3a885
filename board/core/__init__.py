"""
Core types, validation and errors for the board-state engine.
"""

# Instead of from board.core.types import Pair, you can do: from board.core import Pair
from .types import (
    Position,
    EntityKind,
    AttackDirection,
    Empty,
    Single,
    Pair,
    Occupant,
    EMPTY,
    MoveValidation,
)
from .validation import validate_move
from .errors import (
    BoardError,
    ConfigurationError,
    PlacementError,
    InvalidMoveError,
    BoardDesyncError,
)


__all__ = [
    "Position",
    "EntityKind",
    "AttackDirection",
    "Empty",
    "Single",
    "Pair",
    "Occupant",
    "EMPTY",
    "MoveValidation",
    "validate_move",
    "BoardError",
    "ConfigurationError",
    "PlacementError",
    "InvalidMoveError",
    "BoardDesyncError",
]
