"""
Move validation helpers.

The movement engine only understands straight horizontal or vertical
paths; anything else is rejected here before the occupancy map is touched.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .types import MoveValidation, Position

if TYPE_CHECKING:
    from ..world.grid import GridTopology
    from ..entities.player import Player


def validate_move(grid: GridTopology, player: Player, new_position: Position) -> MoveValidation:
    """
    Validate the geometry of a move request.

    Destination legality under game rules (reachability, turn order) is the
    rule layer's concern; this only guarantees the path is well formed.
    """
    old_position = player.position
    if old_position is None:
        return MoveValidation.fail(
            "UNPLACED",
            f"{player.label()} is not on the board"
        )

    if not grid.in_bounds(new_position):
        return MoveValidation.fail(
            "OUT_OF_BOUNDS",
            f"{player.label()} cannot move to {new_position} (out of bounds)"
        )

    if new_position == old_position:
        return MoveValidation.fail(
            "SAME_POSITION",
            f"{player.label()} is already at {new_position}"
        )

    same_row = grid.row(old_position) == grid.row(new_position)
    same_col = grid.col(old_position) == grid.col(new_position)
    if not (same_row or same_col):
        return MoveValidation.fail(
            "NOT_STRAIGHT",
            f"{player.label()} cannot move from {old_position} to {new_position} (not a straight line)"
        )

    return MoveValidation.success()
