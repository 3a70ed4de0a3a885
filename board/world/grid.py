"""
GridTopology - Spatial logic for the square board.

The grid handles:
- Position validation
- Row/column arithmetic
- Adjacency without wrapping across rows
- Border, edge and corner membership

Coordinate System:
- Positions are flat indices in [0, board_size)
- Index 0 is the TOP-LEFT cell, indices increase to the RIGHT
- Row r holds indices [r * row_len, (r + 1) * row_len)
"""

from __future__ import annotations
from typing import List

from ..core.types import Position


class GridTopology:
    """
    A square grid addressed by flat cell indices.

    Provides spatial queries without game logic or state.

    Attributes:
        board_size: Total number of cells
        row_len: Number of cells per row (and rows per board)
    """

    def __init__(self, board_size: int, row_len: int):
        """
        Initialize a grid.

        Args:
            board_size: Total cell count (must be row_len squared)
            row_len: Row length (must be positive)

        Raises:
            ValueError: If dimensions are invalid or the grid is not square
        """
        if board_size <= 0 or row_len <= 0:
            raise ValueError(f"Grid dimensions must be positive: {board_size} cells, rows of {row_len}")
        if row_len * row_len != board_size:
            raise ValueError(f"Grid must be square: {row_len}x{row_len} != {board_size}")

        self.board_size = board_size
        self.row_len = row_len

    @property
    def last_index(self) -> int:
        return self.row_len - 1

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is a cell of the board."""
        return 0 <= pos < self.board_size

    def row(self, pos: Position) -> int:
        return pos // self.row_len

    def col(self, pos: Position) -> int:
        return pos % self.row_len

    def manhattan_distance(self, a: Position, b: Position) -> int:
        """Manhattan (taxicab) distance between two cells."""
        return abs(self.row(a) - self.row(b)) + abs(self.col(a) - self.col(b))

    def is_adjacent(self, a: Position, b: Position) -> bool:
        """
        Check whether b is a true grid neighbour of a.

        Horizontal neighbours must share a row, so stepping right from the
        last column never lands on the first column of the next row.
        """
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return False
        diff = abs(a - b)
        if diff == 1:
            return self.row(a) == self.row(b)
        return diff == self.row_len

    def adjacent_positions(self, pos: Position) -> List[Position]:
        """
        Get the cardinal neighbours of a position.

        Returns:
            In-bounds neighbours in the order left, up, right, down
        """
        candidates = [
            pos - 1,             # LEFT
            pos - self.row_len,  # UP
            pos + 1,             # RIGHT
            pos + self.row_len,  # DOWN
        ]
        return [c for c in candidates if self.is_adjacent(pos, c)]

    def is_horizontal_edge(self, pos: Position) -> bool:
        """True for cells in the top or bottom row."""
        return self.row(pos) in (0, self.last_index)

    def is_vertical_edge(self, pos: Position) -> bool:
        """True for cells in the leftmost or rightmost column."""
        return self.col(pos) in (0, self.last_index)

    def is_corner(self, pos: Position) -> bool:
        return self.is_horizontal_edge(pos) and self.is_vertical_edge(pos)

    def is_border_edge(self, pos: Position) -> bool:
        return self.is_horizontal_edge(pos) or self.is_vertical_edge(pos)

    def straight_step(self, start: Position, end: Position) -> int:
        """
        Signed step that walks from start to end along a row or column.

        Callers must have checked that start and end share a row or column.
        """
        diff = end - start
        step = 1 if self.row(start) == self.row(end) else self.row_len
        return step if diff > 0 else -step

    def __str__(self) -> str:
        return f"Grid({self.row_len}x{self.row_len})"

    def __repr__(self) -> str:
        return f"GridTopology(board_size={self.board_size}, row_len={self.row_len})"
