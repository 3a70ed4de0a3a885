"""
HighlightScanner - bounded straight-line reachability.

From a player's cell, each of the four cardinal directions is scanned
independently up to the movement budget. Weapons do not block; any other
occupant stops the scan before its cell. Turning and diagonal movement are
not modelled.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Set

from ..core.types import Position

if TYPE_CHECKING:
    from ..world.grid import GridTopology
    from ..world.occupancy import OccupancyMap


class HighlightScanner:
    """Read-only scanner over an occupancy map."""

    def __init__(self, grid: GridTopology, occupancy: OccupancyMap, max_movement_span: int):
        self.grid = grid
        self.occupancy = occupancy
        self.max_movement_span = max_movement_span

    @property
    def directions(self) -> List[int]:
        """Steps for left, up, right, down."""
        return [-1, -self.grid.row_len, 1, self.grid.row_len]

    def scan(self, position: Position) -> Set[Position]:
        """Union of the reachable cells in all four directions."""
        reachable: Set[Position] = set()
        for step in self.directions:
            reachable.update(self.scan_direction(position, step))
        return reachable

    def scan_direction(self, position: Position, step: int) -> List[Position]:
        """Reachable cells in one direction, nearest first."""
        cells: List[Position] = []
        current = position
        nxt = position + step
        while len(cells) < self.max_movement_span and self.grid.is_adjacent(current, nxt):
            occupant = self.occupancy.get(nxt)
            if occupant and not occupant.is_weapon_only:
                break
            cells.append(nxt)
            current = nxt
            nxt += step
        return cells
