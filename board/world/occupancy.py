"""
OccupancyMap - the single source of truth for what sits where.

A pure storage primitive: it never validates what it is given. The
engines that mutate it are responsible for its invariants.
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Tuple

from ..core.types import EMPTY, Occupant, Position


class OccupancyMap:
    """Mapping of position -> occupant. Absent keys are empty cells."""

    def __init__(self):
        self._cells: Dict[Position, Occupant] = {}

    def get(self, pos: Position) -> Occupant:
        return self._cells.get(pos, EMPTY)

    def set(self, pos: Position, occupant: Occupant) -> None:
        self._cells[pos] = occupant

    def delete(self, pos: Position) -> None:
        self._cells.pop(pos, None)

    def clear(self) -> None:
        self._cells.clear()

    def is_taken(self, pos: Position) -> bool:
        return pos in self._cells

    def occupied_positions(self) -> List[Position]:
        return sorted(self._cells)

    def items(self) -> Iterator[Tuple[Position, Occupant]]:
        for pos in sorted(self._cells):
            yield pos, self._cells[pos]

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    def __repr__(self) -> str:
        return f"OccupancyMap(occupied={len(self._cells)})"
