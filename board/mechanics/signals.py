"""
CombatSignals - attack and defence markers for the renderer.

These never touch the occupancy map. They only record which cells should
show an attack lean or a shield.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, Mapping, Optional, Set

from ..core.types import AttackDirection, Position


class CombatSignals:
    """Visual combat state: attack leans per attacker cell and shielded cells."""

    def __init__(self):
        self._attack_marks: Dict[Position, AttackDirection] = {}
        self._shields: Set[Position] = set()

    @property
    def attack_marks(self) -> Mapping[Position, AttackDirection]:
        return dict(self._attack_marks)

    @property
    def shields(self) -> FrozenSet[Position]:
        return frozenset(self._shields)

    def attack(self, from_position: Position, to_position: Position) -> AttackDirection:
        """The attacker leans left when its target has a lower index."""
        direction = AttackDirection.LEFT if from_position > to_position else AttackDirection.RIGHT
        self._attack_marks[from_position] = direction
        return direction

    def clear_attack_marks(self) -> None:
        self._attack_marks.clear()

    def add_shield(self, position: Position) -> None:
        self._shields.add(position)

    def remove_shield(self, position: Optional[Position] = None) -> None:
        """Remove one shield, or every shield when no position is given."""
        if position is None:
            self._shields.clear()
        else:
            self._shields.discard(position)

    def clear(self) -> None:
        self.clear_attack_marks()
        self._shields.clear()
