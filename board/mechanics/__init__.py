"""
Mechanics module - board-state resolution systems.

This module provides the engines that operate on an occupancy map:
- PlacementEngine: Constrained-random initial placement
- MovementResolver: Player moves, weapon encounters and weapon swaps
- HighlightScanner: Bounded straight-line reachability
- CombatSignals: Attack/shield markers for the renderer
"""

from .placement import PlacementEngine, DEFAULT_MAX_ATTEMPTS
from .movement import MovementResolver, MoveResult, WeaponEncounter
from .reachability import HighlightScanner
from .signals import CombatSignals

__all__ = [
    "PlacementEngine",
    "DEFAULT_MAX_ATTEMPTS",
    "MovementResolver",
    "MoveResult",
    "WeaponEncounter",
    "HighlightScanner",
    "CombatSignals",
]
