"""
Board-state engine for a grid-based tactical board game.

Usage:
    from board import BoardEngine, BoardConfig
"""

from .config import BoardConfig, WeaponTemplate
from .engine import BoardEngine
from .entities import Entity, Player, Weapon, Obstacle
from .mechanics import WeaponEncounter
from .core import (
    EMPTY,
    Single,
    Pair,
    AttackDirection,
    BoardError,
    ConfigurationError,
    PlacementError,
    InvalidMoveError,
    BoardDesyncError,
)

__all__ = [
    "BoardEngine",
    "BoardConfig",
    "WeaponTemplate",
    "Entity",
    "Player",
    "Weapon",
    "Obstacle",
    "WeaponEncounter",
    "EMPTY",
    "Single",
    "Pair",
    "AttackDirection",
    "BoardError",
    "ConfigurationError",
    "PlacementError",
    "InvalidMoveError",
    "BoardDesyncError",
]
