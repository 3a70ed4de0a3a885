"""
Entity definitions for the board-state engine.

This module exports all entity types:
- Entity (base)
- Player (movable, owns a weapon)
- Weapon (pick-up with a damage value)
- Obstacle (wall)
"""

from .base import Entity, is_obstacle, get_next_entity_id, reset_entity_ids
from .weapon import Weapon
from .player import Player
from .obstacle import Obstacle

__all__ = [
    "Entity",
    "Player",
    "Weapon",
    "Obstacle",
    "is_obstacle",
    "get_next_entity_id",
    "reset_entity_ids",
]
