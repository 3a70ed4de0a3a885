"""
Core type definitions for the board-state engine.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic beyond small helpers, just data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple, Union, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from ..entities.base import Entity
    from ..entities.player import Player
    from ..entities.weapon import Weapon

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Board position: a flat cell index in [0, board_size).
# - Index 0 is the TOP-LEFT cell
# - Index increases to the RIGHT, then wraps to the next row DOWN
Position = int


# ============================================================================
# ENTITY KINDS
# ============================================================================

class EntityKind(Enum):
    """Types of entities that can sit on the board."""
    PLAYER = "player"
    WEAPON = "weapon"
    OBSTACLE = "obstacle"

    def __str__(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        """Get the display icon for this entity kind."""
        return {
            EntityKind.PLAYER: "P",
            EntityKind.WEAPON: "W",
            EntityKind.OBSTACLE: "#",
        }[self]


# ============================================================================
# COMBAT SIGNALS
# ============================================================================

class AttackDirection(Enum):
    """Direction an attacker leans towards its target."""
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# OCCUPANTS
# ============================================================================

@dataclass(frozen=True)
class Empty:
    """Nothing sits on the cell."""

    def entities(self) -> Tuple[Entity, ...]:
        return ()

    def contains(self, entity: Entity) -> bool:
        return False

    @property
    def is_weapon_only(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Single:
    """Exactly one entity sits on the cell."""
    entity: Entity

    def entities(self) -> Tuple[Entity, ...]:
        return (self.entity,)

    def contains(self, entity: Entity) -> bool:
        return self.entity is entity

    @property
    def is_weapon_only(self) -> bool:
        return self.entity.kind == EntityKind.WEAPON


@dataclass(frozen=True)
class Pair:
    """
    A player standing on a cell that also holds a weapon.

    This is the only case where two entities share a cell.
    """
    weapon: Weapon
    player: Player

    def entities(self) -> Tuple[Entity, ...]:
        return (self.weapon, self.player)

    def contains(self, entity: Entity) -> bool:
        return self.weapon is entity or self.player is entity

    @property
    def is_weapon_only(self) -> bool:
        return False


EMPTY = Empty()

Occupant = Union[Empty, Single, Pair]


# ============================================================================
# MOVE VALIDATION
# ============================================================================

@dataclass
class MoveValidation:
    """
    Structured result of validating a move request.

    Attributes:
        valid: Whether the move is geometrically acceptable
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "UNPLACED": The player has no position on the board yet
        - "SAME_POSITION": Destination equals the origin
        - "OUT_OF_BOUNDS": Destination is outside the board
        - "NOT_STRAIGHT": Destination is neither in the same row nor the same column
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> MoveValidation:
        """Create a validation success result."""
        return MoveValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> MoveValidation:
        """Create a validation failure result."""
        return MoveValidation(valid=False, error_code=error_code, message=message)
