"""
Obstacle entity - a wall that blocks movement and never shares a cell.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from .base import Entity
from ..core.types import EntityKind


@dataclass(eq=False)
class Obstacle(Entity):
    """A wall. Carries no state beyond its name and position."""

    kind: ClassVar[EntityKind] = EntityKind.OBSTACLE

    name: str = "wall"

    @classmethod
    def _from_dict_impl(cls, data: Dict[str, Any]) -> Obstacle:
        return cls(name=data.get("name", "wall"))
