"""
Weapon entity - lies on the board until a player picks it up.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict

from .base import Entity
from ..core.types import EntityKind


@dataclass(eq=False)
class Weapon(Entity):
    """
    A weapon with a fixed damage value.

    A weapon is either lying on the board or owned by a player; its
    position field is kept in step with its owner while carried.
    """

    kind: ClassVar[EntityKind] = EntityKind.WEAPON

    damage: int = field(default=0, kw_only=True)

    def __post_init__(self):
        if self.damage < 0:
            raise ValueError(f"Weapon damage must be non-negative: {self.damage}")

    def _extra_dict(self) -> Dict[str, Any]:
        return {"damage": self.damage}

    @classmethod
    def _from_dict_impl(cls, data: Dict[str, Any]) -> Weapon:
        return cls(name=data["name"], damage=data.get("damage", 0))
