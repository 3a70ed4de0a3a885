"""
Player entity - the only movable piece on the board.

Players:
- Are supplied by the caller at game start
- Always own exactly one weapon
- Can stand on a cell that also holds a weapon lying on the board
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict

from .base import Entity
from .weapon import Weapon
from ..core.types import EntityKind


@dataclass(eq=False)
class Player(Entity):
    """
    A player and the weapon it currently holds.

    The weapon must be passed explicitly as a keyword argument; ownership
    is independent of where that weapon object sits on the board.
    """

    kind: ClassVar[EntityKind] = EntityKind.PLAYER

    weapon: Weapon = field(kw_only=True)

    def __post_init__(self):
        if not isinstance(self.weapon, Weapon):
            raise TypeError(f"{self.name} must own a Weapon, got {type(self.weapon).__name__}")

    def get_weapon(self) -> Weapon:
        return self.weapon

    def take_weapon(self, weapon: Weapon) -> Weapon:
        """
        Replace the owned weapon.

        Returns:
            The weapon the player held before
        """
        old = self.weapon
        self.weapon = weapon
        weapon.move(self.position)
        return old

    def _extra_dict(self) -> Dict[str, Any]:
        return {"weapon": self.weapon.to_dict()}

    @classmethod
    def _from_dict_impl(cls, data: Dict[str, Any]) -> Player:
        weapon = Entity.from_dict(data["weapon"])
        return cls(name=data["name"], weapon=weapon)
