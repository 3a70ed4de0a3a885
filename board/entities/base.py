"""
Entity base class shared by everything that can occupy a board cell.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, Optional

from ..core.types import EntityKind, Position

_id_counter: Iterator[int] = itertools.count(1)


def get_next_entity_id() -> int:
    """Get the next unique entity ID."""
    return next(_id_counter)


def reset_entity_ids(start: int = 1) -> None:
    """
    Reset the entity ID counter.

    Useful for testing to ensure reproducible IDs.
    """
    global _id_counter
    _id_counter = itertools.count(start)


@dataclass
class Entity:
    """
    Something that sits on the board: a player, a weapon or an obstacle.

    Attributes:
        name: Display name (also the image key used by the renderer)
        position: Current cell index, None until initial placement
        id: Unique entity ID, assigned automatically
    """

    kind: ClassVar[EntityKind]

    name: str
    position: Optional[Position] = field(default=None, kw_only=True)
    id: int = field(default_factory=get_next_entity_id, kw_only=True, compare=False)

    # Subclass registry for from_dict dispatch
    _registry: ClassVar[Dict[EntityKind, type]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if isinstance(kind, EntityKind):
            Entity._registry[kind] = cls

    @property
    def is_placed(self) -> bool:
        return self.position is not None

    def move(self, position: Position) -> None:
        """Stamp a new position on the entity."""
        self.position = position

    def label(self) -> str:
        """Short human-readable label for logs."""
        return f"{self.kind.value}#{self.id}({self.name})"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "kind": self.kind.value,
            "name": self.name,
            "position": self.position,
        }
        data.update(self._extra_dict())
        return data

    def _extra_dict(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Entity:
        """
        Rebuild an entity from to_dict() output.

        Dispatches on the "kind" field to the matching subclass.
        """
        kind = EntityKind(data["kind"])
        entity_cls = Entity._registry.get(kind)
        if entity_cls is None:
            raise ValueError(f"Unknown entity kind: {data['kind']}")
        entity = entity_cls._from_dict_impl(data)
        if "id" in data:
            entity.id = data["id"]
        entity.position = data.get("position")
        return entity

    @classmethod
    def _from_dict_impl(cls, data: Dict[str, Any]) -> Entity:
        raise NotImplementedError

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return self is other


def is_obstacle(entity: Entity) -> bool:
    """True for anything that is neither a player nor a weapon."""
    return entity.kind not in (EntityKind.PLAYER, EntityKind.WEAPON)
