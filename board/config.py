"""
Board configuration.

A BoardConfig holds everything needed to set up a game: board geometry,
obstacle count, movement budget and the weapon catalog. Configs can be
saved to and loaded from JSON so a UI or API can supply them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.errors import ConfigurationError
from .entities.player import Player
from .entities.weapon import Weapon
from .mechanics.placement import DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True)
class WeaponTemplate:
    """Catalog entry used to build a Weapon at game start."""
    name: str
    damage: int

    def build(self) -> Weapon:
        return Weapon(name=self.name, damage=self.damage)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "damage": self.damage}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> WeaponTemplate:
        return cls(name=data["name"], damage=int(data["damage"]))


DEFAULT_WEAPONS = [
    WeaponTemplate("sword", 20),
    WeaponTemplate("axe", 25),
    WeaponTemplate("mace", 30),
    WeaponTemplate("bow", 15),
]

DEFAULT_PLAYER_WEAPON = WeaponTemplate("dagger", 10)


@dataclass
class BoardConfig:
    """
    Immutable-by-convention game configuration.

    Attributes:
        board_size: Total cell count (row_len squared)
        row_len: Cells per row
        obstacles_num: Number of obstacles placed at game start
        max_movement_span: Maximum cells a player may move in one direction
        weapons: Weapon catalog, one board weapon per entry
        player_weapon: Weapon a freshly created player starts with
        max_placement_attempts: Random draws allowed per entity before placement fails
    """
    board_size: int = 100
    row_len: int = 10
    obstacles_num: int = 12
    max_movement_span: int = 3
    weapons: List[WeaponTemplate] = field(default_factory=lambda: list(DEFAULT_WEAPONS))
    player_weapon: WeaponTemplate = DEFAULT_PLAYER_WEAPON
    max_placement_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """
        Raises:
            ConfigurationError: If any field is out of range
        """
        if self.row_len <= 0:
            raise ConfigurationError(f"row_len must be positive, got {self.row_len}")
        if self.row_len * self.row_len != self.board_size:
            raise ConfigurationError(
                f"board_size must equal row_len squared ({self.row_len}^2 != {self.board_size})"
            )
        if self.obstacles_num < 0:
            raise ConfigurationError(f"obstacles_num must be non-negative, got {self.obstacles_num}")
        if self.max_movement_span <= 0:
            raise ConfigurationError(f"max_movement_span must be positive, got {self.max_movement_span}")
        if not self.weapons:
            raise ConfigurationError("weapon catalog must not be empty")
        if any(w.damage < 0 for w in [*self.weapons, self.player_weapon]):
            raise ConfigurationError("weapon damage must be non-negative")
        if self.max_placement_attempts <= 0:
            raise ConfigurationError(
                f"max_placement_attempts must be positive, got {self.max_placement_attempts}"
            )

    @classmethod
    def default(cls) -> BoardConfig:
        """The stock 10x10 board."""
        return cls()

    def make_player(self, name: str) -> Player:
        """Create an unplaced player holding the configured starting weapon."""
        return Player(name=name, weapon=self.player_weapon.build())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board_size": self.board_size,
            "row_len": self.row_len,
            "obstacles_num": self.obstacles_num,
            "max_movement_span": self.max_movement_span,
            "weapons": [w.to_dict() for w in self.weapons],
            "player_weapon": self.player_weapon.to_dict(),
            "max_placement_attempts": self.max_placement_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BoardConfig:
        """
        Build a config from a dict, falling back to defaults for missing keys.

        Raises:
            ConfigurationError: If the resulting config is invalid
        """
        defaults = cls()
        weapons = data.get("weapons")
        player_weapon = data.get("player_weapon")
        try:
            return cls(
                board_size=int(data.get("board_size", defaults.board_size)),
                row_len=int(data.get("row_len", defaults.row_len)),
                obstacles_num=int(data.get("obstacles_num", defaults.obstacles_num)),
                max_movement_span=int(data.get("max_movement_span", defaults.max_movement_span)),
                weapons=[WeaponTemplate.from_dict(w) for w in weapons] if weapons is not None else defaults.weapons,
                player_weapon=(
                    WeaponTemplate.from_dict(player_weapon) if player_weapon else defaults.player_weapon
                ),
                max_placement_attempts=int(
                    data.get("max_placement_attempts", defaults.max_placement_attempts)
                ),
            )
        except ConfigurationError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Malformed board config: {exc}") from exc

    def to_json(self, filepath: Optional[str | Path] = None, indent: int = 2) -> str:
        """
        Serialize to JSON.

        Args:
            filepath: If provided, also write to this file
            indent: JSON indentation (default: 2)
        """
        json_str = json.dumps(self.to_dict(), indent=indent)

        if filepath:
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json_str, encoding="utf-8")

        return json_str

    @classmethod
    def from_json(cls, json_str: Optional[str] = None, filepath: Optional[str | Path] = None) -> BoardConfig:
        """
        Deserialize from JSON.

        Raises:
            ValueError: If neither json_str nor filepath provided
            ConfigurationError: If the file cannot be read or is not valid JSON
        """
        if filepath:
            try:
                json_str = Path(filepath).read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigurationError(f"Cannot read board config {filepath}: {exc}") from exc

        if json_str is None:
            raise ValueError("Must provide either json_str or filepath")

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Board config is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError("Board config must be a JSON object")
        return cls.from_dict(data)

    def clone(self) -> BoardConfig:
        return BoardConfig.from_dict(self.to_dict())
