"""
BoardEngine - the owned board-state object.

This is the API the rendering and rule layers talk to. It owns the
occupancy map for one game session and routes every mutation through the
mechanics engines.

Usage:
    from board import BoardEngine, BoardConfig

    config = BoardConfig.default()
    engine = BoardEngine(config, seed=7)
    engine.initialize_empty_board()

    players = [config.make_player("knight"), config.make_player("ranger")]
    engine.place_all(players)

    cells = engine.compute_highlights(players[0].position)
    encounters = engine.move_player(players[0], min(cells))
    for encounter in encounters:
        if encounter.weapon is not None:
            engine.swap_weapon(encounter.player, encounter.weapon)

Lifecycle:
    construct -> initialize_empty_board() -> place_all() -> play -> reset_all()
"""

from __future__ import annotations
import random
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set

from .config import BoardConfig
from .core.types import AttackDirection, Occupant, Pair, Position
from .entities.base import Entity
from .entities.player import Player
from .entities.weapon import Weapon
from .mechanics import (
    CombatSignals,
    HighlightScanner,
    MovementResolver,
    PlacementEngine,
    WeaponEncounter,
)
from .world import GridTopology, OccupancyMap
from infra.logger import get_logger

log = get_logger(__name__)

EncounterCallback = Callable[[WeaponEncounter], None]


class BoardEngine:
    """
    Board-state engine for one game session.

    The engine manages:
    - The occupancy map (position -> occupant)
    - Initial placement of players, weapons and obstacles
    - Player moves and the weapon encounters they produce
    - The current highlight set and combat markers

    It does NOT handle turn order, damage, win conditions or input; those
    belong to the rule layer that consumes the encounters.

    Attributes:
        config: Board configuration
        grid: Grid topology derived from the config
        rng: Random number generator used for placement
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        on_encounter: Optional[EncounterCallback] = None,
    ):
        """
        Initialize the engine. The board itself is created by initialize_empty_board().

        Args:
            config: Board configuration (default: BoardConfig.default())
            seed: Random seed for reproducible placement
            on_encounter: Called synchronously, in path order, for every weapon encounter
        """
        self.config = config or BoardConfig.default()
        self.grid = GridTopology(self.config.board_size, self.config.row_len)
        self.rng = random.Random(seed)
        self.on_encounter = on_encounter

        self._occupancy: Optional[OccupancyMap] = None
        self._highlights: Set[Position] = set()
        self._signals = CombatSignals()
        self._entities: List[Entity] = []

    # ========================================================================
    # LIFECYCLE
    # ========================================================================

    def initialize_empty_board(self) -> None:
        """Create the empty board for a freshly loaded game."""
        self._occupancy = OccupancyMap()
        self._highlights.clear()
        self._signals.clear()
        self._entities = []
        log.debug("Empty board initialized: %s", self.grid)

    def place_all(self, players: Sequence[Player]) -> List[Entity]:
        """
        Clear the board and place the players, catalog weapons and obstacles.

        Returns:
            Every placed entity, players first

        Raises:
            PlacementError: If the configuration cannot be satisfied
        """
        occupancy = self._require_board()
        occupancy.clear()
        self._highlights.clear()
        self._signals.clear()

        placement = PlacementEngine(
            self.grid,
            occupancy,
            rng=self.rng,
            max_attempts=self.config.max_placement_attempts,
        )
        self._entities = placement.place_all(
            players,
            self.config.weapons,
            self.config.obstacles_num,
        )
        return list(self._entities)

    def reset_all(self) -> None:
        """Clear the board, highlights and combat markers for a new game."""
        self._require_board().clear()
        self._highlights.clear()
        self._signals.clear()
        self._entities = []
        log.info("Board reset")

    # ========================================================================
    # MOVEMENT
    # ========================================================================

    def move_player(self, player: Player, new_position: Position) -> List[WeaponEncounter]:
        """
        Move a player in a straight line.

        Encounters are delivered to on_encounter (if set) in path order
        before this method returns them.

        Raises:
            InvalidMoveError: If the destination is not a straight in-bounds move
            BoardDesyncError: If the board does not hold the player where it claims
        """
        resolver = MovementResolver(self.grid, self._require_board())
        result = resolver.resolve(player, new_position)
        self._highlights.clear()

        if self.on_encounter is not None:
            for encounter in result.encounters:
                self.on_encounter(encounter)

        return result.encounters

    def swap_weapon(self, player: Player, weapon_on_board: Weapon) -> Weapon:
        """
        Exchange the player's weapon with one lying on the board.

        Returns:
            The weapon the player left behind
        """
        resolver = MovementResolver(self.grid, self._require_board())
        return resolver.swap_weapon(player, weapon_on_board)

    # ========================================================================
    # HIGHLIGHTS
    # ========================================================================

    def compute_highlights(self, position: Position) -> Set[Position]:
        """Cells reachable from position this turn; also kept as the current highlight set."""
        scanner = HighlightScanner(self.grid, self._require_board(), self.config.max_movement_span)
        reachable = scanner.scan(position)
        self._highlights.update(reachable)
        return reachable

    def clear_highlights(self) -> None:
        self._highlights.clear()

    @property
    def highlights(self) -> FrozenSet[Position]:
        return frozenset(self._highlights)

    # ========================================================================
    # COMBAT SIGNALS
    # ========================================================================

    def attack(self, from_position: Position, to_position: Position) -> AttackDirection:
        self._highlights.clear()
        return self._signals.attack(from_position, to_position)

    def add_shield(self, position: Position) -> None:
        self._signals.add_shield(position)

    def remove_shield(self, position: Optional[Position] = None) -> None:
        self._signals.remove_shield(position)

    def clear_attack_marks(self) -> None:
        self._signals.clear_attack_marks()

    @property
    def attack_marks(self) -> Mapping[Position, AttackDirection]:
        return self._signals.attack_marks

    @property
    def shields(self) -> FrozenSet[Position]:
        return self._signals.shields

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._occupancy is not None

    def occupant_at(self, position: Position) -> Occupant:
        return self._require_board().get(position)

    @property
    def entities(self) -> List[Entity]:
        return list(self._entities)

    def get_player(self, name: str) -> Optional[Player]:
        for entity in self._entities:
            if isinstance(entity, Player) and entity.name == name:
                return entity
        return None

    def render(self) -> str:
        """
        Text picture of the board, one row per line.

        Empty cells are ".", highlighted empty cells "*", a player standing
        on a weapon "+", otherwise the entity kind's icon.
        """
        occupancy = self._require_board()
        lines = []
        for row in range(self.grid.row_len):
            chars = []
            for col in range(self.grid.row_len):
                pos = row * self.grid.row_len + col
                occupant = occupancy.get(pos)
                if isinstance(occupant, Pair):
                    chars.append("+")
                elif occupant:
                    chars.append(occupant.entity.kind.icon)
                else:
                    chars.append("*" if pos in self._highlights else ".")
            lines.append("".join(chars))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable snapshot of the board for the UI."""
        occupancy = self._require_board()
        return {
            "board_size": self.grid.board_size,
            "row_len": self.grid.row_len,
            "cells": {
                str(pos): [e.to_dict() for e in occupant.entities()]
                for pos, occupant in occupancy.items()
            },
            "highlights": sorted(self._highlights),
            "attack_marks": {str(pos): str(d) for pos, d in self._signals.attack_marks.items()},
            "shields": sorted(self._signals.shields),
        }

    def _require_board(self) -> OccupancyMap:
        if self._occupancy is None:
            raise RuntimeError("Board not initialized; call initialize_empty_board() first")
        return self._occupancy

    def __str__(self) -> str:
        occupied = len(self._occupancy) if self._occupancy is not None else 0
        return f"BoardEngine(grid={self.grid}, occupied={occupied})"
