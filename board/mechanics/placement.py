"""
PlacementEngine - constrained-random initial placement.

This module handles:
- Building the list of entities for a new game
- Rejection sampling of random cells
- The legality predicate that keeps players and weapons apart and stops
  obstacles from forming interior junctions
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, List, Sequence

from ..core.errors import PlacementError
from ..core.types import Position, Single
from ..entities.base import Entity, is_obstacle
from ..entities.obstacle import Obstacle
from ..entities.player import Player
from infra.logger import get_logger

if TYPE_CHECKING:
    from ..config import WeaponTemplate
    from ..world.grid import GridTopology
    from ..world.occupancy import OccupancyMap

log = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


class PlacementEngine:
    """
    Populates an empty occupancy map at game start.

    Every entity gets a uniformly random empty cell that satisfies the
    legality predicate for its category. The number of draws per entity is
    bounded; running out raises PlacementError instead of spinning forever.
    """

    def __init__(
        self,
        grid: GridTopology,
        occupancy: OccupancyMap,
        rng: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive: {max_attempts}")
        self.grid = grid
        self.occupancy = occupancy
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def build_entities(
        self,
        players: Sequence[Player],
        weapon_templates: Sequence[WeaponTemplate],
        obstacle_count: int,
    ) -> List[Entity]:
        """Players first, then one weapon per template, then the obstacles."""
        entities: List[Entity] = list(players)
        entities.extend(template.build() for template in weapon_templates)
        entities.extend(Obstacle() for _ in range(obstacle_count))
        return entities

    def place_all(
        self,
        players: Sequence[Player],
        weapon_templates: Sequence[WeaponTemplate],
        obstacle_count: int,
    ) -> List[Entity]:
        """
        Place every player, catalog weapon and obstacle on the board.

        Returns:
            All placed entities, in placement order

        Raises:
            PlacementError: If the same player is passed twice, the board
                cannot hold the entities, or a legal cell is not found
                within max_attempts draws
        """
        if len({id(p) for p in players}) != len(players):
            raise PlacementError("The same player was passed more than once")

        entities = self.build_entities(players, weapon_templates, obstacle_count)

        free_cells = self.grid.board_size - len(self.occupancy)
        if len(entities) > free_cells:
            log.error("Cannot place %d entities on %d free cells", len(entities), free_cells)
            raise PlacementError(
                f"Board of {self.grid.board_size} cells cannot hold {len(entities)} entities"
            )

        for entity in entities:
            self.place(entity)

        log.info(
            "Placed %d players, %d weapons, %d obstacles on %s",
            len(players), len(weapon_templates), obstacle_count, self.grid,
        )
        return entities

    def place(self, entity: Entity) -> Position:
        """
        Draw random cells until one is empty and legal for the entity.

        Raises:
            PlacementError: If max_attempts draws all fail
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.rng.randrange(self.grid.board_size)
            if self.occupancy.is_taken(candidate):
                continue
            if not self.is_legal_position(entity, candidate):
                continue

            entity.move(candidate)
            if isinstance(entity, Player):
                entity.weapon.move(candidate)
            self.occupancy.set(candidate, Single(entity))
            log.debug("%s placed at %d after %d attempts", entity.label(), candidate, attempt)
            return candidate

        log.error("No legal cell for %s after %d attempts", entity.label(), self.max_attempts)
        raise PlacementError(
            f"No legal position for {entity.label()} after {self.max_attempts} attempts; "
            f"the board is too small or crowded for this configuration"
        )

    def adjacent_entities(self, pos: Position) -> List[Entity]:
        """Entities on the occupied grid neighbours of a position."""
        neighbours: List[Entity] = []
        for adjacent in self.grid.adjacent_positions(pos):
            neighbours.extend(self.occupancy.get(adjacent).entities())
        return neighbours

    def is_legal_position(self, entity: Entity, pos: Position) -> bool:
        """
        Legality predicate for placing an entity at pos.

        Players and weapons may not touch another player or weapon.
        Obstacles touching more than one occupant must sit on the border next
        to a corner obstacle; lone border obstacles must chain off the top or
        bottom edge.
        """
        neighbours = self.adjacent_entities(pos)

        if not is_obstacle(entity):
            return not any(not is_obstacle(n) for n in neighbours)

        grid = self.grid
        if len(neighbours) > 1:
            if not grid.is_border_edge(pos):
                return False
            return any(
                is_obstacle(n) and grid.is_corner(n.position)
                for n in neighbours
            )
        if grid.is_corner(pos):
            return True
        if grid.is_horizontal_edge(pos):
            return any(grid.is_horizontal_edge(n.position) for n in neighbours)
        if grid.is_vertical_edge(pos):
            # Vertical edges chain off horizontal-edge neighbours as well.
            return any(grid.is_horizontal_edge(n.position) for n in neighbours)
        return True
