"""
MovementResolver - Player relocation along straight paths.

This module handles:
- Validating move geometry
- Vacating the old cell (leaving any weapon behind)
- Reporting every occupied cell along the path, nearest first
- Co-locating the player with a weapon lying on the destination
- Swapping the player's weapon with one lying on the board
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict, List
from dataclasses import dataclass, field

from ..core.errors import BoardDesyncError, InvalidMoveError
from ..core.types import Occupant, Pair, Position, Single
from ..core.validation import validate_move
from ..entities.weapon import Weapon
from infra.logger import get_logger

if TYPE_CHECKING:
    from ..entities.player import Player
    from ..world.grid import GridTopology
    from ..world.occupancy import OccupancyMap

log = get_logger(__name__)


@dataclass
class WeaponEncounter:
    """
    Reported when a moving player's path passes over or lands on an occupied cell.

    Attributes:
        occupant: Whatever sits on the encountered cell
        player: The moving player
        destination: Final destination of the move
        position: The encountered cell
    """
    occupant: Occupant
    player: Player
    destination: Position
    position: Position

    @property
    def weapon(self) -> Weapon | None:
        """The weapon lying on the encountered cell, if there is one."""
        if isinstance(self.occupant, Pair):
            return self.occupant.weapon
        if self.occupant.is_weapon_only:
            return self.occupant.entity
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "destination": self.destination,
            "player": self.player.name,
            "occupants": [e.to_dict() for e in self.occupant.entities()],
        }


@dataclass
class MoveResult:
    """
    Result of resolving a single move.

    Attributes:
        player: The player that moved
        old_position: Position before the move
        new_position: Position after the move
        encounters: Occupied cells met along the path, in path order
    """
    player: Player
    old_position: Position
    new_position: Position
    encounters: List[WeaponEncounter] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player.name,
            "old_position": self.old_position,
            "new_position": self.new_position,
            "encounters": [e.to_dict() for e in self.encounters],
        }


class MovementResolver:
    """
    Resolver for player moves on an occupancy map.

    Destination legality under game rules is not checked here; only the
    geometry of the path is. Moving onto a non-weapon occupant overwrites it.
    """

    def __init__(self, grid: GridTopology, occupancy: OccupancyMap):
        self.grid = grid
        self.occupancy = occupancy

    def resolve(self, player: Player, new_position: Position) -> MoveResult:
        """
        Move a player and collect the weapon encounters along its path.

        Raises:
            InvalidMoveError: If the path is not a straight in-bounds line
            BoardDesyncError: If the player's recorded cell does not hold it
        """
        validation = validate_move(self.grid, player, new_position)
        if not validation.valid:
            raise InvalidMoveError(validation.error_code, validation.message)

        old_position = player.position
        self._vacate(player, old_position)
        encounters = self.path_encounters(player, old_position, new_position)
        self._occupy(player, new_position)

        player.move(new_position)
        player.weapon.move(new_position)

        log.info(
            "%s moves %d -> %d (%d encounters)",
            player.label(), old_position, new_position, len(encounters),
        )
        return MoveResult(
            player=player,
            old_position=old_position,
            new_position=new_position,
            encounters=encounters,
        )

    def path_encounters(
        self,
        player: Player,
        old_position: Position,
        new_position: Position,
    ) -> List[WeaponEncounter]:
        """Occupied cells between origin (excluded) and destination (included)."""
        step = self.grid.straight_step(old_position, new_position)
        step_count = abs(new_position - old_position) // abs(step)

        encounters: List[WeaponEncounter] = []
        for i in range(1, step_count + 1):
            pos = old_position + i * step
            occupant = self.occupancy.get(pos)
            if occupant:
                encounters.append(WeaponEncounter(
                    occupant=occupant,
                    player=player,
                    destination=new_position,
                    position=pos,
                ))
        return encounters

    def swap_weapon(self, player: Player, weapon_on_board: Weapon) -> Weapon:
        """
        Drop the player's weapon where weapon_on_board lies and hand the
        board weapon to the player.

        Returns:
            The weapon the player dropped

        Raises:
            BoardDesyncError: If weapon_on_board is not where it claims to be
        """
        pos = weapon_on_board.position
        occupant = self.occupancy.get(pos) if pos is not None else None

        if isinstance(occupant, Pair) and occupant.weapon is weapon_on_board:
            dropped = player.take_weapon(weapon_on_board)
            dropped.move(pos)
            self.occupancy.set(pos, Pair(weapon=dropped, player=occupant.player))
        elif isinstance(occupant, Single) and occupant.entity is weapon_on_board:
            dropped = player.take_weapon(weapon_on_board)
            dropped.move(pos)
            self.occupancy.set(pos, Single(dropped))
        else:
            log.error("%s is not on the board at %s", weapon_on_board.label(), pos)
            raise BoardDesyncError(
                f"{weapon_on_board.label()} is not recorded at position {pos}"
            )

        log.info("%s swaps %s for %s at %d", player.label(), dropped.name, weapon_on_board.name, pos)
        return dropped

    def _vacate(self, player: Player, pos: Position) -> None:
        occupant = self.occupancy.get(pos)
        if isinstance(occupant, Pair) and occupant.player is player:
            self.occupancy.set(pos, Single(occupant.weapon))
        elif isinstance(occupant, Single) and occupant.entity is player:
            self.occupancy.delete(pos)
        else:
            log.error("%s not found at its recorded position %d", player.label(), pos)
            raise BoardDesyncError(
                f"{player.label()} is recorded at {pos} but the cell holds {occupant!r}"
            )

    def _occupy(self, player: Player, pos: Position) -> None:
        occupant = self.occupancy.get(pos)
        if occupant.is_weapon_only:
            self.occupancy.set(pos, Pair(weapon=occupant.entity, player=player))
        else:
            self.occupancy.set(pos, Single(player))
