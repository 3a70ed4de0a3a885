"""
Board world state.

This module provides:
- GridTopology: Spatial logic and geometry
- OccupancyMap: Position -> occupant storage
"""

from .grid import GridTopology
from .occupancy import OccupancyMap

__all__ = [
    "GridTopology",
    "OccupancyMap",
]
