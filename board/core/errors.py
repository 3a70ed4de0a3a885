"""
Error taxonomy for the board-state engine.

Normal empty outcomes (no encounters on a path, no reachable cells) are
returned as empty collections and never raised.
"""

from __future__ import annotations


class BoardError(Exception):
    """Base class for every error raised by the board engine."""


class ConfigurationError(BoardError, ValueError):
    """The board configuration is invalid or cannot be satisfied."""


class PlacementError(ConfigurationError):
    """No legal position could be found for an entity within the attempt budget."""


class InvalidMoveError(BoardError, ValueError):
    """A move request was rejected before touching the occupancy map."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class BoardDesyncError(BoardError, RuntimeError):
    """The occupancy map disagrees with an entity's recorded position."""
