"""Data models for the vector race."""

from .geometry import Direction, Position
from .player import MAX_SPEED, MIN_SPEED, Player, Strategy
from .track import CellType, Track

__all__ = [
    "CellType",
    "Direction",
    "MAX_SPEED",
    "MIN_SPEED",
    "Player",
    "Position",
    "Strategy",
    "Track",
]
