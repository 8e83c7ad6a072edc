"""Simulation engine components."""

from .board import Board, DisplaySink
from .engine import (
    MoveKind,
    MoveOutcome,
    RaceEngine,
    RaceOutcome,
    RaceResult,
    RaceStatus,
    Standing,
    TurnReport,
)
from .inertia import InertiaManager
from .velocity import VelocityCalculator

__all__ = [
    "Board",
    "DisplaySink",
    "InertiaManager",
    "MoveKind",
    "MoveOutcome",
    "RaceEngine",
    "RaceOutcome",
    "RaceResult",
    "RaceStatus",
    "Standing",
    "TurnReport",
    "VelocityCalculator",
]
