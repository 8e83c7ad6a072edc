"""Test doubles and builders shared by the test modules."""

from vecrace.models import Player, Position, Strategy, Track
from vecrace.simulation import Board, InertiaManager, RaceEngine, VelocityCalculator

# 5x5 track with a single obstacle at (3,1) and the finish in the far corner
OPEN_ROWS = (
    "S....",
    "...#.",
    ".....",
    ".....",
    "....F",
)


class ScriptedStrategy(Strategy):
    """Plays back fixed directions and accelerations, then stalls."""

    def __init__(self, directions=(), accelerations=()):
        self.directions = list(directions)
        self.accelerations = list(accelerations)
        self.seen_allowed = []

    def choose_direction(self, player, allowed):
        self.seen_allowed.append(list(allowed))
        return self.directions.pop(0) if self.directions else None

    def choose_acceleration(self, player):
        return self.accelerations.pop(0) if self.accelerations else 0


class FailingStrategy(Strategy):
    def choose_direction(self, player, allowed):
        raise RuntimeError("bot crashed")

    def choose_acceleration(self, player):
        return 0


class FailingAccelerationStrategy(Strategy):
    def choose_direction(self, player, allowed):
        return allowed[0]

    def choose_acceleration(self, player):
        raise RuntimeError("throttle stuck")


class RawValueStrategy(Strategy):
    """Returns plain values instead of a Direction and an int."""

    def __init__(self, direction="E", acceleration=1):
        self.direction = direction
        self.acceleration = acceleration

    def choose_direction(self, player, allowed):
        return self.direction

    def choose_acceleration(self, player):
        return self.acceleration


def make_player(name, x, y, directions=(), accelerations=(), **state) -> Player:
    return Player(
        name=name,
        position=Position(x, y),
        strategy=ScriptedStrategy(directions, accelerations),
        **state,
    )


def make_engine(rows=OPEN_ROWS, max_turns=10, display_sink=None, **kwargs) -> RaceEngine:
    board = Board(Track(rows=rows), display_sink=display_sink)
    return RaceEngine(board, VelocityCalculator(), InertiaManager(), max_turns, **kwargs)
