"""Player race state and the strategy interface that drives it."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vecrace.models.geometry import Direction, Position

MIN_SPEED = 0
MAX_SPEED = 3


class Strategy(ABC):
    """Decision policy for one player.

    Implementations may read the board, the track and other players'
    positions, but never mutate race state.
    """

    @abstractmethod
    def choose_direction(
        self, player: "Player", allowed: Sequence[Direction]
    ) -> Direction | None:
        """Pick a direction from `allowed`, or None when no safe move exists."""

    @abstractmethod
    def choose_acceleration(self, player: "Player") -> int:
        """Pick a speed change in {-1, 0, 1}."""


class Player(BaseModel):
    """Represents one competitor and its mutable race state."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Unique player name")
    position: Position = Field(..., description="Current cell")
    strategy: Strategy = Field(..., description="Direction/acceleration policy")

    # Race state (mutated by the engine)
    speed: int = Field(default=0, description="Current speed, clamped to [0, 3]")
    previous_direction: Direction | None = Field(
        default=None,
        description="Direction of the last committed move (None before the first)",
    )
    finished: bool = Field(default=False, description="Reached a finish cell")
    finish_turn: int | None = Field(default=None, description="Turn the finish was reached")
    crashes: int = Field(default=0, description="Number of crashes so far")
    distance: int = Field(default=0, description="Total committed displacement")

    @field_validator("speed")
    @classmethod
    def _clamp_speed(cls, value: int) -> int:
        return max(MIN_SPEED, min(MAX_SPEED, value))

    def choose_direction(self, allowed: Sequence[Direction]) -> Direction | None:
        return self.strategy.choose_direction(self, allowed)

    def choose_acceleration(self) -> int:
        return self.strategy.choose_acceleration(self)

    def reset_race_state(self, start: Position) -> None:
        """Reset mutable state for a new race starting at `start`."""
        self.position = start
        self.speed = 0
        self.previous_direction = None
        self.finished = False
        self.finish_turn = None
        self.crashes = 0
        self.distance = 0
