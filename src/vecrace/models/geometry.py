"""Grid coordinates and the eight compass directions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Unit directions in clockwise order starting from north.

    The y axis grows downwards (row index), so north is (0, -1).
    """

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @property
    def dx(self) -> int:
        return _UNIT_VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _UNIT_VECTORS[self][1]

    @property
    def ordinal(self) -> int:
        """Position in the cyclic order N, NE, E, SE, S, SW, W, NW."""
        return _CYCLE.index(self)

    def rotate(self, steps: int) -> "Direction":
        """Rotate clockwise by `steps` 45 degree steps (negative = counter-clockwise)."""
        return _CYCLE[(self.ordinal + steps) % len(_CYCLE)]

    def angular_steps(self, other: "Direction") -> int:
        """Smallest number of 45 degree steps between two directions (0-4)."""
        diff = abs(self.ordinal - other.ordinal) % len(_CYCLE)
        return min(diff, len(_CYCLE) - diff)

    @classmethod
    def cycle(cls) -> list["Direction"]:
        return list(_CYCLE)

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a direction name such as 'ne' or ' SW '.

        Raises:
            ValueError: If the text is not a direction name
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown direction: {text!r}") from None


_CYCLE: tuple[Direction, ...] = tuple(Direction)

_UNIT_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (1, 1),
    Direction.S: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, -1),
}


class Position(BaseModel):
    """Immutable integer grid coordinate."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., description="Column index")
    y: int = Field(..., description="Row index")

    def __init__(self, x: int, y: int, **data):
        super().__init__(x=x, y=y, **data)

    def translate(self, direction: Direction, steps: int = 1) -> "Position":
        """Move `steps` cells along a direction."""
        return Position(self.x + direction.dx * steps, self.y + direction.dy * steps)

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
