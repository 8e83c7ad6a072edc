"""Static race track: a rectangular grid of free, obstacle, start and finish cells."""

from collections import deque
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vecrace.exceptions import TrackFormatError
from vecrace.models.geometry import Direction, Position


class CellType(str, Enum):
    """Cell classification, valued by its track-file symbol."""

    FREE = "."
    OBSTACLE = "#"
    START = "S"
    FINISH = "F"


class Track(BaseModel):
    """Represents a loaded track.

    Immutable after construction. Any coordinate outside
    [0, width) x [0, height) reads as an obstacle.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="track", description="Track name (usually the file stem)")
    rows: tuple[str, ...] = Field(..., description="Grid rows, top to bottom")

    @model_validator(mode="after")
    def _check_grid(self) -> "Track":
        if not self.rows or not self.rows[0]:
            raise TrackFormatError("Track grid is empty", {"track": self.name})
        width = len(self.rows[0])
        symbols = {cell.value for cell in CellType}
        for y, row in enumerate(self.rows):
            if len(row) != width:
                raise TrackFormatError(
                    "Track rows must all have the same width",
                    {"track": self.name, "row": y, "expected": width, "found": len(row)},
                )
            for x, symbol in enumerate(row):
                if symbol not in symbols:
                    raise TrackFormatError(
                        f"Unknown track symbol {symbol!r}",
                        {"track": self.name, "x": x, "y": y},
                    )
        return self

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def get_cell(self, position: Position) -> CellType:
        """Cell type at a position (OBSTACLE outside the grid)."""
        if not self.in_bounds(position):
            return CellType.OBSTACLE
        return CellType(self.rows[position.y][position.x])

    def is_free(self, position: Position) -> bool:
        """Whether a car may stand on the cell (anything but an obstacle)."""
        return self.get_cell(position) != CellType.OBSTACLE

    def is_obstacle(self, position: Position) -> bool:
        return self.get_cell(position) == CellType.OBSTACLE

    def is_finish(self, position: Position) -> bool:
        return self.get_cell(position) == CellType.FINISH

    def is_start(self, position: Position) -> bool:
        return self.get_cell(position) == CellType.START

    def _positions_of(self, cell_type: CellType) -> list[Position]:
        return [
            Position(x, y)
            for y, row in enumerate(self.rows)
            for x, symbol in enumerate(row)
            if symbol == cell_type.value
        ]

    @property
    def start_positions(self) -> list[Position]:
        """All start cells in row-major order."""
        return self._positions_of(CellType.START)

    @property
    def finish_positions(self) -> list[Position]:
        """All finish cells in row-major order."""
        return self._positions_of(CellType.FINISH)

    def get_start_position(self) -> Position | None:
        starts = self.start_positions
        return starts[0] if starts else None

    def get_finish_position(self) -> Position | None:
        finishes = self.finish_positions
        return finishes[0] if finishes else None

    def has_reachable_finish(self) -> bool:
        """Whether any finish cell can be reached from any start cell.

        Uses single-cell steps in all eight directions; a car can always
        slow down to speed 1, so this is the loosest reachability test.
        """
        frontier = deque(self.start_positions)
        seen = set(frontier)
        while frontier:
            current = frontier.popleft()
            if self.is_finish(current):
                return True
            for direction in Direction:
                neighbour = current.translate(direction)
                if neighbour not in seen and self.is_free(neighbour):
                    seen.add(neighbour)
                    frontier.append(neighbour)
        return False

    def __str__(self) -> str:
        return "\n".join(self.rows)
