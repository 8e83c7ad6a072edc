"""Shared helpers for automated strategies."""

from collections.abc import Sequence

import numpy as np

from vecrace.models import Direction, Player, Position, Strategy
from vecrace.simulation.board import Board


class BoardAwareStrategy(Strategy):
    """Base for bots that look one cell ahead on the board.

    The random source is injected so that races are reproducible.
    """

    def __init__(self, board: Board, rng: np.random.Generator | None = None):
        """Initialize the strategy.

        Args:
            board: Board to read track and occupancy from
            rng: Random number generator
        """
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()

    def next_cell(self, position: Position, direction: Direction) -> Position:
        return position.translate(direction)

    def safe_directions(self, player: Player, allowed: Sequence[Direction]) -> list[Direction]:
        """Allowed directions whose next cell is drivable and unoccupied."""
        return [
            direction
            for direction in allowed
            if self.board.is_free(self.next_cell(player.position, direction))
        ]

    def random_safe_direction(self, player: Player, allowed: Sequence[Direction]) -> Direction | None:
        safe = self.safe_directions(player, allowed)
        if not safe:
            return None
        return safe[int(self.rng.integers(len(safe)))]

    def other_players(self, player: Player) -> list[Player]:
        return [other for other in self.board.players if other.name != player.name]
