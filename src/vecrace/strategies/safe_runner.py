"""Bot that runs for the finish while keeping away from other players."""

from collections.abc import Sequence

import numpy as np

from vecrace.models import Direction, Player, Position
from vecrace.simulation.board import Board

from .base import BoardAwareStrategy


class SafeRunnerStrategy(BoardAwareStrategy):
    """Scores each move as -distance_to_finish + alpha * distance_to_nearest_player."""

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        alpha: float = 0.5,
        comfort_distance: int = 1,
    ):
        """Initialize the safe runner.

        Args:
            board: Board to read track and occupancy from
            rng: Random number generator
            alpha: Weight of the distance kept from other players
            comfort_distance: Brake when another player is this close (Manhattan)
        """
        super().__init__(board, rng)
        self.alpha = alpha
        self.comfort_distance = comfort_distance

    def nearest_player_distance(self, player: Player, position: Position) -> float:
        distances = [position.manhattan(other.position) for other in self.other_players(player)]
        return float(min(distances)) if distances else 0.0

    def choose_direction(self, player: Player, allowed: Sequence[Direction]) -> Direction | None:
        finishes = self.board.track.finish_positions
        if not finishes:
            return self.random_safe_direction(player, allowed)

        best_direction = None
        best_score = float("-inf")
        for direction in self.safe_directions(player, allowed):
            cell = self.next_cell(player.position, direction)
            to_finish = min(cell.manhattan(finish) for finish in finishes)
            score = -to_finish + self.alpha * self.nearest_player_distance(player, cell)
            if score > best_score:
                best_score = score
                best_direction = direction
        return best_direction

    def choose_acceleration(self, player: Player) -> int:
        if player.speed < 2:
            return 1
        crowded = any(
            player.position.manhattan(other.position) <= self.comfort_distance
            for other in self.other_players(player)
        )
        return -1 if crowded else 0
