"""Bot that heads straight for the nearest finish cell."""

from collections.abc import Sequence

from vecrace.models import Direction, Player

from .base import BoardAwareStrategy


class GreedyStrategy(BoardAwareStrategy):
    """Minimizes Manhattan distance to the closest finish cell."""

    def choose_direction(self, player: Player, allowed: Sequence[Direction]) -> Direction | None:
        finishes = self.board.track.finish_positions
        if not finishes:
            return self.random_safe_direction(player, allowed)

        best_direction = None
        best_distance = None
        for direction in self.safe_directions(player, allowed):
            cell = self.next_cell(player.position, direction)
            distance = min(cell.manhattan(finish) for finish in finishes)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_direction = direction
        return best_direction

    def choose_acceleration(self, player: Player) -> int:
        return 1
