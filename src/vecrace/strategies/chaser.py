"""Bot that chases the nearest opponent instead of the finish."""

from collections.abc import Sequence

from vecrace.models import Direction, Player

from .base import BoardAwareStrategy


class ChaserStrategy(BoardAwareStrategy):
    """Steers toward the closest other player on the board."""

    def find_target(self, player: Player) -> Player | None:
        others = self.other_players(player)
        if not others:
            return None
        return min(others, key=lambda other: player.position.manhattan(other.position))

    def choose_direction(self, player: Player, allowed: Sequence[Direction]) -> Direction | None:
        target = self.find_target(player)
        if target is None:
            return self.random_safe_direction(player, allowed)

        best_direction = None
        best_distance = None
        for direction in self.safe_directions(player, allowed):
            distance = self.next_cell(player.position, direction).manhattan(target.position)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_direction = direction
        return best_direction

    def choose_acceleration(self, player: Player) -> int:
        # Below speed 2 always speed up; otherwise a coin flip keeps the pace varied
        if player.speed <= 1:
            return 1
        return 1 if self.rng.random() < 0.5 else -1
