"""Turning limits imposed by momentum."""

from vecrace.models import Direction


class InertiaManager:
    """Computes the directions a player may take this turn.

    At speed 0 or 1 (or before the first move) every direction is open.
    At speed 2 the player may turn up to 90 degrees from its previous
    direction, at speed 3 only up to 45 degrees.
    """

    # speed -> maximum number of 45 degree steps away from the previous direction
    TURN_LIMITS: dict[int, int] = {2: 2, 3: 1}

    def max_turn_steps(self, speed: int) -> int | None:
        """Largest allowed turn in 45 degree steps, or None when unrestricted."""
        if speed <= 1:
            return None
        return self.TURN_LIMITS.get(speed, min(self.TURN_LIMITS.values()))

    def allowed_directions(
        self, speed: int, previous_direction: Direction | None
    ) -> list[Direction]:
        """Directions permitted at `speed` after moving along `previous_direction`.

        Args:
            speed: Player speed for this turn
            previous_direction: Direction of the last committed move, if any

        Returns:
            Allowed directions in cyclic order starting from N
        """
        limit = self.max_turn_steps(speed)
        if limit is None or previous_direction is None:
            return Direction.cycle()
        return [
            direction
            for direction in Direction.cycle()
            if direction.angular_steps(previous_direction) <= limit
        ]
