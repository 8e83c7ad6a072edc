"""Speed implied by a displacement on the grid."""

from vecrace.models import Position


class VelocityCalculator:
    """Measures displacement with the Chebyshev metric.

    A diagonal step covers the same number of speed units as an orthogonal one.
    """

    def speed(self, start: Position, end: Position) -> int:
        return max(abs(end.x - start.x), abs(end.y - start.y))
