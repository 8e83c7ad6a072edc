"""Console output formatting."""

from collections.abc import Callable, Mapping

from vecrace.models import Direction, Player
from vecrace.simulation import Board, RaceResult, TurnReport


def heading_label(direction: Direction | None) -> str:
    """Compass label of a heading, "-" before the first move."""
    return direction.value if direction is not None else "-"


def player_marker(index: int) -> str:
    """Single character used to draw the player registered at `index`."""
    markers = "123456789ABCDEGHIJKLMNOPQRTUVWXYZ"
    return markers[index % len(markers)]


class ConsoleOutput:
    """Formats race state and results for console display."""

    @staticmethod
    def render_board(
        board: Board,
        players: list[Player],
        previous_directions: Mapping[str, Direction | None],
    ) -> str:
        """Draw the track with players on it, followed by a legend."""
        grid = [list(row) for row in board.track.rows]
        legend = []
        for index, player in enumerate(players):
            marker = player_marker(index)
            heading = heading_label(previous_directions.get(player.name))
            state = "finished" if player.finished else f"speed {player.speed}"
            legend.append(f"{marker} {player.name:<12} {heading:<2} {state}")
            if not player.finished and board.track.in_bounds(player.position):
                grid[player.position.y][player.position.x] = marker
        lines = ["".join(row) for row in grid]
        return "\n".join(lines + [""] + legend)

    @staticmethod
    def print_board(
        board: Board,
        players: list[Player],
        previous_directions: Mapping[str, Direction | None],
    ) -> None:
        print(ConsoleOutput.render_board(board, players, previous_directions))

    @staticmethod
    def print_turn(report: TurnReport) -> None:
        """Print the moves of one turn.

        Args:
            report: Turn report from the engine
        """
        print(f"\n--- Turn {report.turn} ---")
        for move in report.moves:
            direction = move.direction.value if move.direction else "-"
            line = f"{move.player:<12} {move.kind.value:<17} {direction:<3} {move.start} -> {move.end}"
            if move.reason:
                line += f"  ({move.reason})"
            print(line)

    @staticmethod
    def print_results(result: RaceResult) -> None:
        """Print the final classification.

        Args:
            result: Race result from the engine
        """
        print("\n" + "=" * 60)
        print(f"RACE RESULT: {result.outcome.value.upper()} after {result.turns_played} turns")
        print("=" * 60)
        print(f"{'Pos':<4} {'Player':<16} {'Finish':<10} {'Distance':<10} {'Crashes':<8}")
        print("-" * 60)

        for standing in result.standings:
            finish = f"turn {standing.finish_turn}" if standing.finished else "DNF"
            print(
                f"{standing.position:<4} "
                f"{standing.name:<16} "
                f"{finish:<10} "
                f"{standing.distance:<10} "
                f"{standing.crashes:<8}"
            )

        print("=" * 60)
        if result.winners:
            print(f"Winner(s): {', '.join(result.winners)}")
        if not result.finish_reachable:
            print("Warning: no finish cell is reachable from the start cells")


class ConsoleDisplay:
    """Display sink that prints the board after every turn."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def __call__(
        self,
        board: Board,
        players: list[Player],
        previous_directions: Mapping[str, Direction | None],
    ) -> None:
        self.write(ConsoleOutput.render_board(board, players, previous_directions))
