from vecrace.models import Direction, Position
from vecrace.output import ConsoleDisplay, ConsoleOutput
from vecrace.simulation import MoveKind, MoveOutcome, RaceOutcome, RaceResult, Standing, TurnReport

from .helpers import make_player


def test_render_board_marks_players(board):
    p1 = make_player("Alpha", 1, 2, speed=2)
    p2 = make_player("Beta", 0, 4)
    board.add_player(p1)
    board.add_player(p2)

    text = ConsoleOutput.render_board(board, [p1, p2], {"Alpha": Direction.E, "Beta": None})

    lines = text.splitlines()
    assert lines[2] == ".1..."
    assert lines[4] == "2...F"
    assert any(line.startswith("1 Alpha") and "E  speed 2" in line for line in lines)
    assert any(line.startswith("2 Beta") and "-" in line for line in lines)


def test_diagonal_headings_are_distinct(board):
    players = [make_player(name, x, 2) for name, x in (("NE", 0), ("SW", 1), ("SE", 2), ("NW", 4))]
    for player in players:
        board.add_player(player)
    headings = {player.name: Direction(player.name) for player in players}

    legend = ConsoleOutput.render_board(board, players, headings).splitlines()[-4:]

    labels = [line.split()[2] for line in legend]
    assert labels == ["NE", "SW", "SE", "NW"]


def test_finished_players_are_not_drawn(board):
    player = make_player("Done", 4, 4)
    player.finished = True

    text = ConsoleOutput.render_board(board, [player], {"Done": Direction.SE})

    assert text.splitlines()[4] == "....F"
    assert "finished" in text


def test_console_display_sink(board):
    written = []
    display = ConsoleDisplay(write=written.append)
    board.display_sink = display

    board.display([], {})

    assert written == [ConsoleOutput.render_board(board, [], {})]


def test_print_turn_and_results(capsys):
    report = TurnReport(
        turn=3,
        moves=[
            MoveOutcome(
                player="Alpha",
                kind=MoveKind.CRASHED_OBSTACLE,
                start=Position(0, 1),
                end=Position(0, 1),
                direction=Direction.E,
                target=Position(3, 1),
            )
        ],
    )
    result = RaceResult(
        outcome=RaceOutcome.WON,
        turns_played=7,
        standings=[
            Standing(position=1, name="Alpha", finished=True, finish_turn=7, distance=12, crashes=1),
            Standing(position=2, name="Beta", finished=False, finish_turn=None, distance=5, crashes=0),
        ],
        winners=["Alpha"],
    )

    ConsoleOutput.print_turn(report)
    ConsoleOutput.print_results(result)

    out = capsys.readouterr().out
    assert "--- Turn 3 ---" in out
    assert "crashed_obstacle" in out
    assert "RACE RESULT: WON after 7 turns" in out
    assert "DNF" in out
    assert "Winner(s): Alpha" in out
