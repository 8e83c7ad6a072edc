from unittest.mock import MagicMock

import pytest

from vecrace.exceptions import ConfigurationError
from vecrace.models import Direction, Position
from vecrace.simulation import Board

from .helpers import make_player


def test_track_queries_are_delegated(board):
    assert board.is_free(Position(0, 2))
    assert board.is_obstacle(Position(3, 1))
    assert board.is_obstacle(Position(5, 0))
    assert board.is_finish(Position(4, 4))
    assert not board.is_free(Position(3, 1))


def test_occupied_cell_is_not_free(board):
    player = make_player("P1", 1, 1)
    board.add_player(player)
    assert board.is_occupied(Position(1, 1))
    assert not board.is_free(Position(1, 1))
    assert board.player_at(Position(1, 1)) is player
    assert board.player_at(Position(0, 1)) is None


def test_add_player_on_occupied_cell_fails(board):
    board.add_player(make_player("P1", 0, 0))
    with pytest.raises(ConfigurationError) as excinfo:
        board.add_player(make_player("P2", 0, 0))
    assert excinfo.value.context["occupant"] == "P1"


def test_add_player_on_obstacle_fails(board):
    with pytest.raises(ConfigurationError):
        board.add_player(make_player("P1", 3, 1))


def test_update_player_position_moves_occupancy(board):
    player = make_player("Mover", 0, 0)
    board.add_player(player)

    board.update_player_position(player, Position(2, 3))

    assert player.position == Position(2, 3)
    assert board.occupied_positions() == {Position(2, 3): "Mover"}
    assert board.is_free(Position(0, 0))


def test_update_onto_other_player_leaves_state_untouched(board):
    mover = make_player("Mover", 0, 0)
    blocker = make_player("Blocker", 1, 0)
    board.add_player(mover)
    board.add_player(blocker)

    with pytest.raises(ValueError):
        board.update_player_position(mover, Position(1, 0))

    assert mover.position == Position(0, 0)
    assert board.occupied_positions() == {Position(0, 0): "Mover", Position(1, 0): "Blocker"}


def test_remove_player(board):
    player = make_player("P1", 4, 3)
    board.add_player(player)
    board.remove_player(player)
    assert not board.is_occupied(Position(4, 3))
    assert board.players == []


def test_display_forwards_to_sink(open_track):
    sink = MagicMock()
    board = Board(open_track, display_sink=sink)
    p1, p2 = make_player("P1", 0, 0), make_player("P2", 1, 0)
    board.add_player(p1)
    board.add_player(p2)
    directions = {"P1": Direction.E, "P2": Direction.N}

    board.display([p1, p2], directions)

    sink.assert_called_once_with(board, [p1, p2], directions)


def test_display_without_sink_is_a_no_op(board):
    board.display([], {})
