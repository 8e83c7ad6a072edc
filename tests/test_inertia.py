import pytest

from vecrace.models import Direction
from vecrace.simulation import InertiaManager


@pytest.fixture
def manager():
    return InertiaManager()


@pytest.mark.parametrize("speed", [0, 1])
@pytest.mark.parametrize("previous", list(Direction))
def test_low_speed_allows_every_direction(manager, speed, previous):
    assert manager.allowed_directions(speed, previous) == Direction.cycle()


@pytest.mark.parametrize("speed", [0, 1, 2, 3])
def test_first_move_allows_every_direction(manager, speed):
    assert manager.allowed_directions(speed, None) == Direction.cycle()


def test_speed_two_allows_ninety_degrees(manager):
    allowed = manager.allowed_directions(2, Direction.N)
    assert set(allowed) == {Direction.N, Direction.NE, Direction.NW, Direction.E, Direction.W}
    assert Direction.S not in allowed
    assert Direction.SE not in allowed
    assert Direction.SW not in allowed


def test_speed_three_allows_forty_five_degrees(manager):
    allowed = manager.allowed_directions(3, Direction.N)
    assert set(allowed) == {Direction.N, Direction.NE, Direction.NW}


@pytest.mark.parametrize("previous", list(Direction))
def test_cone_sizes_for_every_heading(manager, previous):
    assert len(manager.allowed_directions(2, previous)) == 5
    assert len(manager.allowed_directions(3, previous)) == 3
    assert previous in manager.allowed_directions(3, previous)


def test_cone_wraps_around_the_cycle(manager):
    assert manager.allowed_directions(3, Direction.NW) == [Direction.N, Direction.W, Direction.NW]
