from pathlib import Path

import pytest

from vecrace.models import Track
from vecrace.simulation import Board

from .helpers import OPEN_ROWS

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def open_track() -> Track:
    return Track(name="open", rows=OPEN_ROWS)


@pytest.fixture
def board(open_track) -> Board:
    return Board(open_track)
