import io
import json
import logging

import pytest

from vecrace.cli import main
from vecrace.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("vecrace")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_run_bots_on_track(data_dir, capsys):
    code = main([
        "--track", str(data_dir / "open_5x5.txt"),
        "--bots", "greedy", "chaser",
        "--max-turns", "5",
        "--seed", "1",
        "--quiet",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "RACE RESULT" in out
    assert "greedy-1" in out
    assert "chaser-2" in out


def test_board_is_drawn_each_turn(data_dir, capsys):
    code = main(["--track", str(data_dir / "open_5x5.txt"), "--bots", "greedy", "--max-turns", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert "--- Turn 1 ---" in out
    assert "--- Turn 2 ---" in out or "RACE RESULT" in out


def test_run_from_config(tmp_path, data_dir, capsys):
    config = tmp_path / "race.json"
    config.write_text(json.dumps({
        "track": str(data_dir / "open_5x5.txt"),
        "max_turns": 4,
        "players": [{"name": "Solo", "kind": "safe_runner"}],
    }))

    assert main(["--config", str(config), "--quiet"]) == 0
    assert "Solo" in capsys.readouterr().out


def test_missing_track_reports_error(tmp_path, capsys):
    code = main(["--track", str(tmp_path / "missing.txt"), "--quiet"])

    assert code == 1
    assert "Cannot read track file" in capsys.readouterr().err


def test_too_many_bots_reports_error(data_dir, capsys):
    code = main([
        "--track", str(data_dir / "test_map.txt"),
        "--bots", "greedy", "greedy",
        "--quiet",
    ])

    assert code == 1
    assert "More players than start cells" in capsys.readouterr().err


def test_configure_logging_replaces_handler():
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    logger = configure_logging("info", stream=stream)

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    logging.getLogger("vecrace.simulation.engine").info("race started")
    assert "race started" in stream.getvalue()
