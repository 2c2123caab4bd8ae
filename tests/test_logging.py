import json
import logging

import pytest
import structlog

from dice_roller import (
    InvalidCountError,
    InvalidRangeError,
    Roller,
    roll_single,
    roll_with_advantage,
    roll_with_modifier,
)
from dice_roller.config import Settings
from dice_roller.logging import setup_logging
from dice_roller.metrics import get_counter


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "dice.jsonl"
    setup_logging(
        Settings(
            logging_level="DEBUG",
            logging_console="NONE",
            logging_file="DEBUG",
            logging_file_path=str(path),
        )
    )
    yield path
    logging.basicConfig(handlers=[], force=True)


def _events(path):
    for h in logging.getLogger().handlers:
        h.flush()
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]


def test_roll_emits_json_events(log_file, fixed_source):
    Roller(fixed_source([4, 6])).roll_with_modifier(2, 6, 3)
    events = _events(log_file)
    names = [e["event"] for e in events]
    assert "dice.roll.start" in names
    done = next(e for e in events if e["event"] == "dice.roll.result")
    assert done["result"]["rolls"] == [4, 6]
    assert done["result"]["total"] == 13
    assert done["level"] == "debug"
    assert "timestamp" in done


def test_rejection_is_raised_not_logged(log_file, fixed_source):
    with pytest.raises(InvalidRangeError):
        Roller(fixed_source([])).roll_single(0)
    with pytest.raises(InvalidCountError):
        Roller(fixed_source([])).roll_with_modifier(-1, 6, 0)
    assert _events(log_file) == []
    assert get_counter("dice.roll.rejected") == 2


def test_file_handler_skipped_when_none(tmp_path):
    path = tmp_path / "never.jsonl"
    setup_logging(Settings(logging_console="NONE", logging_file="NONE", logging_file_path=str(path)))
    try:
        assert logging.getLogger().handlers == []
        assert not path.exists()
    finally:
        logging.basicConfig(handlers=[], force=True)


def test_library_is_silent_without_setup(capsys):
    structlog.reset_defaults()
    logging.basicConfig(handlers=[], force=True)
    res = roll_with_modifier(2, 6, 3)
    roll_with_advantage(20)
    with pytest.raises(InvalidRangeError):
        roll_single(0)
    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""
    assert res.total == sum(res.rolls) + 3
