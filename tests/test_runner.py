import logging

import pytest

from aoc2022 import runner
from aoc2022.core import setup_logging


def test_all_days_available():
    assert runner.available_days() == list(range(1, 26))


def test_unknown_day():
    with pytest.raises(ValueError, match="Unknown day"):
        runner.load_day(26)


def test_unknown_part(example):
    with pytest.raises(ValueError, match="Unknown part"):
        runner.solve_part(1, 3, example(1))


def test_solve_part(example):
    result = runner.solve_part(1, 2, example(1))
    assert result.day == 1
    assert result.part == 2
    assert result.answer == 45_000
    assert result.elapsed >= 0


def test_example_overrides(example):
    assert runner.solve_part(15, 1, example(15), example=True).answer == 26
    assert runner.solve_part(15, 2, example(15), example=True).answer == 56_000_011


@pytest.mark.parametrize(
    "seconds, rendered",
    [
        (5e-8, "50ns"),
        (2.5e-5, "25.00µs"),
        (0.0123, "12.30ms"),
        (3.0, "3.00s"),
    ],
)
def test_format_elapsed(seconds, rendered):
    assert runner.format_elapsed(seconds) == rendered


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUD")


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "aoc.log"
    setup_logging("DEBUG", str(log_file))
    logging.getLogger("aoc2022.test").debug("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text()
    setup_logging("WARNING")
