import logging

import pytest

from aoc2022.days import day17


def test_part_one(example):
    assert day17.part_one(example(17)) == 3068


def test_part_two(example):
    assert day17.part_two(example(17)) == 1_514_285_714_288


def test_first_rocks(example):
    jets = day17.parse(example(17))
    chamber = day17.Chamber(jets)
    chamber.drop()
    assert chamber.height == 1
    chamber.drop()
    assert chamber.height == 4


def test_simulated_height_matches(example):
    jets = day17.parse(example(17))
    chamber = day17.Chamber(jets)
    for _ in range(2022):
        chamber.drop()
    assert chamber.height == 3068


def test_invalid_jet():
    with pytest.raises(ValueError):
        day17.parse("<<>x")


def test_no_cycle_within_budget(example, monkeypatch):
    monkeypatch.setattr(day17, "MAX_SIMULATED", 5)
    with pytest.raises(RuntimeError, match="No cycle found"):
        day17.tower_height(day17.parse(example(17)), 2022)


def test_tower_logged_at_debug(example, caplog):
    with caplog.at_level(logging.DEBUG, logger="aoc2022.days.day17"):
        day17.part_one(example(17))
    assert any(r.getMessage().startswith("Top of the tower:\n|") for r in caplog.records)
