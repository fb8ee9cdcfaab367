"""
CLI tests, run against the shipped examples.
"""

import orjson
from typer.testing import CliRunner

from aoc2022.cli import check_answers, run_all, solve

runner = CliRunner()


def test_solve_one_day():
    result = runner.invoke(solve.app, ["1", "--example"])
    assert result.exit_code == 0, result.output
    assert "Part 1" in result.output
    assert "24000" in result.output
    assert "45000" in result.output


def test_solve_single_part():
    result = runner.invoke(solve.app, ["15", "--part", "2", "--example"])
    assert result.exit_code == 0, result.output
    assert "56000011" in result.output
    assert "Part 1" not in result.output


def test_solve_prints_crt():
    result = runner.invoke(solve.app, ["10", "--part", "2", "--example"])
    assert result.exit_code == 0, result.output
    assert "##..##..##..##..##..##..##..##..##..##.." in result.output


def test_solve_missing_input(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_DATA_DIR", str(tmp_path))
    result = runner.invoke(solve.app, ["3"])
    assert result.exit_code == 1
    assert "failed" in result.output


def test_solve_unknown_day():
    result = runner.invoke(solve.app, ["42", "--example"])
    assert result.exit_code == 1


def test_run_all_writes_answers(tmp_path):
    out = tmp_path / "answers.jsonl"
    result = runner.invoke(run_all.app, ["--example", "--day", "1", "--day", "25", "--out", str(out)])
    assert result.exit_code == 0, result.output
    rows = [orjson.loads(line) for line in out.read_bytes().splitlines()]
    assert rows == [
        {"day": 1, "part": 1, "answer": 24000},
        {"day": 1, "part": 2, "answer": 45000},
        {"day": 25, "part": 1, "answer": "2=-1=0"},
        {"day": 25, "part": 2, "answer": None},
    ]


def test_run_all_skips_missing_inputs(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_DATA_DIR", str(tmp_path))
    result = runner.invoke(run_all.app, ["--day", "4"])
    assert result.exit_code == 0, result.output
    assert "Skipping day 4" in result.output


def test_check_answers(tmp_path):
    answers = tmp_path / "answers.jsonl"
    answers.write_bytes(
        orjson.dumps({"day": 4, "part": 1, "answer": 2}) + b"\n"
        + orjson.dumps({"day": 4, "part": 2, "answer": 4}) + b"\n"
    )
    result = runner.invoke(check_answers.app, [str(answers), "--example"])
    assert result.exit_code == 0, result.output
    assert "2/2 answers match" in result.output


def test_check_answers_mismatch(tmp_path):
    answers = tmp_path / "answers.jsonl"
    answers.write_bytes(orjson.dumps({"day": 4, "part": 1, "answer": 3}) + b"\n")
    result = runner.invoke(check_answers.app, [str(answers), "--example"])
    assert result.exit_code == 1
    assert "0/1 answers match" in result.output


def test_check_answers_missing_file(tmp_path):
    result = runner.invoke(check_answers.app, [str(tmp_path / "nope.jsonl")])
    assert result.exit_code == 1


def test_run_all_unknown_day():
    result = runner.invoke(run_all.app, ["--example", "--day", "42"])
    assert result.exit_code == 1
    assert "Unknown day" in result.output


def test_run_all_bad_log_level():
    result = runner.invoke(run_all.app, ["--example", "--day", "1", "--log-level", "LOUD"])
    assert result.exit_code == 1
    assert "Unknown log level: LOUD" in result.output


def test_check_answers_bad_log_level(tmp_path):
    answers = tmp_path / "answers.jsonl"
    answers.write_bytes(orjson.dumps({"day": 4, "part": 1, "answer": 2}) + b"\n")
    result = runner.invoke(check_answers.app, [str(answers), "--example", "--log-level", "LOUD"])
    assert result.exit_code == 1
    assert "Unknown log level: LOUD" in result.output
