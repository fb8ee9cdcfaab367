import pytest

from aoc2022.core import env
from aoc2022.utils import ints, read_file, read_jsonl, split_blocks, write_jsonl


def test_read_example_verbatim():
    text = read_file("examples", 5)
    # leading spaces in the crate drawing survive
    assert text.startswith("    [D]")


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_DATA_DIR", str(tmp_path))
    with pytest.raises(FileNotFoundError, match="day 3"):
        read_file("inputs", 3)


def test_data_dir_from_env(tmp_path, monkeypatch):
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "07.txt").write_text("hello\n")
    monkeypatch.setenv("AOC_DATA_DIR", str(tmp_path))
    assert read_file("inputs", 7) == "hello\n"


def test_default_data_dir():
    assert env.data_dir() == env.DEFAULT_DATA_DIR
    assert (env.DEFAULT_DATA_DIR / "examples" / "01.txt").exists()


def test_load_env_masks_values(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("AOC_DATA_DIR=/somewhere/else\n")
    found = env.load_env(str(dotenv))
    assert found == {"AOC_DATA_DIR": "/som…"}


def test_split_blocks():
    assert split_blocks("a\nb\n\n\nc\n\n") == [["a", "b"], ["c"]]


def test_ints():
    assert ints("Sensor at x=2, y=-18") == [2, -18]
    assert ints("no numbers") == []


def test_jsonl_round_trip(tmp_path):
    path = tmp_path / "out" / "answers.jsonl"
    rows = [{"day": 1, "part": 1, "answer": 24000}, {"day": 25, "part": 2, "answer": None}]
    write_jsonl(path, rows)
    assert list(read_jsonl(path)) == rows
