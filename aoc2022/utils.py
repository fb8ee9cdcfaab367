"""
Utility functions for reading and splitting puzzle input, plus the JSONL
helpers used for recorded answers.
"""

import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Union

import orjson

from .core.env import data_dir

_INT_RE = re.compile(r"-?\d+")


def input_path(folder: str, day: int) -> Path:
    """Location of a day's puzzle text, e.g. ``data/examples/05.txt``."""
    return data_dir() / folder / f"{day:02d}.txt"


def read_file(folder: str, day: int) -> str:
    """
    Read the puzzle text for a day from ``folder`` ("inputs" or "examples").
    The text is returned verbatim; leading whitespace matters on some days.
    """
    path = input_path(folder, day)
    if not path.exists():
        raise FileNotFoundError(f"No puzzle text for day {day} at {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def split_blocks(text: str) -> List[List[str]]:
    """Split text into groups of lines separated by blank lines."""
    blocks: List[List[str]] = [[]]
    for line in text.splitlines():
        if not line.strip():
            if blocks[-1]:
                blocks.append([])
            continue
        blocks[-1].append(line)
    if not blocks[-1]:
        blocks.pop()
    return blocks


def ints(line: str) -> List[int]:
    """All signed integers appearing in a line, in order."""
    return [int(x) for x in _INT_RE.findall(line)]


def read_jsonl(path: Union[str, Path]) -> Iterator[Dict[str, Any]]:
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                yield orjson.loads(line)


def write_jsonl(path: Union[str, Path], rows: Iterable[Dict[str, Any]]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        for row in rows:
            f.write(orjson.dumps(row) + b"\n")
