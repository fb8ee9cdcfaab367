# aoc2022/core/env.py
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

KNOWN_KEYS = [
    "AOC_DATA_DIR",          # root holding inputs/ and examples/
    "AOC_LOG_LEVEL",
]

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
DEFAULT_LOG_LEVEL = "WARNING"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present (masked).
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            mask = v[:4] + "…" if len(v) > 4 else "…"
            found[k] = mask
    return found


def data_dir() -> Path:
    """Directory holding the ``inputs/`` and ``examples/`` folders."""
    value = os.getenv("AOC_DATA_DIR")
    return Path(value).expanduser() if value else DEFAULT_DATA_DIR


def log_level() -> str:
    return os.getenv("AOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
