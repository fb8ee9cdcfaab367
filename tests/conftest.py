import pytest

from aoc2022.utils import read_file


@pytest.fixture(autouse=True)
def default_data_dir(monkeypatch):
    """Always read the examples shipped with the repo, whatever the local .env says."""
    monkeypatch.delenv("AOC_DATA_DIR", raising=False)
    monkeypatch.delenv("AOC_LOG_LEVEL", raising=False)


@pytest.fixture
def example():
    """Load the published example for a day: ``example(5)``."""
    def load(day: int) -> str:
        return read_file("examples", day)
    return load
