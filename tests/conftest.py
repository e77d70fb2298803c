import pytest
from click.testing import CliRunner
from pathlib import Path


MAX_LINES = 10


def write_lines(path: Path, count: int) -> Path:
    """Write a text file with ``count`` newline-terminated lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"line {i}\n" for i in range(count)), encoding="utf-8")
    return path


@pytest.fixture
def make_file():
    """Provides a helper that writes a file with a given number of lines."""
    return write_lines


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path):
    """Creates a directory with files both under and over MAX_LINES."""
    write_lines(tmp_path / "big.py", MAX_LINES + 3)
    write_lines(tmp_path / "big.txt", MAX_LINES + 3)
    write_lines(tmp_path / "src" / "small.py", MAX_LINES)
    write_lines(tmp_path / "src" / "nested" / "empty.py", 0)
    return tmp_path


@pytest.fixture
def clean_dir(tmp_path):
    """Creates a directory where every file is within MAX_LINES."""
    write_lines(tmp_path / "a.py", MAX_LINES)
    write_lines(tmp_path / "docs" / "b.md", 1)
    return tmp_path


@pytest.fixture
def max_lines():
    """The limit the sample directories are built around."""
    return MAX_LINES
