"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


EXAMPLE_SCHEMATIC = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def example_schematic():
    """The classic 10x10 schematic (sum 4361, gear ratio sum 467835)."""
    return list(EXAMPLE_SCHEMATIC)


@pytest.fixture
def example_file(temp_dir, example_schematic):
    """The example schematic written to disk with a trailing newline."""
    path = temp_dir / "schematic.txt"
    path.write_text("\n".join(example_schematic) + "\n", encoding="utf-8")
    return path
