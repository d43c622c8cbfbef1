"""Shared fixtures: the worked example schematic, as rows and as a file on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

EXAMPLE = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""

EXAMPLE_PART_SUM = 4361
EXAMPLE_GEAR_SUM = 467835


@pytest.fixture()
def example_lines() -> list[str]:
    return EXAMPLE.splitlines()


@pytest.fixture()
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "input"
    path.write_text(EXAMPLE, encoding="utf-8")
    return path
