from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from schematic_context import Schematic, stream_gears, stream_part_numbers
from schematic_extract import read_schematic

logger = logging.getLogger(__name__)

STRATEGIES = ("stream", "grid")


def _check_strategy(strategy: str) -> None:
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}, expected one of {STRATEGIES}")


def sum_part_numbers(lines: Iterable[str], strategy: str = "stream") -> int:
    """Sum every number that touches a symbol, counting each position once."""
    _check_strategy(strategy)
    if strategy == "grid":
        return Schematic.from_lines(lines).part_numbers().total()
    return stream_part_numbers(lines).total()


def sum_gear_ratios(lines: Iterable[str], strategy: str = "stream") -> int:
    """Sum n1 * n2 over every `*` touching exactly two numbers."""
    _check_strategy(strategy)
    if strategy == "grid":
        return Schematic.from_lines(lines).gears().total()
    return stream_gears(lines).total()


@dataclass(frozen=True)
class PartSolver:
    """One half of a puzzle: its number, what it computes, and how."""

    part: int
    description: str

    def solve(self, lines: Iterable[str]) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class PartOne(PartSolver):
    part: int = 1
    description: str = "Sum of part numbers"

    def solve(self, lines: Iterable[str]) -> int:
        return sum_part_numbers(lines)


@dataclass(frozen=True)
class PartTwo(PartSolver):
    part: int = 2
    description: str = "Sum of gear ratios"

    def solve(self, lines: Iterable[str]) -> int:
        return sum_gear_ratios(lines)


@dataclass(frozen=True)
class GearRatios:
    day: int = 3
    name: str = "gear-ratios"
    title: str = "Day 3: Gear Ratios"

    def parts(self) -> tuple[PartSolver, PartSolver]:
        return (PartOne(), PartTwo())

    def get_part(self, part: int) -> PartSolver:
        for solver in self.parts():
            if solver.part == part:
                return solver
        raise ValueError(f"{self.title} has no part {part}")


PUZZLES: dict[int, GearRatios] = {GearRatios.day: GearRatios()}


def solve_file(path: str | Path, part: int, puzzle: GearRatios | None = None) -> int:
    """Read *path* and return the answer for *part* (1 or 2)."""
    puzzle = puzzle or GearRatios()
    solver = puzzle.get_part(part)
    lines = read_schematic(path)
    answer = solver.solve(lines)
    logger.debug("%s part %d on %s: %d", puzzle.title, part, path, answer)
    return answer


def run_part(puzzle: GearRatios, part: int, path: str | Path, show_title: bool = True) -> int:
    if show_title:
        print(puzzle.title)
    solver = puzzle.get_part(part)
    answer = solve_file(path, part, puzzle)
    print(f"[Part {solver.part}] {solver.description}: {answer}")
    return answer


def run_all(puzzle: GearRatios, path: str | Path) -> tuple[int, int]:
    print(puzzle.title)
    first = run_part(puzzle, 1, path, show_title=False)
    second = run_part(puzzle, 2, path, show_title=False)
    return first, second
