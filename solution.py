"""Solve the engine schematic puzzle from the command line.

Two-stage pipeline:
  1. components_from_line  – splits each row into digit runs, period runs and
                             single symbols, keeping the column of every number
                             and symbol
  2. scan_part_numbers /   – compares each row with the row above it:
     scan_gears              a) numbers touching any symbol are part numbers
                             b) numbers touching a `*` are collected per gear;
                                gears with exactly two numbers give a ratio

Usage:
  engine-schematic 3 part1 input.txt
  engine-schematic gear-ratios all input.txt
  engine-schematic all part2 inputs/      (reads inputs/03/input)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schematic_errors import SchematicError
from schematic_pipeline import PUZZLES, run_all, run_part

logger = logging.getLogger(__name__)

_PARTS = {"part1": 1, "part2": 2, "all": None}
_DAY_RANGE = range(1, 26)


# ---------------------------------------------------------------------------
# Day selection
# ---------------------------------------------------------------------------

def _possible_days() -> list[str]:
    return [f"{_DAY_RANGE.start}..{_DAY_RANGE.stop - 1}", "all"] + [p.name for p in PUZZLES.values()]


def valid_day(value: str) -> int | str:
    """Accept a day number, a puzzle name, or ``all``."""
    if value.isdigit():
        day = int(value)
        if day in _DAY_RANGE:
            return day
    else:
        name = value.lower()
        if name == "all":
            return name
        for puzzle in PUZZLES.values():
            if puzzle.name == name:
                return puzzle.day
    raise argparse.ArgumentTypeError(
        f"invalid day {value!r} [possible values: {', '.join(_possible_days())}]"
    )


def _run_day(day: int, part: int | None, path: Path) -> None:
    puzzle = PUZZLES.get(day)
    if puzzle is None:
        raise SchematicError(f"Day {day} not implemented")
    if part is None:
        run_all(puzzle, path)
    else:
        run_part(puzzle, part, path)


def run(day: int | str, part: int | None, path: Path) -> None:
    if day == "all":
        # base path holds one numbered directory per day, each with an "input" file
        for number in sorted(PUZZLES):
            _run_day(number, part, path / f"{number:02d}" / "input")
    else:
        _run_day(day, part, path)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum part numbers and gear ratios in an engine schematic.",
    )
    parser.add_argument(
        "day",
        type=valid_day,
        help=f"Puzzle to run; possible values: {', '.join(_possible_days())}",
    )
    parser.add_argument(
        "part",
        choices=list(_PARTS),
        help="Puzzle part to solve",
    )
    parser.add_argument("input", type=Path, help="Path to the puzzle input")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scan progress to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    day_label = "all days" if args.day == "all" else f"Day {args.day}"
    print(f"User requested solution for {day_label} (part: {args.part})")

    try:
        run(args.day, _PARTS[args.part], args.input)
    except SchematicError as exc:
        logger.debug("solve failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
