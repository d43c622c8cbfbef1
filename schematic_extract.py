from __future__ import annotations

import logging
import re
from pathlib import Path

from schematic_errors import SchematicIOError, SchematicParseError, StructuralAssumptionViolation
from schematic_models import Component, Number, Symbol

logger = logging.getLogger(__name__)

MAX_PART_NUMBER = 2**31 - 1

_PIECE_RE = re.compile(r"[0-9]+|\.+|.", re.DOTALL)
_DIGITS_RE = re.compile(r"[0-9]+")


def read_schematic(path: str | Path) -> list[str]:
    """Read *path* as UTF-8 and return its rows."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SchematicIOError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise SchematicIOError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise SchematicIOError(path, exc.strerror or str(exc)) from exc

    lines = text.splitlines()
    logger.debug("read %d schematic rows from %s", len(lines), path)
    return lines


def split_line(line: str) -> list[str]:
    """Split *line* into digit runs, period runs and single symbol characters.

    Joining the result gives back *line* unchanged.
    """
    return _PIECE_RE.findall(line)


def parse_number(piece: str, line_index: int, column: int) -> int:
    if not _DIGITS_RE.fullmatch(piece):
        raise SchematicParseError(line_index, column, piece, "is not a digit run")
    value = int(piece)
    if value > MAX_PART_NUMBER:
        raise SchematicParseError(
            line_index, column, piece, f"exceeds the largest part number {MAX_PART_NUMBER}"
        )
    return value


def components_from_line(line: str, line_index: int) -> list[Component]:
    """Return the numbers and symbols of one row, left to right.

    Period runs produce nothing but still move the column cursor.
    """
    components: list[Component] = []
    column = 0
    for piece in split_line(line):
        width = len(piece)
        if piece[0] == ".":
            column += width
            continue

        if piece[0].isascii() and piece[0].isdigit():
            token: Number | Symbol = Number(parse_number(piece, line_index, column))
        else:
            if width != 1:
                raise StructuralAssumptionViolation(
                    f"line {line_index + 1}, column {column + 1}: symbol piece {piece!r} "
                    "is longer than one character"
                )
            token = Symbol(piece)

        components.append(Component(token=token, line=line_index, column=column, length=width))
        column += width

    return components
