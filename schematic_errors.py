from __future__ import annotations

from pathlib import Path


class SchematicError(Exception):
    """Base class for every failure while solving a schematic."""


class SchematicIOError(SchematicError):
    """The input file could not be read as UTF-8 text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class SchematicParseError(SchematicError):
    """A digit run does not fit the part number type."""

    def __init__(self, line: int, column: int, text: str, reason: str) -> None:
        self.line = line
        self.column = column
        self.text = text
        super().__init__(f"line {line + 1}, column {column + 1}: {text!r} {reason}")


class StructuralAssumptionViolation(SchematicError):
    """The tokenizer produced a piece that cannot become a component."""
