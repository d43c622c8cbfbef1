from __future__ import annotations

from dataclasses import dataclass, field

GEAR_SYMBOL = "*"


@dataclass(frozen=True)
class Number:
    """A maximal run of digits, read as an integer."""

    value: int


@dataclass(frozen=True)
class Symbol:
    """Any single character that is neither a digit nor a period."""

    char: str


@dataclass(frozen=True)
class Component:
    """A number or symbol placed on the schematic.

    Two components are the same component only if they sit at the same
    position; equal values elsewhere on the grid are distinct.
    """

    token: Number | Symbol
    line: int
    column: int
    length: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    @property
    def last_column(self) -> int:
        return self.column + self.length - 1

    @property
    def is_number(self) -> bool:
        return isinstance(self.token, Number)

    @property
    def is_symbol(self) -> bool:
        return isinstance(self.token, Symbol)

    @property
    def is_gear(self) -> bool:
        return isinstance(self.token, Symbol) and self.token.char == GEAR_SYMBOL

    @property
    def text(self) -> str:
        if isinstance(self.token, Number):
            return str(self.token.value)
        return self.token.char


@dataclass
class PartNumberTally:
    """Part numbers validated so far, keyed by position."""

    parts: dict[tuple[int, int], int] = field(default_factory=dict)

    def add(self, component: Component) -> None:
        if isinstance(component.token, Number):
            self.parts.setdefault(component.position, component.token.value)

    def __contains__(self, component: Component) -> bool:
        return component.position in self.parts

    def total(self) -> int:
        return sum(self.parts.values())


@dataclass
class GearTally:
    """Numbers touching each `*`, keyed by the gear's position.

    A gear's neighbour list is only complete once the line below it has been
    scanned, so the tally lives for the whole input.
    """

    gears: dict[tuple[int, int], list[int]] = field(default_factory=dict)

    def register(self, gear: Component) -> None:
        self.gears.setdefault(gear.position, [])

    def attach(self, gear: Component, number: Component) -> None:
        if isinstance(number.token, Number):
            self.gears.setdefault(gear.position, []).append(number.token.value)

    def ratios(self) -> list[int]:
        return [values[0] * values[1] for values in self.gears.values() if len(values) == 2]

    def total(self) -> int:
        return sum(self.ratios())
