from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from schematic_extract import components_from_line
from schematic_models import Component, GearTally, PartNumberTally

logger = logging.getLogger(__name__)


def footprint(component: Component) -> tuple[int, int, int, int]:
    """Return (first_line, last_line, first_column, last_column) of the cells touching *component*.

    The rectangle pads the component by one cell on every side, so the first
    column may be -1 for a component at the start of a row.
    """
    return (
        component.line - 1,
        component.line + 1,
        component.column - 1,
        component.last_column + 1,
    )


def touches(a: Component, b: Component) -> bool:
    """True when *b* occupies at least one cell of *a*'s footprint."""
    first_line, last_line, first_col, last_col = footprint(a)
    if not first_line <= b.line <= last_line:
        return False
    return b.last_column >= first_col and b.column <= last_col


def touching_in_line(components: Sequence[Component], index: int) -> list[Component]:
    """Return the immediate neighbours of ``components[index]`` that really touch it.

    Dropped period runs can sit between neighbours in the list, so each
    neighbour is checked by column rather than trusted by position.
    """
    component = components[index]
    found: list[Component] = []
    for i in (index - 1, index + 1):
        if 0 <= i < len(components) and touches(component, components[i]):
            found.append(components[i])
    return found


def touching_above(component: Component, previous: Iterable[Component]) -> list[Component]:
    return [other for other in previous if touches(component, other)]


def scan_part_numbers(
    tally: PartNumberTally,
    previous: Sequence[Component],
    current: Sequence[Component],
) -> PartNumberTally:
    """Record the part numbers that *current* proves, on its own row or the row above.

    A number on *current* is proved by a touching symbol beside it or above it;
    a symbol on *current* proves any touching number on *previous*.
    """
    for index, component in enumerate(current):
        if component.is_number:
            beside = touching_in_line(current, index)
            above = touching_above(component, previous)
            if any(other.is_symbol for other in beside + above):
                tally.add(component)
        else:
            for other in touching_above(component, previous):
                if other.is_number and other not in tally:
                    tally.add(other)
    return tally


def scan_gears(
    tally: GearTally,
    previous: Sequence[Component],
    current: Sequence[Component],
) -> GearTally:
    """Attach numbers to the `*` gears they touch between *previous* and *current*."""
    for index, component in enumerate(current):
        if component.is_gear:
            tally.register(component)
            for other in touching_in_line(current, index) + touching_above(component, previous):
                if other.is_number:
                    tally.attach(component, other)
        elif component.is_number:
            for other in touching_above(component, previous):
                if other.is_gear:
                    tally.attach(other, component)
    return tally


def stream_part_numbers(lines: Iterable[str]) -> PartNumberTally:
    tally = PartNumberTally()
    previous: list[Component] = []
    for line_index, line in enumerate(lines):
        current = components_from_line(line, line_index)
        scan_part_numbers(tally, previous, current)
        previous = current
    logger.debug("streamed part numbers: %d found", len(tally.parts))
    return tally


def stream_gears(lines: Iterable[str]) -> GearTally:
    tally = GearTally()
    previous: list[Component] = []
    for line_index, line in enumerate(lines):
        current = components_from_line(line, line_index)
        scan_gears(tally, previous, current)
        previous = current
    logger.debug("streamed gears: %d candidates, %d with two numbers", len(tally.gears), len(tally.ratios()))
    return tally


@dataclass
class Schematic:
    """Every row's components, for lookups by position instead of by scan order."""

    rows: list[list[Component]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Schematic:
        return cls([components_from_line(line, i) for i, line in enumerate(lines)])

    def components(self) -> Iterable[Component]:
        for row in self.rows:
            yield from row

    def neighbours(self, component: Component) -> list[Component]:
        """Return every other component inside *component*'s footprint."""
        first_line, last_line, _, _ = footprint(component)
        found: list[Component] = []
        for line in range(max(first_line, 0), min(last_line, len(self.rows) - 1) + 1):
            for other in self.rows[line]:
                if other.position != component.position and touches(component, other):
                    found.append(other)
        return found

    def part_numbers(self) -> PartNumberTally:
        tally = PartNumberTally()
        for component in self.components():
            if component.is_number and any(o.is_symbol for o in self.neighbours(component)):
                tally.add(component)
        return tally

    def gears(self) -> GearTally:
        tally = GearTally()
        for component in self.components():
            if not component.is_gear:
                continue
            tally.register(component)
            for other in self.neighbours(component):
                if other.is_number:
                    tally.attach(component, other)
        return tally
