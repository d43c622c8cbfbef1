"""Tests for adjacency arithmetic and the row-by-row scans."""

from __future__ import annotations

from schematic_context import (
    Schematic,
    footprint,
    scan_gears,
    scan_part_numbers,
    stream_gears,
    stream_part_numbers,
    touches,
    touching_in_line,
)
from schematic_extract import components_from_line
from schematic_models import Component, GearTally, Number, PartNumberTally, Symbol


def _number(value: int, line: int, column: int) -> Component:
    return Component(Number(value), line=line, column=column, length=len(str(value)))


def _symbol(char: str, line: int, column: int) -> Component:
    return Component(Symbol(char), line=line, column=column, length=1)


class TestFootprint:
    def test_pads_one_cell_each_side(self) -> None:
        assert footprint(_number(467, 0, 0)) == (-1, 1, -1, 3)
        assert footprint(_symbol("*", 4, 3)) == (3, 5, 2, 4)

    def test_diagonals_touch(self) -> None:
        number = _number(35, 2, 2)
        assert touches(number, _symbol("*", 1, 1))
        assert touches(number, _symbol("*", 1, 4))
        assert touches(number, _symbol("*", 3, 1))
        assert touches(number, _symbol("*", 3, 4))

    def test_whole_span_counts(self) -> None:
        assert touches(_number(12345, 5, 0), _symbol("#", 4, 3))

    def test_two_columns_away_does_not_touch(self) -> None:
        number = _number(12, 0, 0)
        assert not touches(number, _symbol("#", 1, 3))
        assert not touches(number, _symbol("#", 0, 3))

    def test_two_lines_away_does_not_touch(self) -> None:
        assert not touches(_number(7, 0, 0), _symbol("#", 2, 0))

    def test_is_symmetric(self) -> None:
        number = _number(598, 9, 5)
        gear = _symbol("*", 8, 5)
        assert touches(number, gear) and touches(gear, number)


class TestTouchingInLine:
    def test_gap_between_list_neighbours(self) -> None:
        components = components_from_line("1.*", 0)
        assert touching_in_line(components, 0) == []
        assert touching_in_line(components, 1) == []

    def test_both_sides(self) -> None:
        components = components_from_line("#42$", 0)
        assert [c.text for c in touching_in_line(components, 1)] == ["#", "$"]

    def test_first_and_last_column(self) -> None:
        components = components_from_line("5*..*7", 0)
        assert touching_in_line(components, 0) == [components[1]]
        assert touching_in_line(components, 3) == [components[2]]


class TestScanPartNumbers:
    def test_symbol_above_validates_number(self) -> None:
        tally = stream_part_numbers(["#..", ".7."])
        assert tally.total() == 7

    def test_symbol_below_validates_earlier_number(self) -> None:
        tally = stream_part_numbers(["12.", "..#"])
        assert tally.total() == 12

    def test_number_far_from_symbol_is_not_a_part(self) -> None:
        assert stream_part_numbers(["12..", "...#"]).total() == 0

    def test_counted_once_per_position(self) -> None:
        assert stream_part_numbers(["*1*", "*.*"]).total() == 1

    def test_equal_values_at_different_positions(self) -> None:
        tally = stream_part_numbers(["1*1"])
        assert tally.total() == 2
        assert set(tally.parts) == {(0, 0), (0, 2)}

    def test_rows_of_different_length(self) -> None:
        assert stream_part_numbers(["123", "...*"]).total() == 123
        assert stream_part_numbers(["123", "....*"]).total() == 0

    def test_any_symbol_character_counts(self) -> None:
        assert stream_part_numbers(["1=.2@", "....."]).total() == 3

    def test_accumulator_is_passed_through(self) -> None:
        tally = PartNumberTally()
        first = components_from_line("..5", 0)
        second = components_from_line(".+.", 1)
        returned = scan_part_numbers(tally, [], first)
        assert returned is tally and tally.total() == 0
        scan_part_numbers(tally, first, second)
        assert tally.total() == 5

    def test_reversed_rows_give_same_sum(self, example_lines: list[str]) -> None:
        tally = PartNumberTally()
        previous: list[Component] = []
        for i, line in enumerate(example_lines):
            current = components_from_line(line, i)
            scan_part_numbers(tally, list(reversed(previous)), list(reversed(current)))
            previous = current
        assert tally.total() == 4361


class TestScanGears:
    def test_two_numbers_on_same_row(self) -> None:
        assert stream_gears(["2*3"]).total() == 6

    def test_numbers_above_and_below(self) -> None:
        tally = stream_gears([".5.", ".*.", ".6."])
        assert tally.gears == {(1, 1): [5, 6]}
        assert tally.total() == 30

    def test_number_below_attaches_to_earlier_gear(self) -> None:
        assert stream_gears(["10.", ".*.", "..7"]).total() == 70

    def test_one_number_contributes_nothing(self) -> None:
        tally = stream_gears(["*", "5"])
        assert tally.gears == {(0, 0): [5]}
        assert tally.total() == 0

    def test_three_numbers_contribute_nothing(self) -> None:
        tally = stream_gears(["2*3", ".4."])
        assert sorted(tally.gears[(0, 1)]) == [2, 3, 4]
        assert tally.total() == 0

    def test_gear_without_numbers_is_registered(self) -> None:
        tally = stream_gears(["..*", "5.."])
        assert tally.gears == {(0, 2): []}
        assert tally.total() == 0

    def test_other_symbols_are_not_gears(self) -> None:
        assert stream_gears(["2#3"]).total() == 0

    def test_accumulator_persists_across_calls(self) -> None:
        tally = GearTally()
        rows = [components_from_line(line, i) for i, line in enumerate(["4..", ".*.", "..5"])]
        scan_gears(tally, [], rows[0])
        scan_gears(tally, rows[0], rows[1])
        assert tally.gears == {(1, 1): [4]}
        scan_gears(tally, rows[1], rows[2])
        assert tally.gears == {(1, 1): [4, 5]}
        assert tally.ratios() == [20]


class TestSchematic:
    def test_neighbours_of_gear(self, example_lines: list[str]) -> None:
        schematic = Schematic.from_lines(example_lines)
        gear = schematic.rows[8][1]
        assert gear.is_gear
        assert sorted(c.text for c in schematic.neighbours(gear)) == ["598", "755"]

    def test_neighbours_at_grid_edges(self) -> None:
        schematic = Schematic.from_lines(["5*"])
        assert [c.text for c in schematic.neighbours(schematic.rows[0][0])] == ["*"]

    def test_matches_streaming_scan(self, example_lines: list[str]) -> None:
        schematic = Schematic.from_lines(example_lines)
        assert schematic.part_numbers().parts == stream_part_numbers(example_lines).parts
        assert schematic.gears().total() == stream_gears(example_lines).total()
