"""Tests for the two-row sliding window scanner.

Covers the classic example schematic, gear pairing, first-come consumption
of numbers shared between symbols, ragged rows and error propagation.
"""

import pytest

from partscan.config import ScannerConfig
from partscan.errors import GearOverflowError, NumberParseError
from partscan.scanner import SchematicScanner, scan_file, scan_lines


# =============================================================================
# Totals
# =============================================================================

class TestExampleSchematic:
    """The 10x10 example grid."""

    def test_totals(self, example_schematic):
        result = scan_lines(example_schematic)
        assert result.part_sum == 4361
        assert result.gear_ratio_sum == 467835

    def test_gears(self, example_schematic):
        scanner = SchematicScanner()
        for line in example_schematic:
            scanner.feed(line)
        scanner.finish()

        assert len(scanner.gears) == 3
        assert scanner.gears.get(3, 1).ratio() == 467 * 35
        assert scanner.gears.get(5, 8).ratio() == 755 * 598
        lonely = scanner.gears.get(3, 4)
        assert lonely.first == 617
        assert lonely.second is None

    def test_crlf_line_endings(self, example_schematic):
        result = scan_lines([line + "\r\n" for line in example_schematic])
        assert (result.part_sum, result.gear_ratio_sum) == (4361, 467835)

    def test_stats(self, example_schematic):
        stats = scan_lines(example_schematic).stats
        assert stats.rows == 10
        assert stats.width == 10
        assert stats.ragged_rows == 0
        assert stats.symbol_counts == {"*": 3, "#": 1, "+": 1, "$": 1}
        assert stats.part_numbers == 8
        assert stats.largest_part_number == 755
        assert stats.gears_seen == 3
        assert stats.gears_paired == 2

    def test_scan_file(self, example_file):
        result = scan_file(example_file)
        assert (result.part_sum, result.gear_ratio_sum) == (4361, 467835)

    def test_to_dict(self, example_schematic):
        assert scan_lines(example_schematic).to_dict() == {
            "part_sum": 4361,
            "gear_ratio_sum": 467835,
        }


class TestTotals:
    """Small grids exercising each adjacency direction."""

    def test_empty_input(self):
        result = scan_lines([])
        assert (result.part_sum, result.gear_ratio_sum) == (0, 0)

    def test_all_blank(self):
        result = scan_lines(["....", "....", "...."])
        assert (result.part_sum, result.gear_ratio_sum) == (0, 0)

    def test_numbers_without_symbols(self):
        result = scan_lines(["12..34", "......", "56...."])
        assert result.part_sum == 0

    def test_unadjacent_number_is_ignored(self):
        result = scan_lines(["467..114..", "...*......"])
        assert result.part_sum == 467
        assert result.gear_ratio_sum == 0

    def test_number_left_and_right_of_symbol(self):
        assert scan_lines(["12#34"]).part_sum == 46

    def test_number_above_symbol(self):
        assert scan_lines(["..7", ".#."]).part_sum == 7

    def test_number_below_symbol_on_last_row(self):
        assert scan_lines(["#..", "5.."]).part_sum == 5

    @pytest.mark.parametrize("grid", [
        ["1..", ".#.", "..."],
        [".1.", ".#.", "..."],
        ["..1", ".#.", "..."],
        ["...", "1#.", "..."],
        ["...", ".#1", "..."],
        ["...", ".#.", "1.."],
        ["...", ".#.", ".1."],
        ["...", ".#.", "..1"],
    ])
    def test_all_eight_neighbors(self, grid):
        assert scan_lines(grid).part_sum == 1

    def test_number_touching_two_symbols_counted_once(self):
        scanner = SchematicScanner()
        for line in ["..#..", "..12.", "...$."]:
            scanner.feed(line)
        result = scanner.finish()
        assert result.part_sum == 12
        assert result.stats.part_numbers == 1


# =============================================================================
# Gears
# =============================================================================

class TestGearPairing:
    """Gear ratios, overflow and first-come assignment."""

    def test_gear_with_two_numbers(self):
        result = scan_lines(["2*3"])
        assert result.part_sum == 5
        assert result.gear_ratio_sum == 6

    def test_gear_with_one_number(self):
        result = scan_lines(["2*.."])
        assert result.part_sum == 2
        assert result.gear_ratio_sum == 0

    def test_gear_with_no_numbers(self):
        result = scan_lines(["...", ".*.", "..."])
        assert (result.part_sum, result.gear_ratio_sum) == (0, 0)

    def test_gear_across_rows(self):
        result = scan_lines(["10..", ".*..", "..20"])
        assert result.gear_ratio_sum == 200

    def test_non_gear_symbol_has_no_ratio(self):
        result = scan_lines(["2#3"])
        assert result.part_sum == 5
        assert result.gear_ratio_sum == 0

    def test_three_numbers_overflow(self):
        scanner = SchematicScanner()
        scanner.feed("1.2")
        scanner.feed(".*.")
        with pytest.raises(GearOverflowError) as exc_info:
            scanner.feed("3..")

        err = exc_info.value
        assert (err.x, err.y) == (1, 1)
        assert err.numbers == (2, 1)
        assert err.value == 3

    def test_overflow_aborts_scan_lines(self):
        with pytest.raises(GearOverflowError):
            scan_lines(["1.2", ".*.", "3.4"])

    def test_shared_number_goes_to_first_gear_in_row(self):
        """Left-to-right: the left gear takes the 3 and the right gear is left with 4."""
        scanner = SchematicScanner()
        scanner.feed("2*3*4")
        result = scanner.finish()

        left = scanner.gears.get(1, 0)
        right = scanner.gears.get(3, 0)
        assert (left.first, left.second) == (3, 2)
        assert (right.first, right.second) == (4, None)
        assert result.part_sum == 9
        assert result.gear_ratio_sum == 6

    def test_shared_number_goes_to_gear_above(self):
        """The previous-row pass runs first, so the upper gear wins."""
        scanner = SchematicScanner()
        for line in ["*..", "5..", "*.."]:
            scanner.feed(line)
        scanner.finish()

        assert scanner.gears.get(0, 0).first == 5
        assert scanner.gears.get(0, 2).first is None


# =============================================================================
# Input shape and configuration
# =============================================================================

class TestInputShape:
    """Ragged rows, empty lines and alternate alphabets."""

    def test_longer_row_below(self):
        result = scan_lines(["5..", "*...9"])
        assert result.part_sum == 5
        assert result.stats.ragged_rows == 1
        assert result.stats.max_width == 5

    def test_shorter_row_below(self):
        result = scan_lines(["....*", "..", "...#7"])
        assert result.part_sum == 7

    def test_empty_lines_skipped(self):
        result = scan_lines(["..5\n", "\n", ".#.\n"])
        assert result.part_sum == 5
        assert result.stats.empty_lines_skipped == 1
        assert result.stats.rows == 2

    def test_empty_lines_kept_as_rows(self):
        config = ScannerConfig(skip_empty_lines=False)
        result = scan_lines(["..5", "", ".#."], config)
        assert result.part_sum == 0
        assert result.stats.rows == 3

    def test_trailing_spaces_are_not_symbols(self):
        assert scan_lines(["467  ", "....."]).part_sum == 0

    def test_trailing_tab_is_not_a_symbol(self):
        result = scan_lines(["..12\t\n"])
        assert result.part_sum == 0
        assert not result.stats.symbol_counts
        assert result.stats.width == 4

    def test_interior_space_is_not_a_symbol(self):
        assert scan_lines(["12 34", ".. .."]).part_sum == 0

    def test_whitespace_only_line_is_empty(self):
        result = scan_lines(["..5", "   \t", ".#."])
        assert result.part_sum == 5
        assert result.stats.empty_lines_skipped == 1

    def test_custom_gear_marker(self):
        config = ScannerConfig(gear="x")
        assert scan_lines(["2x3"], config).gear_ratio_sum == 6
        result = scan_lines(["2*3"], config)
        assert (result.part_sum, result.gear_ratio_sum) == (5, 0)

    def test_custom_blank(self):
        config = ScannerConfig(blank="_")
        assert scan_lines(["12_*"], config).part_sum == 0
        # '.' is a symbol under this alphabet
        assert scan_lines(["12.__"], config).part_sum == 12

    def test_number_too_large(self):
        with pytest.raises(NumberParseError) as exc_info:
            scan_lines(["99999999999*"])
        err = exc_info.value
        assert (err.row, err.start, err.end) == (0, 0, 11)
        assert err.line_number == 1

    def test_number_too_large_reports_input_line(self):
        """Skipped empty lines do not advance the row, but the line number counts them."""
        with pytest.raises(NumberParseError) as exc_info:
            scan_lines(["\n", "...\n", "\n", "99999999999*\n"])
        err = exc_info.value
        assert err.row == 1
        assert err.line_number == 4
        assert "row 1 (line 4)" in str(err)

    def test_gear_overflow_reports_input_line(self):
        with pytest.raises(GearOverflowError) as exc_info:
            scan_lines(["1.2", "", ".*.", "", "3.."])
        err = exc_info.value
        assert (err.x, err.y) == (1, 1)
        assert err.line_number == 3

    def test_gear_line_numbers(self):
        scanner = SchematicScanner()
        for line in ["", "2*3", "", "", "...", "4*5"]:
            scanner.feed(line)
        scanner.finish()
        assert scanner.gears.get(1, 0).line_number == 2
        assert scanner.gears.get(1, 2).line_number == 6

    def test_custom_max_number(self):
        config = ScannerConfig(max_number=999)
        with pytest.raises(NumberParseError):
            scan_lines(["1000#"], config)


class TestScannerLifecycle:
    """feed/finish protocol."""

    def test_finish_is_repeatable(self):
        scanner = SchematicScanner()
        scanner.feed("2*3")
        assert scanner.finish() is scanner.finish()

    def test_feed_after_finish(self):
        scanner = SchematicScanner()
        scanner.finish()
        with pytest.raises(RuntimeError):
            scanner.feed("...")

    def test_row_index_advances(self):
        scanner = SchematicScanner()
        scanner.feed("...")
        scanner.feed("...")
        assert scanner.row_index == 2
        assert scanner.previous_row.index == 1

    def test_debug_logging(self, caplog):
        with caplog.at_level("DEBUG", logger="partscan"):
            scan_lines(["2*3"])
        assert "     line: 2*3" in caplog.text
        assert "-> 3" in caplog.text
