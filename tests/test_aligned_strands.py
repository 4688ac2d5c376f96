"""
Unit tests for the aligned_strands module.

Tests cover:
- Padding two strands into a common frame
- Drawing cuts on both strands
- Blunt and sticky detection
- Mismatched strand lengths

Run with: python -m pytest tests/test_aligned_strands.py -v
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cutsite.aligned_strands import (
    AlignedResult,
    align,
    align_with_cuts,
    insert_cut_symbols,
    fragment_lengths,
    is_blunt,
    is_sticky,
)
from cutsite.errors import ValidationError
from strandutils.string_formatting import FormatConfig, strip_padding


class TestAlign:
    """Tests for align()"""

    def test_differing_padding(self):
        result = align("nngattacannnnn", "nnnnnctaatgtnn")
        assert result.primary == "nnnnngattacannnnn"
        assert result.complement == "nnnnnctaatgtnnnnn"

    def test_returns_aligned_result(self):
        result = align("gattaca", "ctaatgt")
        assert result == AlignedResult("gattaca", "ctaatgt")

    def test_already_aligned_is_unchanged(self):
        result = align("nnnnngattacannnnn", "nnnnnctaatgtnnnnn")
        assert result.primary == "nnnnngattacannnnn"
        assert result.complement == "nnnnnctaatgtnnnnn"

    def test_equal_lengths_and_cores_preserved(self):
        pairs = [
            ("gattaca", "nnnctaatgt"),
            ("nngattaca", "ctaatgtnnnn"),
            ("nnnnnnngaattcn", "ncttaag"),
            ("acgt", "tgca"),
        ]
        for a, b in pairs:
            result = align(a, b)
            assert len(result.primary) == len(result.complement)
            assert strip_padding(result.primary) == strip_padding(a)
            assert strip_padding(result.complement) == strip_padding(b)

    def test_uppercase_padding(self):
        result = align("NNgattaca", "ctaatgtNN")
        assert result.primary == "NNgattacaNN"
        assert result.complement == "NNctaatgtNN"

    def test_inner_wildcards_are_content(self):
        result = align("gannc", "nnctnng")
        assert result.primary == "nngannc"
        assert result.complement == "nnctnng"

    def test_different_core_lengths_raise(self):
        with pytest.raises(ValidationError):
            align("acgt", "acg")

    def test_error_reports_both_strands(self):
        with pytest.raises(ValidationError) as excinfo:
            align("nnacgt", "acgn")
        message = str(excinfo.value)
        assert "4, 'acgt'" in message
        assert "3, 'acg'" in message

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            align("acgt", "a")


class TestAlignWithCuts:
    """Tests for align_with_cuts()"""

    def test_multiple_cuts_on_both_strands(self):
        result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [0, 2, 12])
        assert result.primary == "n n n n^n g a t t a c a n n^n n^n"
        assert result.complement == "n^n n^n n c t a a t g t n^n n n n"

    def test_cut_order_does_not_matter(self):
        expected = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [0, 2, 12])
        result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [12, 0, 10], [2, 12, 0])
        assert result == expected

    def test_marker_count_matches_cut_count(self):
        result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [5])
        assert result.primary.count("^") == 3
        assert result.complement.count("^") == 1

    def test_equal_lengths(self):
        result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [5])
        assert len(result.primary) == len(result.complement)

    def test_no_cuts_is_spaced_only(self):
        result = align_with_cuts("gattaca", "ctaatgt", [], [])
        assert result.primary == "g a t t a c a"
        assert result.complement == "c t a a t g t"

    def test_cut_on_one_strand_only(self):
        result = align_with_cuts("gattaca", "ctaatgt", [2], [])
        assert result.primary == "g a t^t a c a"
        assert result.complement == "c t a a t g t"

    def test_left_padding_added_to_second_strand(self):
        result = align_with_cuts("nngattaca", "ctaatgt", [2], [0])
        assert result.primary == "n n g^a t t a c a"
        assert result.complement == "n n c^t a a t g t"

    def test_different_core_lengths_raise(self):
        with pytest.raises(ValidationError):
            align_with_cuts("acgt", "acg", [0], [0])

    def test_custom_format(self):
        config = FormatConfig(cut_symbol="|", spacer="-")
        result = align_with_cuts("gaattc", "cttaag", [0], [4], config)
        assert result.primary == "g|a-a-t-t-c"
        assert result.complement == "c-t-t-a-a|g"


class TestInsertCutSymbols:
    """Tests for insert_cut_symbols()"""

    def test_descending_insertion(self):
        assert insert_cut_symbols("gattaca", [0, 3]) == "g^att^aca"

    def test_adjust_shifts_cuts(self):
        assert insert_cut_symbols("nngattaca", [0], adjust=2) == "nng^attaca"

    def test_cut_after_last_character(self):
        assert insert_cut_symbols("gattaca", [6]) == "gattaca^"

    def test_negative_cut_raises(self):
        with pytest.raises(ValidationError):
            insert_cut_symbols("gattaca", [-3])

    def test_cut_past_end_raises(self):
        with pytest.raises(ValidationError):
            insert_cut_symbols("gattaca", [7])
        with pytest.raises(ValidationError):
            insert_cut_symbols("gattaca", [5], adjust=2)

    def test_out_of_range_cuts_rejected_when_aligning(self):
        with pytest.raises(ValidationError) as excinfo:
            align_with_cuts("gattaca", "ctaatgt", [-3], [2])
        assert "'gattaca'" in str(excinfo.value)
        with pytest.raises(ValidationError) as excinfo:
            align_with_cuts("gattaca", "ctaatgt", [2], [20])
        assert "Cut 20" in str(excinfo.value)


class TestBluntAndSticky:
    """Tests for is_blunt() and is_sticky()"""

    def test_blunt(self):
        result = align_with_cuts("gatatc", "ctatag", [2], [2])
        assert is_blunt(result)
        assert not is_sticky(result)

    def test_sticky(self):
        result = align_with_cuts("gaattc", "cttaag", [0], [4])
        assert not is_blunt(result)
        assert is_sticky(result)

    def test_one_staggered_pair_makes_it_sticky(self):
        result = align_with_cuts("gattacagattaca", "ctaatgtctaatgt", [1, 8], [1, 9])
        assert is_sticky(result)

    def test_multiple_cuts_scenario_is_sticky(self):
        result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [0, 2, 12])
        assert not is_blunt(result)

    def test_fragment_lengths(self):
        assert fragment_lengths("g a t^a t c") == [5, 5]
        assert fragment_lengths("g a t a t c") == [11]
