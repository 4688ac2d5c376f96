"""
Unit tests for the strandutils string formatting and sequence helpers.

Run with: python -m pytest tests/test_string_formatting.py -v
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from strandutils.string_formatting import (
    FormatConfig,
    DEFAULT_FORMAT,
    split_padding,
    strip_padding,
    left_padding,
    right_padding,
    make_padding,
    has_cut_symbols,
    strip_cuts,
    strip_cuts_and_padding,
    add_spacing,
)
from strandutils.sequences import complement, reverse_complement, is_nucleotide_pattern
from strandutils.errors import ValidationError
from cutsite.errors import ValidationError as CutsiteValidationError


class TestPadding:
    """Tests for padding helpers"""

    def test_split(self):
        assert split_padding("nngattacannnnn") == ("nn", "gattaca", "nnnnn")

    def test_no_padding(self):
        assert split_padding("gattaca") == ("", "gattaca", "")

    def test_all_padding(self):
        assert split_padding("nnnn") == ("nnnn", "", "")

    def test_inner_wildcards_kept(self):
        assert strip_padding("nganatn") == "ganat"

    def test_uppercase(self):
        assert strip_padding("NNgattacaN") == "gattaca"
        assert left_padding("NNgattacaN") == "NN"
        assert right_padding("NNgattacaN") == "N"

    def test_make_padding(self):
        assert make_padding(3) == "nnn"
        assert make_padding(0) == ""
        assert make_padding(-2) == ""


class TestCutSymbols:
    """Tests for cut symbol helpers"""

    def test_has_cut_symbols(self):
        assert has_cut_symbols("g^aattc")
        assert not has_cut_symbols("gaattc")

    def test_strip_cuts(self):
        assert strip_cuts("g^aat^tc") == "gaattc"

    def test_strip_cuts_and_padding(self):
        assert strip_cuts_and_padding("n^gat^tacan") == "gattaca"


class TestAddSpacing:
    """Tests for add_spacing()"""

    def test_plain(self):
        assert add_spacing("gattaca") == "g a t t a c a"

    def test_with_cuts(self):
        assert add_spacing("nnnn^ngattacann^nn^n") == "n n n n^n g a t t a c a n n^n n^n"

    def test_leading_and_trailing_cut(self):
        assert add_spacing("^ga") == "^g a"
        assert add_spacing("ga^") == "g a^"

    def test_empty(self):
        assert add_spacing("") == ""

    def test_custom_characters(self):
        config = FormatConfig(cut_symbol="|", spacer="-")
        assert add_spacing("ga|t", config) == "g-a|t"


class TestFormatConfig:
    """Tests for FormatConfig validation"""

    def test_default(self):
        assert DEFAULT_FORMAT.cut_symbol == "^"
        assert DEFAULT_FORMAT.pad_char == "n"
        assert DEFAULT_FORMAT.spacer == " "

    def test_multi_character_symbol_raises(self):
        with pytest.raises(ValidationError):
            FormatConfig(cut_symbol="^^")

    def test_duplicate_characters_raise(self):
        with pytest.raises(ValidationError):
            FormatConfig(spacer="^")

    def test_nucleotide_cut_symbol_raises(self):
        with pytest.raises(ValidationError):
            FormatConfig(cut_symbol="a")

    def test_one_error_kind_for_both_packages(self):
        assert CutsiteValidationError is ValidationError
        with pytest.raises(CutsiteValidationError):
            FormatConfig(pad_char="nn")


class TestSequences:
    """Tests for Biopython-backed sequence helpers"""

    def test_complement(self):
        assert complement("gaattc") == "cttaag"
        assert complement("GAnTC") == "CTnAG"

    def test_reverse_complement(self):
        assert reverse_complement("ATGC") == "GCAT"
        assert reverse_complement("ATGCN") == "NGCAT"

    def test_is_nucleotide_pattern(self):
        assert is_nucleotide_pattern("NNRYacgt")
        assert is_nucleotide_pattern("g^aattc")
        assert not is_nucleotide_pattern("EcoRI")
        assert not is_nucleotide_pattern("")
        assert not is_nucleotide_pattern("^")
