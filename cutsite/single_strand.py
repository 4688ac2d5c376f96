"""
Single Strand Module

One strand of a restriction site together with the places it is cut.

Cuts are given in enzyme notation (see cutsite.cut_locations). The strand
pads its recognition pattern with 'n' where cuts fall outside of it, so
every cut has a character on both sides:

    strand = SingleStrand("gattaca", [-2, 3, 7])
    strand.pattern            # 'nngattacan'
    strand.cut_locations      # [0, 4, 8]
    strand.with_cut_symbols() # 'n^ngat^taca^n'
"""

import logging
from typing import Iterable, List, Optional

from strandutils.string_formatting import (
    DEFAULT_FORMAT,
    FormatConfig,
    add_spacing,
    has_cut_symbols,
    left_padding,
    make_padding,
    strip_cuts,
    strip_cuts_and_padding,
)

from .aligned_strands import insert_cut_symbols
from .cut_locations import CutLocationPairInEnzymeNotation, enzyme_to_array_index, left_offset
from .errors import ValidationError

logger = logging.getLogger(__name__)


def cut_locations_from_symbols(pattern: str, config: Optional[FormatConfig] = None) -> List[int]:
    """
    Read enzyme-notation cuts from a pattern drawn with cut symbols.

    Positions are counted from the first nucleotide after any left padding,
    so a cut in front of the pattern is negative:

        cut_locations_from_symbols("g^aattc")     -> [1]
        cut_locations_from_symbols("n^gattaca")   -> [-1]
        cut_locations_from_symbols("gattaca^n")   -> [7]
    """
    config = config or DEFAULT_FORMAT
    padding = len(left_padding(strip_cuts(pattern, config), config))

    cuts = []
    seen = 0
    for char in pattern:
        if char == config.cut_symbol:
            n = seen - padding
            cuts.append(n if n > 0 else n - 1)
        else:
            seen += 1
    return cuts


class SingleStrand:
    """
    A strand pattern with cuts.

    Attributes:
        stripped (str): Pattern without padding or cut symbols
        cut_locations_in_enzyme_notation (List[int]): Cuts in enzyme notation
        config (FormatConfig): Reserved characters
    """

    def __init__(self,
                 sequence: str,
                 cut_locations_in_enzyme_notation: Optional[Iterable[int]] = None,
                 config: Optional[FormatConfig] = None):
        """
        Parameters:
            sequence: Strand pattern. May contain cut symbols when no cuts are passed.
            cut_locations_in_enzyme_notation: Cuts in enzyme notation (no zero)
            config: Reserved characters (default: DEFAULT_FORMAT)

        Raises:
            ValidationError: If a cut is zero or not an integer, or if cuts are given
                both as symbols and as locations
        """
        self.config = config or DEFAULT_FORMAT
        sequence = str(sequence)

        if has_cut_symbols(sequence, self.config):
            if cut_locations_in_enzyme_notation:
                raise ValidationError(
                    f"Cuts given both as symbols and as locations: {sequence!r}, "
                    f"{list(cut_locations_in_enzyme_notation)!r}"
                )
            cut_locations_in_enzyme_notation = cut_locations_from_symbols(sequence, self.config)
            logger.debug("Read cuts %s from %r", cut_locations_in_enzyme_notation, sequence)

        cuts = list(cut_locations_in_enzyme_notation or [])
        for cut in cuts:
            # raises on 0 and non-integers
            CutLocationPairInEnzymeNotation(cut)

        self.stripped = strip_cuts_and_padding(sequence, self.config)
        self.cut_locations_in_enzyme_notation = cuts

    @property
    def pattern(self) -> str:
        """Stripped pattern padded so that every cut falls inside it."""
        cuts = self.cut_locations_in_enzyme_notation
        if not cuts:
            return self.stripped
        left = make_padding(left_offset(cuts), self.config)
        right = make_padding(max(cuts) - len(self.stripped) + 1, self.config)
        return left + self.stripped + right

    @property
    def cut_locations(self) -> List[int]:
        """Cuts as 0-based indices into `pattern`."""
        offset = left_offset(self.cut_locations_in_enzyme_notation)
        return [enzyme_to_array_index(c, offset) for c in self.cut_locations_in_enzyme_notation]

    def with_cut_symbols(self) -> str:
        """Padded pattern with a cut symbol after each cut, e.g. 'n^ngat^taca^n'."""
        return insert_cut_symbols(self.pattern, self.cut_locations, config=self.config)

    def with_spaces(self) -> str:
        """
        with_cut_symbols() spaced out one character per column, e.g. 'n^n g a t^t a c a^n'.

        No spacer is written next to a cut symbol, so the result lines up
        column for column with the other strand of an aligned site.
        """
        return add_spacing(self.with_cut_symbols(), self.config)

    def __len__(self):
        return len(self.stripped)

    def __str__(self):
        return self.pattern

    def __repr__(self):
        return f"SingleStrand({self.stripped!r}, {self.cut_locations_in_enzyme_notation!r})"
