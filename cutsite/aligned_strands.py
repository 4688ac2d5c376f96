"""
Aligned Strands Module

Pads and aligns the primary and complementary strand of a restriction site
so that both strings have the same length and every column pairs a
nucleotide with its partner. Cut symbols can be drawn into the aligned
strands to show where each strand is cleaved.

Typical usage:
    result = align("nngattacannnnn", "nnnnnctaatgtnn")
    result.primary      # 'nnnnngattacannnnn'
    result.complement   # 'nnnnnctaatgtnnnnn'

    result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [0, 2, 12])
    result.primary      # 'n n n n^n g a t t a c a n n^n n^n'
    result.complement   # 'n^n n^n n c t a a t g t n^n n n n'
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from strandutils.string_formatting import (
    DEFAULT_FORMAT,
    FormatConfig,
    add_spacing,
    make_padding,
    split_padding,
)

from .errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignedResult:
    """An aligned pair of strands of equal length"""
    primary: str
    complement: str


def align(a: str, b: str, config: Optional[FormatConfig] = None) -> AlignedResult:
    """
    Pad and align two strands.

    Both outputs receive the larger of the two left paddings and the larger
    of the two right paddings, so their cores end up in the same columns.

    Parameters:
        a: Primary strand, optionally padded
        b: Complementary strand, optionally padded
        config: Reserved characters (default: DEFAULT_FORMAT)

    Returns:
        AlignedResult with equal-length primary and complement

    Raises:
        ValidationError: If the cores of `a` and `b` differ in length
    """
    config = config or DEFAULT_FORMAT
    a_left, a_core, a_right = split_padding(str(a), config)
    b_left, b_core, b_right = split_padding(str(b), config)
    validate_input(a_core, b_core)

    left = max(a_left, b_left, key=len)
    right = max(a_right, b_right, key=len)

    return AlignedResult(left + a_core + right, left + b_core + right)


def align_with_cuts(a: str,
                    b: str,
                    a_cuts: Sequence[int],
                    b_cuts: Sequence[int],
                    config: Optional[FormatConfig] = None) -> AlignedResult:
    """
    Pad and align two strands and draw their cut symbols.

    Each nucleotide is spaced out to make room for the cut symbols. The two
    strands may carry any number of unrelated cuts; no biological shortcuts
    are taken.

    Algorithm:
    1. Split each strand into left padding, core and right padding
    2. Extend the shorter right padding to match the longer one
    3. Extend the shorter left padding to match the longer one, and shift
       that strand's cuts right by the number of characters added
    4. Insert a cut symbol after each cut offset, highest offset first
    5. Space out both strands

    Parameters:
        a: Primary strand, optionally padded
        b: Complementary strand, optionally padded
        a_cuts: Primary strand cuts, 0-based array index into `a`
        b_cuts: Complementary strand cuts, 0-based array index into `b`
        config: Reserved characters (default: DEFAULT_FORMAT)

    Returns:
        AlignedResult with spaced, equal-length primary and complement

    Raises:
        ValidationError: If the cores of `a` and `b` differ in length
    """
    config = config or DEFAULT_FORMAT
    a_left, a_core, a_right = split_padding(str(a), config)
    b_left, b_core, b_right = split_padding(str(b), config)
    validate_input(a_core, b_core)

    right_diff = len(a_right) - len(b_right)
    if right_diff > 0:
        b_right += make_padding(right_diff, config)
    else:
        a_right += make_padding(-right_diff, config)

    a_adjust = b_adjust = 0
    left_diff = len(a_left) - len(b_left)
    if left_diff > 0:
        b_left += make_padding(left_diff, config)
        b_adjust = left_diff
    else:
        a_left += make_padding(-left_diff, config)
        a_adjust = -left_diff

    primary = insert_cut_symbols(a_left + a_core + a_right, a_cuts, a_adjust, config)
    complement = insert_cut_symbols(b_left + b_core + b_right, b_cuts, b_adjust, config)

    logger.debug("Aligned %r / %r with cuts %s / %s", a, b, list(a_cuts), list(b_cuts))
    return AlignedResult(add_spacing(primary, config), add_spacing(complement, config))


def insert_cut_symbols(strand: str,
                       cuts: Sequence[int],
                       adjust: int = 0,
                       config: Optional[FormatConfig] = None) -> str:
    """
    Insert a cut symbol after each cut offset.

    Cuts are inserted from the highest offset down so an insertion never
    moves a position that is still waiting to be marked.

    Parameters:
        strand: Unspaced strand
        cuts: 0-based offsets; the symbol goes after the character at each offset
        adjust: Padding added to the left of `strand` after the offsets were computed
        config: Reserved characters (default: DEFAULT_FORMAT)

    Raises:
        ValidationError: If a cut is negative or falls past the end of `strand`
    """
    config = config or DEFAULT_FORMAT
    for cut in cuts:
        if cut < 0 or cut + 1 + adjust > len(strand):
            raise ValidationError(
                f"Cut {cut} (shifted by {adjust}) is outside the strand.\n"
                f"{len(strand)}, {strand!r}"
            )
    for cut in sorted(cuts, reverse=True):
        position = cut + 1 + adjust
        strand = strand[:position] + config.cut_symbol + strand[position:]
    return strand


def fragment_lengths(rendered: str, config: Optional[FormatConfig] = None) -> List[int]:
    """Lengths of the pieces a rendered strand is split into by its cut symbols."""
    config = config or DEFAULT_FORMAT
    return [len(piece) for piece in rendered.split(config.cut_symbol)]


def is_blunt(aligned: AlignedResult, config: Optional[FormatConfig] = None) -> bool:
    """
    Check whether an alignment drawn with cuts produces blunt ends.

    True when both strands are cut into pieces of identical lengths, i.e.
    every cut on one strand sits in the same column as a cut on the other.

    Parameters:
        aligned: Result of align_with_cuts
        config: Reserved characters (default: DEFAULT_FORMAT)
    """
    return fragment_lengths(aligned.primary, config) == fragment_lengths(aligned.complement, config)


def is_sticky(aligned: AlignedResult, config: Optional[FormatConfig] = None) -> bool:
    """Check whether an alignment drawn with cuts leaves overhangs."""
    return not is_blunt(aligned, config)


def validate_input(a: str, b: str) -> None:
    """Raise ValidationError unless two stripped strands have the same length."""
    if len(a) != len(b):
        raise ValidationError(
            "Result sequences are not the same size. "
            "Does not align sequences with differing lengths after stripping padding.\n"
            f"{len(a)}, {a!r}\n"
            f"{len(b)}, {b!r}"
        )
