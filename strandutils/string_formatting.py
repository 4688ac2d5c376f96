"""
String Formatting Module

Helpers for the textual form of restriction enzyme strands:
- Padding: runs of the wildcard letter 'n' on either end of a strand
- Cut symbols: a reserved character marking where a strand is cut
- Spacing: a separator between adjacent nucleotides so that two strands
  rendered with cut symbols line up column for column

Usage:
    from strandutils.string_formatting import strip_padding, add_spacing

    strip_padding("nngattacannn")      # 'gattaca'
    add_spacing("nnnn^ngattaca")       # 'n n n n^n g a t t a c a'
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from Bio.Data.IUPACData import ambiguous_dna_letters

from .errors import ValidationError


# ============================================
# Configuration
# ============================================

@dataclass(frozen=True)
class FormatConfig:
    """Reserved characters used when rendering strands"""
    cut_symbol: str = "^"
    pad_char: str = "n"
    spacer: str = " "

    def __post_init__(self):
        for label, char in (("cut_symbol", self.cut_symbol),
                            ("pad_char", self.pad_char),
                            ("spacer", self.spacer)):
            if len(char) != 1:
                raise ValidationError(f"{label} must be a single character, got {char!r}")
        if len({self.cut_symbol, self.pad_char.lower(), self.spacer}) != 3:
            raise ValidationError(
                f"cut_symbol, pad_char and spacer must be distinct: "
                f"{self.cut_symbol!r}, {self.pad_char!r}, {self.spacer!r}"
            )
        nucleotides = ambiguous_dna_letters.upper()
        for label, char in (("cut_symbol", self.cut_symbol), ("spacer", self.spacer)):
            if char.upper() in nucleotides:
                raise ValidationError(f"{label} {char!r} collides with the nucleotide alphabet")


DEFAULT_FORMAT = FormatConfig()


# ============================================
# Padding
# ============================================

def _padding_regex(config: FormatConfig) -> "re.Pattern":
    pad = re.escape(config.pad_char.lower()) + re.escape(config.pad_char.upper())
    return re.compile(rf"^([{pad}]*)(.*?)([{pad}]*)\Z", re.DOTALL)


def split_padding(s: str, config: Optional[FormatConfig] = None) -> Tuple[str, str, str]:
    """
    Split a strand into (left padding, core, right padding).

    A strand made only of padding is all left padding.

    Args:
        s: Strand string, possibly padded on either end
        config: Reserved characters (default: DEFAULT_FORMAT)

    Returns:
        Tuple of (left, core, right) whose concatenation is `s`
    """
    config = config or DEFAULT_FORMAT
    match = _padding_regex(config).match(s)
    return match.group(1), match.group(2), match.group(3)


def strip_padding(s: str, config: Optional[FormatConfig] = None) -> str:
    """Remove leading and trailing padding from a strand."""
    return split_padding(s, config)[1]


def left_padding(s: str, config: Optional[FormatConfig] = None) -> str:
    """Return the leading run of padding characters."""
    return split_padding(s, config)[0]


def right_padding(s: str, config: Optional[FormatConfig] = None) -> str:
    """Return the trailing run of padding characters."""
    return split_padding(s, config)[2]


def make_padding(length: int, config: Optional[FormatConfig] = None) -> str:
    """Return `length` padding characters."""
    config = config or DEFAULT_FORMAT
    return config.pad_char * max(length, 0)


# ============================================
# Cut symbols
# ============================================

def has_cut_symbols(s: str, config: Optional[FormatConfig] = None) -> bool:
    """Check whether a string contains at least one cut symbol."""
    config = config or DEFAULT_FORMAT
    return config.cut_symbol in s


def strip_cuts(s: str, config: Optional[FormatConfig] = None) -> str:
    """Remove every cut symbol from a string."""
    config = config or DEFAULT_FORMAT
    return s.replace(config.cut_symbol, "")


def strip_cuts_and_padding(s: str, config: Optional[FormatConfig] = None) -> str:
    """Remove cut symbols, then padding."""
    return strip_padding(strip_cuts(s, config), config)


def add_spacing(seq: str, config: Optional[FormatConfig] = None) -> str:
    """
    Put a spacer between adjacent nucleotides.

    No spacer is written on either side of a cut symbol, so a cut occupies
    the column a spacer would have used and two strands of the same length
    stay aligned:

        add_spacing("gat^ca")  ->  'g a t^c a'

    Args:
        seq: Strand string, optionally containing cut symbols
        config: Reserved characters (default: DEFAULT_FORMAT)

    Returns:
        Spaced string
    """
    config = config or DEFAULT_FORMAT
    out = []
    after_nucleotide = False
    for char in seq:
        if char == config.cut_symbol:
            out.append(char)
            after_nucleotide = False
        elif after_nucleotide:
            out.append(config.spacer)
            out.append(char)
        else:
            out.append(char)
            after_nucleotide = True
    return "".join(out)
