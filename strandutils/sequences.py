"""
Sequence helpers backed by Biopython.

The complementary strand of a restriction site is written 3'->5' directly
under the primary strand, so it is the plain (forward) complement rather
than the reverse complement.
"""

from typing import Optional

from Bio.Data.IUPACData import ambiguous_dna_letters
from Bio.Seq import Seq

from .string_formatting import FormatConfig, strip_cuts


_IUPAC_DNA = frozenset(ambiguous_dna_letters.upper() + ambiguous_dna_letters.lower())


def complement(sequence: str) -> str:
    """
    Return the complement of a DNA sequence, position for position.

    Case and IUPAC ambiguity codes are preserved ('n' stays 'n').
    """
    return str(Seq(sequence).complement())


def reverse_complement(sequence: str) -> str:
    """Return the reverse complement of a DNA sequence."""
    return str(Seq(sequence).reverse_complement())


def is_nucleotide_pattern(text: str, config: Optional[FormatConfig] = None) -> bool:
    """
    Check whether a string is an IUPAC DNA pattern.

    Cut symbols are allowed anywhere in the pattern. An empty string (or a
    string of cut symbols only) is not a pattern.
    """
    letters = strip_cuts(text, config)
    if not letters:
        return False
    return all(c in _IUPAC_DNA for c in letters)
