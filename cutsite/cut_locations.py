"""
Cut Locations Module

Cut positions of a restriction enzyme are written in one of two notations:

- Enzyme notation: 1-based, counted from the first nucleotide of the
  recognition pattern. There is no 0; the position before 1 is -1, then
  -2 and so on. A cut at value v lies after nucleotide v.
- Array index: 0-based index into the strand string once the pattern has
  been padded on the left by as many 'n' as the most negative cut needs.
  A cut at index i lies after the character at index i.

Example with pattern 'gattaca' and cuts -2 and 3:

    enzyme notation   -2 -1  1  2  3  4  5  6  7
    padded pattern     n  n  g  a  t  t  a  c  a
    array index        0  1  2  3  4  5  6  7  8

    CutLocationsInEnzymeNotation.from_raw(-2, 3).to_array_index().primary
    -> [0, 4]

Every pair holds a primary and a complement cut; either may be None when
only one strand is cut.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import ValidationError

logger = logging.getLogger(__name__)

RawCutPair = Tuple[Optional[int], Optional[int]]


# ============================================
# Single value conversion
# ============================================

def enzyme_to_array_index(value: int, offset: int = 0) -> int:
    """
    Convert one enzyme-notation cut to an array index.

    Parameters:
        value: Nonzero enzyme-notation cut
        offset: Left padding in front of the pattern (-min of the cut set when negative)
    """
    if value > 0:
        return value + offset - 1
    return value + offset


def array_to_enzyme_index(index: int, offset: int = 0) -> int:
    """Inverse of enzyme_to_array_index; never returns 0."""
    if index >= offset:
        return index - offset + 1
    return index - offset


def left_offset(values: Iterable[int]) -> int:
    """Padding needed in front of a pattern so that no cut maps below index 0."""
    values = list(values)
    if not values:
        return 0
    return max(0, -min(values))


def reflect_enzyme_location(value: int, length: int) -> int:
    """
    Mirror an enzyme-notation cut through a pattern of `length` nucleotides.

    A cut after `b` nucleotides from the left of the primary strand lies
    after `length - b` nucleotides of the complementary strand read in the
    same direction. Applying this twice returns the original value.

        reflect_enzyme_location(1, 6)   -> 5     g^aattc / cttaa^g
        reflect_enzyme_location(6, 6)   -> -1
        reflect_enzyme_location(-1, 6)  -> 6
    """
    boundary = value if value > 0 else value + 1
    reflected = length - boundary
    return reflected if reflected > 0 else reflected - 1


# ============================================
# Pairs
# ============================================

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CutLocationPair:
    """A primary/complement cut pair in 0-based array index notation"""
    primary: Optional[int] = None
    complement: Optional[int] = None

    def __post_init__(self):
        if self.primary is None and self.complement is None:
            raise ValidationError("A cut location pair needs at least one cut, got (None, None)")
        for value in (self.primary, self.complement):
            if value is not None:
                self._validate_value(value)

    def _validate_value(self, value) -> None:
        if not _is_int(value) or value < 0:
            raise ValidationError(
                f"Array index cut locations must be non-negative integers, got {value!r} "
                f"in ({self.primary!r}, {self.complement!r})"
            )

    @classmethod
    def from_raw(cls, raw) -> "CutLocationPair":
        """
        Build a pair from a bare cut or a (primary, complement) sequence.

        A bare integer is a primary-strand cut only:
            3          -> (3, None)
            [3, 2]     -> (3, 2)
            (None, 2)  -> (None, 2)
        """
        if isinstance(raw, CutLocationPair):
            return cls(raw.primary, raw.complement)
        if raw is None or _is_int(raw):
            return cls(raw, None)
        if isinstance(raw, (list, tuple)) and len(raw) in (1, 2):
            return cls(*raw)
        raise ValidationError(f"Cannot read a cut location pair from {raw!r}")

    def as_tuple(self) -> RawCutPair:
        return (self.primary, self.complement)


@dataclass(frozen=True)
class CutLocationPairInEnzymeNotation(CutLocationPair):
    """A primary/complement cut pair in enzyme notation (no zero)"""

    def _validate_value(self, value) -> None:
        if not _is_int(value) or value == 0:
            raise ValidationError(
                f"Enzyme notation cut locations must be nonzero integers, got {value!r} "
                f"in ({self.primary!r}, {self.complement!r})"
            )


# ============================================
# Collections of pairs
# ============================================

@dataclass(frozen=True)
class CutLocations:
    """
    Cut pairs in array index notation.

    `offset` is the left padding the indices were computed against; it is
    what makes the conversion back to enzyme notation lossless.
    """
    pairs: Tuple[CutLocationPair, ...] = ()
    offset: int = 0

    @classmethod
    def from_raw(cls, *raw_pairs, offset: int = 0) -> "CutLocations":
        return cls(tuple(CutLocationPair.from_raw(r) for r in raw_pairs), offset)

    @property
    def primary(self) -> List[int]:
        return [p.primary for p in self.pairs if p.primary is not None]

    @property
    def complement(self) -> List[int]:
        return [p.complement for p in self.pairs if p.complement is not None]

    def as_tuples(self) -> List[RawCutPair]:
        return [p.as_tuple() for p in self.pairs]

    def to_enzyme_notation(self) -> "CutLocationsInEnzymeNotation":
        """Convert back to enzyme notation."""
        return CutLocationsInEnzymeNotation(tuple(
            CutLocationPairInEnzymeNotation(
                *(None if v is None else array_to_enzyme_index(v, self.offset)
                  for v in pair.as_tuple())
            )
            for pair in self.pairs
        ))

    def __len__(self):
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)


@dataclass(frozen=True)
class CutLocationsInEnzymeNotation:
    """Cut pairs in enzyme notation"""
    pairs: Tuple[CutLocationPairInEnzymeNotation, ...] = ()

    @classmethod
    def from_raw(cls, *raw_pairs) -> "CutLocationsInEnzymeNotation":
        """
        Build from raw cuts, e.g. from_raw(1, (3, 2), (None, 2), 57).

        Bare integers are primary-strand cuts.
        """
        return cls(tuple(CutLocationPairInEnzymeNotation.from_raw(r) for r in raw_pairs))

    @property
    def primary(self) -> List[int]:
        return [p.primary for p in self.pairs if p.primary is not None]

    @property
    def complement(self) -> List[int]:
        return [p.complement for p in self.pairs if p.complement is not None]

    @property
    def min(self) -> Optional[int]:
        values = self.primary + self.complement
        return min(values) if values else None

    @property
    def max(self) -> Optional[int]:
        values = self.primary + self.complement
        return max(values) if values else None

    @property
    def offset(self) -> int:
        return left_offset(self.primary + self.complement)

    def as_tuples(self) -> List[RawCutPair]:
        return [p.as_tuple() for p in self.pairs]

    def to_array_index(self) -> CutLocations:
        """
        Convert to array index notation.

        When any cut is negative every index is shifted right by the padding
        that cut needs, so no index is ever negative.
        """
        offset = self.offset
        converted = CutLocations(tuple(
            CutLocationPair(
                *(None if v is None else enzyme_to_array_index(v, offset)
                  for v in pair.as_tuple())
            )
            for pair in self.pairs
        ), offset)
        logger.debug("Enzyme notation %s -> array index %s (offset %d)",
                     self.as_tuples(), converted.as_tuples(), offset)
        return converted

    def __len__(self):
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)


# ============================================
# Convenience functions
# ============================================

def to_array_index(cut_pairs: Iterable) -> List[RawCutPair]:
    """
    Convert enzyme-notation cut pairs to array index pairs.

    Example:
        >>> to_array_index([(1, 5)])
        [(0, 4)]
        >>> to_array_index([(-2, 3), (None, 7)])
        [(0, 4), (None, 8)]
    """
    return CutLocationsInEnzymeNotation.from_raw(*cut_pairs).to_array_index().as_tuples()


def to_enzyme_notation(cut_pairs: Iterable, offset: int = 0) -> List[RawCutPair]:
    """Convert array index pairs computed against `offset` padding back to enzyme notation."""
    return CutLocations.from_raw(*cut_pairs, offset=offset).to_enzyme_notation().as_tuples()


def pair_raw_cut_locations(primary: Optional[Sequence[Optional[int]]],
                           complement: Optional[Sequence[Optional[int]]]) -> List[RawCutPair]:
    """
    Pair primary and complementary cuts from an external enzyme definition.

    0 and None mean "no cut" and are dropped. The remaining cuts are paired
    in order.

    Parameters:
        primary: Primary strand cuts in enzyme notation, or None
        complement: Complementary strand cuts in enzyme notation, or None

    Raises:
        ValidationError: If the two strands are left with a different number of cuts
    """
    p_cuts = [c for c in (primary or []) if c not in (0, None)]
    c_cuts = [c for c in (complement or []) if c not in (0, None)]
    if len(p_cuts) != len(c_cuts):
        raise ValidationError(
            "Primary and complementary cut locations cannot be paired.\n"
            f"primary: {len(p_cuts)}, {p_cuts!r}\n"
            f"complement: {len(c_cuts)}, {c_cuts!r}"
        )
    return list(zip(p_cuts, c_cuts))
