"""
Enzyme Source Module

A double-stranded restriction site can be described in four ways:

1. An EnzymeEntry record
2. The name of an enzyme, resolved through a lookup
3. A pattern drawn with cut symbols, e.g. 'g^aattc'
4. A plain pattern plus cut locations in enzyme notation

resolve_enzyme_source() decides once which of these it was given and
returns the matching variant. Each variant knows how to produce the
pattern and the enzyme-notation cut pairs of the site.

The lookup is any mapping of enzyme name -> EnzymeEntry, for instance the
result of strandutils.parsers.parse_enzyme_table().
"""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, Tuple, Union

from strandutils.parsers import EnzymeEntry
from strandutils.sequences import is_nucleotide_pattern
from strandutils.string_formatting import (
    DEFAULT_FORMAT,
    FormatConfig,
    has_cut_symbols,
    strip_cuts_and_padding,
)

from .cut_locations import (
    CutLocationsInEnzymeNotation,
    RawCutPair,
    pair_raw_cut_locations,
    reflect_enzyme_location,
)
from .errors import UnknownEnzymeError, ValidationError
from .single_strand import cut_locations_from_symbols

logger = logging.getLogger(__name__)

EnzymeLookup = Mapping[str, EnzymeEntry]
NameCheck = Callable[[str], bool]


def is_enzyme_name(text: str, config: Optional[FormatConfig] = None) -> bool:
    """Anything that isn't an IUPAC DNA pattern is taken to be an enzyme name."""
    return not is_nucleotide_pattern(text, config)


def find_enzyme(name: str, lookup: Optional[EnzymeLookup]) -> EnzymeEntry:
    """
    Find an enzyme by name, exactly first, then ignoring case.

    Raises:
        UnknownEnzymeError: If no entry matches
    """
    if lookup:
        if name in lookup:
            return lookup[name]
        wanted = name.lower()
        for key, entry in lookup.items():
            if key.lower() == wanted:
                logger.debug("Resolved enzyme %r as %r", name, key)
                return entry
    raise UnknownEnzymeError(f"No entry found for enzyme named {name!r}")


# ============================================
# Variants
# ============================================

@dataclass(frozen=True)
class SiteDefinition:
    """Pattern and enzyme-notation cut pairs of a double-stranded site"""
    pattern: str
    cut_pairs: Tuple[RawCutPair, ...]
    primary_cuts: Tuple[int, ...]
    complement_cuts: Tuple[int, ...]


@dataclass(frozen=True)
class FromEntry:
    """Site defined by an EnzymeEntry record"""
    entry: EnzymeEntry

    def build(self, config: FormatConfig) -> SiteDefinition:
        pairs = pair_raw_cut_locations(self.entry.primary_cuts, self.entry.complementary_cuts)
        return _from_cut_pairs(self.entry.pattern, pairs)


@dataclass(frozen=True)
class FromName:
    """Site defined by an enzyme name; the entry is resolved at construction"""
    name: str
    entry: EnzymeEntry

    def build(self, config: FormatConfig) -> SiteDefinition:
        return FromEntry(self.entry).build(config)


@dataclass(frozen=True)
class FromPatternWithCutSymbols:
    """Site drawn with cut symbols on the primary strand"""
    pattern: str

    def build(self, config: FormatConfig) -> SiteDefinition:
        # the complementary cuts mirror the primary ones through the pattern
        stripped = strip_cuts_and_padding(self.pattern, config)
        p_cuts = cut_locations_from_symbols(self.pattern, config)
        c_cuts = [reflect_enzyme_location(c, len(stripped)) for c in p_cuts]
        return SiteDefinition(stripped, tuple(zip(p_cuts, c_cuts)), tuple(p_cuts), tuple(c_cuts))


@dataclass(frozen=True)
class FromPatternWithCutLocations:
    """Plain pattern plus raw cut pairs in enzyme notation"""
    pattern: str
    raw_cut_pairs: Tuple

    def build(self, config: FormatConfig) -> SiteDefinition:
        return _from_cut_pairs(self.pattern, self.raw_cut_pairs)


EnzymeSource = Union[FromEntry, FromName, FromPatternWithCutSymbols, FromPatternWithCutLocations]


def _from_cut_pairs(pattern: str, raw_cut_pairs: Sequence) -> SiteDefinition:
    cuts = CutLocationsInEnzymeNotation.from_raw(*raw_cut_pairs)
    return SiteDefinition(pattern, tuple(cuts.as_tuples()), tuple(cuts.primary), tuple(cuts.complement))


# ============================================
# Resolution
# ============================================

def resolve_enzyme_source(erp,
                          raw_cut_pairs: Sequence = (),
                          lookup: Optional[EnzymeLookup] = None,
                          name_check: Optional[NameCheck] = None,
                          config: Optional[FormatConfig] = None) -> EnzymeSource:
    """
    Decide what kind of site description `erp` is.

    Parameters:
        erp: EnzymeEntry, enzyme name or nucleotide pattern
        raw_cut_pairs: Cut pairs in enzyme notation, only for plain patterns
        lookup: Mapping of enzyme name -> EnzymeEntry used to resolve names
        name_check: Decides whether a string is a name (default: is_enzyme_name)
        config: Reserved characters (default: DEFAULT_FORMAT)

    Returns:
        One of FromEntry, FromName, FromPatternWithCutSymbols, FromPatternWithCutLocations

    Raises:
        ValidationError: For None, an entry combined with cut pairs, or an unsupported type
        UnknownEnzymeError: If a name is not in the lookup
    """
    config = config or DEFAULT_FORMAT
    name_check = name_check or (lambda text: is_enzyme_name(text, config))
    raw_cut_pairs = tuple(raw_cut_pairs)

    if erp is None:
        raise ValidationError(
            "Passed a None value. Perhaps an EnzymeEntry that does not exist was requested?"
        )

    if isinstance(erp, EnzymeEntry):
        if raw_cut_pairs:
            raise ValidationError(
                "An EnzymeEntry was passed together with cut locations. Ambiguous or redundant.\n"
                f"cut locations = {raw_cut_pairs!r}"
            )
        return FromEntry(erp)

    if isinstance(erp, str):
        if name_check(erp):
            if raw_cut_pairs:
                raise ValidationError(
                    f"Enzyme name {erp!r} was passed together with cut locations {raw_cut_pairs!r}"
                )
            return FromName(erp, find_enzyme(erp, lookup))
        if has_cut_symbols(erp, config):
            if raw_cut_pairs:
                raise ValidationError(
                    f"Pattern {erp!r} has cut symbols and cut locations {raw_cut_pairs!r}"
                )
            return FromPatternWithCutSymbols(erp)
        return FromPatternWithCutLocations(erp, raw_cut_pairs)

    raise ValidationError(f"Don't know what to do with {type(erp).__name__}: {erp!r}")
