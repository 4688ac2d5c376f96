"""
Double Stranded Module

A restriction site as a primary strand and its complementary strand, each
with its own cuts.

Typical usage:
    ds = DoubleStranded("g^aattc")
    ds.aligned_strands_with_cuts()
    # AlignedResult(primary='g^a a t t c', complement='c t t a a^g')
    ds.is_sticky()     # True

    ds = DoubleStranded("gattaca", (3, 4))
    ds = DoubleStranded("EcoRI", enzyme_lookup=parse_enzyme_table("enzymes.tsv"))

Cut pairs for a plain pattern are in enzyme notation; a bare integer is a
primary-strand cut and either side of a pair may be None:

    1, (3, 2), (20, 22), 57
    p, (p, c), (p, c),   p
"""

import logging
from typing import Optional

from strandutils.sequences import complement
from strandutils.string_formatting import DEFAULT_FORMAT, FormatConfig

from .aligned_strands import AlignedResult, align, align_with_cuts, is_blunt
from .cut_locations import CutLocations, CutLocationsInEnzymeNotation
from .enzyme_source import EnzymeLookup, NameCheck, resolve_enzyme_source
from .single_strand import SingleStrand

logger = logging.getLogger(__name__)


class DoubleStranded:
    """
    A pair of SingleStrand objects for the two strands of a site.

    Attributes:
        source: The resolved description this site was built from
        primary (SingleStrand): Primary strand
        complement (SingleStrand): Complementary strand, column for column under primary
        cut_locations_in_enzyme_notation (CutLocationsInEnzymeNotation): Cut pairs
        cut_locations (CutLocations): Cut pairs in array index notation
    """

    def __init__(self,
                 erp,
                 *raw_cut_pairs,
                 enzyme_lookup: Optional[EnzymeLookup] = None,
                 name_check: Optional[NameCheck] = None,
                 config: Optional[FormatConfig] = None):
        """
        Parameters:
            erp: An EnzymeEntry, an enzyme name, or a nucleotide pattern (with or
                 without cut symbols)
            *raw_cut_pairs: Cut pairs in enzyme notation, for a plain pattern
            enzyme_lookup: Mapping of enzyme name -> EnzymeEntry for resolving names
            name_check: Decides whether a string is an enzyme name
            config: Reserved characters (default: DEFAULT_FORMAT)

        Raises:
            ValidationError: If the description or its cuts are inconsistent
            UnknownEnzymeError: If an enzyme name isn't in the lookup
        """
        self.config = config or DEFAULT_FORMAT
        self.source = resolve_enzyme_source(
            erp, raw_cut_pairs, lookup=enzyme_lookup, name_check=name_check, config=self.config
        )
        site = self.source.build(self.config)

        self.cut_locations_in_enzyme_notation = CutLocationsInEnzymeNotation.from_raw(*site.cut_pairs)
        self.cut_locations: CutLocations = self.cut_locations_in_enzyme_notation.to_array_index()

        self.primary = SingleStrand(site.pattern, site.primary_cuts, self.config)
        self.complement = SingleStrand(complement(site.pattern), site.complement_cuts, self.config)

        logger.debug("Built %s from %s", self, type(self.source).__name__)

    def aligned_strands(self) -> AlignedResult:
        """See cutsite.aligned_strands.align"""
        return align(self.primary.pattern, self.complement.pattern, self.config)

    def aligned_strands_with_cuts(self) -> AlignedResult:
        """See cutsite.aligned_strands.align_with_cuts"""
        return align_with_cuts(
            self.primary.pattern,
            self.complement.pattern,
            self.primary.cut_locations,
            self.complement.cut_locations,
            self.config,
        )

    def is_blunt(self) -> bool:
        """True if the cut pattern creates blunt fragments"""
        return is_blunt(self.aligned_strands_with_cuts(), self.config)

    def is_sticky(self) -> bool:
        """True if the cut pattern creates sticky fragments"""
        return not self.is_blunt()

    def __repr__(self):
        return (f"DoubleStranded(primary={self.primary.with_cut_symbols()!r}, "
                f"complement={self.complement.with_cut_symbols()!r})")
