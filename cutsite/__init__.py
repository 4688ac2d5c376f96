# Restriction enzyme strand alignment and cut annotation

from .errors import (
    ValidationError,
    UnknownEnzymeError,
)
from .aligned_strands import (
    AlignedResult,
    align,
    align_with_cuts,
    insert_cut_symbols,
    fragment_lengths,
    is_blunt,
    is_sticky,
)
from .cut_locations import (
    CutLocationPair,
    CutLocationPairInEnzymeNotation,
    CutLocations,
    CutLocationsInEnzymeNotation,
    enzyme_to_array_index,
    array_to_enzyme_index,
    reflect_enzyme_location,
    to_array_index,
    to_enzyme_notation,
    pair_raw_cut_locations,
)
from .single_strand import (
    SingleStrand,
    cut_locations_from_symbols,
)
from .enzyme_source import (
    FromEntry,
    FromName,
    FromPatternWithCutSymbols,
    FromPatternWithCutLocations,
    resolve_enzyme_source,
    find_enzyme,
    is_enzyme_name,
)
from .double_stranded import DoubleStranded
# Re-export for convenience
from strandutils.parsers import (
    EnzymeEntry,
    parse_enzyme_table,
)
