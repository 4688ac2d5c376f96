# Utility functions for restriction enzyme strands

from .errors import ValidationError

from .string_formatting import (
    # Configuration
    FormatConfig,
    DEFAULT_FORMAT,
    # Padding
    split_padding,
    strip_padding,
    left_padding,
    right_padding,
    make_padding,
    # Cut symbols and spacing
    has_cut_symbols,
    strip_cuts,
    strip_cuts_and_padding,
    add_spacing,
)

from .sequences import (
    complement,
    reverse_complement,
    is_nucleotide_pattern,
)

from .parsers import (
    # Data class
    EnzymeEntry,
    # Enzyme table parsers
    parse_enzyme_line,
    parse_enzyme_table,
)
