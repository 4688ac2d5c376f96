#!/usr/bin/env python3
"""
Print the aligned strands of a restriction site and where they are cut.

The site can be an enzyme name (looked up in a tab-separated enzyme table),
a pattern drawn with cut symbols, or a plain pattern plus --cut options in
enzyme notation.

Usage:
    python scripts/show_cut_pattern.py 'g^aattc'
    python scripts/show_cut_pattern.py gattaca --cut 3,4 --cut 6
    python scripts/show_cut_pattern.py EcoRI --enzyme-table enzymes.tsv
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from cutsite import DoubleStranded, ValidationError
from strandutils.parsers import parse_enzyme_table

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def parse_cut_argument(text: str):
    """Parse '3', '3,4', ',4' or '3,' into an enzyme-notation cut pair."""
    if "," not in text:
        return int(text)
    primary, complement = text.split(",", 1)
    return (int(primary) if primary.strip() else None,
            int(complement) if complement.strip() else None)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Show the aligned strands and cuts of a restriction site",
    )
    parser.add_argument(
        "site",
        help="Enzyme name, pattern with cut symbols, or plain pattern",
    )
    parser.add_argument(
        "--cut", action="append", default=[], type=parse_cut_argument,
        help="Cut in enzyme notation: PRIMARY or PRIMARY,COMPLEMENT (repeatable)",
    )
    parser.add_argument(
        "--enzyme-table",
        help="Tab-separated enzyme table used to resolve enzyme names",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log debug messages",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    lookup = None
    if args.enzyme_table:
        lookup = parse_enzyme_table(args.enzyme_table)
        logger.info("Loaded %d enzymes from %s", len(lookup), args.enzyme_table)

    try:
        site = DoubleStranded(args.site, *args.cut, enzyme_lookup=lookup)
        aligned = site.aligned_strands()
        with_cuts = site.aligned_strands_with_cuts()
        blunt = site.is_blunt()
    except ValidationError as e:
        logger.error("%s", e)
        return 1

    print(f"cuts (enzyme notation): {site.cut_locations_in_enzyme_notation.as_tuples()}")
    print(f"cuts (array index):     {site.cut_locations.as_tuples()}")
    print()
    print(f"5' {aligned.primary} 3'")
    print(f"3' {aligned.complement} 5'")
    print()
    print(f"5' {with_cuts.primary} 3'")
    print(f"3' {with_cuts.complement} 5'")
    print()
    print("blunt" if blunt else "sticky")
    return 0


if __name__ == "__main__":
    sys.exit(main())
