"""
Parsers Module

Reads restriction enzyme definitions from a tab-separated table.

Table columns:
    name  pattern  primary_cut1  complement_cut1  [primary_cut2  complement_cut2]

Cut positions are in enzyme notation (1-based, no zero, negative values
count back from the position before the first nucleotide). A cut of 0
means "no cut", the same convention REBASE uses.

Usage:
    from strandutils.parsers import parse_enzyme_table

    enzymes = parse_enzyme_table("enzymes.tsv")
    enzymes["EcoRI"].pattern      # 'GAATTC'
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


# ============================================
# Data Classes
# ============================================

@dataclass(frozen=True)
class EnzymeEntry:
    """A restriction enzyme definition, cuts in enzyme notation (0 = absent)"""
    name: str
    pattern: str
    primary_strand_cut1: int = 0
    complementary_strand_cut1: int = 0
    primary_strand_cut2: int = 0
    complementary_strand_cut2: int = 0

    @property
    def primary_cuts(self) -> List[int]:
        return [self.primary_strand_cut1, self.primary_strand_cut2]

    @property
    def complementary_cuts(self) -> List[int]:
        return [self.complementary_strand_cut1, self.complementary_strand_cut2]


# ============================================
# Enzyme table parser
# ============================================

def parse_enzyme_line(line: str) -> Optional[EnzymeEntry]:
    """
    Parse one row of an enzyme table.

    Args:
        line: Tab-separated row

    Returns:
        EnzymeEntry, or None for comments and blank lines

    Raises:
        ValueError: If the row has the wrong number of fields or a cut is not an integer
    """
    line = line.rstrip("\n")
    if not line.strip() or line.startswith('#'):
        return None

    fields = line.split('\t')
    if len(fields) not in (4, 6):
        raise ValueError(f"Expected 4 or 6 tab-separated fields, got {len(fields)}")

    cuts = [int(x) for x in fields[2:]]
    return EnzymeEntry(fields[0].strip(), fields[1].strip(), *cuts)


def parse_enzyme_table(table_file: str) -> Dict[str, EnzymeEntry]:
    """
    Parse a tab-separated restriction enzyme table.

    Args:
        table_file: Path to the table

    Returns:
        Dictionary mapping enzyme name -> EnzymeEntry. Later rows win on
        duplicate names.

    Raises:
        FileNotFoundError: If the table doesn't exist
    """
    if not Path(table_file).exists():
        raise FileNotFoundError(f"Enzyme table not found: {table_file}")

    enzymes = {}
    with open(table_file, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            try:
                entry = parse_enzyme_line(line)
            except ValueError as e:
                logger.warning("%s:%d: skipping malformed row (%s)", table_file, line_no, e)
                continue
            if entry is not None:
                enzymes[entry.name] = entry

    logger.debug("Loaded %d enzymes from %s", len(enzymes), table_file)
    return enzymes
