"""
Demo script for aligning restriction site strands and drawing their cuts.

Shows:
- Aligning two strands with different padding
- Drawing cuts on both strands
- Converting cuts between enzyme notation and array index
- Building double-stranded sites from patterns and enzyme entries
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cutsite import (
    DoubleStranded,
    EnzymeEntry,
    align,
    align_with_cuts,
    to_array_index,
)


def example_1_align():
    """Example 1: Padding two strands into a common frame."""
    print("=" * 80)
    print("Example 1: Aligning two strands")
    print("=" * 80)

    result = align("nngattacannnnn", "nnnnnctaatgtnn")
    print(f"  primary:    {result.primary}")
    print(f"  complement: {result.complement}")
    print()


def example_2_align_with_cuts():
    """Example 2: Drawing cuts on both strands."""
    print("=" * 80)
    print("Example 2: Aligning two strands with cuts")
    print("=" * 80)

    result = align_with_cuts("nngattacannnnn", "nnnnnctaatgtnn", [0, 10, 12], [0, 2, 12])
    print(f"  primary:    {result.primary}")
    print(f"  complement: {result.complement}")
    print()


def example_3_notation():
    """Example 3: Enzyme notation vs array index."""
    print("=" * 80)
    print("Example 3: Converting cut locations")
    print("=" * 80)

    pairs = [(-2, 3), (None, 7)]
    print(f"  enzyme notation: {pairs}")
    print(f"  array index:     {to_array_index(pairs)}")
    print()


def example_4_double_stranded():
    """Example 4: Blunt and sticky sites."""
    print("=" * 80)
    print("Example 4: Double-stranded sites")
    print("=" * 80)

    lookup = {
        "EcoRI": EnzymeEntry("EcoRI", "GAATTC", 1, 5),
        "EcoRV": EnzymeEntry("EcoRV", "GATATC", 3, 3),
    }
    for name in ("EcoRI", "EcoRV"):
        site = DoubleStranded(name, enzyme_lookup=lookup)
        aligned = site.aligned_strands_with_cuts()
        kind = "blunt" if site.is_blunt() else "sticky"
        print(f"  {name} ({kind})")
        print(f"    5' {aligned.primary} 3'")
        print(f"    3' {aligned.complement} 5'")

    site = DoubleStranded("nn^gattaca", enzyme_lookup=lookup)
    aligned = site.aligned_strands_with_cuts()
    print("  nn^gattaca")
    print(f"    5' {aligned.primary} 3'")
    print(f"    3' {aligned.complement} 5'")
    print()


def main():
    """Run all examples."""
    print("\n")
    print("*" * 80)
    print("RESTRICTION SITE STRAND ALIGNMENT - DEMONSTRATION")
    print("*" * 80)
    print()

    example_1_align()
    example_2_align_with_cuts()
    example_3_notation()
    example_4_double_stranded()

    print("*" * 80)
    print("All examples completed!")
    print("*" * 80)
    print()


if __name__ == '__main__':
    main()
