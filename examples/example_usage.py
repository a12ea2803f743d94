#!/usr/bin/env python3
"""
Example usage of the Play UP Invoice Parser
Demonstrates the parser with sample invoice text.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playup_parser import ColorPaletteParser, PlayUpInvoiceParser, render_color_csv


def create_sample_invoice_text():
    """Create sample invoice text as extracted from a Play UP PDF."""
    return """
    PLAY UP - INVOICE 2024/118

    Article  Color  Description  3M 6M 9M 12M 18M 24M 36M  Total  Price  Amount
    1AR11002 P6179 RIB LS T-SHIRT - 100% OGCO
    6110 20 91 - (24M - 36M)
    1 1 1 1 1 1 - 6 12.3900 74.340a)
    1AR11003 R1000 RIB LEGGING - 95% OGCO 5% EA
    6104 63 00
    2 2 2 2 - - - 8 9.9500 79.60

    Article  Color  Description  3Y 4Y 5Y 6Y 8Y 10Y 12Y 14Y  Total  Price  Amount
    2AR11104 E7048 DENIM JUMPSUIT - 100% CO
    6204 62 - (3Y - 14Y)
    - 2 2 2 2 - - - 8 21.4500 171.60
    """


def demonstrate_invoice_parser():
    """Parse the sample invoice and print CSV and JSON output."""
    print("=" * 60)
    print("DEMONSTRATION: Play UP Invoice Parser")
    print("=" * 60)

    parser = PlayUpInvoiceParser(dutch_sizes=True)
    result = parser.parse_text(create_sample_invoice_text())

    print(f"Found {result.product_count} products, {result.variant_count} variants\n")
    print(result.csv)
    print(json.dumps(result.to_dict()["products"], indent=2, ensure_ascii=False))


def demonstrate_color_palette():
    """Parse sample color palette text."""
    print("\n" + "=" * 60)
    print("DEMONSTRATION: Color Palette Parser")
    print("=" * 60)

    mappings = ColorPaletteParser().parse_text("WATERCOLOR P6179\nSOFT PINK\nE7048\nINK R1000")
    print(render_color_csv(mappings))


def demonstrate_cli_usage():
    """Show CLI commands."""
    print("=" * 60)
    print("DEMONSTRATION: CLI Usage")
    print("=" * 60)
    print("1. Parse invoice:     playup-parser parse invoice.pdf -o products.csv")
    print("2. Keep size labels:  playup-parser parse invoice.pdf --raw-sizes")
    print("3. JSON output:       playup-parser parse invoice.pdf --format json")
    print("4. Color palette:     playup-parser colors palette.pdf -o colors.csv")
    print("5. Verbose mode:      playup-parser -v parse invoice.pdf")


def main():
    demonstrate_invoice_parser()
    demonstrate_color_palette()
    demonstrate_cli_usage()


if __name__ == "__main__":
    main()
