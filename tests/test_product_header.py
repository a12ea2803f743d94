#!/usr/bin/env python3
"""
Tests for product header matching and description cleaning.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playup_parser.models import ProductHeader
from playup_parser.product_header import clean_description, match_product_header


class TestCleanDescription(unittest.TestCase):
    """Test cases for composition suffix removal."""

    def test_strips_composition_suffix(self):
        self.assertEqual(clean_description("RIB LS T-SHIRT - 100% OGCO"), "RIB LS T-SHIRT")

    def test_strips_trailing_dashes(self):
        self.assertEqual(clean_description("STRIPED JERSEY LS T- - 50% OGCO/50%"), "STRIPED JERSEY LS T")

    def test_uses_last_separator(self):
        self.assertEqual(clean_description("DRESS - FLORAL - 100% CO"), "DRESS - FLORAL")

    def test_suffix_without_percentage_is_kept(self):
        self.assertEqual(clean_description("T-SHIRT - NAVY"), "T-SHIRT - NAVY")

    def test_plain_description_is_verbatim(self):
        self.assertEqual(clean_description("DENIM JUMPSUIT"), "DENIM JUMPSUIT")


class TestMatchProductHeader(unittest.TestCase):
    """Test cases for match_product_header."""

    def test_product_line(self):
        header = match_product_header("1AR11002 P6179 RIB LS T-SHIRT - 100% OGCO")
        self.assertEqual(header, ProductHeader(
            article="1AR11002",
            color_code="P6179",
            description="RIB LS T-SHIRT",
        ))

    def test_description_without_composition(self):
        header = match_product_header("2AU10505 R1000 KNITTED CARDIGAN")
        self.assertEqual(header.description, "KNITTED CARDIGAN")

    def test_article_must_start_with_digit(self):
        self.assertIsNone(match_product_header("AR110022 P6179 RIB LS T-SHIRT"))

    def test_article_must_be_seven_characters(self):
        self.assertIsNone(match_product_header("1AR110 P6179 RIB LS T-SHIRT"))

    def test_color_code_must_be_four_characters(self):
        self.assertIsNone(match_product_header("1AR11002 P61 RIB LS T-SHIRT"))

    def test_description_is_required(self):
        self.assertIsNone(match_product_header("1AR11002 P6179"))

    def test_other_invoice_lines(self):
        for line in [
            "3M 6M 9M 12M 18M 24M 36M",
            "6110 20 91 - (24M - 36M)",
            "1 1 1 1 1 1 6 12.3900 74.340a)",
        ]:
            with self.subTest(line=line):
                self.assertIsNone(match_product_header(line))


if __name__ == "__main__":
    unittest.main()
