#!/usr/bin/env python3
"""
Tests for size-column header detection.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playup_parser.size_vocabulary import (
    ADULT_SIZES,
    BABY_SIZES,
    KIDS_SIZES,
    SHORT_BABY_SIZES,
    detect_size_vocabulary,
)


class TestDetectSizeVocabulary(unittest.TestCase):
    """Test cases for detect_size_vocabulary."""

    def test_baby_table(self):
        vocabulary = detect_size_vocabulary("3M 6M 9M 12M 18M 24M 36M")
        self.assertEqual(vocabulary, BABY_SIZES)
        self.assertEqual(vocabulary.labels, ("3M", "6M", "9M", "12M", "18M", "24M", "36M"))

    def test_baby_table_up_to_24_months(self):
        self.assertEqual(detect_size_vocabulary("Article 3M 6M 9M 12M 18M 24M Total"), BABY_SIZES)

    def test_short_baby_table(self):
        vocabulary = detect_size_vocabulary("0M 1M 3M 6M 9M 12M Total")
        self.assertEqual(vocabulary, SHORT_BABY_SIZES)
        self.assertEqual(vocabulary.labels[0], "0M")

    def test_kids_table(self):
        vocabulary = detect_size_vocabulary("3Y 4Y 5Y 6Y 8Y 10Y 12Y 14Y Total")
        self.assertEqual(vocabulary, KIDS_SIZES)
        self.assertEqual(len(vocabulary), 8)

    def test_adult_table(self):
        self.assertEqual(detect_size_vocabulary("XS S M L XL Total"), ADULT_SIZES)

    def test_adult_table_requires_spaced_letters(self):
        self.assertIsNone(detect_size_vocabulary("XS,S,M,L,XL"))

    def test_customs_line_is_not_a_header(self):
        self.assertIsNone(detect_size_vocabulary("6110 20 91 - (24M - 36M)"))

    def test_product_line_is_not_a_header(self):
        self.assertIsNone(detect_size_vocabulary("1AR11002 P6179 RIB LS T-SHIRT - 100% OGCO"))

    def test_month_rule_wins_over_year_rule(self):
        self.assertEqual(detect_size_vocabulary("3M 6M 9M 3Y 4Y 5Y"), SHORT_BABY_SIZES)

    def test_unrelated_line(self):
        self.assertIsNone(detect_size_vocabulary("Invoice number 2024-118"))


if __name__ == "__main__":
    unittest.main()
