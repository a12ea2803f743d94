#!/usr/bin/env python3
"""
Tests for text normalization.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playup_parser.text_normalizer import normalize_line_list, normalize_lines


class TestNormalizeLines(unittest.TestCase):
    """Test cases for line normalization."""

    def test_splits_and_trims_text(self):
        self.assertEqual(normalize_lines("  first \r\n\r\nsecond\rthird  \n"), ["first", "second", "third"])

    def test_empty_text(self):
        self.assertEqual(normalize_lines(""), [])

    def test_line_list(self):
        self.assertEqual(normalize_line_list(["  3M 6M 9M ", "", "   ", "\t1 1 2 9.95 19.90\t"]),
                         ["3M 6M 9M", "1 1 2 9.95 19.90"])


if __name__ == "__main__":
    unittest.main()
