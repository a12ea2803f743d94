#!/usr/bin/env python3
"""
Tests for the color palette parser.
"""

import unittest
from unittest.mock import patch

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from playup_parser.color_palette import ColorPaletteParser, render_color_csv


class TestColorPaletteParser(unittest.TestCase):
    """Test cases for ColorPaletteParser."""

    def setUp(self):
        self.parser = ColorPaletteParser()

    def test_name_and_code_on_one_line(self):
        mappings = self.parser.parse_text("WATERCOLOR P6179\nSoft Pink E7048")
        self.assertEqual(mappings, {"P6179": "WATERCOLOR", "E7048": "SOFT PINK"})

    def test_code_below_name(self):
        mappings = self.parser.parse_text("FOREST GREEN\nG1234")
        self.assertEqual(mappings, {"G1234": "FOREST GREEN"})

    def test_short_name_above_code(self):
        mappings = self.parser.parse_text("RED\r\n\r\nR1000")
        self.assertEqual(mappings, {"R1000": "RED"})

    def test_continuous_text(self):
        mappings = self.parser.parse_text("Colors: WATERCOLOR P6179, SAND S2000")
        self.assertEqual(mappings, {"P6179": "WATERCOLOR", "S2000": "SAND"})

    def test_later_line_overwrites_earlier_mapping(self):
        mappings = self.parser.parse_text("WATERCOLOR P6179\nOCEAN P6179")
        self.assertEqual(mappings, {"P6179": "OCEAN"})

    def test_continuous_text_does_not_overwrite_line_mapping(self):
        mappings = self.parser.parse_text("WATERCOLOR P6179\nSee list: OCEAN P6179")
        self.assertEqual(mappings, {"P6179": "WATERCOLOR"})

    def test_continuous_name_ignores_preceding_words(self):
        self.assertEqual(self.parser.parse_text("Ref. 12 NOTE WATERCOLOR P6179"), {})

    def test_continuous_name_after_separator(self):
        mappings = self.parser.parse_text("Ref. 12: WATERCOLOR P6179")
        self.assertEqual(mappings, {"P6179": "WATERCOLOR"})

    def test_no_mappings(self):
        self.assertEqual(self.parser.parse_text(""), {})
        self.assertEqual(self.parser.parse_text("image based palette"), {})

    @patch('playup_parser.color_palette.extract_pdf_text')
    def test_parse_pdf(self, mock_extract):
        mock_extract.return_value = "WATERCOLOR P6179"
        self.assertEqual(self.parser.parse_pdf("palette.pdf"), {"P6179": "WATERCOLOR"})
        mock_extract.assert_called_once_with("palette.pdf")

    def test_render_color_csv(self):
        csv_text = render_color_csv({"P6179": "WATERCOLOR", "E7048": "SOFT PINK"})
        self.assertEqual(csv_text, "ColorCode,ColorName\nP6179,WATERCOLOR\nE7048,SOFT PINK\n")


if __name__ == "__main__":
    unittest.main()
