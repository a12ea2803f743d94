#!/usr/bin/env python3
"""
Color palette parser for Play UP color-code PDFs.

Maps color codes (a letter followed by four digits, e.g. ``P6179``) to
their color names (e.g. ``WATERCOLOR``).
"""

import re
import logging
from typing import Dict, List

from .pdf_extractor import extract_pdf_text

logger = logging.getLogger(__name__)

COLOR_CSV_HEADER = "ColorCode,ColorName"

_NAME_AND_CODE = re.compile(r'^([A-Z][A-Z\s]+?)\s+([A-Z]\d{4})$', re.IGNORECASE)
_CODE_ONLY = re.compile(r'^[A-Z]\d{4}$')
_NAME_ONLY = re.compile(r'^[A-Z][A-Z\s]+$')
_LONG_NAME_ONLY = re.compile(r'^[A-Z][A-Z\s]{3,}$')
# A name starts a line or follows a separator, e.g. "Colors: WATERCOLOR P6179, SAND S2000"
_CONTINUOUS = re.compile(r'(?:^|[,;:|])[ \t]*([A-Z][A-Z ]{3,}?)\s+([A-Z]\d{4})\b', re.MULTILINE)
_LINE_BREAKS = re.compile(r'[\n\r]+')


class ColorPaletteParser:
    """Extracts color code to color name mappings from palette text."""

    def _split_lines(self, text: str) -> List[str]:
        lines = (line.strip() for line in _LINE_BREAKS.split(text))
        return [line for line in lines if line]

    def _add(self, mappings: Dict[str, str], code: str, name: str, strategy: str,
             overwrite: bool = True):
        if code in mappings and not overwrite:
            return
        mappings[code] = name
        logger.debug(f"  ✅ {strategy}: {code} → {name}")

    def parse_text(self, text: str) -> Dict[str, str]:
        """
        Parse color mappings from palette text.

        Args:
            text: Raw text extracted from a color palette PDF

        Returns:
            Color code to upper-case color name. A code found again by the
            line strategies takes the later name; the continuous pass over
            the whole text only fills codes the line strategies missed.
        """
        mappings: Dict[str, str] = {}
        if not text:
            return mappings

        lines = self._split_lines(text)
        for i, line in enumerate(lines):
            # "WATERCOLOR P6179"
            match = _NAME_AND_CODE.match(line)
            if match:
                self._add(mappings, match.group(2).upper(), match.group(1).strip().upper(), "Same line")
                continue

            # Name on the previous line, code on this one
            if _CODE_ONLY.match(line) and i > 0 and _NAME_ONLY.match(lines[i - 1]):
                self._add(mappings, line, lines[i - 1].upper(), "Name above")

            # Name on this line, code on the next one
            if _LONG_NAME_ONLY.match(line) and i < len(lines) - 1 and _CODE_ONLY.match(lines[i + 1]):
                self._add(mappings, lines[i + 1], line.upper(), "Code below")

        for match in _CONTINUOUS.finditer(text):
            self._add(mappings, match.group(2).upper(), match.group(1).strip().upper(), "Continuous", overwrite=False)

        logger.info(f"✅ Total extracted: {len(mappings)} color mappings")
        return mappings

    def parse_pdf(self, pdf_path: str) -> Dict[str, str]:
        """
        Parse color mappings from a palette PDF.

        Raises:
            PDFExtractionError: If no text can be extracted from the PDF
        """
        logger.info(f"🎨 Parsing Play UP color palette PDF: {pdf_path}")
        return self.parse_text(extract_pdf_text(pdf_path))


def render_color_csv(mappings: Dict[str, str]) -> str:
    """Render color mappings as ``ColorCode,ColorName`` CSV."""
    lines = [COLOR_CSV_HEADER] + [f"{code},{name}" for code, name in mappings.items()]
    return "\n".join(lines) + "\n"
