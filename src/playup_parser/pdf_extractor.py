#!/usr/bin/env python3
"""
PDF text extraction for supplier invoices.
"""

import logging
from pathlib import Path
from typing import List

import pdfplumber

from .text_normalizer import normalize_lines

logger = logging.getLogger(__name__)

# Suppress logging noise from pdfminer
logging.getLogger("pdfminer").setLevel(logging.ERROR)


class PDFExtractionError(Exception):
    """Raised when a document cannot be turned into text."""


class PDFTextExtractor:
    """Extracts page text from a PDF with pdfplumber."""

    def __init__(self, x_tolerance: float = 3, y_tolerance: float = 3):
        self.x_tolerance = x_tolerance
        self.y_tolerance = y_tolerance

    def extract_text(self, pdf_path: str) -> str:
        """
        Extract text from all pages of a PDF.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Page texts joined top to bottom, one document line per text line

        Raises:
            PDFExtractionError: If the file is missing, unreadable or has no text
        """
        if not Path(pdf_path).exists():
            raise PDFExtractionError(f"PDF file not found: {pdf_path}")

        try:
            with pdfplumber.open(pdf_path) as pdf:
                pages = [self._extract_page_text(page) for page in pdf.pages]
        except Exception as e:
            logger.error(f"❌ pdfplumber extraction failed: {e}")
            raise PDFExtractionError(f"Failed to parse PDF: {e}") from e

        text = "\n".join(page_text for page_text in pages if page_text)
        if not text.strip():
            logger.error(f"❌ No text extracted from {pdf_path}")
            raise PDFExtractionError(
                f"No text could be extracted from {pdf_path}; the PDF may be image-based"
            )

        logger.info(f"✅ Extracted {len(text)} characters from {len(pages)} pages")
        return text

    def _extract_page_text(self, page) -> str:
        page_text = page.extract_text()
        if not page_text:
            # Retry with layout-preserving settings
            page_text = page.extract_text(
                layout=True,
                x_tolerance=self.x_tolerance,
                y_tolerance=self.y_tolerance
            )
        return page_text or ""

    def extract_lines(self, pdf_path: str) -> List[str]:
        """Extract normalized, non-empty text lines from a PDF."""
        return normalize_lines(self.extract_text(pdf_path))


def extract_pdf_text(pdf_path: str) -> str:
    """
    Convenience function to extract text from PDF.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        Extracted text
    """
    return PDFTextExtractor().extract_text(pdf_path)


def extract_pdf_lines(pdf_path: str) -> List[str]:
    """
    Convenience function to extract normalized lines from PDF.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        List of trimmed, non-empty lines
    """
    lines = PDFTextExtractor().extract_lines(pdf_path)
    logger.info(f"📝 Total lines in PDF: {len(lines)}")
    return lines
