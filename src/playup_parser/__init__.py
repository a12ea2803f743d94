"""
Play UP Invoice Parser

Converts Play UP supplier invoice PDFs into product import CSV.
"""

__version__ = "1.0.0"

from .color_palette import ColorPaletteParser, render_color_csv
from .csv_renderer import render_csv, to_dutch_size
from .invoice_parser import PlayUpInvoiceParser, parse_invoice_lines
from .models import ParsedProduct, ParseResult
from .pdf_extractor import PDFExtractionError, PDFTextExtractor

__all__ = [
    "PlayUpInvoiceParser",
    "parse_invoice_lines",
    "ColorPaletteParser",
    "render_color_csv",
    "render_csv",
    "to_dutch_size",
    "ParsedProduct",
    "ParseResult",
    "PDFExtractionError",
    "PDFTextExtractor",
]
