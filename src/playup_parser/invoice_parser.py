#!/usr/bin/env python3
"""
Play UP Invoice Parser
Reconstructs the product/size/quantity table of a Play UP supplier invoice
from its extracted text lines.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .csv_renderer import flatten_products, render_csv
from .models import EMPTY_VOCABULARY, ParsedProduct, ParseResult
from .pdf_extractor import extract_pdf_text
from .product_header import match_product_header
from .quantity_line import (
    DEFAULT_LOOKAHEAD,
    DEFAULT_MAX_SIZE_QUANTITY,
    locate_quantity_line,
    tokenize_quantities,
)
from .size_vocabulary import detect_size_vocabulary
from .text_normalizer import normalize_line_list, normalize_lines

logger = logging.getLogger(__name__)

DEBUG_TEXT_LIMIT = 2000


class PlayUpInvoiceParser:
    """Line-scanning parser for Play UP invoice tables."""

    def __init__(self, lookahead: int = DEFAULT_LOOKAHEAD,
                 max_size_quantity: int = DEFAULT_MAX_SIZE_QUANTITY,
                 dutch_sizes: bool = False):
        self.lookahead = lookahead
        self.max_size_quantity = max_size_quantity
        self.dutch_sizes = dutch_sizes

    def parse_lines(self, lines: Sequence[str]) -> List[ParsedProduct]:
        """
        Parse products from invoice lines.

        The active size vocabulary is replaced whenever a table header is
        seen; each product takes its sizes from the vocabulary active at its
        header line.

        Args:
            lines: Document lines in top-to-bottom order; padding and blank
                lines are removed before scanning

        Returns:
            Products with at least one positive size quantity
        """
        lines = normalize_line_list(lines)
        products = []
        vocabulary = EMPTY_VOCABULARY

        for i, line in enumerate(lines):
            detected = detect_size_vocabulary(line)
            if detected:
                vocabulary = detected
                logger.info(f"📊 Table header detected at line {i}: {', '.join(vocabulary.labels)}")
                continue

            header = match_product_header(line)
            if header is None:
                continue

            if not vocabulary:
                logger.warning(f"⚠️ Found product at line {i} but no table header detected yet. Skipping: {line}")
                continue

            logger.info(f"🔍 Found article: {header.article} {header.color_code} - {header.description}")

            quantity_row = locate_quantity_line(lines, i, self.lookahead)
            if quantity_row is None:
                logger.warning(f"⚠️ No quantities line found for {header.article}")
                continue

            sizes = tokenize_quantities(quantity_row.line, vocabulary, self.max_size_quantity)
            if not sizes:
                logger.warning(f"⚠️ No valid quantities found for {header.article}")
                continue

            product = ParsedProduct(
                article=header.article,
                color_code=header.color_code,
                description=header.description,
                sizes=sizes,
                price=quantity_row.unit_price,
            )
            products.append(product)
            logger.info(f"✅ Added product: {product.article} {product.color_code} "
                        f"({len(sizes)} sizes, €{product.price})")

        logger.info(f"✅ Extracted {len(products)} products")
        return products

    def parse_text(self, text: str) -> ParseResult:
        """Parse products from raw extracted document text."""
        lines = normalize_lines(text)
        logger.info(f"📝 Total lines: {len(lines)}")

        products = self.parse_lines(lines)
        debug_text: Optional[str] = None
        if not products:
            debug_text = text[:DEBUG_TEXT_LIMIT]

        return ParseResult(
            products=products,
            csv=render_csv(products, self.dutch_sizes),
            variant_count=len(flatten_products(products)),
            line_count=len(lines),
            debug_text=debug_text,
        )

    def parse_pdf(self, pdf_path: str) -> ParseResult:
        """
        Parse a Play UP invoice PDF.

        Raises:
            PDFExtractionError: If no text can be extracted from the PDF
        """
        logger.info(f"📋 Parsing Play UP PDF: {pdf_path}")
        return self.parse_text(extract_pdf_text(pdf_path))


def parse_invoice_lines(lines: Sequence[str]) -> Dict[str, Any]:
    """
    Parse invoice lines into products and their CSV rendering.

    Args:
        lines: Pre-extracted, line-split document text

    Returns:
        Dictionary with ``products`` and ``csv``
    """
    parser = PlayUpInvoiceParser()
    products = parser.parse_lines(lines)
    return {"products": products, "csv": render_csv(products)}
