#!/usr/bin/env python3
"""
CSV rendering of parsed invoice products for product import.
"""

import re
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from .models import OutputRow, ParsedProduct

logger = logging.getLogger(__name__)

CSV_HEADER = "Article,Color,Description,Size,Quantity,Price"

_MONTH_SIZE = re.compile(r'^(\d+)M$')
_YEAR_SIZE = re.compile(r'^(\d+)Y$')


def to_dutch_size(size: str) -> str:
    """
    Translate month/year size labels to Dutch.

    ``3M`` becomes ``3 maand`` and ``6Y`` becomes ``6 jaar``; letter sizes
    (XS, S, M, L, XL) are returned unchanged.
    """
    match = _MONTH_SIZE.match(size)
    if match:
        return f"{match.group(1)} maand"
    match = _YEAR_SIZE.match(size)
    if match:
        return f"{match.group(1)} jaar"
    return size


def format_price(price: Decimal) -> str:
    return str(Decimal(price).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def flatten_products(products: Iterable[ParsedProduct]) -> List[OutputRow]:
    """Flatten products into one row per size with a positive quantity."""
    rows = []
    for product in products:
        rows.extend(product.rows())
    return rows


def format_row(row: OutputRow, dutch_sizes: bool = False) -> str:
    size = to_dutch_size(row.size) if dutch_sizes else row.size
    return ",".join([
        row.article,
        row.color_code,
        _quote(row.description),
        size,
        str(row.quantity),
        format_price(row.price),
    ])


def render_csv(products: Iterable[ParsedProduct], dutch_sizes: bool = False) -> str:
    """
    Render products as import CSV.

    Args:
        products: Parsed invoice products
        dutch_sizes: Translate month/year sizes to Dutch labels

    Returns:
        CSV text with a header line; every line ends with a newline
    """
    rows = flatten_products(products)
    lines = [CSV_HEADER] + [format_row(row, dutch_sizes) for row in rows]
    logger.info(f"✅ Generated CSV with {len(rows)} variants")
    return "\n".join(lines) + "\n"
