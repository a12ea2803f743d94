#!/usr/bin/env python3
"""
Quantity line location and tokenization for Play UP invoices.

Below every product header, after customs-code lines such as
``6110 20 91 - (24M - 36M)``, comes one quantity line:

    1 1 1 1 1 1 6 12.3900 74.340a)

i.e. per-size quantities (a dash means no stock in that size), the row
total, the unit price and the line total.
"""

import re
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from .models import QuantityRow, SizeVocabulary

logger = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 5
DEFAULT_MAX_SIZE_QUANTITY = 20

# Quantities or dashes, row total, unit price (2-4 decimals), line total
QUANTITY_LINE_PATTERN = re.compile(
    r'^((?:\d+|-)\s+)+(\d+)\s+(\d+[.,]\d{2,4})\s+(\d+[.,]\d{2})'
)

NO_STOCK = '-'
_PRICE_TOKEN = re.compile(r'^\d+[.,]\d{4}$')
_QUANTITY_TOKEN = re.compile(r'^(\d{1,2}|-)$')
_LEADING_INTEGER = re.compile(r'^\d+')


def parse_unit_price(price_str: str) -> Decimal:
    """Parse a unit price, accepting a comma decimal separator."""
    return Decimal(price_str.replace(',', '.'))


def match_quantity_line(line: str) -> Optional[Decimal]:
    """Return the unit price if the line has the quantity line shape."""
    match = QUANTITY_LINE_PATTERN.match(line)
    if not match:
        return None
    return parse_unit_price(match.group(3))


def locate_quantity_line(lines: Sequence[str], index: int,
                         lookahead: int = DEFAULT_LOOKAHEAD) -> Optional[QuantityRow]:
    """
    Find the quantity line belonging to the product header at ``index``.

    Args:
        lines: All normalized document lines
        index: Line index of the product header
        lookahead: Number of lines after the header to search

    Returns:
        The first matching line in the window, or None
    """
    end = min(index + lookahead + 1, len(lines))
    for j in range(index + 1, end):
        candidate = lines[j]
        logger.debug(f"   Checking line {j}: {candidate}")
        unit_price = match_quantity_line(candidate)
        if unit_price is not None:
            logger.debug(f"   ✅ Found quantities line {j}: {candidate} (price {unit_price})")
            return QuantityRow(
                line=candidate,
                tokens=tuple(candidate.split()),
                unit_price=unit_price,
                line_index=j,
            )
    return None


def _leading_integer(token: str) -> Optional[int]:
    match = _LEADING_INTEGER.match(token)
    return int(match.group(0)) if match else None


def is_price_token(token: str) -> bool:
    return bool(_PRICE_TOKEN.match(token))


def is_total_token(token: str, max_size_quantity: int = DEFAULT_MAX_SIZE_QUANTITY) -> bool:
    """Per-size quantities never exceed ``max_size_quantity``; larger numbers are totals."""
    value = _leading_integer(token)
    return value is not None and value > max_size_quantity


def collect_quantity_tokens(tokens: Sequence[str],
                            max_size_quantity: int = DEFAULT_MAX_SIZE_QUANTITY) -> List[str]:
    """
    Collect the per-size quantity tokens of a quantity line.

    Scanning stops at the first price-shaped or total-shaped token. The last
    collected token is the row total column and is dropped.
    """
    values = []
    for token in tokens:
        if is_price_token(token) or is_total_token(token, max_size_quantity):
            break
        if _QUANTITY_TOKEN.match(token):
            values.append(token)
    return values[:-1]


def tokenize_quantities(line: str, vocabulary: SizeVocabulary,
                        max_size_quantity: int = DEFAULT_MAX_SIZE_QUANTITY) -> Dict[str, int]:
    """
    Map the quantities of a quantity line onto size labels.

    Args:
        line: The located quantity line
        vocabulary: Size vocabulary active for the owning product
        max_size_quantity: Largest value accepted as a per-size quantity

    Returns:
        Size label to quantity, only for quantities greater than zero
    """
    values = collect_quantity_tokens(line.split(), max_size_quantity)
    logger.debug(f"   Quantity values: {values} for sizes {list(vocabulary.labels)}")

    sizes = {}
    for label, token in zip(vocabulary.labels, values):
        if token == NO_STOCK:
            continue
        quantity = int(token)
        if quantity > 0:
            sizes[label] = quantity
    return sizes
