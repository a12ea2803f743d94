#!/usr/bin/env python3
"""
Product header recognition for Play UP invoices.

A product header line carries an article code, a color code and a free-text
description, e.g. ``1AR11002 P6179 RIB LS T-SHIRT - 100% OGCO``.
"""

import re
import logging
from typing import Optional

from .models import ProductHeader

logger = logging.getLogger(__name__)

# Digit-first article code (7+ chars), color code (4+ chars), description
PRODUCT_HEADER_PATTERN = re.compile(r'^(\d[A-Z0-9]{6,})\s+([A-Z0-9]{4,})\s+(.+)')

COMPOSITION_SEPARATOR = ' - '
_PERCENTAGE = re.compile(r'\d+%')
_TRAILING_DASHES = re.compile(r'[\s\-]+$')


def is_composition_suffix(text: str) -> bool:
    """Check if text looks like fabric composition, e.g. ``100% OGCO``."""
    return '%' in text or bool(_PERCENTAGE.search(text))


def clean_description(description: str) -> str:
    """
    Remove a trailing fabric-composition suffix from a description.

    Only the text after the last `` - `` separator is considered, and only
    when it carries a percentage:

        "RIB LS T-SHIRT - 100% OGCO"          -> "RIB LS T-SHIRT"
        "STRIPED JERSEY LS T- - 50% OGCO/50%" -> "STRIPED JERSEY LS T"
        "DENIM JUMPSUIT"                      -> "DENIM JUMPSUIT"
    """
    description = description.strip()
    dash_index = description.rfind(COMPOSITION_SEPARATOR)
    if dash_index == -1:
        return description

    suffix = description[dash_index + len(COMPOSITION_SEPARATOR):]
    if not is_composition_suffix(suffix):
        return description

    cleaned = _TRAILING_DASHES.sub('', description[:dash_index].strip()).strip()
    logger.debug(f"📝 Cleaned description from '{description}' to '{cleaned}'")
    return cleaned


def match_product_header(line: str) -> Optional[ProductHeader]:
    """
    Match a product header line.

    Args:
        line: One normalized document line

    Returns:
        The parsed header, or None when the line is not a product header
    """
    match = PRODUCT_HEADER_PATTERN.match(line)
    if not match:
        return None

    return ProductHeader(
        article=match.group(1),
        color_code=match.group(2),
        description=clean_description(match.group(3)),
    )
