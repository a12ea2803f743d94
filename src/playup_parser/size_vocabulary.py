#!/usr/bin/env python3
"""
Size-column detection for Play UP invoice tables.

Each product table in an invoice starts with a header line listing its size
columns. Different tables carry different size ranges (baby months, kids
years, adult letter sizes), so the header decides how the positional
quantities below it are labelled.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .models import SizeVocabulary

logger = logging.getLogger(__name__)

BABY_SIZES = SizeVocabulary(
    name="baby",
    labels=("3M", "6M", "9M", "12M", "18M", "24M", "36M"),
)
SHORT_BABY_SIZES = SizeVocabulary(
    name="short_baby",
    labels=("0M", "1M", "3M", "6M", "9M", "12M"),
)
KIDS_SIZES = SizeVocabulary(
    name="kids",
    labels=("3Y", "4Y", "5Y", "6Y", "8Y", "10Y", "12Y", "14Y"),
)
ADULT_SIZES = SizeVocabulary(
    name="adult",
    labels=("XS", "S", "M", "L", "XL"),
)


def _contains_all(line: str, *tokens: str) -> bool:
    return all(token in line for token in tokens)


def is_month_header(line: str) -> bool:
    return _contains_all(line, '3M', '6M', '9M')


def is_long_month_header(line: str) -> bool:
    return '36M' in line or '24M' in line


def is_year_header(line: str) -> bool:
    return _contains_all(line, '3Y', '4Y', '5Y')


def is_letter_header(line: str) -> bool:
    return _contains_all(line, 'XS', ' S ', ' M ', ' L')


def _month_vocabulary(line: str) -> SizeVocabulary:
    # Tables that stop at 12M omit the 24M/36M columns
    return BABY_SIZES if is_long_month_header(line) else SHORT_BABY_SIZES


# Ordered detection rules; the first match wins
DETECTION_RULES: List[Tuple[Callable[[str], bool], Callable[[str], SizeVocabulary]]] = [
    (is_month_header, _month_vocabulary),
    (is_year_header, lambda line: KIDS_SIZES),
    (is_letter_header, lambda line: ADULT_SIZES),
]


def detect_size_vocabulary(line: str) -> Optional[SizeVocabulary]:
    """
    Detect a size-column header line.

    Args:
        line: One normalized document line

    Returns:
        The vocabulary announced by the line, or None when the line is not
        a recognized table header
    """
    for matches, vocabulary_for in DETECTION_RULES:
        if matches(line):
            vocabulary = vocabulary_for(line)
            logger.debug(f"🔍 Detected {vocabulary.name} table: {', '.join(vocabulary.labels)}")
            return vocabulary
    return None
