"""
Text normalization for extracted invoice text.
"""

import re
from typing import Iterable, List

_LINE_BREAKS = re.compile(r'\r\n|\r|\n')


def normalize_line_list(lines: Iterable[str]) -> List[str]:
    """Strip each line and drop the empty ones."""
    stripped = (line.strip() for line in lines)
    return [line for line in stripped if line]


def normalize_lines(text: str) -> List[str]:
    """Split raw document text into trimmed, non-empty lines."""
    if not text:
        return []
    return normalize_line_list(_LINE_BREAKS.split(text))
