"""
Bracket-matrix parser: plain text to document elements.

Detects matrix literals written as ``[ [ a b ] [ c d ] ]`` inside a line of
text. Anything that does not form a valid matrix stays text; the parser never
raises on malformed input.
"""

import logging
from typing import List, Optional, Tuple

from .models import Element, TextElement, MatrixElement


logger = logging.getLogger(__name__)


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] == ' ':
        pos += 1
    return pos


def _parse_row(text: str, pos: int) -> Tuple[Optional[List[str]], int]:
    """Parse one ``[ cell cell ... ]`` group starting at ``pos`` (a ``[``)."""
    pos = _skip_spaces(text, pos + 1)
    row = []
    cell = ''

    while pos < len(text) and text[pos] != ']':
        if text[pos] == ' ':
            if cell:
                row.append(cell)
                cell = ''
        elif text[pos] == '[':
            return None, pos
        else:
            cell += text[pos]
        pos += 1

    if pos >= len(text):
        return None, pos

    if cell:
        row.append(cell)

    return row, pos + 1


def parse_matrix(text: str, start: int) -> Optional[Tuple[MatrixElement, int]]:
    """Parse a matrix literal starting at ``start``.

    Args:
        text: Source text
        start: Index of the opening ``[``

    Returns:
        ``(element, end)`` where ``end`` is the index just past the closing
        bracket, or None if the text at ``start`` is not a valid matrix
    """
    if start >= len(text) or text[start] != '[':
        return None

    pos = _skip_spaces(text, start + 1)
    rows = []

    while pos < len(text) and text[pos] == '[':
        row, pos = _parse_row(text, pos)
        if row is None:
            return None
        rows.append(row)
        pos = _skip_spaces(text, pos)

    if pos >= len(text) or text[pos] != ']':
        return None

    if not rows:
        return None
    cols = len(rows[0])
    if cols == 0 or any(len(row) != cols for row in rows):
        logger.debug(f"Rejected non-rectangular matrix literal at {start}")
        return None

    return MatrixElement(rows=len(rows), cols=cols, data=rows), pos + 1


def parse_text(text: str) -> List[Element]:
    """Parse raw text into text and matrix elements.

    A ``[`` followed by a space starts a matrix attempt; if it fails the
    bracket is kept as ordinary text. Text runs are kept verbatim, and the
    result always holds at least one element.
    """
    elements: List[Element] = []
    current_text = []
    pos = 0

    while pos < len(text):
        if text[pos] == '[' and pos + 1 < len(text) and text[pos + 1] == ' ':
            result = parse_matrix(text, pos)
            if result:
                if current_text:
                    elements.append(TextElement(value=''.join(current_text)))
                    current_text = []
                matrix, pos = result
                elements.append(matrix)
                continue

        current_text.append(text[pos])
        pos += 1

    if current_text:
        elements.append(TextElement(value=''.join(current_text)))

    if not elements:
        elements.append(TextElement(value=''))

    return elements


__all__ = [
    'parse_text',
    'parse_matrix'
]
