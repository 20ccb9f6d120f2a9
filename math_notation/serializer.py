"""
Serialize document elements back to plain text (inverse of the bracket-matrix parser).
"""

import logging
from typing import Iterable

from .models import Element, TextElement, MatrixElement, SymbolElement


logger = logging.getLogger(__name__)


def serialize_matrix(matrix: MatrixElement) -> str:
    """Serialize a matrix to ``[ [ a b ] [ c d ] ]``."""
    rows = ' '.join(f"[ {' '.join(row)} ]" for row in matrix.data)
    return f"[ {rows} ]"


def serialize_symbol(symbol: SymbolElement) -> str:
    """Display glyph if set, otherwise the raw identifier."""
    return symbol.display or symbol.value


def serialize(content: Iterable[Element]) -> str:
    """Serialize a line of elements to plain text."""
    parts = []
    for element in content:
        if isinstance(element, TextElement):
            parts.append(element.value)
        elif isinstance(element, MatrixElement):
            parts.append(serialize_matrix(element))
        elif isinstance(element, SymbolElement):
            parts.append(serialize_symbol(element))
        else:
            logger.warning(f"Skipping unknown element {type(element).__name__}")
    return ''.join(parts)


__all__ = [
    'serialize',
    'serialize_matrix',
    'serialize_symbol'
]
