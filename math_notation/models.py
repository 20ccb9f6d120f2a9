"""
Data models for notes: document elements, content blocks and notes
"""

import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any, Union
from enum import Enum

from .math_ast import MathNode, ast_from_dict


class ElementType(Enum):
    """Types of document elements inside one editor line."""
    TEXT = "text"
    MATRIX = "matrix"
    SYMBOL = "symbol"


@dataclass
class TextElement:
    """A run of plain text."""
    value: str = ""

    @property
    def type(self) -> ElementType:
        return ElementType.TEXT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'type': self.type.value, 'value': self.value}


@dataclass
class MatrixElement:
    """A matrix embedded in a line, written as ``[ [ a b ] [ c d ] ]`` in plain text."""
    rows: int
    cols: int
    data: List[List[str]] = field(default_factory=list)

    @property
    def type(self) -> ElementType:
        return ElementType.MATRIX

    @classmethod
    def empty(cls, rows: int, cols: int) -> 'MatrixElement':
        """Create a matrix with blank cells."""
        return cls(rows=rows, cols=cols, data=[[''] * cols for _ in range(rows)])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'type': self.type.value,
            'rows': self.rows,
            'cols': self.cols,
            'data': [list(row) for row in self.data]
        }


@dataclass
class SymbolElement:
    """An inline symbol referenced by its identifier (``alpha``, ``integral`` ...)."""
    value: str
    display: Optional[str] = None

    @property
    def type(self) -> ElementType:
        return ElementType.SYMBOL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {'type': self.type.value, 'value': self.value}
        if self.display is not None:
            data['display'] = self.display
        return data


Element = Union[TextElement, MatrixElement, SymbolElement]


def element_from_dict(data: Dict[str, Any]) -> Element:
    """Rebuild a document element from its dictionary form."""
    element_type = data.get('type') if isinstance(data, dict) else None

    if element_type == 'text':
        return TextElement(value=data.get('value', ''))
    elif element_type == 'matrix':
        rows = [[str(cell) for cell in row] for row in data.get('data', [])]
        return MatrixElement(
            rows=int(data.get('rows', len(rows))),
            cols=int(data.get('cols', len(rows[0]) if rows else 0)),
            data=rows
        )
    elif element_type == 'symbol':
        return SymbolElement(value=data['value'], display=data.get('display'))

    raise ValueError(f"Unknown element type: {element_type!r}")


def generate_id(prefix: Optional[str] = None) -> str:
    """Generate a unique block or note ID: ``<millis>-<9 base36 chars>``."""
    alphabet = string.digits + string.ascii_lowercase
    suffix = ''.join(random.choice(alphabet) for _ in range(9))
    base = f"{int(time.time() * 1000)}-{suffix}"
    return f"{prefix}-{base}" if prefix else base


def _now_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class ParagraphBlock:
    """A paragraph of plain text (may contain bracket-matrix shorthand)."""
    id: str
    text: str = ""

    type: str = field(default="paragraph", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'type': self.type, 'id': self.id, 'text': self.text}


@dataclass
class MathBlock:
    """A math expression: the AST and the LaTeX compiled from it."""
    id: str
    ast: MathNode
    latex: str = ""
    inline: bool = False

    type: str = field(default="math", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'type': self.type,
            'id': self.id,
            'inline': self.inline,
            'ast': self.ast.to_dict(),
            'latex': self.latex
        }


ContentBlock = Union[ParagraphBlock, MathBlock]


def block_from_dict(data: Dict[str, Any]) -> ContentBlock:
    """Rebuild a content block from its dictionary form."""
    block_type = data.get('type')

    if block_type == 'paragraph':
        return ParagraphBlock(id=data['id'], text=data.get('text', ''))
    elif block_type == 'math':
        return MathBlock(
            id=data['id'],
            ast=ast_from_dict(data.get('ast')),
            latex=data.get('latex', ''),
            inline=bool(data.get('inline', False))
        )

    raise ValueError(f"Unknown content block type: {block_type!r}")


@dataclass
class Note:
    """A note: title plus an ordered list of content blocks."""
    id: str
    title: str
    content: List[ContentBlock] = field(default_factory=list)
    created_at: int = field(default_factory=_now_millis)
    updated_at: int = field(default_factory=_now_millis)

    @classmethod
    def create(cls, title: str = "Untitled Note") -> 'Note':
        """Create a new note holding one empty paragraph."""
        return cls(
            id=generate_id('note'),
            title=title,
            content=[ParagraphBlock(id=generate_id('block'))]
        )

    @property
    def math_blocks(self) -> List[MathBlock]:
        return [block for block in self.content if isinstance(block, MathBlock)]

    def touch(self):
        """Update the modification timestamp."""
        self.updated_at = _now_millis()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'content': [block.to_dict() for block in self.content],
            'createdAt': self.created_at,
            'updatedAt': self.updated_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Note':
        """Rebuild a note from its dictionary form."""
        try:
            return cls(
                id=data['id'],
                title=data.get('title', ''),
                content=[block_from_dict(block) for block in data.get('content', [])],
                created_at=int(data.get('createdAt', 0)),
                updated_at=int(data.get('updatedAt', 0))
            )
        except KeyError as e:
            raise ValueError(f"Note is missing field {e}") from e


@dataclass
class ProcessingResult:
    """Result of loading or refreshing a note."""
    note: Optional[Note] = None
    processing_time: Optional[float] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[Dict[str, Any]] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'note': self.note.to_dict() if self.note else None,
            'processing_time': self.processing_time,
            'errors': self.errors,
            'warnings': self.warnings,
            'timestamp': self.timestamp.isoformat(),
            'success': len(self.errors) == 0
        }

    @property
    def is_successful(self) -> bool:
        """Check if processing was successful."""
        return len(self.errors) == 0


__all__ = [
    'ProcessingResult',
    'ElementType',
    'Element',
    'TextElement',
    'MatrixElement',
    'SymbolElement',
    'element_from_dict',
    'ParagraphBlock',
    'MathBlock',
    'ContentBlock',
    'block_from_dict',
    'Note',
    'generate_id'
]
