"""
Editor command palette: insert matrices and symbols into a line of elements
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .models import Element, TextElement, MatrixElement, SymbolElement
from .symbols import resolve_symbol



@dataclass
class CursorPosition:
    type: str = 'text'  # text, matrix
    element_index: int = 0
    text_offset: Optional[int] = 0
    row: Optional[int] = None
    col: Optional[int] = None


@dataclass
class EditorState:
    content: List[Element] = field(default_factory=lambda: [TextElement()])
    cursor_position: CursorPosition = field(default_factory=CursorPosition)
    show_command_palette: bool = False
    command_search_query: str = ''
    selected_command_index: int = 0

    def close_command_palette(self):
        self.show_command_palette = False
        self.command_search_query = ''


@dataclass(frozen=True)
class Command:
    id: str
    name: str
    description: str
    category: str
    execute: Callable[[EditorState], None]


def insert_matrix(state: EditorState, rows: int, cols: int):
    """Insert a blank matrix after the cursor element and move into its first cell."""
    insert_index = state.cursor_position.element_index + 1
    state.content.insert(insert_index, MatrixElement.empty(rows, cols))
    state.cursor_position = CursorPosition(
        type='matrix', element_index=insert_index, text_offset=None, row=0, col=0
    )
    state.close_command_palette()


def insert_symbol(state: EditorState, symbol: str, display: Optional[str] = None):
    """Insert a symbol after the cursor element and place the cursor past it."""
    insert_index = state.cursor_position.element_index + 1
    state.content.insert(insert_index, SymbolElement(value=symbol, display=display))
    state.cursor_position = CursorPosition(type='text', element_index=insert_index + 1, text_offset=0)
    state.close_command_palette()


def _matrix_command(rows: int, cols: int) -> Command:
    return Command(
        id=f'insert-matrix-{rows}x{cols}',
        name=f'matrix {rows}×{cols}',
        description=f'Insert a {rows}×{cols} matrix',
        category='insert',
        execute=lambda state: insert_matrix(state, rows, cols)
    )


def _vector_command(size: int) -> Command:
    return Command(
        id=f'insert-vector-{size}',
        name=f'vector {size}D',
        description=f'Insert a {size}D column vector',
        category='insert',
        execute=lambda state: insert_matrix(state, size, 1)
    )


def _symbol_command(symbol: str, description: Optional[str] = None) -> Command:
    display = resolve_symbol(symbol).display
    return Command(
        id=f'symbol-{symbol}',
        name=symbol,
        description=description or f'Insert {display} symbol',
        category='symbol',
        execute=lambda state: insert_symbol(state, symbol, display)
    )


COMMANDS: List[Command] = [
    *[_matrix_command(r, c) for r, c in [(2, 2), (2, 3), (3, 2), (3, 3), (4, 4)]],
    *[_vector_command(size) for size in (2, 3, 4)],
    *[_symbol_command(name) for name in ('alpha', 'beta', 'gamma', 'delta', 'theta', 'lambda', 'pi')],
    _symbol_command('sigma', 'Insert Σ (summation) symbol'),
    _symbol_command('integral', 'Insert ∫ (integral) symbol'),
    _symbol_command('sqrt', 'Insert √ (square root) symbol'),
]


def get_command(command_id: str) -> Optional[Command]:
    return next((cmd for cmd in COMMANDS if cmd.id == command_id), None)


def filter_commands(query: str) -> List[Command]:
    """Filter commands by name, description or category (case-insensitive)."""
    if not query:
        return list(COMMANDS)

    lower_query = query.lower()
    return [
        cmd for cmd in COMMANDS
        if lower_query in cmd.name.lower()
        or lower_query in cmd.description.lower()
        or lower_query in cmd.category.lower()
    ]


__all__ = [
    'CursorPosition',
    'EditorState',
    'Command',
    'COMMANDS',
    'insert_matrix',
    'insert_symbol',
    'get_command',
    'filter_commands'
]
