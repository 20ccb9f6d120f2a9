"""
Math builder state: the data behind the matrix, vector, template and calculus panels
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import NotesConfig
from .latex_compiler import ast_to_latex
from .math_ast import (
    MathNode, SymbolNode, MatrixNode, VectorNode, IntegralNode,
    FractionNode, ExponentNode, SubscriptNode
)


logger = logging.getLogger(__name__)

BUILDER_TABS = ('matrices', 'vectors', 'symbols', 'calculus', 'templates')


@dataclass
class MathBuilderState:
    """Editable builder state; produces a fresh AST on every build."""
    mode: str = 'create'  # create, edit
    editing_block_id: Optional[str] = None
    current_ast: Optional[MathNode] = None
    active_tab: str = 'matrices'

    # Matrix builder
    matrix_rows: int = 2
    matrix_cols: int = 2
    matrix_cells: List[List[str]] = field(default_factory=lambda: [['', ''], ['', '']])

    # Vector builder
    vector_size: int = 3
    vector_orientation: str = 'col'
    vector_cells: List[str] = field(default_factory=lambda: ['', '', ''])

    # Template builder
    fraction_numerator: str = ''
    fraction_denominator: str = ''
    exponent_base: str = ''
    exponent_power: str = ''
    subscript_base: str = ''
    subscript_value: str = ''

    # Integral builder
    integral_body: str = ''
    integral_from: str = ''
    integral_to: str = ''
    integral_variable: str = 'x'

    config: NotesConfig = field(default_factory=NotesConfig, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: NotesConfig) -> 'MathBuilderState':
        state = cls(config=config)
        state.reset_builders()
        return state

    @property
    def current_latex(self) -> str:
        if self.current_ast is None:
            return ''
        return ast_to_latex(self.current_ast)

    def set_active_tab(self, tab: str):
        if tab not in BUILDER_TABS:
            raise ValueError(f"Unknown builder tab: {tab}")
        self.active_tab = tab

    def enter_edit_mode(self, block_id: str, ast: MathNode):
        """Load an existing math block into the builder."""
        self.mode = 'edit'
        self.editing_block_id = block_id
        self.current_ast = ast
        self.load_ast_into_builder(ast)

    def exit_edit_mode(self):
        self.mode = 'create'
        self.editing_block_id = None
        self.current_ast = None
        self.reset_builders()

    def load_ast_into_builder(self, ast: MathNode):
        """Copy AST fields into the matching builder and switch to its tab."""
        if isinstance(ast, MatrixNode):
            self.active_tab = 'matrices'
            self.matrix_rows = ast.rows
            self.matrix_cols = ast.cols
            self.matrix_cells = [list(row) for row in ast.cells]
        elif isinstance(ast, VectorNode):
            self.active_tab = 'vectors'
            self.vector_size = len(ast.cells)
            self.vector_orientation = ast.orientation
            self.vector_cells = list(ast.cells)
        elif isinstance(ast, FractionNode):
            self.active_tab = 'templates'
            self.fraction_numerator = ast.numerator
            self.fraction_denominator = ast.denominator
        elif isinstance(ast, ExponentNode):
            self.active_tab = 'templates'
            self.exponent_base = ast.base
            self.exponent_power = ast.exponent
        elif isinstance(ast, SubscriptNode):
            self.active_tab = 'templates'
            self.subscript_base = ast.base
            self.subscript_value = ast.subscript
        elif isinstance(ast, IntegralNode):
            self.active_tab = 'calculus'
            self.integral_body = ast.body
            self.integral_from = ast.from_ or ''
            self.integral_to = ast.to or ''
            self.integral_variable = ast.d or self.config.default_integral_variable
        else:
            logger.debug(f"No builder for {type(ast).__name__}; keeping current tab")

    def reset_builders(self):
        """Reset every builder to the configured defaults."""
        config = self.config
        self.matrix_rows = config.default_matrix_rows
        self.matrix_cols = config.default_matrix_cols
        self.matrix_cells = [[''] * config.default_matrix_cols for _ in range(config.default_matrix_rows)]

        self.vector_size = config.default_vector_size
        self.vector_orientation = config.default_vector_orientation
        self.vector_cells = [''] * config.default_vector_size

        self.fraction_numerator = ''
        self.fraction_denominator = ''
        self.exponent_base = ''
        self.exponent_power = ''
        self.subscript_base = ''
        self.subscript_value = ''

        self.integral_body = ''
        self.integral_from = ''
        self.integral_to = ''
        self.integral_variable = config.default_integral_variable

    def set_matrix_size(self, rows: int, cols: int):
        """Resize the matrix grid, keeping cells that still fit."""
        self.matrix_rows = rows
        self.matrix_cols = cols
        old = self.matrix_cells
        self.matrix_cells = [
            [old[i][j] if i < len(old) and j < len(old[i]) else '' for j in range(cols)]
            for i in range(rows)
        ]

    def update_matrix_cell(self, row: int, col: int, value: str):
        if 0 <= row < len(self.matrix_cells) and 0 <= col < len(self.matrix_cells[row]):
            self.matrix_cells[row][col] = value

    def build_matrix_ast(self) -> MatrixNode:
        return MatrixNode(rows=self.matrix_rows, cols=self.matrix_cols, cells=self.matrix_cells)

    def set_vector_size(self, size: int):
        """Resize the vector, keeping leading cells."""
        self.vector_size = size
        self.vector_cells = [self.vector_cells[i] if i < len(self.vector_cells) else '' for i in range(size)]

    def update_vector_cell(self, index: int, value: str):
        if 0 <= index < len(self.vector_cells):
            self.vector_cells[index] = value

    def toggle_vector_orientation(self):
        self.vector_orientation = 'row' if self.vector_orientation == 'col' else 'col'

    def build_vector_ast(self) -> VectorNode:
        return VectorNode(orientation=self.vector_orientation, cells=self.vector_cells)

    def build_current_ast(self) -> Optional[MathNode]:
        """Build the AST for the active tab.

        On the templates tab the first builder with any filled field wins, in
        the order fraction, exponent, subscript. Returns None when nothing
        can be built.
        """
        if self.active_tab == 'matrices':
            return self.build_matrix_ast()

        elif self.active_tab == 'vectors':
            return self.build_vector_ast()

        elif self.active_tab == 'templates':
            if self.fraction_numerator or self.fraction_denominator:
                return FractionNode(numerator=self.fraction_numerator, denominator=self.fraction_denominator)
            elif self.exponent_base or self.exponent_power:
                return ExponentNode(base=self.exponent_base, exponent=self.exponent_power)
            elif self.subscript_base or self.subscript_value:
                return SubscriptNode(base=self.subscript_base, subscript=self.subscript_value)
            return None

        elif self.active_tab == 'calculus':
            return IntegralNode(
                body=self.integral_body,
                from_=self.integral_from or None,
                to=self.integral_to or None,
                d=self.integral_variable
            )

        return None

    def create_symbol_ast(self, symbol: str) -> SymbolNode:
        return SymbolNode(value=symbol)


__all__ = [
    'MathBuilderState',
    'BUILDER_TABS'
]
