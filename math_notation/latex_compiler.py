"""
Compile expression ASTs and document elements to LaTeX for KaTeX-style renderers.
"""

import logging
from typing import Callable, Dict, Iterable

from .math_ast import (
    MathNode, SymbolNode, NumberNode, IdentifierNode, MatrixNode, VectorNode,
    OperatorNode, WrapperNode, IntegralNode, FractionNode, ExponentNode, SubscriptNode
)
from .models import Element, TextElement, MatrixElement, SymbolElement
from .symbols import resolve_symbol


logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = ' & '
ROW_SEPARATOR = ' \\\\ '

OPERATOR_TOKENS = {
    '+': '+',
    '-': '-',
    '*': '\\times',
    '/': '\\div',
    'dot': '\\cdot',
    'times': '\\times',
}


def bmatrix(body: str) -> str:
    return f"\\begin{{bmatrix}} {body} \\end{{bmatrix}}"


def grid_to_latex(cells: Iterable[Iterable[str]]) -> str:
    """Join a row-major grid with column and row separators inside a bmatrix."""
    return bmatrix(ROW_SEPARATOR.join(COLUMN_SEPARATOR.join(row) for row in cells))


def _compile_symbol(node: SymbolNode) -> str:
    return node.value


def _compile_number(node: NumberNode) -> str:
    return node.value


def _compile_identifier(node: IdentifierNode) -> str:
    return node.name


def _compile_matrix(node: MatrixNode) -> str:
    return grid_to_latex(node.cells)


def _compile_vector(node: VectorNode) -> str:
    if node.orientation == 'col':
        return bmatrix(ROW_SEPARATOR.join(node.cells))
    return bmatrix(COLUMN_SEPARATOR.join(node.cells))


def _compile_operator(node: OperatorNode) -> str:
    left = ast_to_latex(node.left)
    right = ast_to_latex(node.right)
    return f"{left} {OPERATOR_TOKENS.get(node.op, node.op)} {right}"


def _compile_wrapper(node: WrapperNode) -> str:
    inner = ast_to_latex(node.inner)
    if node.wrap == 'paren':
        return f"\\left( {inner} \\right)"
    elif node.wrap == 'norm':
        return f"\\left\\| {inner} \\right\\|"
    elif node.wrap == 'sqrt':
        return f"\\sqrt{{{inner}}}"
    # Unknown wrap kinds pass the inner markup through
    return inner


def _compile_integral(node: IntegralNode) -> str:
    latex = '\\int'
    # A lone bound is dropped: both limits or neither
    if node.from_ is not None and node.to is not None:
        latex += f"_{{{node.from_}}}^{{{node.to}}}"
    latex += f" {node.body}"
    if node.d:
        latex += f" \\, d{node.d}"
    return latex


def _compile_fraction(node: FractionNode) -> str:
    return f"\\frac{{{node.numerator}}}{{{node.denominator}}}"


def _compile_exponent(node: ExponentNode) -> str:
    return f"{{{node.base}}}^{{{node.exponent}}}"


def _compile_subscript(node: SubscriptNode) -> str:
    return f"{{{node.base}}}_{{{node.subscript}}}"


NODE_COMPILERS: Dict[type, Callable[..., str]] = {
    SymbolNode: _compile_symbol,
    NumberNode: _compile_number,
    IdentifierNode: _compile_identifier,
    MatrixNode: _compile_matrix,
    VectorNode: _compile_vector,
    OperatorNode: _compile_operator,
    WrapperNode: _compile_wrapper,
    IntegralNode: _compile_integral,
    FractionNode: _compile_fraction,
    ExponentNode: _compile_exponent,
    SubscriptNode: _compile_subscript,
}


def ast_to_latex(node: MathNode) -> str:
    """Convert an AST node to a LaTeX string.

    Deterministic and total over the AST variants. No precedence is inferred
    for operators; callers nest wrappers where they want parentheses.

    Args:
        node: Root of the expression tree

    Returns:
        LaTeX markup, or an empty string for objects outside the AST
    """
    compiler = NODE_COMPILERS.get(type(node))
    if compiler is None:
        logger.warning(f"Cannot compile {type(node).__name__} to LaTeX")
        return ''
    return compiler(node)


def element_to_latex(element: Element) -> str:
    """Convert one document element to LaTeX."""
    if isinstance(element, TextElement):
        return f"\\text{{{element.value}}}" if element.value else ''
    elif isinstance(element, MatrixElement):
        return grid_to_latex(element.data)
    elif isinstance(element, SymbolElement):
        return resolve_symbol(element.value).markup

    logger.warning(f"Cannot compile {type(element).__name__} to LaTeX")
    return ''


def elements_to_latex(elements: Iterable[Element]) -> str:
    """Convert a line of document elements to a single LaTeX string."""
    return ' '.join(part for part in (element_to_latex(e) for e in elements) if part)


__all__ = [
    'ast_to_latex',
    'element_to_latex',
    'elements_to_latex',
    'grid_to_latex',
    'NODE_COMPILERS',
    'OPERATOR_TOKENS'
]
