"""
Expression AST for math blocks.

Every node is a frozen dataclass with a ``kind`` discriminant. Sequences are
stored as tuples so a compiled tree cannot be mutated behind the compiler's
back; builders construct a fresh tree for every compilation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, Union
from enum import Enum


class NodeKind(Enum):
    """Discriminant values used in the persisted form of a math block."""
    SYMBOL = "symbol"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    MATRIX = "matrix"
    VECTOR = "vector"
    OPERATOR = "op"
    WRAPPER = "wrapper"
    INTEGRAL = "integral"
    FRACTION = "fraction"
    EXPONENT = "exponent"
    SUBSCRIPT = "subscript"


VECTOR_ORIENTATIONS = ('col', 'row')
OPERATORS = ('+', '-', '*', '/', 'dot', 'times')
WRAPS = ('paren', 'norm', 'sqrt')


def _freeze_grid(cells: Sequence[Sequence[str]]) -> Tuple[Tuple[str, ...], ...]:
    return tuple(tuple(row) for row in cells)


class MathNode(ABC):
    """Base class of the closed set of AST variants."""

    kind: ClassVar[NodeKind]

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Persisted form, tagged with ``kind``."""
        pass


@dataclass(frozen=True)
class SymbolNode(MathNode):
    value: str

    kind: ClassVar[NodeKind] = NodeKind.SYMBOL

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'value': self.value}


@dataclass(frozen=True)
class NumberNode(MathNode):
    value: str

    kind: ClassVar[NodeKind] = NodeKind.NUMBER

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'value': self.value}


@dataclass(frozen=True)
class IdentifierNode(MathNode):
    name: str

    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'name': self.name}


@dataclass(frozen=True)
class MatrixNode(MathNode):
    """Row-major grid of cell strings.

    ``len(cells) == rows`` and every row holding ``cols`` entries is expected
    but not enforced; the compiler emits whatever grid it is given.
    """
    rows: int
    cols: int
    cells: Tuple[Tuple[str, ...], ...]

    kind: ClassVar[NodeKind] = NodeKind.MATRIX

    def __post_init__(self):
        object.__setattr__(self, 'cells', _freeze_grid(self.cells))

    @property
    def is_rectangular(self) -> bool:
        """Check the documented shape invariant."""
        return len(self.cells) == self.rows and all(len(row) == self.cols for row in self.cells)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'rows': self.rows,
            'cols': self.cols,
            'cells': [list(row) for row in self.cells]
        }


@dataclass(frozen=True)
class VectorNode(MathNode):
    orientation: str
    cells: Tuple[str, ...]

    kind: ClassVar[NodeKind] = NodeKind.VECTOR

    def __post_init__(self):
        object.__setattr__(self, 'cells', tuple(self.cells))

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'orientation': self.orientation, 'cells': list(self.cells)}


@dataclass(frozen=True)
class OperatorNode(MathNode):
    op: str
    left: MathNode
    right: MathNode

    kind: ClassVar[NodeKind] = NodeKind.OPERATOR

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'op': self.op,
            'left': self.left.to_dict(),
            'right': self.right.to_dict()
        }


@dataclass(frozen=True)
class WrapperNode(MathNode):
    wrap: str
    inner: MathNode

    kind: ClassVar[NodeKind] = NodeKind.WRAPPER

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'wrap': self.wrap, 'inner': self.inner.to_dict()}


@dataclass(frozen=True)
class IntegralNode(MathNode):
    """Integral with an opaque markup body.

    ``from_`` is persisted under the key ``from``.
    """
    body: str
    from_: Optional[str] = None
    to: Optional[str] = None
    d: Optional[str] = None

    kind: ClassVar[NodeKind] = NodeKind.INTEGRAL

    def to_dict(self) -> Dict[str, Any]:
        data = {'kind': self.kind.value, 'body': self.body}
        if self.from_ is not None:
            data['from'] = self.from_
        if self.to is not None:
            data['to'] = self.to
        if self.d is not None:
            data['d'] = self.d
        return data


@dataclass(frozen=True)
class FractionNode(MathNode):
    numerator: str
    denominator: str

    kind: ClassVar[NodeKind] = NodeKind.FRACTION

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'numerator': self.numerator, 'denominator': self.denominator}


@dataclass(frozen=True)
class ExponentNode(MathNode):
    base: str
    exponent: str

    kind: ClassVar[NodeKind] = NodeKind.EXPONENT

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'base': self.base, 'exponent': self.exponent}


@dataclass(frozen=True)
class SubscriptNode(MathNode):
    base: str
    subscript: str

    kind: ClassVar[NodeKind] = NodeKind.SUBSCRIPT

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'base': self.base, 'subscript': self.subscript}


MathAst = Union[
    SymbolNode, NumberNode, IdentifierNode, MatrixNode, VectorNode, OperatorNode,
    WrapperNode, IntegralNode, FractionNode, ExponentNode, SubscriptNode
]

NODE_TYPES: Tuple[type, ...] = (
    SymbolNode, NumberNode, IdentifierNode, MatrixNode, VectorNode, OperatorNode,
    WrapperNode, IntegralNode, FractionNode, ExponentNode, SubscriptNode
)

_NODES_BY_KIND = {node_type.kind.value: node_type for node_type in NODE_TYPES}


def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Math node '{data.get('kind')}' is missing field '{key}'")
    return data[key]


def ast_from_dict(data: Dict[str, Any]) -> MathNode:
    """Rebuild an AST from its persisted dictionary form.

    Args:
        data: Mapping produced by ``MathNode.to_dict`` (or the editor's JSON)

    Returns:
        The reconstructed node

    Raises:
        ValueError: If the kind is unknown or a required field is missing
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for a math node, got {type(data).__name__}")

    kind = data.get('kind')
    if kind not in _NODES_BY_KIND:
        raise ValueError(f"Unknown math node kind: {kind!r}")

    if kind in ('symbol', 'number'):
        return _NODES_BY_KIND[kind](value=str(_require(data, 'value')))
    elif kind == 'identifier':
        return IdentifierNode(name=str(_require(data, 'name')))
    elif kind == 'matrix':
        return MatrixNode(
            rows=int(_require(data, 'rows')),
            cols=int(_require(data, 'cols')),
            cells=[[str(cell) for cell in row] for row in _require(data, 'cells')]
        )
    elif kind == 'vector':
        return VectorNode(
            orientation=_require(data, 'orientation'),
            cells=[str(cell) for cell in _require(data, 'cells')]
        )
    elif kind == 'op':
        return OperatorNode(
            op=_require(data, 'op'),
            left=ast_from_dict(_require(data, 'left')),
            right=ast_from_dict(_require(data, 'right'))
        )
    elif kind == 'wrapper':
        return WrapperNode(wrap=_require(data, 'wrap'), inner=ast_from_dict(_require(data, 'inner')))
    elif kind == 'integral':
        return IntegralNode(
            body=str(_require(data, 'body')),
            from_=data.get('from'),
            to=data.get('to'),
            d=data.get('d')
        )
    elif kind == 'fraction':
        return FractionNode(numerator=_require(data, 'numerator'), denominator=_require(data, 'denominator'))
    elif kind == 'exponent':
        return ExponentNode(base=_require(data, 'base'), exponent=_require(data, 'exponent'))
    else:
        return SubscriptNode(base=_require(data, 'base'), subscript=_require(data, 'subscript'))


__all__ = [
    'NodeKind',
    'MathNode',
    'MathAst',
    'SymbolNode',
    'NumberNode',
    'IdentifierNode',
    'MatrixNode',
    'VectorNode',
    'OperatorNode',
    'WrapperNode',
    'IntegralNode',
    'FractionNode',
    'ExponentNode',
    'SubscriptNode',
    'NODE_TYPES',
    'VECTOR_ORIENTATIONS',
    'OPERATORS',
    'WRAPS',
    'ast_from_dict'
]
