import pytest
import tempfile
from pathlib import Path
from math_notation.math_ast import (
    SymbolNode, NumberNode, IdentifierNode, MatrixNode, VectorNode, OperatorNode,
    WrapperNode, IntegralNode, FractionNode, ExponentNode, SubscriptNode
)
from math_notation.models import Note, ParagraphBlock, MathBlock
from math_notation.processor import NoteProcessor
from math_notation.config import NotesConfig


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_asts():
    """One node of every AST variant."""
    return {
        'symbol': SymbolNode(value='\\pi'),
        'number': NumberNode(value='42'),
        'identifier': IdentifierNode(name='x'),
        'matrix': MatrixNode(rows=2, cols=2, cells=[['1', '0'], ['0', '1']]),
        'vector': VectorNode(orientation='col', cells=['a', 'b', 'c']),
        'op': OperatorNode(op='*', left=IdentifierNode(name='A'), right=IdentifierNode(name='B')),
        'wrapper': WrapperNode(wrap='norm', inner=IdentifierNode(name='v')),
        'integral': IntegralNode(body='f(x)', from_='0', to='1', d='x'),
        'fraction': FractionNode(numerator='a', denominator='b'),
        'exponent': ExponentNode(base='e', exponent='x'),
        'subscript': SubscriptNode(base='x', subscript='i'),
    }


@pytest.fixture
def sample_texts():
    """Plain-text lines using the bracket-matrix shorthand."""
    return {
        'identity': '[ [ 1 0 ] [ 0 1 ] ]',
        'equation': 'A = [ [ 1 2 ] [ 3 4 ] ] and b = [ [ 5 ] [ 6 ] ]',
        'row_vector': 'v = [ [ x y z ] ]',
        'plain': 'no matrices here',
        'ragged': '[ [ 1 2 ] [ 3 ] ]',
        'unclosed': 'see [ [ 1 2 ] [ 3 4 ]',
        'empty_matrix': '[ ]',
        'list_like': 'items [1, 2, 3] stay text',
    }


@pytest.fixture
def processor():
    """Note processor instance."""
    return NoteProcessor(NotesConfig())


@pytest.fixture
def sample_note():
    """Note with a paragraph, a matrix block and an integral block."""
    return Note(
        id='note-1',
        title='Linear Algebra',
        content=[
            ParagraphBlock(id='block-1', text='The identity [ [ 1 0 ] [ 0 1 ] ] is neutral.'),
            MathBlock(
                id='block-2',
                ast=MatrixNode(rows=2, cols=2, cells=[['1', '0'], ['0', '1']]),
                latex='',
                inline=False
            ),
            MathBlock(
                id='block-3',
                ast=IntegralNode(body='x^2', from_='0', to='1', d='x'),
                latex='',
                inline=True
            ),
        ],
        created_at=1700000000000,
        updated_at=1700000000000
    )
