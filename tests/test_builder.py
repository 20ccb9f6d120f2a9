import pytest
from math_notation.builder import MathBuilderState
from math_notation.config import NotesConfig
from math_notation.math_ast import (
    MatrixNode, VectorNode, IntegralNode, FractionNode, ExponentNode, SubscriptNode, SymbolNode
)


@pytest.fixture
def builder():
    return MathBuilderState()


class TestMatrixBuilder:

    def test_defaults(self, builder):
        """Test the initial 2x2 blank grid."""
        assert builder.mode == 'create'
        assert builder.matrix_cells == [['', ''], ['', '']]
        assert builder.current_latex == ''

    def test_resize_keeps_overlap(self, builder):
        """Test that resizing preserves cells that still fit."""
        builder.update_matrix_cell(0, 0, 'a')
        builder.update_matrix_cell(1, 1, 'd')
        builder.set_matrix_size(3, 1)
        assert builder.matrix_cells == [['a'], [''], ['']]

        builder.set_matrix_size(1, 3)
        assert builder.matrix_cells == [['a', '', '']]

    def test_update_out_of_range_is_ignored(self, builder):
        """Test out-of-range cell writes."""
        builder.update_matrix_cell(5, 0, 'x')
        builder.update_matrix_cell(0, -1, 'x')
        assert builder.matrix_cells == [['', ''], ['', '']]

    def test_build_matrix_ast_is_a_copy(self, builder):
        """Test that the AST does not alias builder state."""
        builder.update_matrix_cell(0, 0, '1')
        ast = builder.build_matrix_ast()
        builder.update_matrix_cell(0, 0, '9')
        assert ast == MatrixNode(rows=2, cols=2, cells=[['1', ''], ['', '']])


class TestVectorBuilder:

    def test_resize_and_toggle(self, builder):
        """Test vector resizing and orientation."""
        builder.update_vector_cell(0, 'x')
        builder.set_vector_size(2)
        assert builder.vector_cells == ['x', '']
        builder.set_vector_size(4)
        assert builder.vector_cells == ['x', '', '', '']

        builder.toggle_vector_orientation()
        assert builder.vector_orientation == 'row'
        builder.toggle_vector_orientation()
        assert builder.vector_orientation == 'col'

    def test_build_vector_ast(self, builder):
        """Test vector AST construction."""
        builder.set_active_tab('vectors')
        for i, value in enumerate(['1', '2', '3']):
            builder.update_vector_cell(i, value)
        assert builder.build_current_ast() == VectorNode(orientation='col', cells=['1', '2', '3'])


class TestBuildCurrentAst:

    def test_templates_priority(self, builder):
        """Test fraction, then exponent, then subscript."""
        builder.set_active_tab('templates')
        assert builder.build_current_ast() is None

        builder.subscript_base = 'x'
        assert builder.build_current_ast() == SubscriptNode(base='x', subscript='')

        builder.exponent_power = '2'
        assert builder.build_current_ast() == ExponentNode(base='', exponent='2')

        builder.fraction_numerator = '1'
        assert builder.build_current_ast() == FractionNode(numerator='1', denominator='')

    def test_calculus_drops_empty_bounds(self, builder):
        """Test integral construction."""
        builder.set_active_tab('calculus')
        builder.integral_body = 'f(x)'
        assert builder.build_current_ast() == IntegralNode(body='f(x)', d='x')

        builder.integral_from = '0'
        builder.integral_to = '1'
        assert builder.build_current_ast() == IntegralNode(body='f(x)', from_='0', to='1', d='x')

    def test_symbols_tab_builds_nothing(self, builder):
        """Test tabs without an AST."""
        builder.set_active_tab('symbols')
        assert builder.build_current_ast() is None
        assert builder.create_symbol_ast('\\pi') == SymbolNode(value='\\pi')

    def test_unknown_tab(self, builder):
        """Test tab validation."""
        with pytest.raises(ValueError):
            builder.set_active_tab('graphs')


class TestEditMode:

    def test_enter_and_exit(self, builder):
        """Test loading an AST and resetting."""
        ast = MatrixNode(rows=1, cols=3, cells=[['a', 'b', 'c']])
        builder.enter_edit_mode('block-7', ast)
        assert builder.mode == 'edit'
        assert builder.editing_block_id == 'block-7'
        assert builder.active_tab == 'matrices'
        assert builder.matrix_cells == [['a', 'b', 'c']]
        assert builder.current_latex == '\\begin{bmatrix} a & b & c \\end{bmatrix}'

        builder.exit_edit_mode()
        assert builder.mode == 'create'
        assert builder.current_ast is None
        assert builder.matrix_cells == [['', ''], ['', '']]

    def test_load_each_builder(self, builder):
        """Test loading every supported AST kind."""
        builder.load_ast_into_builder(VectorNode(orientation='row', cells=['1', '2']))
        assert (builder.active_tab, builder.vector_size, builder.vector_orientation) == ('vectors', 2, 'row')

        builder.load_ast_into_builder(FractionNode(numerator='a', denominator='b'))
        assert (builder.active_tab, builder.fraction_numerator) == ('templates', 'a')

        builder.load_ast_into_builder(ExponentNode(base='e', exponent='x'))
        assert builder.exponent_power == 'x'

        builder.load_ast_into_builder(SubscriptNode(base='a', subscript='n'))
        assert builder.subscript_value == 'n'

        builder.load_ast_into_builder(IntegralNode(body='g', from_='0'))
        assert builder.active_tab == 'calculus'
        assert (builder.integral_from, builder.integral_to, builder.integral_variable) == ('0', '', 'x')

    def test_round_trip_through_builder(self, builder):
        """Test that loading then building reproduces the AST."""
        ast = IntegralNode(body='x^2', from_='0', to='2', d='t')
        builder.load_ast_into_builder(ast)
        assert builder.build_current_ast() == ast


class TestConfigDefaults:

    def test_from_config(self):
        """Test configured builder defaults."""
        config = NotesConfig(default_matrix_rows=3, default_matrix_cols=1,
                             default_vector_size=2, default_vector_orientation='row',
                             default_integral_variable='t')
        builder = MathBuilderState.from_config(config)
        assert builder.matrix_cells == [[''], [''], ['']]
        assert builder.vector_cells == ['', '']
        assert builder.vector_orientation == 'row'
        assert builder.integral_variable == 't'
