import pytest
from math_notation.templates import (
    MATH_TEMPLATES, PLACEHOLDER, TEMPLATE_CATEGORIES, compile_template, default_slot_values,
    get_template, get_template_slots, list_templates
)


class TestTemplateRegistry:

    def test_registry_keys_match_ids(self):
        """Test that every template is registered under its own id."""
        assert len(MATH_TEMPLATES) == 21
        for template_id, template in MATH_TEMPLATES.items():
            assert template.id == template_id
            assert template.category in TEMPLATE_CATEGORIES
            assert template.slots

    def test_registry_is_read_only(self):
        """Test that the registry cannot be mutated."""
        with pytest.raises(TypeError):
            MATH_TEMPLATES['new'] = MATH_TEMPLATES['fraction']

    def test_large_operator_flags(self):
        """Test the static large-operator flag."""
        large = {t.id for t in MATH_TEMPLATES.values() if t.is_large_operator}
        assert large == {'summation', 'product', 'integral', 'union', 'intersection', 'limit'}

    def test_lookup_miss(self):
        """Test unknown template ids."""
        assert compile_template('does-not-exist', {}) == ''
        assert get_template('does-not-exist') is None
        assert get_template_slots('does-not-exist') == []
        assert default_slot_values('does-not-exist') == {}

    def test_list_templates_by_category(self):
        """Test category filtering."""
        decorations = {t.id for t in list_templates('decoration')}
        assert decorations == {'hat', 'bar', 'vec'}
        assert len(list_templates()) == len(MATH_TEMPLATES)

    def test_default_slot_values(self):
        """Test slot defaults."""
        assert default_slot_values('integral') == {
            'lower': '', 'upper': '', 'body': '', 'differential': 'dx'
        }
        assert default_slot_values('limit')['variable'] == 'x'


class TestCompileTemplate:

    def test_fraction(self):
        """Test fraction with filled and empty slots."""
        assert compile_template('fraction', {'numerator': 'a', 'denominator': 'b'}) == '\\dfrac{a}{b}'
        assert compile_template('fraction', {'numerator': '', 'denominator': ''}) == '\\dfrac{\\square}{\\square}'
        assert compile_template('fraction', {}) == '\\dfrac{\\square}{\\square}'

    def test_blank_slot_uses_placeholder(self):
        """Test that whitespace-only slots count as empty."""
        assert compile_template('sqrt', {'body': '   '}) == '\\sqrt{\\square}'

    def test_slots_are_independent(self):
        """Test partially filled templates."""
        assert compile_template('fraction', {'numerator': 'a'}) == '\\dfrac{a}{\\square}'
        assert compile_template('superSub', {'sup': '2'}) == '{\\square}_{\\square}^{2}'

    def test_summation(self):
        """Test bounds are optional on large operators."""
        assert compile_template('summation', {'lower': 'i=1', 'upper': 'n', 'body': 'i'}) == \
            '\\displaystyle\\sum_{i=1}^{n} i'
        assert compile_template('summation', {}) == '\\displaystyle\\sum \\square'
        assert compile_template('product', {'upper': 'n', 'body': 'k'}) == '\\displaystyle\\prod^{n} k'

    def test_integral_template(self):
        """Test the integral differential fallback."""
        assert compile_template('integral', {'lower': 'a', 'upper': 'b', 'body': 'f(x)', 'differential': 'dt'}) == \
            '\\displaystyle\\int_{a}^{b} f(x)\\, dt'
        assert compile_template('integral', {}) == '\\displaystyle\\int \\square\\, dx'

    def test_set_operators(self):
        """Test union and intersection."""
        assert compile_template('union', {'body': 'A_i'}) == '\\displaystyle\\bigcup A_i'
        assert compile_template('intersection', {'lower': 'i', 'body': 'B_i'}) == '\\displaystyle\\bigcap_{i} B_i'

    def test_roots(self):
        """Test square and nth roots."""
        assert compile_template('sqrt', {'body': 'x'}) == '\\sqrt{x}'
        assert compile_template('nthroot', {'index': '3', 'body': 'x'}) == '\\sqrt[3]{x}'
        assert compile_template('nthroot', {}) == '\\sqrt[n]{\\square}'

    def test_scripts(self):
        """Test power and subscript templates."""
        assert compile_template('power', {'base': 'x', 'exponent': '2'}) == '{x}^{2}'
        assert compile_template('subscriptExpr', {'base': 'a', 'sub': 'n'}) == '{a}_{n}'

    def test_limit(self):
        """Test limit fallbacks."""
        assert compile_template('limit', {'variable': 'n', 'approaching': '0', 'body': 'a_n'}) == \
            '\\displaystyle\\lim_{n \\to 0} a_n'
        assert compile_template('limit', {}) == '\\displaystyle\\lim_{x \\to \\infty} \\square'

    def test_derivatives(self):
        """Test ordinary and partial derivatives."""
        assert compile_template('derivative', {'function': 'y', 'variable': 't'}) == '\\dfrac{dy}{dt}'
        assert compile_template('derivative', {}) == '\\dfrac{d\\square}{dx}'
        assert compile_template('partialDerivative', {'function': 'f'}) == '\\dfrac{\\partial f}{\\partial x}'

    def test_decorations_and_delimiters(self):
        """Test single-slot wrappers."""
        assert compile_template('hat', {'body': 'x'}) == '\\hat{x}'
        assert compile_template('bar', {'body': 'z'}) == '\\overline{z}'
        assert compile_template('vec', {'body': 'v'}) == '\\vec{v}'
        assert compile_template('abs', {'body': 'x'}) == '\\left|x\\right|'
        assert compile_template('paren', {'body': 'a+b'}) == '\\left(a+b\\right)'
        assert compile_template('bracket', {}) == '\\left[\\square\\right]'

    def test_binom(self):
        """Test binomial coefficient."""
        assert compile_template('binom', {'n': 'n', 'k': 'k'}) == '\\dbinom{n}{k}'

    def test_placeholder_guarantee(self):
        """Test one placeholder per empty slot, except slots with a fallback.

        Large-operator bounds are omitted when empty, and the variable,
        approach, differential and root-index slots fall back to ``x``,
        ``\\infty``, ``dx`` and ``n``. Every other slot shows a placeholder.
        """
        fallback_slots = {
            'summation': {'lower', 'upper'},
            'product': {'lower', 'upper'},
            'union': {'lower', 'upper'},
            'intersection': {'lower', 'upper'},
            'integral': {'lower', 'upper', 'differential'},
            'limit': {'variable', 'approaching'},
            'derivative': {'variable'},
            'partialDerivative': {'variable'},
            'nthroot': {'index'},
        }
        for template_id, template in MATH_TEMPLATES.items():
            empty = {slot.name: '' for slot in template.slots}
            latex = compile_template(template_id, empty)
            expected = len(set(template.slot_names) - fallback_slots.get(template_id, set()))
            assert latex, template_id
            assert expected >= 1, template_id
            assert latex.count(PLACEHOLDER) == expected, template_id

    def test_pure(self):
        """Test that compilation does not depend on call history."""
        values = {'numerator': 'x', 'denominator': 'y'}
        first = compile_template('fraction', values)
        compile_template('fraction', {})
        assert compile_template('fraction', values) == first
        assert values == {'numerator': 'x', 'denominator': 'y'}
