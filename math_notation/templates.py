"""
Math templates: named LaTeX patterns with editable slots.

Each template compiles a mapping of slot values into LaTeX. Empty slots are
filled with a placeholder glyph so a half-filled template still renders as a
complete structure while it is being edited.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple


logger = logging.getLogger(__name__)

PLACEHOLDER = '\\square'

TEMPLATE_CATEGORIES = ('operator', 'structure', 'function', 'decoration')

SlotValues = Mapping[str, str]


@dataclass(frozen=True)
class SlotDefinition:
    name: str
    placeholder: str  # hint shown in the empty input, e.g. "i=1"
    default_value: str = ''


@dataclass(frozen=True)
class MathTemplate:
    id: str
    name: str
    category: str
    slots: Tuple[SlotDefinition, ...]
    compile: Callable[[SlotValues], str]
    is_large_operator: bool = False  # rendered at 2-2.5x size

    @property
    def slot_names(self) -> List[str]:
        return [slot.name for slot in self.slots]


def _value(values: SlotValues, name: str, fallback: str = PLACEHOLDER) -> str:
    """Slot content, or ``fallback`` when missing or blank."""
    value = values.get(name) or ''
    return value if value.strip() else fallback


def _optional(values: SlotValues, name: str, pattern: str) -> str:
    value = _value(values, name, '')
    return pattern.format(value) if value else ''


def _big_operator(command: str) -> Callable[[SlotValues], str]:
    def compile_big_operator(v: SlotValues) -> str:
        lower = _optional(v, 'lower', '_{{{}}}')
        upper = _optional(v, 'upper', '^{{{}}}')
        return f"\\displaystyle{command}{lower}{upper} {_value(v, 'body')}"
    return compile_big_operator


def _wrap(pattern: str, slot: str = 'body') -> Callable[[SlotValues], str]:
    def compile_wrapped(v: SlotValues) -> str:
        return pattern.format(_value(v, slot))
    return compile_wrapped


def _compile_integral(v: SlotValues) -> str:
    lower = _optional(v, 'lower', '_{{{}}}')
    upper = _optional(v, 'upper', '^{{{}}}')
    return f"\\displaystyle\\int{lower}{upper} {_value(v, 'body')}\\, {_value(v, 'differential', 'dx')}"


def _compile_fraction(v: SlotValues) -> str:
    return f"\\dfrac{{{_value(v, 'numerator')}}}{{{_value(v, 'denominator')}}}"


def _compile_nthroot(v: SlotValues) -> str:
    return f"\\sqrt[{_value(v, 'index', 'n')}]{{{_value(v, 'body')}}}"


def _compile_power(v: SlotValues) -> str:
    return f"{{{_value(v, 'base')}}}^{{{_value(v, 'exponent')}}}"


def _compile_subscript(v: SlotValues) -> str:
    return f"{{{_value(v, 'base')}}}_{{{_value(v, 'sub')}}}"


def _compile_super_sub(v: SlotValues) -> str:
    return f"{{{_value(v, 'base')}}}_{{{_value(v, 'sub')}}}^{{{_value(v, 'sup')}}}"


def _compile_limit(v: SlotValues) -> str:
    variable = _value(v, 'variable', 'x')
    approaching = _value(v, 'approaching', '\\infty')
    return f"\\displaystyle\\lim_{{{variable} \\to {approaching}}} {_value(v, 'body')}"


def _compile_derivative(v: SlotValues) -> str:
    return f"\\dfrac{{d{_value(v, 'function')}}}{{d{_value(v, 'variable', 'x')}}}"


def _compile_partial_derivative(v: SlotValues) -> str:
    return f"\\dfrac{{\\partial {_value(v, 'function')}}}{{\\partial {_value(v, 'variable', 'x')}}}"


def _compile_binom(v: SlotValues) -> str:
    return f"\\dbinom{{{_value(v, 'n')}}}{{{_value(v, 'k')}}}"


def _slots(*specs: Tuple[str, ...]) -> Tuple[SlotDefinition, ...]:
    return tuple(SlotDefinition(*spec) for spec in specs)


_BOUNDED_SLOTS = ('lower', 'i=1'), ('upper', 'n')

_TEMPLATES = [
    # Large operators
    MathTemplate('summation', 'Summation', 'operator',
                 _slots(*_BOUNDED_SLOTS, ('body', 'expr')), _big_operator('\\sum'), True),
    MathTemplate('product', 'Product', 'operator',
                 _slots(*_BOUNDED_SLOTS, ('body', 'expr')), _big_operator('\\prod'), True),
    MathTemplate('integral', 'Integral', 'operator',
                 _slots(('lower', 'a'), ('upper', 'b'), ('body', 'f(x)'), ('differential', 'dx', 'dx')),
                 _compile_integral, True),
    MathTemplate('union', 'Union', 'operator',
                 _slots(*_BOUNDED_SLOTS, ('body', 'A_i')), _big_operator('\\bigcup'), True),
    MathTemplate('intersection', 'Intersection', 'operator',
                 _slots(*_BOUNDED_SLOTS, ('body', 'A_i')), _big_operator('\\bigcap'), True),

    # Structures
    MathTemplate('fraction', 'Fraction', 'structure',
                 _slots(('numerator', 'a'), ('denominator', 'b')), _compile_fraction),
    MathTemplate('sqrt', 'Square Root', 'structure',
                 _slots(('body', 'x')), _wrap('\\sqrt{{{}}}')),
    MathTemplate('nthroot', 'Nth Root', 'structure',
                 _slots(('index', 'n'), ('body', 'x')), _compile_nthroot),
    MathTemplate('power', 'Exponent', 'structure',
                 _slots(('base', 'x'), ('exponent', 'n')), _compile_power),
    MathTemplate('subscriptExpr', 'Subscript', 'structure',
                 _slots(('base', 'x'), ('sub', 'i')), _compile_subscript),
    MathTemplate('superSub', 'Super & Subscript', 'structure',
                 _slots(('base', 'x'), ('sub', 'i'), ('sup', 'n')), _compile_super_sub),
    MathTemplate('abs', 'Absolute Value', 'structure',
                 _slots(('body', 'x')), _wrap('\\left|{}\\right|')),
    MathTemplate('paren', 'Parentheses', 'structure',
                 _slots(('body', 'expr')), _wrap('\\left({}\\right)')),
    MathTemplate('bracket', 'Brackets', 'structure',
                 _slots(('body', 'expr')), _wrap('\\left[{}\\right]')),
    MathTemplate('binom', 'Binomial', 'structure',
                 _slots(('n', 'n'), ('k', 'k')), _compile_binom),

    # Functions
    MathTemplate('limit', 'Limit', 'function',
                 _slots(('variable', 'x', 'x'), ('approaching', '\\infty'), ('body', 'f(x)')),
                 _compile_limit, True),
    MathTemplate('derivative', 'Derivative', 'function',
                 _slots(('function', 'f'), ('variable', 'x', 'x')), _compile_derivative),
    MathTemplate('partialDerivative', 'Partial Derivative', 'function',
                 _slots(('function', 'f'), ('variable', 'x', 'x')), _compile_partial_derivative),

    # Decorations
    MathTemplate('hat', 'Hat', 'decoration', _slots(('body', 'x')), _wrap('\\hat{{{}}}')),
    MathTemplate('bar', 'Bar (overline)', 'decoration', _slots(('body', 'x')), _wrap('\\overline{{{}}}')),
    MathTemplate('vec', 'Vector Arrow', 'decoration', _slots(('body', 'v')), _wrap('\\vec{{{}}}')),
]

MATH_TEMPLATES: Mapping[str, MathTemplate] = MappingProxyType({t.id: t for t in _TEMPLATES})


def get_template(template_id: str) -> Optional[MathTemplate]:
    return MATH_TEMPLATES.get(template_id)


def compile_template(template_id: str, slot_values: Optional[SlotValues] = None) -> str:
    """Compile a template instance to LaTeX.

    Args:
        template_id: Registry key, e.g. ``"fraction"``
        slot_values: Current content of each slot; missing slots are blank

    Returns:
        LaTeX markup, or an empty string if the template is unknown
    """
    template = MATH_TEMPLATES.get(template_id)
    if template is None:
        logger.debug(f"Unknown math template: {template_id}")
        return ''
    return template.compile(slot_values or {})


def get_template_slots(template_id: str) -> List[SlotDefinition]:
    """Get slot definitions for a template (empty for unknown ids)."""
    template = MATH_TEMPLATES.get(template_id)
    return list(template.slots) if template else []


def default_slot_values(template_id: str) -> Dict[str, str]:
    """Initial slot values for a fresh template instance."""
    return {slot.name: slot.default_value for slot in get_template_slots(template_id)}


def list_templates(category: Optional[str] = None) -> List[MathTemplate]:
    """List registered templates, optionally restricted to one category."""
    return [t for t in MATH_TEMPLATES.values() if category is None or t.category == category]


__all__ = [
    'PLACEHOLDER',
    'TEMPLATE_CATEGORIES',
    'SlotDefinition',
    'MathTemplate',
    'MATH_TEMPLATES',
    'get_template',
    'compile_template',
    'get_template_slots',
    'default_slot_values',
    'list_templates'
]
