"""
Post-process compiled LaTeX before it is handed to the renderer.
"""

import logging

import regex


logger = logging.getLogger(__name__)

# Editor scaffolding that must never reach the renderer
PLACEHOLDER_PATTERNS = [
    regex.compile(r'\\placeholder\{[^{}]*\}'),
    regex.compile(r'\\placeholder(?![a-zA-Z])'),
    regex.compile(r'\\(?:cursor|caret)(?![a-zA-Z])'),
    regex.compile(r'\{\{\s*[A-Za-z_][\w-]*\s*\}\}'),
    regex.compile(r'[\u200b\u200c\u200d\ufeff]'),
]

# Recursive: ``^{_{^{}}}`` goes in one substitution
EMPTY_GROUP_PATTERN = regex.compile(r'(?:[_^]|\\text)\{(?:\s|(?R))*\}')
EDGE_SEPARATOR_PATTERN = regex.compile(r'^(?:\s*(?:&|\\\\))+|(?:(?<!\\)&\s*|\\\\\s*)+$')
# Text groups are matched first so a ``d/dx`` inside ``\text{...}`` stays prose
DIFFERENTIAL_PATTERN = regex.compile(
    r'(?P<text>\\text(?P<group>\{(?:[^{}]++|(?&group))*\}))'
    r'|(?<![\\a-zA-Z])d(?P<num>[a-zA-Z]?)\s*/\s*d(?P<den>[a-zA-Z])(?![a-zA-Z])'
)
WHITESPACE_PATTERN = regex.compile(r'\s+')


def _rewrite_differential(match) -> str:
    if match.group('text'):
        return match.group(0)
    return f"\\frac{{d{match.group('num')}}}{{d{match.group('den')}}}"


def _sanitize_pass(latex: str) -> str:
    for pattern in PLACEHOLDER_PATTERNS:
        latex = pattern.sub('', latex)

    latex = EMPTY_GROUP_PATTERN.sub('', latex)
    latex = DIFFERENTIAL_PATTERN.sub(_rewrite_differential, latex)
    latex = WHITESPACE_PATTERN.sub(' ', latex).strip()
    latex = EDGE_SEPARATOR_PATTERN.sub('', latex).strip()

    return latex


def sanitize_latex(latex: str) -> str:
    """Strip editor scaffolding and tidy a LaTeX string.

    Removes placeholder tokens, empty script groups and separators at the
    ends of the markup, collapses whitespace and rewrites a bare ``d/dx``
    outside text groups into ``\\frac{d}{dx}``. Row and column separators
    inside an environment are kept: they delimit empty cells.

    Passes repeat until the output stops changing, so the result is stable
    under a second call. The loop ends because every pass that changes the
    string either shortens it, normalizes whitespace, or consumes a ``/``,
    and no step adds one.

    Args:
        latex: Markup produced by the compilers

    Returns:
        Cleaned markup
    """
    passes = 0
    while True:
        cleaned = _sanitize_pass(latex)
        passes += 1
        if cleaned == latex:
            break
        latex = cleaned

    if passes > 2:
        logger.debug(f"LaTeX sanitization settled after {passes} passes")
    return latex


__all__ = [
    'sanitize_latex',
    'PLACEHOLDER_PATTERNS'
]
