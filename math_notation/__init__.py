"""
Math Notation Core

Document and expression model for a notes editor that mixes plain text with
mathematical notation: expression ASTs, slot templates and the bracket-matrix
shorthand, all compiled to LaTeX for an external renderer.
"""

__version__ = "0.1.0"
__author__ = "Math Notation Team"

# Import AST and models
from .math_ast import (
    MathNode,
    NodeKind,
    SymbolNode,
    NumberNode,
    IdentifierNode,
    MatrixNode,
    VectorNode,
    OperatorNode,
    WrapperNode,
    IntegralNode,
    FractionNode,
    ExponentNode,
    SubscriptNode,
    ast_from_dict
)
from .models import (
    ElementType,
    TextElement,
    MatrixElement,
    SymbolElement,
    ParagraphBlock,
    MathBlock,
    Note,
    ProcessingResult
)

# Import configuration classes
from .config import NotesConfig, ExportConfig

# Import core functions
from .latex_compiler import ast_to_latex, elements_to_latex
from .templates import MathTemplate, SlotDefinition, MATH_TEMPLATES, compile_template, get_template_slots
from .symbols import InlineSymbol, INLINE_SYMBOLS, resolve_symbol
from .parser import parse_text
from .serializer import serialize
from .sanitizer import sanitize_latex
from .builder import MathBuilderState
from .commands import EditorState, filter_commands

# Import main processor
from .processor import NoteProcessor

__all__ = [
    # Version
    "__version__",

    # AST
    "MathNode",
    "NodeKind",
    "SymbolNode",
    "NumberNode",
    "IdentifierNode",
    "MatrixNode",
    "VectorNode",
    "OperatorNode",
    "WrapperNode",
    "IntegralNode",
    "FractionNode",
    "ExponentNode",
    "SubscriptNode",
    "ast_from_dict",

    # Models
    "ElementType",
    "TextElement",
    "MatrixElement",
    "SymbolElement",
    "ParagraphBlock",
    "MathBlock",
    "Note",
    "ProcessingResult",

    # Configurations
    "NotesConfig",
    "ExportConfig",

    # Core components
    "ast_to_latex",
    "elements_to_latex",
    "MathTemplate",
    "SlotDefinition",
    "MATH_TEMPLATES",
    "compile_template",
    "get_template_slots",
    "InlineSymbol",
    "INLINE_SYMBOLS",
    "resolve_symbol",
    "parse_text",
    "serialize",
    "sanitize_latex",
    "MathBuilderState",
    "EditorState",
    "filter_commands",

    # Main processor
    "NoteProcessor"
]


# Convenience function
def create_processor(**kwargs):
    """Create a configured note processor instance."""
    config = NotesConfig(**kwargs)
    return NoteProcessor(config)
