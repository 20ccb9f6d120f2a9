"""
Main processor wiring the compilers, parser and serializer for a notes editor
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional, Union, List, Dict, Any, Mapping

from .config import NotesConfig, ExportConfig
from .latex_compiler import ast_to_latex, elements_to_latex
from .math_ast import MathNode
from .models import (
    Element, MathBlock, MatrixElement, Note, ParagraphBlock, ProcessingResult,
    block_from_dict, generate_id
)
from .parser import parse_text
from .sanitizer import sanitize_latex
from .serializer import serialize
from .symbols import InlineSymbol, INLINE_SYMBOLS, load_symbol_table, resolve_symbol
from .templates import compile_template


logger = logging.getLogger(__name__)


class NoteProcessor:
    """Compile math blocks and convert paragraph text for one editor session."""

    def __init__(self, config: Optional[NotesConfig] = None,
                 export_config: Optional[ExportConfig] = None):
        """Initialize processor with configuration."""
        self.config = config or NotesConfig()
        self.export_config = export_config or ExportConfig()

        if self.config.symbol_config_path:
            self.symbols = load_symbol_table(self.config.symbol_config_path)
        else:
            self.symbols = INLINE_SYMBOLS

        # Setup logging
        if self.config.verbose:
            logging.basicConfig(level=logging.INFO)
        if self.config.debug:
            logging.basicConfig(level=logging.DEBUG)

    def _finish(self, latex: str) -> str:
        if self.config.sanitize_output:
            return sanitize_latex(latex)
        return latex

    def compile_ast(self, ast: MathNode) -> str:
        """Compile an AST to renderer-ready LaTeX."""
        return self._finish(ast_to_latex(ast))

    def render_template(self, template_id: str, slot_values: Optional[Mapping[str, str]] = None) -> str:
        """Compile a template; empty string if the template is unknown."""
        latex = compile_template(template_id, slot_values)
        return self._finish(latex) if latex else ''

    def resolve_symbol(self, symbol_id: str) -> InlineSymbol:
        return resolve_symbol(symbol_id, self.symbols)

    def create_math_block(self, ast: MathNode, inline: bool = False,
                          block_id: Optional[str] = None) -> MathBlock:
        """Create a math block holding the AST and its compiled LaTeX."""
        return MathBlock(
            id=block_id or generate_id(),
            ast=ast,
            latex=self.compile_ast(ast),
            inline=inline
        )

    def parse_paragraph(self, text: str) -> List[Element]:
        return parse_text(text)

    def serialize_elements(self, elements: List[Element]) -> str:
        return serialize(elements)

    def paragraph_to_latex(self, text: str) -> str:
        """Compile a paragraph containing bracket-matrix shorthand to LaTeX."""
        return self._finish(elements_to_latex(parse_text(text)))

    def refresh_note(self, note: Note) -> int:
        """Recompile the LaTeX of every math block from its AST.

        Returns:
            Number of blocks whose LaTeX changed
        """
        changed = 0
        for block in note.math_blocks:
            latex = self.compile_ast(block.ast)
            if latex != block.latex:
                block.latex = latex
                changed += 1
        if changed:
            note.touch()
            logger.info(f"Recompiled {changed} math block(s) in note {note.id}")
        return changed

    def load_note(self, data: Dict[str, Any]) -> ProcessingResult:
        """Decode a persisted note, skipping blocks that cannot be decoded."""
        start_time = time.time()
        errors = []
        warnings = []

        try:
            blocks = []
            for index, block_data in enumerate(data.get('content', [])):
                try:
                    blocks.append(block_from_dict(block_data))
                except (KeyError, TypeError, ValueError, AttributeError) as e:
                    warnings.append({
                        'type': 'block_decode',
                        'index': index,
                        'error': str(e)
                    })
                    logger.warning(f"Skipping block {index}: {e}")

            note = Note(
                id=data['id'],
                title=data.get('title', ''),
                content=blocks,
                created_at=int(data.get('createdAt', 0)),
                updated_at=int(data.get('updatedAt', 0))
            )
            self.refresh_note(note)

            return ProcessingResult(
                note=note,
                processing_time=time.time() - start_time,
                errors=errors,
                warnings=warnings
            )

        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Loading note failed: {e}")
            return ProcessingResult(
                processing_time=time.time() - start_time,
                errors=[{'type': 'note_decode', 'error': str(e)}],
                warnings=warnings
            )

    def export_note(self, note: Note, output_path: Union[str, Path],
                    format: str = "json") -> bool:
        """Export a note to a JSON, LaTeX or Markdown file."""
        output_path = Path(output_path)

        try:
            if format == "json":
                with open(output_path, 'w', encoding='utf-8') as f:
                    json.dump(note.to_dict(), f,
                              indent=self.export_config.indent,
                              ensure_ascii=self.export_config.ensure_ascii)
            elif format == "latex":
                output_path.write_text(self._generate_latex_output(note), encoding='utf-8')
            elif format == "markdown":
                output_path.write_text(self._generate_markdown_output(note), encoding='utf-8')
            else:
                logger.error(f"Unsupported export format: {format}")
                return False

            return True

        except OSError as e:
            logger.error(f"Export failed: {e}")
            return False

    def _paragraph_text(self, block: ParagraphBlock) -> str:
        """Plain text with embedded matrices typeset as inline math."""
        return ''.join(
            f"${self._finish(elements_to_latex([element]))}$" if isinstance(element, MatrixElement)
            else serialize([element])
            for element in parse_text(block.text)
        )

    def _generate_latex_output(self, note: Note) -> str:
        """Generate LaTeX document from a note."""
        packages = [f"\\usepackage{{{package}}}" for package in self.export_config.latex_packages]
        lines = [
            f"\\documentclass{{{self.export_config.document_class}}}",
            *packages,
            "\\begin{document}",
            "",
            f"\\section*{{{note.title}}}",
            ""
        ]

        for block in note.content:
            if isinstance(block, MathBlock):
                lines.append(f"${block.latex}$" if block.inline else f"\\[{block.latex}\\]")
            else:
                lines.append(self._paragraph_text(block))
            lines.append("")

        lines.append("\\end{document}")
        return "\n".join(lines)

    def _generate_markdown_output(self, note: Note) -> str:
        """Generate Markdown document from a note."""
        lines = [f"# {note.title}", ""]

        for block in note.content:
            if isinstance(block, MathBlock):
                lines.append(f"${block.latex}$" if block.inline else f"$${block.latex}$$")
            else:
                lines.append(self._paragraph_text(block))
            lines.append("")

        return "\n".join(lines)
