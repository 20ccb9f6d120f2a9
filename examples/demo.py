#!/usr/bin/env python3
"""
Demo script for Math Notation Core
"""

from pathlib import Path

from math_notation import (
    NoteProcessor, NotesConfig, MathBuilderState, EditorState, MATH_TEMPLATES, Note, ParagraphBlock,
    filter_commands, sanitize_latex
)
from math_notation.serializer import serialize

processor = NoteProcessor(NotesConfig(verbose=True))

print("Templates")
print("=" * 60)
for template_id, template in MATH_TEMPLATES.items():
    marker = " (large)" if template.is_large_operator else ""
    print(f"{template.name:<22}{marker:<9} {processor.render_template(template_id)}")

print("\nBuilder")
print("=" * 60)
builder = MathBuilderState()
builder.set_matrix_size(2, 3)
for row, values in enumerate([['1', '2', '3'], ['4', '5', '6']]):
    for col, value in enumerate(values):
        builder.update_matrix_cell(row, col, value)
matrix_block = processor.create_math_block(builder.build_current_ast())
print(f"Matrix: {matrix_block.latex}")

builder.set_active_tab('calculus')
builder.integral_body = '\\sin(x)'
builder.integral_from = '0'
builder.integral_to = '\\pi'
integral_block = processor.create_math_block(builder.build_current_ast())
print(f"Integral: {integral_block.latex}")

print("\nCommand palette")
print("=" * 60)
state = EditorState()
state.content[0].value = 'Rotation by '
for command in filter_commands('theta'):
    print(f"- {command.name}: {command.description}")
    command.execute(state)
line = serialize(state.content)
print(f"Line: {line}")

print("\nSanitizer")
print("=" * 60)
for raw in ['x^{} + \\placeholder{y} 1', 'dy/dx = 2x', '& a & b \\\\']:
    print(f"{raw!r:35} -> {sanitize_latex(raw)!r}")

# Export
output_file = Path("demo_note.json")
note = Note.create("Demo")
note.content = [ParagraphBlock(id='p1', text='Let A = [ [ 1 2 3 ] [ 4 5 6 ] ]'), matrix_block, integral_block]
for fmt, suffix in [("json", ".json"), ("latex", ".tex"), ("markdown", ".md")]:
    path = output_file.with_suffix(suffix)
    if processor.export_note(note, path, format=fmt):
        print(f"\nNote exported to: {path}")

print("\nDemo completed!")
