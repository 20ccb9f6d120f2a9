#!/usr/bin/env python3
"""Simple example of using the Math Notation Core library"""

from math_notation import NoteProcessor, Note, MatrixNode, IntegralNode

# Create processor
processor = NoteProcessor()

# A note with a paragraph using the bracket-matrix shorthand
note = Note.create("Linear Algebra")
note.content[0].text = "The identity [ [ 1 0 ] [ 0 1 ] ] leaves every vector unchanged."

# Add math blocks built from ASTs
note.content.append(processor.create_math_block(
    MatrixNode(rows=2, cols=2, cells=[['a', 'b'], ['c', 'd']])
))
note.content.append(processor.create_math_block(
    IntegralNode(body='x^2', from_='0', to='1', d='x'), inline=True
))

# Show results
print(f"Note '{note.title}' has {len(note.math_blocks)} math blocks:")
for i, block in enumerate(note.math_blocks, 1):
    print(f"\n{i}. {block.latex}")
    print(f"   Kind: {block.ast.kind.value}")
    print(f"   Inline: {block.inline}")

print(f"\nParagraph as LaTeX: {processor.paragraph_to_latex(note.content[0].text)}")

# Save to file
processor.export_note(note, "my_note.json")
print("\nNote saved to my_note.json")
