"""Edit a rendered line and watch the raw text change: one splice, then a full re-derive."""

from penleaf import Alignment, Editor, LineIdentity

editor = Editor("# Title\n\nFirst para.\n\nSecond para.\n")

line = LineIdentity(page_index=0, section_index=2, line_index=0)
print("Before:", repr(editor.line_text(line)))

editor.set_line_alignment(line, Alignment.CENTER)
editor.begin_line_edit(line)
editor.commit_line_edit("First paragraph, rewritten.")

print("After:", repr(editor.text))
print("Still centered:", editor.pages[0].alignment_for(2, 0) is Alignment.CENTER)
