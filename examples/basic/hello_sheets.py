"""Classify, paginate and print a page of notes with zero config."""

from penleaf import Editor

notes = """CS 101: Intro to Computing
# Lecture 3
What is an algorithm?
A finite sequence of well-defined steps.
1. Input
2. Output
"""

editor = Editor(notes)
for page in editor.render():
    print(page)
