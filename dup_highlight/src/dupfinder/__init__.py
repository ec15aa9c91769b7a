"""
Duplicate Line Finder

Detects copy-pasted blocks of lines inside a single text document and flags
every physical line that belongs to one of them.

- Line normalization (whitespace-insensitive comparison keys)
- Duplicate-block search (widest windows first, no overlapping groups)
- Per-line annotation for renderers

Example Usage:
    from dupfinder import Engine

    report = Engine().analyze(open("main.rs").read())
    for group in report.groups:
        print(group.width, group.spans)
"""

# src/dupfinder/__init__.py
from .engine import Engine, Report, find_dup_lines  # re-export
from .finder import find_duplicate_groups
from .models import Line, DuplicateGroup, AnnotatedLine

__version__ = "1.0.0"
__all__ = [
    "Engine", "Report", "find_dup_lines", "find_duplicate_groups",
    "Line", "DuplicateGroup", "AnnotatedLine",
]
