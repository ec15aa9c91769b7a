from __future__ import annotations
from typing import Iterable, List
from .models import Line
from .config import BRACE_CHARS, WHITESPACE

def normalize_line(text: str) -> str:
    """
    Comparison key for a line: outer whitespace trimmed, then every space
    character removed. Tabs inside the line are kept. Whitespace means the
    Unicode White_Space set, so control characters such as \\x1c count as text.
    """
    return text.strip(WHITESPACE).replace(" ", "")

def is_empty(text: str) -> bool:
    return not normalize_line(text)

def only_braces(window: Iterable[Line]) -> bool:
    """True when every character of the window is whitespace or a brace."""
    return all(
        ch in WHITESPACE or ch in BRACE_CHARS
        for line in window
        for ch in line.normalized
    )

def split_lines(text: str) -> List[Line]:
    """
    Split on '\\n' only and tag every physical line with its 0-based index.
    A trailing newline yields a final empty line, so the count always matches
    what a reader of the document sees.
    """
    return [
        Line(index=i, raw=raw, normalized=normalize_line(raw))
        for i, raw in enumerate(text.split("\n"))
    ]

def non_empty(lines: Iterable[Line]) -> List[Line]:
    """Drop blank lines; original indices are kept on the survivors."""
    return [ln for ln in lines if not ln.is_empty]
