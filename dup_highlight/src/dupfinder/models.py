# dupfinder/models.py
"""
Data models for the duplicate-line finder.

- Line: one physical line of the input (raw + normalized) with its stable index.
- DuplicateGroup: two or more occurrence spans sharing the same normalized content.
- AnnotatedLine: the per-line output handed to the renderer.

These classes carry no detection logic; normalizing, searching and annotating
live in their own modules.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

# inclusive (first_line, last_line), both 0-based physical indices
Span = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Line:
    """
    One physical line of the document.

    Attributes
    ----------
    index : int
        0-based position among all physical lines (blank ones included).
    raw : str
        The untouched line text, used for rendering.
    normalized : str
        Outer whitespace trimmed and every space removed. Only used for
        equality tests between lines.
    """
    index: int
    raw: str
    normalized: str

    @property
    def is_empty(self) -> bool:
        return not self.normalized


@dataclass(slots=True)
class DuplicateGroup:
    """
    One finding: a window of `width` non-empty lines that occurs at every span
    in `spans` (ascending start order, at least two of them).
    """
    width: int
    spans: List[Span] = field(default_factory=list)

    def covers(self, index: int) -> bool:
        return any(a <= index <= b for a, b in self.spans)

    def to_dict(self) -> dict:
        return {"width": self.width, "spans": [list(s) for s in self.spans]}


@dataclass(frozen=True, slots=True)
class AnnotatedLine:
    index: int
    text: str
    highlight: bool
