from __future__ import annotations
from typing import Iterable, List, Sequence, Set
from .models import Line, DuplicateGroup, AnnotatedLine

def highlighted_indices(lines: Sequence[Line], groups: Iterable[DuplicateGroup]) -> Set[int]:
    """Indices of non-empty lines covered by any span of any group."""
    groups = list(groups)
    return {ln.index for ln in lines if not ln.is_empty and any(g.covers(ln.index) for g in groups)}

def annotate(lines: Sequence[Line], groups: Iterable[DuplicateGroup]) -> List[AnnotatedLine]:
    """One AnnotatedLine per physical line, in order; blank lines are never highlighted."""
    marked = highlighted_indices(lines, groups)
    return [AnnotatedLine(index=ln.index, text=ln.raw, highlight=ln.index in marked) for ln in lines]
