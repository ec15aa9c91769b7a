# dupfinder/finder.py
"""
Duplicate-block search over the non-empty lines of one document.

Window widths are tried from the largest (half the non-empty line count) down
to 1. Every accepted group claims its lines in a per-call UsedLines table, so a
long repeated block is reported once as a whole and smaller sub-patterns of it
are never reported again. Groups never share a physical line.
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Sequence

from .models import Line, DuplicateGroup, Span
from .normalize import only_braces
from .config import MIN_OCCURRENCES

log = logging.getLogger(__name__)


class UsedLines:
    """Marker table over physical line indices, claimed by accepted groups."""

    def __init__(self, total_lines: int) -> None:
        self._used = [False] * max(0, int(total_lines))

    def __contains__(self, index: int) -> bool:
        return self._used[index]

    def any_used(self, spans: Iterable[Span]) -> bool:
        return any(self._used[i] for a, b in spans for i in range(a, b + 1))

    def claim(self, spans: Iterable[Span]) -> None:
        for a, b in spans:
            for i in range(a, b + 1):
                self._used[i] = True


def coalesce_spans(spans: Iterable[Span]) -> List[Span]:
    """
    Collapse overlapping placements of the same repeating run.

    Scanning in order, a span that starts no later than the previous kept span
    ends is dropped; the kept span is NOT extended to the dropped one's end.
    """
    out: List[Span] = []
    for a, b in spans:
        if out and out[-1][1] >= a:
            continue
        out.append((a, b))
    return out


def _matching_spans(keys: Sequence[str], lines: Sequence[Line], start: int, width: int) -> Iterator[Span]:
    """Yield (first, last) physical indices of every window equal to keys[start:start+width]."""
    pattern = keys[start:start + width]
    for q in range(len(keys) - width + 1):
        if keys[q:q + width] == pattern:
            yield lines[q].index, lines[q + width - 1].index


def find_duplicate_groups(lines: Sequence[Line], total_lines: int) -> List[DuplicateGroup]:
    """
    Find maximal, non-overlapping groups of repeated line windows.

    `lines` must already be filtered to non-empty lines (original indices
    preserved); `total_lines` is the physical line count of the document and
    sizes the marker table. Groups come back in discovery order: widest first,
    then by ascending start position.
    """
    keys = [ln.normalized for ln in lines]
    used = UsedLines(total_lines)
    groups: List[DuplicateGroup] = []

    for width in range(len(lines) // 2, 0, -1):
        for p in range(len(lines) - width + 1):
            window = lines[p:p + width]
            if window[0].index in used or only_braces(window):
                continue

            spans = coalesce_spans(_matching_spans(keys, lines, p, width))
            if len(spans) < MIN_OCCURRENCES:
                continue

            if used.any_used(spans):
                log.debug("skip width=%d at line %d: overlaps an accepted group", width, window[0].index)
                continue

            used.claim(spans)
            groups.append(DuplicateGroup(width=width, spans=spans))
            log.debug("group width=%d spans=%s", width, spans)

    return groups
