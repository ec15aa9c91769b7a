# dupfinder/engine.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .models import AnnotatedLine, DuplicateGroup, Span
from .normalize import split_lines, non_empty
from .finder import find_duplicate_groups
from .annotate import annotate
from .loader import read_document

log = logging.getLogger(__name__)


@dataclass
class Report:
    """Everything a renderer needs: every physical line with its flag, plus the groups."""
    source: Optional[str]
    lines: List[AnnotatedLine] = field(default_factory=list)
    groups: List[DuplicateGroup] = field(default_factory=list)

    @property
    def duplicated_line_count(self) -> int:
        return sum(1 for ln in self.lines if ln.highlight)

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "groups": [g.to_dict() for g in self.groups],
            "lines": [{"line": ln.text, "highlight": ln.highlight} for ln in self.lines],
        }


def find_dup_lines(text: str) -> List[List[Span]]:
    """Text in, span lists out: one list of (first, last) per duplicate group."""
    lines = split_lines(text)
    return [g.spans for g in find_duplicate_groups(non_empty(lines), len(lines))]


class Engine:
    """
    Thin orchestration layer that glues together:
      - document loading (loader.read_document),
      - line normalization (normalize.split_lines),
      - duplicate search (finder.find_duplicate_groups),
      - per-line annotation (annotate.annotate).

    Public API (used by CLI/Flask):
      * analyze(text):      detect duplicates in an in-memory document
      * analyze_file(path): read a document and analyze it

    Every call builds its own lines and marker table, so one Engine may be
    shared between threads.
    """

    def __init__(self, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

    # /* ~~~ Detect duplicate blocks in a text and flag every physical line ~~~ */
    def analyze(self, text: str, *, source: Optional[str] = None) -> Report:
        lines = split_lines(text)
        groups = find_duplicate_groups(non_empty(lines), len(lines))
        report = Report(source=source, lines=annotate(lines, groups), groups=groups)
        log.info(
            "Analyzed %s: lines=%d groups=%d highlighted=%d",
            source or "<text>", len(lines), len(groups), report.duplicated_line_count,
        )
        return report

    # /* ~~~ Read a document from disk, then analyze it ~~~ */
    def analyze_file(self, path: str | os.PathLike, *, encoding: Optional[str] = None) -> Report:
        text = read_document(path, encoding=encoding)
        return self.analyze(text, source=os.fspath(path))
