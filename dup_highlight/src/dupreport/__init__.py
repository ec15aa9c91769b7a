"""Public API for rendering duplicate-line reports."""
from __future__ import annotations
from typing import Optional
from dupfinder.engine import Engine
from .render import render_report, write_report, language_for

def mark_dup_lines(text: str, *, language: Optional[str] = None) -> str:
    """Analyze `text` and return the rendered HTML report."""
    return render_report(Engine().analyze(text), language=language)

__all__ = ["mark_dup_lines", "render_report", "write_report", "language_for"]
