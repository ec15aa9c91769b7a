# dupreport/render.py
"""
HTML rendering of a duplicate report.

Uses the same Jinja2 templates folder as the Flask UI. Autoescaping is on for
.html templates, so raw line text can never turn into markup.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from dupfinder.config import DEFAULT_LANGUAGE, HIGHLIGHT_CLASS, LANGUAGE_BY_SUFFIX
from dupfinder.engine import Report
from dupfinder.exceptions import ReportWriteError

log = logging.getLogger(__name__)

_env = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    autoescape=select_autoescape(["html"]),
)

def language_for(path: str | os.PathLike | None) -> str:
    """Code class for the <code> element, guessed from the file suffix."""
    if not path:
        return DEFAULT_LANGUAGE
    return LANGUAGE_BY_SUFFIX.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)

def render_report(report: Report, *, language: Optional[str] = None) -> str:
    template = _env.get_template("report.html")
    return template.render(
        report=report,
        lines=report.lines,
        language=language or language_for(report.source),
        hl=HIGHLIGHT_CLASS,
    )

def write_report(html: str, path: str | os.PathLike) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        raise ReportWriteError(f"cannot write {os.fspath(path)!s}: {e}") from e
    log.info("Wrote report to %s", os.fspath(path))
