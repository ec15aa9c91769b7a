"""
Document loading for the duplicate finder.

Reads one input file as text. Any failure to open or decode it is fatal for
the run: a report over a partial document would be misleading, so there is no
retry and no `errors="ignore"` fallback.
"""

from __future__ import annotations
import logging
import os
from .config import ENCODING
from .exceptions import DocumentReadError

log = logging.getLogger(__name__)

def read_document(path: str | os.PathLike, encoding: str | None = None) -> str:
    """Return the whole text of `path`; raise DocumentReadError if it cannot be read."""
    enc = encoding or ENCODING
    try:
        with open(path, "r", encoding=enc, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"cannot read {os.fspath(path)!s}: {e}") from e
    log.info("Read %s (%d chars)", os.fspath(path), len(text))
    return text
