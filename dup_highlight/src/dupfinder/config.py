from __future__ import annotations
import os

# text encoding used when reading input documents
ENCODING: str = "utf-8"

# fixed, well-known location for the rendered report
DEFAULT_OUTPUT: str = "/tmp/dup-report.html"

# DUP_HIGHLIGHT_OUTPUT, when set, replaces DEFAULT_OUTPUT
def output_path() -> str:
    return os.environ.get("DUP_HIGHLIGHT_OUTPUT", DEFAULT_OUTPUT)

# /* ~~~ windows made only of these (plus whitespace) are never reported ~~~ */
BRACE_CHARS = frozenset("{}")

# a pattern must occur at least this many times to become a group
MIN_OCCURRENCES: int = 2

# CSS class put on highlighted lines in the HTML report
HIGHLIGHT_CLASS: str = "hl"

# code class for the <code> element when the language cannot be guessed
DEFAULT_LANGUAGE: str = "rust"

LANGUAGE_BY_SUFFIX = {
    ".rs": "rust",
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".go": "go",
    ".java": "java",
    ".kt": "kotlin",
    ".rb": "ruby",
    ".sh": "bash",
}

# Unicode White_Space property; str.isspace() also accepts \x1c-\x1f, which this leaves out
WHITESPACE: str = "\t\n\x0b\x0c\r \x85\xa0" + "".join(
    chr(cp) for cp in (0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000)
)
