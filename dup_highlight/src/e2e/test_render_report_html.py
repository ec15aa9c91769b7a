# src/e2e/test_render_report_html.py

from pathlib import Path
import pytest

from dupfinder.engine import Engine
from dupfinder.exceptions import ReportWriteError
from dupreport import mark_dup_lines
from dupreport.render import render_report, write_report, language_for


def test_marks_duplicate_lines():
    inp = """
        a a
        a a
        b
        """
    outp = (
        '<code class="rust">\n\n'
        '<span class="hl">        a a</span>\n'
        '<span class="hl">        a a</span>\n'
        "        b\n"
        "        \n"
        "</code>"
    )
    assert outp in mark_dup_lines(inp)


def test_escapes_markup_in_line_text():
    s = """
        a
        a<div>
        """
    html = mark_dup_lines(s)
    assert "<div>" not in html
    assert "a&lt;div&gt;" in html


def test_escapes_highlighted_lines_too():
    html = mark_dup_lines("x = '<b>&';\nx = '<b>&';")
    assert "<b>" not in html
    assert '<span class="hl">x = &#39;&lt;b&gt;&amp;&#39;;</span>' in html


def test_language_class_from_suffix_and_override():
    assert language_for("main.py") == "python"
    assert language_for("lib.RS") == "rust"
    assert language_for("notes.unknown") == "rust"
    assert language_for(None) == "rust"

    report = Engine().analyze("a\na", source="x.go")
    assert '<code class="go">' in render_report(report)
    assert '<code class="c">' in render_report(report, language="c")


def test_summary_counts_in_report():
    html = render_report(Engine().analyze("a\nb\na\nb\nc"))
    assert "1 duplicate group(s)" in html
    assert "4 line(s) highlighted" in html


def test_write_report(tmp_path: Path):
    out = tmp_path / "r.html"
    write_report("<p>ok</p>", out)
    assert out.read_text(encoding="utf-8") == "<p>ok</p>"


def test_write_report_to_missing_dir_fails(tmp_path: Path):
    with pytest.raises(ReportWriteError):
        write_report("x", tmp_path / "missing" / "r.html")
