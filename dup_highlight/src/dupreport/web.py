from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response, render_template
from dupfinder.engine import Engine
from dupfinder.config import DEFAULT_LANGUAGE, LANGUAGE_BY_SUFFIX
from .render import render_report

app = Flask(__name__)
_engine: Engine = Engine()

log = logging.getLogger(__name__)

def _submitted_text() -> str | None:
    if request.is_json:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return None
        text = body.get("text")
        return text if isinstance(text, str) else None
    return request.form.get("text")

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})

@app.post("/api/duplicates")
def api_duplicates():
    text = _submitted_text()
    if text is None:
        return jsonify({"error": "missing 'text'"}), 400
    report = _engine.analyze(text)
    return jsonify(report.to_dict())

# ---------- UI ----------
@app.get("/")
def home():
    languages = sorted(set(LANGUAGE_BY_SUFFIX.values()) | {DEFAULT_LANGUAGE})
    return render_template("index.html", languages=languages, default_language=DEFAULT_LANGUAGE)

@app.post("/report")
def report():
    text = request.form.get("text")
    if text is None:
        return Response("missing 'text'", status=400, mimetype="text/plain")
    # browsers submit textarea content with CRLF line breaks
    rep = _engine.analyze(text.replace("\r\n", "\n"))
    html = render_report(rep, language=request.form.get("lang") or None)
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI for the duplicate highlighter")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(verbose=args.verbose)
    log.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
