from __future__ import annotations
import argparse, json, sys
from dupfinder.engine import Engine
from dupfinder import config as CFG
from dupfinder.exceptions import DupHighlightError
from .render import render_report, write_report

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="dup-highlight", description="Highlighter of duplicate code lines.")
    p.add_argument("input", metavar="INPUT", help="Sets the input file to analyze")
    p.add_argument("-o", "--output", default=None, help=f"HTML report path (default: $DUP_HIGHLIGHT_OUTPUT or {CFG.DEFAULT_OUTPUT})")
    p.add_argument("--lang", default=None, help="Code class for the report (default: guessed from INPUT suffix)")
    p.add_argument("--encoding", default=None, help="Input text encoding")
    p.add_argument("--json", action="store_true", help="Emit groups and flags as JSON on stdout instead of HTML")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    output = args.output or CFG.output_path()

    eng = Engine(verbose=args.verbose)
    try:
        report = eng.analyze_file(args.input, encoding=args.encoding)
        if args.json:
            print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
            return 0
        write_report(render_report(report, language=args.lang), output)
    except DupHighlightError as e:
        print(f"dup-highlight: {e}", file=sys.stderr)
        return 1

    print(f"{len(report.groups)} duplicate group(s), "
          f"{report.duplicated_line_count} line(s) highlighted -> {output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
