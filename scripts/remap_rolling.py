#!/usr/bin/env python3
"""Remap a github-painter template.sh into the profile's rolling 53-week grid.

Dates are moved by (week column, weekday row), so the drawing keeps its shape.
Every commit date is emitted as 12:00:00 GMT+0000 (UTC).

Usage:
  python3 scripts/remap_rolling.py [--align=left|center|right] template.sh > paint.sh

Env (or .env):
  ROLLING_PAINTER_ALIGN, ROLLING_PAINTER_SOURCE_YEAR, ROLLING_PAINTER_RULES
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

from rolling_painter.config import RemapConfig, parse_alignment
from rolling_painter.template import remap_template


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("template", help="github-painter template.sh")
    ap.add_argument("--align", default=None, help="left|center|right (default: left, or ROLLING_PAINTER_ALIGN)")
    ap.add_argument("--source-year", type=int, default=None, help="Year the template was drawn in (default: 2019)")
    ap.add_argument("--rules", default=None, help="Optional JSON list of extra [regex, replacement] strip rules")
    ap.add_argument("--no-sanitize", action="store_true", help="Keep git init/remote/pull and github_painter dir lines")
    ap.add_argument("--out", default=None, help="Write here instead of stdout")
    args = ap.parse_args(argv)

    try:
        cfg = RemapConfig.from_env()
        align = parse_alignment(args.align) if args.align is not None else cfg.align
    except ValueError as e:
        raise SystemExit(str(e))

    source_year = args.source_year if args.source_year is not None else cfg.source_year
    rules_path = Path(args.rules).expanduser() if args.rules else cfg.rules_path

    path = Path(args.template).expanduser()
    if not path.exists():
        raise SystemExit(f"Missing template: {path}")
    text = path.read_text(encoding="utf-8")

    # Captured once so every decision in this run sees the same "today".
    today = datetime.now(timezone.utc).date()

    try:
        result = remap_template(
            text,
            today=today,
            align=align,
            source_year=source_year,
            sanitize=not args.no_sanitize,
            rules_path=rules_path,
        )
    except ValueError as e:  # RemapError is a ValueError
        raise SystemExit(str(e))

    if args.out:
        outp = Path(args.out)
        outp.parent.mkdir(parents=True, exist_ok=True)
        outp.write_text(result.text, encoding="utf-8")
    else:
        sys.stdout.write(result.text)

    if result.passthrough:
        print(f"WARN: no {source_year} commit dates in {path.name}; passed through", file=sys.stderr)
    else:
        print(f"OK: {result.anchors} commit dates, shift={result.shift} columns, align={align}", file=sys.stderr)


if __name__ == "__main__":
    main()
