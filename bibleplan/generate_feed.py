#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bible Plan Feed – write one reading-plan feed

Takes a request path in the form:
    /rssbible/{plan}/{translation}/{YYYYMMDD}/{chapters}/feed.rss

Run:
  python3 -m bibleplan.generate_feed /rssbible/ot/esv/20260101/2/feed.rss -o feed.rss
Env knobs (optional): see bibleplan/config.py
"""

import argparse
import datetime
import pathlib
import re
import sys

if __package__ in (None, ""):
    sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from bibleplan.config import load_config
from bibleplan.feed import build_feed
from bibleplan.sanitize import (
    sanitize_chapters,
    sanitize_date,
    sanitize_plan,
    sanitize_translation,
    today_utc,
)
from bibleplan.schedule import format_start_date

FEED_PATH_RE = re.compile(r"^/rssbible/([^/]+)/([^/]+)/([^/]+)/([^/]+)/feed\.rss$")


def parse_feed_path(path: str):
    """Return ``(plan, translation, start_date, chapters)`` raw segments, or ``None``."""

    m = FEED_PATH_RE.match(path or "")
    if not m:
        return None
    return m.groups()


def _warn_replaced(segments, today: datetime.date) -> None:
    plan, translation, start, chapters = segments
    checks = (
        ("plan", plan, sanitize_plan(plan)),
        ("translation", translation, sanitize_translation(translation)),
        ("start date", start, format_start_date(sanitize_date(start, today=today))),
        ("chapters", chapters, str(sanitize_chapters(chapters))),
    )
    for name, raw, clean in checks:
        # translation codes are case-insensitive
        if raw != clean and raw.upper() != clean:
            print(f"[WARN] Invalid {name} {raw!r}; using {clean}", file=sys.stderr)


def _parse_today(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Write a Bible reading-plan RSS feed.")
    parser.add_argument("path", help="/rssbible/{plan}/{translation}/{YYYYMMDD}/{chapters}/feed.rss")
    parser.add_argument("-o", "--output", help="file to write (default: stdout)")
    parser.add_argument("--today", type=_parse_today, help="override today's date (YYYY-MM-DD)")
    args = parser.parse_args(argv)

    segments = parse_feed_path(args.path)
    if segments is None:
        print("ERROR: not a feed path:", args.path, file=sys.stderr)
        return 2

    today = args.today or today_utc()
    _warn_replaced(segments, today)
    xml = build_feed(*segments, config=load_config(), today=today)

    if not args.output:
        sys.stdout.write(xml)
        return 0

    out = pathlib.Path(args.output)
    out.write_text(xml, encoding="utf-8")
    print(f"[FEED] {args.path} -> {out} ({xml.count('<item>')} items)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
