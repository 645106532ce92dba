# -*- coding: utf-8 -*-
"""Turn raw feed-path segments into safe values.

Every function here is total: bad input is replaced by a default, never
rejected, so a feed can always be rendered.
"""

import datetime

from bibleplan import PLANS, DEFAULT_PLAN, DEFAULT_TRANSLATION, DEFAULT_CHAPTERS
from bibleplan.catalog import find_translation


def today_utc() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


def sanitize_plan(raw) -> str:
    return raw if raw in PLANS else DEFAULT_PLAN


def sanitize_date(raw, today: datetime.date = None) -> datetime.date:
    """Parse ``YYYYMMDD``; anything else (including Feb 30) means today."""

    fallback = today or today_utc()
    if not isinstance(raw, str) or len(raw) != 8 or not raw.isascii() or not raw.isdigit():
        return fallback
    year, month, day = int(raw[:4]), int(raw[4:6]), int(raw[6:])
    if not (1900 <= year <= 2100 and 1 <= month <= 12 and 1 <= day <= 31):
        return fallback
    try:
        return datetime.date(year, month, day)
    except ValueError:
        # day past the end of the month
        return fallback


def sanitize_translation(raw) -> str:
    if not isinstance(raw, str):
        return DEFAULT_TRANSLATION
    found = find_translation(raw.upper())
    return found["Code"] if found else DEFAULT_TRANSLATION


def sanitize_chapters(raw) -> int:
    # Length check comes first so huge values are never parsed.
    if not isinstance(raw, str) or len(raw) > 2:
        return DEFAULT_CHAPTERS
    try:
        value = int(raw, 10)
    except ValueError:
        return DEFAULT_CHAPTERS
    if value < 1 or value > 99:
        return DEFAULT_CHAPTERS
    return value
