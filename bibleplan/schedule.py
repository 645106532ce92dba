# -*- coding: utf-8 -*-
"""Reading schedule: which chapters are due by today, as feed items."""

import datetime
import math
from urllib.parse import quote

from bibleplan import MAX_CHAPTERS
from bibleplan.catalog import catalog_for
from bibleplan.sanitize import today_utc

READING_SEARCH_URL = "https://www.biblegateway.com/passage/?search="
ITEM_AUTHOR = "Bible Gateway"


def days_between(start: datetime.date, today: datetime.date = None) -> int:
    """Whole calendar days between ``start`` and ``today``, in either direction."""

    today = today or today_utc()
    return abs((today - start).days)


def reading_day(index: int, chapters_per_day: int) -> int:
    """1-based reading day of the chapter at zero-based ``index``."""

    return math.ceil((index + 1) / chapters_per_day)


def build_reading_url(book: str, chapter: int, translation: str) -> str:
    # translation is a registry code, so only the book needs quoting
    return f"{READING_SEARCH_URL}{quote(book, safe='')}%20{chapter}&version={translation}"


def _publish_date(today: datetime.date, days_back: int) -> datetime.datetime:
    day = today - datetime.timedelta(days=days_back)
    return datetime.datetime(day.year, day.month, day.day, tzinfo=datetime.timezone.utc)


def build_feed_items(plan: str, translation: str, start_date: datetime.date,
                     chapters_per_day: int, today: datetime.date = None) -> list:
    """Return the feed items for every chapter due between ``start_date`` and ``today``.

    Items are dicts with ``title``, ``description``, ``link``, ``author`` and
    ``date`` keys, in reading order. Day ``n`` of the plan is dated
    ``today - (1 + elapsed - n)`` so the latest reading day lands on
    yesterday. The list never holds more than ``MAX_CHAPTERS`` entries nor
    more than the plan's catalog.
    """

    today = today or today_utc()
    elapsed = days_between(start_date, today)
    count = min(elapsed * chapters_per_day, MAX_CHAPTERS)

    items = []
    for index, ref in enumerate(catalog_for(plan)[:count]):
        day = reading_day(index, chapters_per_day)
        items.append({
            "title": f"{ref.book} {ref.chapter}",
            "description": f"Day {day} of {plan.upper()} plan in {translation.upper()}",
            "link": build_reading_url(ref.book, ref.chapter, translation),
            "author": ITEM_AUTHOR,
            "date": _publish_date(today, 1 + (elapsed - day)),
        })
    return items


def format_start_date(date: datetime.date) -> str:
    return date.strftime("%Y%m%d")
