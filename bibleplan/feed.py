#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Render the reading-plan feed as an RSS 2.0 document."""

import datetime
from email.utils import format_datetime
from xml.sax.saxutils import escape

from bibleplan.config import FeedConfig
from bibleplan.sanitize import (
    sanitize_chapters,
    sanitize_date,
    sanitize_plan,
    sanitize_translation,
)
from bibleplan.schedule import build_feed_items, format_start_date

FEED_CONTENT_TYPE = "application/rss+xml"

# Headers for whatever HTTP layer serves the document.
FEED_HEADERS = {
    "Content-Type": FEED_CONTENT_TYPE,
    "Cache-Control": "public, max-age=3600",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value) -> str:
    """Replace ``& < > " '`` with their XML entities."""

    return escape(str(value if value is not None else ""), _QUOTE_ENTITIES)


def format_rss_date(value: datetime.datetime) -> str:
    """Return RFC 822 formatted date for RSS."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(value.astimezone(datetime.timezone.utc), usegmt=True)


def feed_path(plan: str, translation: str, start_date: datetime.date, chapters: int) -> str:
    return f"rssbible/{plan}/{translation}/{format_start_date(start_date)}/{chapters}/feed.rss"


def build_feed_metadata(plan: str, translation: str, start_date: datetime.date,
                        chapters: int, config: FeedConfig = None,
                        now: datetime.datetime = None) -> dict:
    """Channel metadata for an already-sanitized request.

    ``feed_url`` is rebuilt from the sanitized values, so it may differ from
    the path that was requested.
    """

    config = config or FeedConfig()
    return {
        "title": config.title,
        "description": config.description,
        "site_url": config.site_url,
        "feed_url": config.site_url + feed_path(plan, translation, start_date, chapters),
        "image_url": config.image_url,
        "managing_editor": config.attribution,
        "webmaster": config.webmaster,
        "copyright": config.attribution,
        "language": config.language,
        "pub_date": now or datetime.datetime.now(datetime.timezone.utc),
        "ttl": int(config.ttl),
    }


_ITEM_TEMPLATE = """
    <item>
      <title>{title}</title>
      <description>{description}</description>
      <link>{link}</link>
      <guid isPermaLink="true">{link}</guid>
      <pubDate>{pub_date}</pubDate>
      <author>{author}</author>
    </item>"""

_FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>{title}</title>
    <description>{description}</description>
    <link>{site_url}</link>
    <atom:link href="{feed_url}" rel="self" type="application/rss+xml"/>
    <language>{language}</language>
    <managingEditor>{managing_editor}</managingEditor>
    <webMaster>{webmaster}</webMaster>
    <copyright>{copyright}</copyright>
    <pubDate>{pub_date}</pubDate>
    <ttl>{ttl}</ttl>
    <image>
      <url>{image_url}</url>
      <title>{title}</title>
      <link>{site_url}</link>
    </image>{items}
  </channel>
</rss>
"""


def render_item(item: dict) -> str:
    return _ITEM_TEMPLATE.format(
        title=escape_xml(item.get("title")),
        description=escape_xml(item.get("description")),
        link=escape_xml(item.get("link")),
        pub_date=format_rss_date(item["date"]),
        author=escape_xml(item.get("author")),
    )


def render_feed(metadata: dict, items) -> str:
    """Serialize channel ``metadata`` and ``items`` (in the given order)."""

    fields = {
        key: escape_xml(metadata.get(key))
        for key in (
            "title", "description", "site_url", "feed_url", "image_url",
            "managing_editor", "webmaster", "copyright", "language",
        )
    }
    return _FEED_TEMPLATE.format(
        pub_date=format_rss_date(metadata["pub_date"]),
        ttl=int(metadata["ttl"]),
        items="".join(render_item(item) for item in items),
        **fields,
    )


def build_feed(plan, translation, start_date, chapters, config: FeedConfig = None,
               today: datetime.date = None, now: datetime.datetime = None) -> str:
    """Sanitize raw path segments, compute the schedule and render the feed."""

    plan = sanitize_plan(plan)
    translation = sanitize_translation(translation)
    start = sanitize_date(start_date, today=today)
    chapters_per_day = sanitize_chapters(chapters)

    items = build_feed_items(plan, translation, start, chapters_per_day, today=today)
    metadata = build_feed_metadata(plan, translation, start, chapters_per_day, config, now)
    return render_feed(metadata, items)
