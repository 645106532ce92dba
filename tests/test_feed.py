import datetime
import re

import feedparser

from bibleplan.config import FeedConfig
from bibleplan.feed import (
    FEED_HEADERS,
    build_feed,
    build_feed_metadata,
    escape_xml,
    format_rss_date,
    render_feed,
)
from bibleplan.schedule import build_feed_items

TODAY = datetime.date(2026, 10, 19)
NOW = datetime.datetime(2026, 10, 19, 8, 30, tzinfo=datetime.timezone.utc)
FIVE_DAYS_AGO = "20261014"

ITEM_TITLE_RE = re.compile(r"<item>[\s\S]*?<title>(.*?)</title>[\s\S]*?</item>")


def _metadata(**overrides):
    meta = build_feed_metadata("ot", "ESV", datetime.date(2026, 10, 14), 1, FeedConfig(), NOW)
    meta.update(overrides)
    return meta


def test_escape_xml_replaces_reserved_characters():
    assert escape_xml("<a href=\"x\">Tom & Jerry's</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
    )
    assert escape_xml(None) == ""
    assert escape_xml(60) == "60"


def test_format_rss_date_is_rfc822_gmt():
    value = datetime.datetime(2026, 10, 18, tzinfo=datetime.timezone.utc)
    assert format_rss_date(value) == "Sun, 18 Oct 2026 00:00:00 GMT"
    assert format_rss_date(datetime.datetime(2026, 10, 14)) == "Wed, 14 Oct 2026 00:00:00 GMT"


def test_metadata_feed_url_built_from_sanitized_values():
    meta = build_feed_metadata("nt", "NIV", datetime.date(2026, 1, 2), 3, FeedConfig(), NOW)

    assert meta["feed_url"] == "https://www.bibleplanfeed.com/rssbible/nt/NIV/20260102/3/feed.rss"
    assert meta["site_url"] == "https://www.bibleplanfeed.com/"
    assert meta["image_url"] == "https://www.bibleplanfeed.com/icon.png"
    assert meta["description"] == "Go to www.bibleplanfeed.com for more information."
    assert meta["ttl"] == 60
    assert meta["pub_date"] == NOW


def test_rendered_feed_has_rss_structure():
    xml = build_feed("ot", "esv", FIVE_DAYS_AGO, "1", today=TODAY, now=NOW)

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">' in xml
    assert "<title>Bible Plan Feed</title>" in xml
    assert "<ttl>60</ttl>" in xml
    assert "<pubDate>Mon, 19 Oct 2026 08:30:00 GMT</pubDate>" in xml
    assert (
        '<atom:link href="https://www.bibleplanfeed.com/rssbible/ot/ESV/20261014/1/feed.rss" '
        'rel="self" type="application/rss+xml"/>'
    ) in xml
    assert "&amp;version=ESV" in xml
    assert '<guid isPermaLink="true">' in xml
    assert xml.rstrip().endswith("</rss>")


def test_item_titles_round_trip_in_order():
    items = build_feed_items("full", "NIV", datetime.date(2026, 10, 9), 3, today=TODAY)
    xml = render_feed(_metadata(), items)

    assert ITEM_TITLE_RE.findall(xml) == [item["title"] for item in items]
    assert xml.count("<item>") == 30


def test_empty_item_list_renders_valid_feed():
    xml = build_feed("full", "ESV", "20261019", "5", today=TODAY, now=NOW)

    assert "<item>" not in xml
    parsed = feedparser.parse(xml)
    assert parsed.version == "rss20"
    assert parsed.entries == []
    assert parsed.feed.title == "Bible Plan Feed"


def test_feedparser_reads_items():
    xml = build_feed("nt", "kjv", FIVE_DAYS_AGO, "1", today=TODAY, now=NOW)
    parsed = feedparser.parse(xml)

    assert parsed.version == "rss20"
    assert [entry.title for entry in parsed.entries] == [f"Matthew {n}" for n in range(1, 6)]
    first = parsed.entries[0]
    assert first.link == "https://www.biblegateway.com/passage/?search=Matthew%201&version=KJV"
    assert first.id == first.link
    assert first.summary == "Day 1 of NT plan in KJV"
    assert first.published == "Wed, 14 Oct 2026 00:00:00 GMT"


def test_markup_in_fields_is_escaped():
    hostile = "<script>alert('x')</script> & \"quoted\""
    items = [{
        "title": hostile,
        "description": hostile,
        "link": "https://example.com/?a=1&b=<2>",
        "author": hostile,
        "date": datetime.datetime(2026, 10, 18, tzinfo=datetime.timezone.utc),
    }]
    xml = render_feed(_metadata(title=hostile, copyright=hostile), items)

    assert "<script>" not in xml
    assert "'x'" not in xml
    assert '"quoted"' not in xml
    assert "&lt;script&gt;alert(&apos;x&apos;)&lt;/script&gt; &amp; &quot;quoted&quot;" in xml
    assert "https://example.com/?a=1&amp;b=&lt;2&gt;" in xml


def test_bad_segments_still_render_a_feed():
    xml = build_feed("xyz", "bogus", "20261332", "100", today=TODAY, now=NOW)

    assert "rssbible/full/ESV/20261019/1/feed.rss" in xml
    assert "<item>" not in xml


def test_custom_config_used_for_channel():
    config = FeedConfig(site_url="https://feeds.example.org/", title="My Plan", ttl=30)
    xml = build_feed("ot", "esv", FIVE_DAYS_AGO, "1", config=config, today=TODAY, now=NOW)

    assert "<title>My Plan</title>" in xml
    assert "<ttl>30</ttl>" in xml
    assert "<url>https://feeds.example.org/icon.png</url>" in xml
    assert "https://feeds.example.org/rssbible/ot/ESV/20261014/1/feed.rss" in xml


def test_feed_headers():
    assert FEED_HEADERS["Content-Type"] == "application/rss+xml"
    assert FEED_HEADERS["Cache-Control"] == "public, max-age=3600"
