#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Environment knobs for the feed channel metadata.

Env knobs (optional):
  BIBLEPLAN_SITE_URL, BIBLEPLAN_FEED_TITLE, BIBLEPLAN_ATTRIBUTION,
  BIBLEPLAN_WEBMASTER, BIBLEPLAN_FEED_TTL, BIBLEPLAN_LANGUAGE
"""

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    """Return an integer from the environment or ``default`` on failure."""

    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"[WARN] Invalid {name}={raw!r}; falling back to {default}")
        return default


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


@dataclass(frozen=True)
class FeedConfig:
    site_url: str = "https://www.bibleplanfeed.com/"
    title: str = "Bible Plan Feed"
    attribution: str = "github.com/tryonlinux - Not affiliated with Bible Gateway"
    webmaster: str = "github.com/tryonlinux"
    ttl: int = 60
    language: str = "en"

    @property
    def description(self) -> str:
        host = self.site_url.split("://", 1)[-1].rstrip("/")
        return f"Go to {host} for more information."

    @property
    def image_url(self) -> str:
        return f"{self.site_url.rstrip('/')}/icon.png"


def load_config() -> FeedConfig:
    """Build a :class:`FeedConfig` from the current environment."""

    defaults = FeedConfig()
    site_url = _env_str("BIBLEPLAN_SITE_URL", defaults.site_url)
    if not site_url.endswith("/"):
        site_url += "/"
    ttl = _env_int("BIBLEPLAN_FEED_TTL", defaults.ttl)
    if ttl <= 0:
        print(f"[WARN] BIBLEPLAN_FEED_TTL must be positive; falling back to {defaults.ttl}")
        ttl = defaults.ttl
    return FeedConfig(
        site_url=site_url,
        title=_env_str("BIBLEPLAN_FEED_TITLE", defaults.title),
        attribution=_env_str("BIBLEPLAN_ATTRIBUTION", defaults.attribution),
        webmaster=_env_str("BIBLEPLAN_WEBMASTER", defaults.webmaster),
        ttl=ttl,
        language=_env_str("BIBLEPLAN_LANGUAGE", defaults.language),
    )
