# -*- coding: utf-8 -*-
"""Static book/chapter catalogs and the translation registry."""

import json
import pathlib
from functools import lru_cache
from typing import NamedTuple

DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"
BOOKS_JSON = DATA_DIR / "books.json"
TRANSLATIONS_JSON = DATA_DIR / "translations.json"


class ChapterRef(NamedTuple):
    book: str
    chapter: int


def _load_json(path: pathlib.Path):
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def build_chapter_list(books) -> tuple:
    """Expand ``{"name", "chapters"}`` book records into ordered chapter references."""

    chapters = []
    for book in books:
        for chapter in range(1, int(book["chapters"]) + 1):
            chapters.append(ChapterRef(book["name"], chapter))
    return tuple(chapters)


@lru_cache(maxsize=None)
def load_catalogs() -> dict:
    """Return the ``ot``, ``nt`` and ``full`` chapter catalogs, read once per process."""

    books = _load_json(BOOKS_JSON)
    old = build_chapter_list(b for b in books if b["testament"] == "ot")
    new = build_chapter_list(b for b in books if b["testament"] == "nt")
    return {"ot": old, "nt": new, "full": old + new}


def catalog_for(plan: str) -> tuple:
    catalogs = load_catalogs()
    return catalogs.get(plan) or catalogs["full"]


@lru_cache(maxsize=None)
def load_translations() -> tuple:
    """Return the registry as ordered ``{"Code", "Description"}`` records."""

    return tuple(
        {"Code": str(entry["Code"]), "Description": str(entry.get("Description", ""))}
        for entry in _load_json(TRANSLATIONS_JSON)
    )


def find_translation(code: str):
    """Return the registry record whose code equals ``code`` exactly, or ``None``."""

    for entry in load_translations():
        if entry["Code"] == code:
            return entry
    return None
