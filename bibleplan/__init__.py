"""Bible reading-plan RSS feed generator."""

# Plan tokens accepted in a feed path; "full" is the fallback.
PLANS = ("ot", "nt", "full")
DEFAULT_PLAN = "full"

DEFAULT_TRANSLATION = "ESV"
DEFAULT_CHAPTERS = 1

# Chapters in the full Bible; no feed ever lists more items than this.
MAX_CHAPTERS = 1189

__all__ = [
    "PLANS",
    "DEFAULT_PLAN",
    "DEFAULT_TRANSLATION",
    "DEFAULT_CHAPTERS",
    "MAX_CHAPTERS",
]
