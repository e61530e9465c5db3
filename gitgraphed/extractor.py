"""Pattern-based extraction of contribution data from the calendar HTML.

The page is scanned as plain text. Everything that depends on the
markup shape lives here, so a markup parser can replace these two
functions without touching normalization or fetching.
"""

import re
from typing import NamedTuple


TOTAL_PATTERN = re.compile(r"([0-9]+) contributions in the last year")

# GitHub emits data-date before data-level on each calendar cell.
DAY_PATTERN = re.compile(
    r'data-date="([^"]+)"[^>]+data-level="([^"]+)"[^>]*>([^<]*)</td>'
)


class RawDay(NamedTuple):
    """Untyped fields of one calendar cell, as found in the page."""

    date: str
    level: str
    text: str


def extract_total_contributions(html: str) -> int:
    """Return the yearly total from the summary phrase, or 0 if absent."""

    match = TOTAL_PATTERN.search(html)
    if match is None:
        return 0
    return int(match.group(1))


def extract_day_fragments(html: str) -> list[RawDay]:
    """Return every calendar cell in document order."""

    return [RawDay(*groups) for groups in DAY_PATTERN.findall(html)]
