import logging
import re
from datetime import date
from enum import StrEnum

import httpx

from gitgraphed.api.schemas.contributions import ContributionDay
from gitgraphed.api.schemas.contributions import ContributionGraph
from gitgraphed.dates import day_of_week
from gitgraphed.dates import week_of_year
from gitgraphed.extractor import RawDay
from gitgraphed.extractor import extract_day_fragments
from gitgraphed.extractor import extract_total_contributions
from gitgraphed.github_scraper import fetch_contributions_page
from gitgraphed.settings import Settings


logger = logging.getLogger(__name__)

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ASCII_INT = re.compile(r"[+-]?[0-9]+")
NO_CONTRIBUTIONS = "No contributions"


class ContributionLevel(StrEnum):
    NONE = "none"
    FIRST_QUARTILE = "first_quartile"
    SECOND_QUARTILE = "second_quartile"
    THIRD_QUARTILE = "third_quartile"
    FOURTH_QUARTILE = "fourth_quartile"


LEVEL_NAMES = {
    0: ContributionLevel.NONE,
    1: ContributionLevel.FIRST_QUARTILE,
    2: ContributionLevel.SECOND_QUARTILE,
    3: ContributionLevel.THIRD_QUARTILE,
    4: ContributionLevel.FOURTH_QUARTILE,
}


def contribution_level_name(level: int) -> str:
    """Map a heatmap level in range 0..4 to its quartile label.

    Levels outside the table map to an empty string.
    """

    name = LEVEL_NAMES.get(level)
    return name.value if name is not None else ""


def parse_iso_date(raw_date: str) -> date | None:
    if not ISO_DATE.fullmatch(raw_date):
        return None
    try:
        return date.fromisoformat(raw_date)
    except ValueError:
        return None


def parse_int(text: str) -> int | None:
    """Parse an optionally signed run of ASCII digits.

    Unicode digits and underscore separators are rejected, unlike int().
    """

    if not ASCII_INT.fullmatch(text):
        return None
    return int(text)


def parse_count(text: str) -> int:
    """Read the count from cell text such as "5 contributions"."""

    text = text.strip()
    if not text or text == NO_CONTRIBUTIONS:
        return 0
    count = parse_int(text.split()[0])
    if count is None:
        return 0
    return max(count, 0)


def parse_level(raw_level: str) -> int:
    level = parse_int(raw_level)
    return level if level is not None else 0


def normalize_day(raw_day: RawDay) -> ContributionDay | None:
    """Turn one extracted cell into a day record.

    Returns None when the date cannot be parsed; such cells are noise.
    """

    parsed_day = parse_iso_date(raw_day.date)
    if parsed_day is None:
        return None

    level = parse_level(raw_day.level)
    return ContributionDay(
        date=parsed_day,
        count=parse_count(raw_day.text),
        level=level,
        day_of_week=day_of_week(parsed_day),
        week_of_year=week_of_year(parsed_day),
        contrib_level=contribution_level_name(level),
    )


def build_contribution_graph(username: str, year: int, html: str) -> ContributionGraph:
    """Extract and normalize calendar data from a contributions page.

    The total is taken from the summary phrase as-is and is not checked
    against the sum of the day counts.
    """

    raw_days = extract_day_fragments(html)
    days: list[ContributionDay] = []
    for raw_day in raw_days:
        day = normalize_day(raw_day)
        if day is None:
            continue
        days.append(day)

    logger.debug("matched=%d skipped=%d", len(raw_days), len(raw_days) - len(days))
    if not raw_days:
        logger.warning("No contribution cells found for %s in %d", username, year)

    return ContributionGraph(
        username=username,
        total_contributions=extract_total_contributions(html),
        years=[year],
        days=days,
    )


def get_contribution_graph(
    username: str,
    year: int,
    app_settings: Settings,
    transport: httpx.BaseTransport | None = None,
) -> ContributionGraph:
    """Fetch one year of a user's contribution calendar and parse it."""

    html = fetch_contributions_page(
        username=username,
        year=year,
        app_settings=app_settings,
        transport=transport,
    )
    return build_contribution_graph(username=username, year=year, html=html)
