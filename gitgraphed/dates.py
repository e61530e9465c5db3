from datetime import date


def day_of_week(day: date) -> int:
    """Return the weekday index with Sunday as 0 and Saturday as 6."""

    return (day.weekday() + 1) % 7


def week_of_year(day: date) -> int:
    """Return the ISO-8601 week number (1..53)."""

    return day.isocalendar().week
