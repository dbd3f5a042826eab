# dates.py
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

import dateparser

from .vocabulary import MONTHS, WEEKDAYS


def month_number(name: str) -> Optional[int]:
    """Return the month number for a full or abbreviated month name."""
    return MONTHS.get(name.lower().rstrip("."))


def resolve_month_day(
    month_name: str,
    day: int,
    today: date,
    year: Optional[int] = None,
    roll_past_dates: bool = False,
) -> Optional[date]:
    """Build a calendar date from a month name and a day number.

    The year defaults to the year of ``today``. With ``roll_past_dates``
    a date without an explicit year that already passed moves to the
    next year. Unknown months and impossible days give None.
    """
    month = month_number(month_name)
    if month is None:
        return None

    explicit_year = year is not None
    try:
        resolved = date(year if explicit_year else today.year, month, day)
    except ValueError:
        return None

    if roll_past_dates and not explicit_year and resolved < today:
        try:
            resolved = resolved.replace(year=resolved.year + 1)
        except ValueError:
            # Feb 29 has no counterpart next year
            return None
    return resolved


def next_weekday(name: str, today: date) -> Optional[date]:
    """Return the first given weekday strictly after ``today``."""
    target = WEEKDAYS.get(name.lower())
    if target is None:
        return None
    days_ahead = (target - today.weekday()) % 7 or 7
    return today + timedelta(days=days_ahead)


def in_period(count: int, unit: str, today: date) -> Optional[date]:
    """Resolve "in N days" / "in N weeks" relative to ``today``."""
    if count < 0:
        return None
    days = count * 7 if unit.lower().startswith("week") else count
    return today + timedelta(days=days)


def parse_numeric(text: str, today: date) -> Optional[date]:
    """Normalize a numeric date such as "7/10", "7/10/2027" or "2027-07-10".

    Slash dates are read month first.
    """
    dt = dateparser.parse(
        text,
        languages=["en"],
        settings={
            "DATE_ORDER": "MDY",
            "PREFER_DATES_FROM": "current_period",
            "RELATIVE_BASE": datetime.combine(today, time()),
        },
    )
    return dt.date() if dt else None


def end_from_duration(start: date, count: int, unit: str) -> Optional[date]:
    """Compute an end date from a duration phrase.

    "N days" counts the start day, so the trip ends on start + N - 1.
    "N nights" ends on the checkout morning, start + N. Weeks count
    seven days each.
    """
    if count <= 0:
        return None
    unit = unit.lower()
    if unit.startswith("night"):
        return start + timedelta(days=count)
    if unit.startswith("week"):
        return start + timedelta(days=7 * count - 1)
    return start + timedelta(days=count - 1)


def after_start(end: date, start: Optional[date], explicit_year: bool) -> date:
    """Place an end date without explicit year after the start date.

    "December 28 to January 3" ends in the following year.
    """
    if start is None or explicit_year or end >= start:
        return end
    try:
        return end.replace(year=end.year + 1)
    except ValueError:
        return end
