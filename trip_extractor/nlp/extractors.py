"""Value extractors and normalizers.

Every extractor has the signature ``(match, context) -> value | None``.
It reads the named groups of the regular expression match, converts
them into a typed field value and returns None when the matched text
does not make a usable value (unknown month, impossible day, empty
keyword set...). Extractors never raise for bad input; the scanner
treats None as "discard this candidate".

Named groups understood by the date extractors:

- ``mon``/``day``/``year`` for month-first dates ("July 10th, 2027")
- ``dmon``/``dday``/``dyear`` for day-first dates ("the 10th of July")
- ``numeric`` for numeric dates ("7/10/2027")
- ``count``/``unit`` for durations and offsets ("for 7 days")
- ``weekday`` for weekday names
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from ..domain.models import Extractor, ParseContext
from . import dates
from .vocabulary import (
    ACCOMMODATION_SYNONYMS,
    CALENDAR_WORDS,
    GROUP_WORDS,
    INTEREST_INDEX,
    MAGNITUDES,
    MAX_DESTINATION_WORDS,
    MAX_TRAVELERS,
    MONTHS,
    NON_PLACE_WORDS,
    NUMBER_WORDS,
    STOPWORDS,
    TRANSPORT_INDEX,
    WEEKDAYS,
)

_ARTICLES = {"a": 1, "an": 1}


def _group(match: "re.Match[str]", name: str) -> Optional[str]:
    try:
        return match.group(name)
    except IndexError:
        return None


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def parse_count(text: Optional[str]) -> Optional[int]:
    """Parse digits or number words ("3", "three", "twenty-five", "a").

    Returns None for anything that is not a whole number.
    """
    if not text:
        return None
    text = text.strip().lower()
    if text.isdigit():
        return int(text)
    if text in _ARTICLES:
        return _ARTICLES[text]

    total = 0
    for word in re.split(r"[\s-]+", text):
        value = NUMBER_WORDS.get(word)
        if value is None:
            return None
        total += value
    return total or None


def normalize_amount(text: Optional[str]) -> Optional[str]:
    """Strip thousands separators from a decimal amount.

    Returns None for zero or unparseable amounts.
    """
    if not text:
        return None
    cleaned = text.replace(",", "").strip()
    try:
        if float(cleaned) <= 0:
            return None
    except ValueError:
        return None
    return cleaned


# ---------------------------------------------------------------------------
# Destination
# ---------------------------------------------------------------------------


def normalize_destination(text: str) -> str:
    """Trim a destination phrase and title-case each word."""
    words = text.split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _place_words(match: "re.Match[str]") -> Optional[list[str]]:
    raw = _group(match, "place")
    if not raw:
        return None
    words = raw.split()
    if not words or len(words) > MAX_DESTINATION_WORDS:
        return None
    return words


def destination(match: "re.Match[str]", context: ParseContext) -> Optional[str]:
    """Destination after a cue phrase such as "going to" or "trip to"."""
    words = _place_words(match)
    if words is None:
        return None
    lowered = [w.lower() for w in words]
    if lowered[0] in NON_PLACE_WORDS or lowered[0] in INTEREST_INDEX:
        return None
    if all(w in STOPWORDS for w in lowered):
        return None
    return normalize_destination(" ".join(words))


_LEADING_EXCLUSIONS = (
    STOPWORDS,
    NON_PLACE_WORDS,
    CALENDAR_WORDS,
    GROUP_WORDS,
    NUMBER_WORDS,
    MONTHS,
    WEEKDAYS,
    INTEREST_INDEX,
    TRANSPORT_INDEX,
)


def _not_a_leading_place(word: str) -> bool:
    return any(word in words for words in _LEADING_EXCLUSIONS)


def leading_destination(match: "re.Match[str]", context: ParseContext) -> Optional[str]:
    """Destination opening the transcript ("Tokyo for 5 days").

    Weak heuristic: rejects any phrase containing a stopword, a verb, a
    number, a month or weekday, a time or group word ("Next week",
    "Two people") or an interest or transport keyword ("Hiking").
    """
    words = _place_words(match)
    if words is None:
        return None
    lowered = [w.lower() for w in words]
    if any(_not_a_leading_place(w) for w in lowered):
        return None
    return normalize_destination(" ".join(words))


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def _month_day(
    match: "re.Match[str]", context: ParseContext
) -> Tuple[Optional[date], bool]:
    """Resolve month/day groups, returning the date and whether a year was given."""
    month_name = _group(match, "mon")
    day_text = _group(match, "day")
    year_text = _group(match, "year")
    if month_name is None or day_text is None:
        month_name = _group(match, "dmon")
        day_text = _group(match, "dday")
        year_text = _group(match, "dyear")
    if month_name is None or day_text is None:
        return None, False

    year = int(year_text) if year_text else None
    resolved = dates.resolve_month_day(
        month_name,
        int(day_text),
        context.today,
        year=year,
        roll_past_dates=context.roll_past_dates,
    )
    return resolved, year is not None


def start_date(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Start date from a month name and day number."""
    resolved, _ = _month_day(match, context)
    return resolved


def end_date(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """End date from a month name and day number.

    Lands after an already-resolved start date when no year was given.
    """
    resolved, explicit_year = _month_day(match, context)
    if resolved is None:
        return None
    return dates.after_start(resolved, context.start_date, explicit_year)


def end_date_after_start(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Like ``end_date`` but only meaningful once a start date exists."""
    if context.start_date is None:
        return None
    return end_date(match, context)


def numeric_date(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Numeric date ("7/10/2027", "2027-07-10") normalized with dateparser."""
    text = _group(match, "numeric")
    if not text:
        return None
    return dates.parse_numeric(text, context.today)


def range_end_day(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Second day of a hyphenated range ("July 5-12").

    The month and year come from the start date in the context.
    """
    start = context.start_date
    day_text = _group(match, "day")
    if start is None or day_text is None:
        return None
    try:
        end = start.replace(day=int(day_text))
    except ValueError:
        return None
    return end if end >= start else None


def duration_end(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """End date from "for N days/nights/weeks" and the resolved start date."""
    if context.start_date is None:
        return None
    count = parse_count(_group(match, "count"))
    unit = _group(match, "unit") or "days"
    if count is None:
        return None
    return dates.end_from_duration(context.start_date, count, unit)


def weekday_date(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Next occurrence of a named weekday ("next Monday")."""
    name = _group(match, "weekday")
    if not name:
        return None
    return dates.next_weekday(name, context.today)


def relative_period(match: "re.Match[str]", context: ParseContext) -> Optional[date]:
    """Offset from today ("in 5 days", "in two weeks")."""
    count = parse_count(_group(match, "count"))
    unit = _group(match, "unit") or "days"
    if count is None:
        return None
    return dates.in_period(count, unit, context.today)


def days_from_today(days: int) -> Extractor:
    """Extractor returning a fixed offset from today ("tomorrow", "next week")."""

    def extract(match: "re.Match[str]", context: ParseContext) -> date:
        return context.today + timedelta(days=days)

    return extract


# ---------------------------------------------------------------------------
# Travelers
# ---------------------------------------------------------------------------


def _bounded(count: Optional[int]) -> Optional[int]:
    if count is None or not 1 <= count <= MAX_TRAVELERS:
        return None
    return count


def traveler_count(match: "re.Match[str]", context: ParseContext) -> Optional[int]:
    """Traveler count from digits or number words."""
    return _bounded(parse_count(_group(match, "count")))


def adults_and_children(match: "re.Match[str]", context: ParseContext) -> Optional[int]:
    """Sum of "N adults and M children"."""
    adults = parse_count(_group(match, "adults"))
    children = parse_count(_group(match, "children"))
    if adults is None or children is None:
        return None
    return _bounded(adults + children)


def constant(value: int) -> Extractor:
    """Extractor returning a fixed value.

    Used for named groups ("couple", "solo", "family") whose sizes are
    heuristic defaults rather than stated counts.
    """

    def extract(match: "re.Match[str]", context: ParseContext) -> int:
        return value

    return extract


# ---------------------------------------------------------------------------
# Budget
# ---------------------------------------------------------------------------


def budget_amount(match: "re.Match[str]", context: ParseContext) -> Optional[str]:
    """Decimal amount with thousands separators removed."""
    return normalize_amount(_group(match, "amount"))


def spelled_amount(match: "re.Match[str]", context: ParseContext) -> Optional[str]:
    """Spelled-out amount ("two thousand", "twenty five hundred")."""
    count = parse_count(_group(match, "words"))
    magnitude = MAGNITUDES.get((_group(match, "magnitude") or "").lower())
    if count is None or magnitude is None:
        return None
    return str(count * magnitude)


# ---------------------------------------------------------------------------
# Accommodation
# ---------------------------------------------------------------------------


def accommodation(match: "re.Match[str]", context: ParseContext) -> Optional[str]:
    """Accommodation keyword normalized to hotel, airbnb, hostel or resort."""
    kind = _group(match, "kind")
    if not kind:
        return None
    key = re.sub(r"\s+", " ", kind.strip().lower())
    return ACCOMMODATION_SYNONYMS.get(key)


# ---------------------------------------------------------------------------
# Interests / transportation
# ---------------------------------------------------------------------------


def keyword_alternation(index: Dict[str, FrozenSet[str]]) -> str:
    """Regex alternation of all keywords, longest first, spaces flexible."""
    keywords = sorted(index, key=len, reverse=True)
    body = "|".join(re.escape(k).replace(r"\ ", r"\s+") for k in keywords)
    return f"(?:{body})"


def keyword_regex(index: Dict[str, FrozenSet[str]]) -> "re.Pattern[str]":
    """Compile a whole-word match of any keyword."""
    return re.compile(rf"\b{keyword_alternation(index)}\b", re.IGNORECASE)


def find_categories(
    text: str, index: Dict[str, FrozenSet[str]], regex: "re.Pattern[str]"
) -> FrozenSet[str]:
    """Return every category whose keywords occur in ``text``."""
    found: set[str] = set()
    for hit in regex.finditer(text):
        keyword = re.sub(r"\s+", " ", hit.group(0).lower())
        found.update(index.get(keyword, ()))
    return frozenset(found)


def categories(
    index: Dict[str, FrozenSet[str]]
) -> Callable[["re.Match[str]", ParseContext], Optional[FrozenSet[str]]]:
    """Extractor mapping the whole matched text onto category tags.

    One phrase can activate several categories. An empty result is
    reported as None so the span stays unclaimed.
    """
    regex = keyword_regex(index)

    def extract(match: "re.Match[str]", context: ParseContext) -> Optional[FrozenSet[str]]:
        found = find_categories(match.group(0), index, regex)
        return found or None

    return extract
