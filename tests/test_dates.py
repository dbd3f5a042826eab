"""Tests for the calendar helpers."""

from datetime import date

import pytest

from trip_extractor.nlp import dates

TODAY = date(2026, 3, 1)  # Sunday


@pytest.mark.parametrize(
    "name, expected",
    [("July", 7), ("jul", 7), ("Sept", 9), ("sep.", 9), ("DECEMBER", 12), ("Juno", None)],
)
def test_month_number(name, expected):
    assert dates.month_number(name) == expected


def test_resolve_month_day_defaults_to_current_year():
    assert dates.resolve_month_day("july", 10, TODAY) == date(2026, 7, 10)


def test_resolve_month_day_keeps_past_dates_by_default():
    assert dates.resolve_month_day("january", 15, TODAY) == date(2026, 1, 15)


def test_resolve_month_day_rolls_past_dates_when_asked():
    resolved = dates.resolve_month_day("january", 15, TODAY, roll_past_dates=True)

    assert resolved == date(2027, 1, 15)


def test_resolve_month_day_explicit_year_is_never_rolled():
    resolved = dates.resolve_month_day(
        "january", 15, TODAY, year=2026, roll_past_dates=True
    )

    assert resolved == date(2026, 1, 15)


@pytest.mark.parametrize("month, day", [("february", 30), ("april", 31), ("june", 0), ("smarch", 3)])
def test_resolve_month_day_rejects_impossible_dates(month, day):
    assert dates.resolve_month_day(month, day, TODAY) is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("monday", date(2026, 3, 2)),
        ("Friday", date(2026, 3, 6)),
        ("sunday", date(2026, 3, 8)),
    ],
)
def test_next_weekday_is_strictly_after_today(name, expected):
    assert dates.next_weekday(name, TODAY) == expected


def test_next_weekday_unknown_name():
    assert dates.next_weekday("someday", TODAY) is None


def test_in_period():
    assert dates.in_period(5, "days", TODAY) == date(2026, 3, 6)
    assert dates.in_period(2, "weeks", TODAY) == date(2026, 3, 15)


@pytest.mark.parametrize(
    "count, unit, expected",
    [
        (7, "days", date(2026, 7, 16)),
        (1, "day", date(2026, 7, 10)),
        (5, "nights", date(2026, 7, 15)),
        (2, "weeks", date(2026, 7, 23)),
    ],
)
def test_end_from_duration(count, unit, expected):
    assert dates.end_from_duration(date(2026, 7, 10), count, unit) == expected


def test_end_from_duration_rejects_zero():
    assert dates.end_from_duration(date(2026, 7, 10), 0, "days") is None


def test_after_start_crosses_new_year():
    start = date(2026, 12, 28)

    assert dates.after_start(date(2026, 1, 3), start, explicit_year=False) == date(2027, 1, 3)
    assert dates.after_start(date(2026, 1, 3), start, explicit_year=True) == date(2026, 1, 3)
    assert dates.after_start(date(2026, 12, 30), start, explicit_year=False) == date(2026, 12, 30)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7/10/2027", date(2027, 7, 10)),
        ("2027-07-10", date(2027, 7, 10)),
        ("12/1/2026", date(2026, 12, 1)),
    ],
)
def test_parse_numeric(text, expected):
    assert dates.parse_numeric(text, TODAY) == expected
