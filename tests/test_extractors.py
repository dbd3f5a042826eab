"""Tests for value extractors and normalizers."""

import re
from datetime import date

import pytest

from trip_extractor.domain.models import ParseContext
from trip_extractor.nlp import extractors as ex
from trip_extractor.nlp.vocabulary import INTEREST_INDEX, TRANSPORT_INDEX

TODAY = date(2026, 3, 1)
CONTEXT = ParseContext(today=TODAY)


def _match(pattern, text):
    match = re.search(pattern, text, re.IGNORECASE)
    assert match is not None, (pattern, text)
    return match


@pytest.mark.parametrize(
    "text, expected",
    [
        ("4", 4),
        ("three", 3),
        ("Twelve", 12),
        ("twenty-five", 25),
        ("twenty five", 25),
        ("a", 1),
        ("an", 1),
        ("several", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_count(text, expected):
    assert ex.parse_count(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("2000", "2000"), ("1,500", "1500"), ("12,000.50", "12000.50"), ("0", None), ("abc", None)],
)
def test_normalize_amount(text, expected):
    assert ex.normalize_amount(text) == expected


def test_normalize_destination_title_cases_each_word():
    assert ex.normalize_destination("  new   york ") == "New York"
    assert ex.normalize_destination("rio de janeiro") == "Rio De Janeiro"


def test_destination_rejects_non_places():
    match = _match(r"to (?P<place>\w+)", "going to stay")

    assert ex.destination(match, CONTEXT) is None


def test_destination_rejects_interest_keywords():
    match = _match(r"visit (?P<place>\w+)", "visit museums")

    assert ex.destination(match, CONTEXT) is None


def test_leading_destination_rejects_stopwords():
    match = _match(r"^(?P<place>\w+ \w+)", "we are")

    assert ex.leading_destination(match, CONTEXT) is None


@pytest.mark.parametrize(
    "phrase",
    ["Two people", "Next week", "Tomorrow", "Hiking", "July", "Friday", "Trains"],
)
def test_leading_destination_rejects_time_group_and_keyword_words(phrase):
    match = _match(r"^(?P<place>.+)$", phrase)

    assert ex.leading_destination(match, CONTEXT) is None


def test_leading_destination_accepts_a_place():
    match = _match(r"^(?P<place>.+)$", "new york")

    assert ex.leading_destination(match, CONTEXT) == "New York"


def test_start_date_reads_day_first_groups():
    match = _match(r"(?P<dday>\d+)th of (?P<dmon>\w+)", "the 10th of July")

    assert ex.start_date(match, CONTEXT) == date(2026, 7, 10)


def test_end_date_lands_after_start():
    context = ParseContext(today=TODAY, start_date=date(2026, 12, 28))
    match = _match(r"(?P<mon>\w+) (?P<day>\d+)", "January 3")

    assert ex.end_date(match, context) == date(2027, 1, 3)


def test_end_date_after_start_needs_a_start():
    match = _match(r"(?P<mon>\w+) (?P<day>\d+)", "July 18")

    assert ex.end_date_after_start(match, CONTEXT) is None


def test_range_end_day_inherits_month_from_start():
    context = ParseContext(today=TODAY, start_date=date(2026, 7, 5))

    assert ex.range_end_day(_match(r"-(?P<day>\d+)", "-12"), context) == date(2026, 7, 12)
    assert ex.range_end_day(_match(r"-(?P<day>\d+)", "-3"), context) is None
    assert ex.range_end_day(_match(r"-(?P<day>\d+)", "-12"), CONTEXT) is None


def test_duration_end_requires_start_date():
    match = _match(r"for (?P<count>\w+) (?P<unit>\w+)", "for seven days")

    assert ex.duration_end(match, CONTEXT) is None
    context = ParseContext(today=TODAY, start_date=date(2026, 7, 10))
    assert ex.duration_end(match, context) == date(2026, 7, 16)


def test_relative_period_and_fixed_offsets():
    match = _match(r"in (?P<count>\w+) (?P<unit>\w+)", "in two weeks")

    assert ex.relative_period(match, CONTEXT) == date(2026, 3, 15)
    assert ex.days_from_today(1)(match, CONTEXT) == date(2026, 3, 2)


def test_traveler_count_is_bounded():
    assert ex.traveler_count(_match(r"(?P<count>\d+)", "4"), CONTEXT) == 4
    assert ex.traveler_count(_match(r"(?P<count>\d+)", "0"), CONTEXT) is None
    assert ex.traveler_count(_match(r"(?P<count>\d+)", "51"), CONTEXT) is None


def test_adults_and_children_are_summed():
    match = _match(r"(?P<adults>\w+) adults and (?P<children>\w+) kids", "two adults and three kids")

    assert ex.adults_and_children(match, CONTEXT) == 5


def test_constant_ignores_the_match():
    assert ex.constant(2)(_match("couple", "a couple"), CONTEXT) == 2


def test_spelled_amount():
    match = _match(
        r"(?P<words>[a-z ]+?) (?P<magnitude>hundred|thousand)", "twenty five hundred"
    )

    assert ex.spelled_amount(match, CONTEXT) == "2500"


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("Hotel", "hotel"),
        ("motel", "hotel"),
        ("vacation  rental", "airbnb"),
        ("apartment", "airbnb"),
        ("all-inclusive", "resort"),
        ("backpackers", "hostel"),
        ("castle", None),
    ],
)
def test_accommodation_synonyms(kind, expected):
    match = _match(r"(?P<kind>.+)", kind)

    assert ex.accommodation(match, CONTEXT) == expected


def test_categories_activate_several_tags():
    extract = ex.categories(INTEREST_INDEX)

    value = extract(_match(r".+", "museums, wine and beaches"), CONTEXT)

    assert value == frozenset({"culture", "food", "relaxation"})


def test_categories_return_none_without_keywords():
    extract = ex.categories(TRANSPORT_INDEX)

    assert extract(_match(r".+", "nothing relevant here"), CONTEXT) is None


def test_keyword_alternation_allows_flexible_spacing():
    regex = ex.keyword_regex(TRANSPORT_INDEX)

    assert regex.search("we want public   transport") is not None
    assert regex.search("subwayish") is None
