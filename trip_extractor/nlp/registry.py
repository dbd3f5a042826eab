"""Pattern registry: the ordered table of field parsers.

Field parsers run in declaration order, and a span claimed by an
earlier accepted token cannot back a later one. ``START_DATE`` is
declared before ``END_DATE`` so duration and range phrasings can read
the resolved start date from the context.

Within a field parser, patterns are listed from most to least specific.
Confidence guidance:

- 0.9 and above: an explicit verbal marker ("destination is",
  "budget is ... per person", "leaving on")
- 0.7 to 0.85: common but looser phrasings
- below 0.7: weak heuristics that should rarely win alone; below the
  acceptance threshold they are logged but never returned
"""

from __future__ import annotations

import re
from typing import Tuple

from ..domain.models import Extractor, FieldParser, Pattern, TripField
from . import extractors as ex
from .vocabulary import (
    COUPLE_SIZE,
    FAMILY_DEFAULT_SIZE,
    INTEREST_INDEX,
    MONTHS,
    SOLO_SIZE,
    TRANSPORT_INDEX,
    WEEKDAYS,
)


def _p(regex: str, confidence: float, extract: Extractor, description: str) -> Pattern:
    return Pattern(re.compile(regex, re.IGNORECASE), confidence, extract, description)


# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

_UNITS = "one|two|three|four|five|six|seven|eight|nine"
_TEENS = (
    "ten|eleven|twelve|thirteen|fourteen|fifteen|sixteen|seventeen|eighteen|nineteen"
)
_TENS = "twenty|thirty|forty|fifty|sixty|seventy|eighty|ninety"
NUM_WORDS = rf"(?:(?:{_TENS})(?:[\s-](?:{_UNITS}))?|{_TEENS}|{_UNITS})"
COUNT = rf"(?:\d+|{NUM_WORDS})"

_ORD = r"(?:st|nd|rd|th)?"
MONTH = "(?:" + "|".join(sorted(MONTHS, key=len, reverse=True)) + ")"
DATE_MONTH_FIRST = (
    rf"(?P<mon>{MONTH})\.?\s+(?P<day>\d{{1,2}})(?!\d){_ORD}(?:,?\s+(?P<year>\d{{4}}))?"
)
DATE_DAY_FIRST = (
    rf"(?:the\s+)?(?P<dday>\d{{1,2}})(?!\d){_ORD}\s+(?:of\s+)?(?P<dmon>{MONTH})"
    rf"(?:,?\s+(?P<dyear>\d{{4}}))?"
)
DATE = rf"(?:{DATE_MONTH_FIRST}|{DATE_DAY_FIRST})\b"
NUMERIC_DATE = r"(?P<numeric>\d{4}-\d{1,2}-\d{1,2}|\d{1,2}/\d{1,2}(?:/\d{2,4})?)\b"

_WEEKDAY = "|".join(WEEKDAYS)

# Any letter, accented ones included ("São Paulo").
_LETTER = r"[^\W\d_]"
_PLACE_WORD = rf"{_LETTER}(?:{_LETTER}|['\-])*"

# A place name: up to five words, ended by a connective, punctuation, a
# date or the end of the transcript. The terminator is a lookahead so the
# following phrase ("for 7 days", "June 10 to June 17") stays available
# to other fields.
_PLACE_END = (
    r"(?=\s+(?:for|from|on|in|leaving|departing|starting|returning|next|with|and"
    r"|this|during|between|until|to|by|at|around|because|so)\b"
    rf"|\s+{MONTH}\.?\s+\d|\s+\d|\s*[,.;:!?]|\s*$)"
)
PLACE = rf"(?P<place>{_PLACE_WORD}(?:\s+{_PLACE_WORD}){{0,4}}?){_PLACE_END}"

AMOUNT = r"(?P<amount>\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?|\d+(?:\.\d{1,2})?)"
PER_PERSON = r"(?:per\s+person|per\s+head|each|pp)\b"
SPELLED = rf"(?P<words>{NUM_WORDS})\s+(?P<magnitude>hundred|thousand)"

ACCOMMODATION_KIND = (
    r"(?P<kind>hotels?|motel|airbnb|air\s+bnb|hostels?|resort|vacation\s+rental"
    r"|holiday\s+rental|apartment|backpackers|all[-\s]inclusive)"
)

_PHRASE = r"(?P<phrase>[a-z\s'&\-]+)"


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------

DESTINATION = FieldParser(
    TripField.DESTINATION,
    (
        _p(
            rf"\b(?:my\s+|our\s+)?destination\s+(?:is|will\s+be)\s+{PLACE}",
            0.98,
            ex.destination,
            '"destination is Tokyo"',
        ),
        _p(
            rf"\b(?:i'm|i\s+am|we're|we\s+are)\s+going\s+to\s+{PLACE}",
            0.95,
            ex.destination,
            "\"I'm going to Paris\"",
        ),
        _p(
            rf"\b(?:want|wants|wanna|plan|planning|hoping|like)\s+to\s+go\s+to\s+{PLACE}",
            0.95,
            ex.destination,
            '"we want to go to Rome"',
        ),
        _p(
            rf"\b(?:travel(?:l?ing)?|trip|vacation|holiday|getaway)\s+to\s+{PLACE}",
            0.92,
            ex.destination,
            '"travel to London"',
        ),
        _p(rf"\bvisit(?:ing)?\s+{PLACE}", 0.90, ex.destination, '"visiting Lisbon"'),
        _p(
            rf"\b(?:head(?:ed|ing)|fly(?:ing)?|off)\s+to\s+{PLACE}",
            0.90,
            ex.destination,
            '"heading to Rome"',
        ),
        _p(
            rf"\bgoing\s+to\s+{PLACE}",
            0.85,
            ex.destination,
            '"going to New York"',
        ),
        _p(
            rf"^\s*(?P<place>{_LETTER}+(?:\s+{_LETTER}+){{0,2}}?)(?=\s+(?:for|from|on|in)\s)",
            0.70,
            ex.leading_destination,
            '"Tokyo for 5 days"',
        ),
    ),
)

START_DATE = FieldParser(
    TripField.START_DATE,
    (
        _p(rf"\bleaving\s+(?:on\s+)?{DATE}", 0.95, ex.start_date, '"leaving on July 10th"'),
        _p(rf"\bdeparting\s+(?:on\s+)?{DATE}", 0.93, ex.start_date, '"departing July 15"'),
        _p(rf"\bfrom\s+{DATE}", 0.90, ex.start_date, '"from August 1st"'),
        _p(
            rf"\b(?:starting|beginning|arriving)\s+(?:on\s+)?{DATE}",
            0.88,
            ex.start_date,
            '"starting June 20"',
        ),
        _p(rf"\bbetween\s+{DATE}", 0.88, ex.start_date, '"between July 10 and July 18"'),
        _p(
            rf"\b(?:leaving|departing|starting|from)\s+(?:on\s+)?{NUMERIC_DATE}",
            0.88,
            ex.numeric_date,
            '"leaving 7/10/2027"',
        ),
        _p(
            rf"\bfrom\s+(?:the\s+)?(?P<dday>\d{{1,2}})(?!\d){_ORD}"
            rf"(?=\s*(?:to|until|till|-|–)\s*(?:the\s+)?\d{{1,2}}{_ORD}\s+(?:of\s+)?(?P<dmon>{MONTH}))",
            0.85,
            ex.start_date,
            '"from 10 to 19 July"',
        ),
        _p(
            rf"\b{DATE_MONTH_FIRST}(?=\s*[-–]\s*\d{{1,2}}(?!\d))",
            0.85,
            ex.start_date,
            '"July 5-12"',
        ),
        _p(
            rf"\b{DATE_MONTH_FIRST}(?=\s+(?:to|through|thru|until|till)\s+{MONTH})",
            0.85,
            ex.start_date,
            '"June 10 to June 17"',
        ),
        _p(rf"\bnext\s+(?P<weekday>{_WEEKDAY})\b", 0.85, ex.weekday_date, '"next Monday"'),
        _p(
            rf"\bin\s+(?P<count>{COUNT}|a)\s+(?P<unit>days?|weeks?)\b",
            0.80,
            ex.relative_period,
            '"in 5 days"',
        ),
        _p(r"\btomorrow\b", 0.80, ex.days_from_today(1), '"tomorrow"'),
        _p(r"\bnext\s+week\b", 0.75, ex.days_from_today(7), '"next week"'),
    ),
)

END_DATE = FieldParser(
    TripField.END_DATE,
    (
        _p(rf"\breturning\s+(?:on\s+)?{DATE}", 0.95, ex.end_date, '"returning July 18th"'),
        _p(
            rf"\b(?:to|until|till|through|thru)\s+{DATE}",
            0.90,
            ex.end_date,
            '"until August 5"',
        ),
        _p(
            rf"\bcoming\s+back\s+(?:on\s+)?{DATE}",
            0.88,
            ex.end_date,
            '"coming back September 1"',
        ),
        _p(
            rf"\b(?:returning|coming\s+back|until|till)\s+(?:on\s+)?{NUMERIC_DATE}",
            0.88,
            ex.numeric_date,
            '"returning 7/18/2027"',
        ),
        _p(
            rf"(?:(?<=\d)|(?<=st)|(?<=nd)|(?<=rd)|(?<=th))\s*[-–]\s*(?P<day>\d{{1,2}})(?!\d){_ORD}",
            0.85,
            ex.range_end_day,
            '"July 5-12"',
        ),
        _p(
            rf"\bfor\s+(?P<count>{COUNT}|a)\s+(?P<unit>days?|nights?|weeks?)\b",
            0.85,
            ex.duration_end,
            '"for 7 days"',
        ),
        _p(rf"\band\s+{DATE}", 0.80, ex.end_date_after_start, '"between July 10 and July 18"'),
    ),
)

TRAVELERS = FieldParser(
    TripField.TRAVELERS,
    (
        _p(
            rf"\bwith\s+(?P<adults>{COUNT})\s+adults?\s+and\s+(?P<children>{COUNT})\s+(?:children|child|kids?)\b",
            0.98,
            ex.adults_and_children,
            '"with 2 adults and 1 child"',
        ),
        _p(
            rf"\b(?P<adults>{COUNT})\s+adults?\s+(?:and\s+)?(?P<children>{COUNT})\s+(?:children|child|kids?)\b",
            0.95,
            ex.adults_and_children,
            '"2 adults 1 child"',
        ),
        _p(rf"\bparty\s+of\s+(?P<count>{COUNT})\b", 0.95, ex.traveler_count, '"party of 4"'),
        _p(rf"\bgroup\s+of\s+(?P<count>{COUNT})\b", 0.93, ex.traveler_count, '"group of 6"'),
        _p(rf"\bfamily\s+of\s+(?P<count>{COUNT})\b", 0.90, ex.traveler_count, '"family of 5"'),
        _p(
            r"\b(?P<count>\d+)\s+(?:of\s+us|people|persons?|travell?ers?|adults?|guests?)\b",
            0.90,
            ex.traveler_count,
            '"4 people"',
        ),
        _p(
            rf"\bthere(?:'s|'re|\s+is|\s+are|\s+will\s+be)\s+(?P<count>{COUNT})\b(?:\s+of\s+us)?",
            0.88,
            ex.traveler_count,
            '"there are 3 of us"',
        ),
        _p(
            rf"\b(?P<count>{NUM_WORDS})\s+(?:people|persons?|travell?ers?|adults|of\s+us)\b",
            0.85,
            ex.traveler_count,
            '"three people"',
        ),
        _p(
            r"\b(?:couple|the\s+two\s+of\s+us|just\s+us\s+two)\b",
            0.92,
            ex.constant(COUPLE_SIZE),
            '"couple"',
        ),
        _p(
            r"\bwith\s+my\s+(?:wife|husband|partner|spouse|boyfriend|girlfriend|fianc[eé]e?)\b",
            0.85,
            ex.constant(COUPLE_SIZE),
            '"with my wife"',
        ),
        _p(
            r"\b(?:solo|alone|by\s+myself|just\s+me|on\s+my\s+own)\b",
            0.95,
            ex.constant(SOLO_SIZE),
            '"solo trip"',
        ),
        _p(
            r"\bfamily(?:\s+(?:trip|vacation|holiday))?\b",
            0.75,
            ex.constant(FAMILY_DEFAULT_SIZE),
            '"family trip"',
        ),
    ),
)

BUDGET = FieldParser(
    TripField.BUDGET,
    (
        _p(
            rf"\bbudget\s+(?:is\s+|of\s+)?(?:around\s+|about\s+|roughly\s+)?\$?{AMOUNT}"
            rf"\s*(?:dollars?|usd|bucks)?\s*{PER_PERSON}",
            0.95,
            ex.budget_amount,
            '"budget is $1500 per person"',
        ),
        _p(
            rf"\${AMOUNT}\s*(?:dollars?|usd)?\s*{PER_PERSON}",
            0.92,
            ex.budget_amount,
            '"$2000 per person"',
        ),
        _p(
            rf"\b{AMOUNT}\s*(?:dollars?|usd|bucks)\s*{PER_PERSON}",
            0.90,
            ex.budget_amount,
            '"1500 dollars each"',
        ),
        _p(
            rf"\b{SPELLED}\s*(?:dollars?\s*)?{PER_PERSON}",
            0.88,
            ex.spelled_amount,
            '"two thousand per person"',
        ),
        _p(
            rf"\b(?:(?:total\s+)?budget\s+(?:is\s+|of\s+)?|keep\s+it\s+under\s+|spend\s+(?:up\s+to\s+)?)"
            rf"(?:around\s+|about\s+)?\$?{AMOUNT}",
            0.55,
            ex.budget_amount,
            '"budget is $5000" (total, not per person)',
        ),
        _p(
            rf"\b{SPELLED}\s+dollars\b",
            0.55,
            ex.spelled_amount,
            '"fifteen hundred dollars" (no per-person marker)',
        ),
    ),
)

ACCOMMODATION = FieldParser(
    TripField.ACCOMMODATION,
    (
        _p(
            rf"\b(?:prefer|preferring|want|wanting|would\s+like)\s+(?:to\s+stay\s+(?:in|at)\s+)?"
            rf"(?:an?\s+)?{ACCOMMODATION_KIND}\b",
            0.95,
            ex.accommodation,
            '"prefer a hotel"',
        ),
        _p(
            rf"\bstay(?:ing)?\s+(?:in|at)\s+(?:an?\s+)?{ACCOMMODATION_KIND}\b",
            0.92,
            ex.accommodation,
            '"staying in a hotel"',
        ),
        _p(
            rf"\blooking\s+for\s+(?:an?\s+)?{ACCOMMODATION_KIND}\b",
            0.90,
            ex.accommodation,
            '"looking for a resort"',
        ),
        _p(
            rf"\bbook(?:ing)?\s+(?:an?\s+)?{ACCOMMODATION_KIND}\b",
            0.88,
            ex.accommodation,
            '"book an airbnb"',
        ),
        _p(rf"\b{ACCOMMODATION_KIND}\b", 0.80, ex.accommodation, '"hotel"'),
    ),
)

_interests = ex.categories(INTEREST_INDEX)
_transport = ex.categories(TRANSPORT_INDEX)

INTERESTS = FieldParser(
    TripField.INTERESTS,
    (
        _p(
            rf"\binterested\s+in\s+{_PHRASE}",
            0.95,
            _interests,
            '"interested in food and culture"',
        ),
        _p(
            rf"\b(?:we|i)\s+(?:really\s+)?(?:like|love|enjoy)\s+{_PHRASE}",
            0.90,
            _interests,
            '"we like hiking and nature"',
        ),
        _p(rf"\b(?:really\s+)?into\s+{_PHRASE}", 0.88, _interests, '"into nightlife and shopping"'),
        _p(
            r"\bfor\s+(?:the\s+)?(?P<phrase>[a-z\s'&\-]+?)\s+(?:scene|activities|experiences|spots)\b",
            0.85,
            _interests,
            '"for the food scene"',
        ),
        _p(rf"\b{ex.keyword_alternation(INTEREST_INDEX)}\b", 0.65, _interests, "interest keyword"),
    ),
)

TRANSPORTATION = FieldParser(
    TripField.TRANSPORTATION,
    (
        _p(
            r"\b(?:need|want|require|prefer)\s+(?P<phrase>[a-z\s,'\-]+?)\s+(?:transportation|transport|transit)\b",
            0.92,
            _transport,
            '"need public transportation"',
        ),
        _p(
            r"\b(?:we'll|we\s+will|i'll|i\s+will|will)\s+(?:need|take|use|rent)\s+(?P<phrase>[a-z\s,'\-]+)",
            0.88,
            _transport,
            "\"we'll need flights and trains\"",
        ),
        _p(
            r"\b(?:transportation|transport|getting\s+around)\s*(?::|by|via|with)\s*(?P<phrase>[a-z\s,'\-]+)",
            0.85,
            _transport,
            '"transportation: car rental"',
        ),
        _p(
            rf"\bby\s+{ex.keyword_alternation(TRANSPORT_INDEX)}\b",
            0.80,
            _transport,
            '"by train"',
        ),
        _p(rf"\b{ex.keyword_alternation(TRANSPORT_INDEX)}\b", 0.75, _transport, "transport keyword"),
    ),
)

FIELD_PARSERS: Tuple[FieldParser, ...] = (
    DESTINATION,
    START_DATE,
    END_DATE,
    TRAVELERS,
    BUDGET,
    ACCOMMODATION,
    INTERESTS,
    TRANSPORTATION,
)
