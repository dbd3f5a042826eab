"""Fixed vocabulary shared by the extractors.

Month and weekday names, number words, and the keyword tables that map
free-text mentions onto interest, transportation and accommodation
categories.
"""

from typing import Dict, FrozenSet, Tuple

MONTHS: Dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

# Python's date.weekday() numbering: Monday is 0.
WEEKDAYS: Dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

UNITS: Dict[str, int] = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9,
}

TEENS: Dict[str, int] = {
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
    "nineteen": 19,
}

TENS: Dict[str, int] = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

NUMBER_WORDS: Dict[str, int] = {**UNITS, **TEENS, **TENS}

MAGNITUDES: Dict[str, int] = {"hundred": 100, "thousand": 1000}

# Heuristic group sizes for named groups. These are defaults, not counts:
# "family" says nothing about how many people actually travel.
SOLO_SIZE = 1
COUPLE_SIZE = 2
FAMILY_DEFAULT_SIZE = 4

MAX_TRAVELERS = 50

ACCOMMODATION_SYNONYMS: Dict[str, str] = {
    "hotel": "hotel",
    "hotels": "hotel",
    "motel": "hotel",
    "inn": "hotel",
    "airbnb": "airbnb",
    "air bnb": "airbnb",
    "vacation rental": "airbnb",
    "holiday rental": "airbnb",
    "apartment": "airbnb",
    "hostel": "hostel",
    "hostels": "hostel",
    "backpackers": "hostel",
    "resort": "resort",
    "all inclusive": "resort",
    "all-inclusive": "resort",
}

INTEREST_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "culture": (
        "culture", "cultural", "museum", "museums", "history", "historical",
        "art", "arts", "temple", "temples", "heritage", "architecture",
    ),
    "adventure": (
        "adventure", "adventures", "adventurous", "hiking", "hike", "hikes",
        "outdoor", "outdoors", "trekking", "climbing", "sports", "surfing",
        "diving",
    ),
    "food": (
        "food", "foodie", "restaurant", "restaurants", "cuisine", "dining",
        "culinary", "eat", "eating", "wine", "street food",
    ),
    "relaxation": (
        "relax", "relaxation", "relaxing", "spa", "spas", "massage", "beach",
        "beaches", "wellness", "peaceful",
    ),
    "nature": (
        "nature", "natural", "park", "parks", "wildlife", "scenery",
        "landscape", "landscapes", "mountains", "forest", "forests",
    ),
    "shopping": (
        "shopping", "shop", "shops", "market", "markets", "boutique",
        "boutiques", "mall", "malls", "stores",
    ),
    "nightlife": (
        "nightlife", "night life", "bar", "bars", "club", "clubs", "clubbing",
        "party", "parties", "partying", "dancing",
    ),
    "photography": (
        "photo", "photos", "photography", "instagram", "pictures", "scenic",
        "photogenic",
    ),
}

TRANSPORT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "flights": (
        "flight", "flights", "fly", "flying", "plane", "planes", "air travel",
        "airfare",
    ),
    "car-rental": (
        "car", "cars", "rental car", "car rental", "rent a car", "drive",
        "driving", "road trip",
    ),
    "public-transport": (
        "public transport", "public transportation", "public transit",
        "subway", "metro", "bus", "buses", "train", "trains", "tram", "trams",
        "rail",
    ),
    "walking": ("walk", "walking", "on foot", "by foot"),
}

STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "with", "from", "by", "as", "is", "are", "was", "were", "be", "been",
        "will", "would", "could", "should", "may", "might", "must", "can",
        "there", "here", "this", "that", "these", "those", "we", "i", "you",
        "he", "she", "it", "they", "our", "my", "your", "us", "me", "of",
        "some", "so", "just", "really", "about",
    }
)

# Leading words that mean a "going to X" style capture is not a place.
NON_PLACE_WORDS: FrozenSet[str] = frozenset(
    {
        "need", "be", "have", "stay", "take", "use", "spend", "see", "go",
        "do", "get", "make", "try", "travel", "fly", "leave", "want", "book",
        "rent", "explore", "visit", "bring", "keep", "look", "plan", "eat",
        "interested", "going", "leaving", "departing", "starting", "returning",
        "traveling", "travelling", "looking", "planning", "staying", "budget",
        "party", "group", "family", "couple", "solo", "alone", "prefer",
        "somewhere", "anywhere", "everywhere", "home",
    }
)

# Time and group words that can open a request ("Next week in Paris",
# "Two people from March 3") but never name a place.
CALENDAR_WORDS: FrozenSet[str] = frozenset(
    {
        "next", "this", "last", "today", "tonight", "tomorrow", "week",
        "weeks", "weekend", "month", "months", "year", "day", "days", "night",
        "nights", "early", "late", "mid", "end",
    }
)

GROUP_WORDS: FrozenSet[str] = frozenset(
    {
        "people", "person", "persons", "adult", "adults", "child", "children",
        "kids", "traveler", "travelers", "traveller", "travellers", "guests",
        "friends", "us",
    }
)

MAX_DESTINATION_WORDS = 5


def build_keyword_index(table: Dict[str, Tuple[str, ...]]) -> Dict[str, FrozenSet[str]]:
    """Invert a category -> keywords table into keyword -> categories."""
    index: Dict[str, set] = {}
    for category, keywords in table.items():
        for keyword in keywords:
            index.setdefault(keyword, set()).add(category)
    return {keyword: frozenset(categories) for keyword, categories in index.items()}


INTEREST_INDEX = build_keyword_index(INTEREST_KEYWORDS)
TRANSPORT_INDEX = build_keyword_index(TRANSPORT_KEYWORDS)
