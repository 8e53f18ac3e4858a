"""
Keyword-based region classification.

Maps free-text location strings to a coarse geographic region. Used by
both the cost estimator (regional price tables, flight distance
categories) and the trip planner (route grouping, best season).
"""

from typing import Literal, Tuple


Region = Literal["europe", "asia", "americas", "africa", "oceania", "other"]

FALLBACK_REGION: Region = "other"

# Evaluated in order; the first rule with a matching keyword wins.
REGION_RULES: Tuple[Tuple[Region, Tuple[str, ...]], ...] = (
    (
        "europe",
        (
            "paris", "london", "rome", "berlin", "madrid", "amsterdam", "vienna",
            "prague", "barcelona", "italy", "france", "spain", "germany", "uk",
            "england", "portugal", "greece", "switzerland", "austria",
            "netherlands", "belgium", "sweden", "norway",
        ),
    ),
    (
        "asia",
        (
            "tokyo", "beijing", "seoul", "bangkok", "singapore", "mumbai", "delhi",
            "japan", "china", "thailand", "india", "korea", "vietnam", "indonesia",
            "malaysia", "philippines",
        ),
    ),
    (
        "americas",
        (
            "new york", "los angeles", "toronto", "mexico", "brazil", "argentina",
            "usa", "canada", "chile", "peru", "colombia", "united states", "america",
        ),
    ),
    (
        "africa",
        (
            "cairo", "cape town", "nairobi", "morocco", "egypt", "south africa",
            "kenya", "tanzania", "ghana", "nigeria", "ethiopia", "uganda",
        ),
    ),
    (
        "oceania",
        ("sydney", "melbourne", "auckland", "australia", "new zealand", "fiji", "tahiti"),
    ),
)

# Group order used when routing; identical to rule priority plus the fallback.
REGION_ORDER: Tuple[Region, ...] = tuple(r for r, _ in REGION_RULES) + (FALLBACK_REGION,)

COUNTRY_TOKENS: Tuple[str, ...] = (
    "usa", "canada", "uk", "france", "germany", "italy", "spain", "japan", "australia",
)


def classify_region(location: str) -> Region:
    """
    Classify a location string into a region.

    Matching is a case-insensitive substring search against each region's
    keyword list, in priority order europe, asia, americas, africa,
    oceania. Never fails: unknown locations classify as ``other``.

    Args:
        location: Free-text location, e.g. "Paris, France"

    Returns:
        The matching region name
    """
    lowered = (location or "").lower()
    for region, keywords in REGION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return region
    return FALLBACK_REGION


def _segments(location: str) -> Tuple[str, ...]:
    return tuple(p.strip() for p in location.lower().split(",") if p.strip())


def same_country(a: str, b: str) -> bool:
    """
    Heuristically decide whether two locations are in the same country.

    True when both strings contain the same known country token, or when
    any comma-delimited segment of one equals a segment of the other
    (e.g. "Lyon, France" and "Nice, France").

    Args:
        a: First location string
        b: Second location string

    Returns:
        True if the locations look domestic to each other
    """
    a_lower = (a or "").lower()
    b_lower = (b or "").lower()

    for country in COUNTRY_TOKENS:
        if country in a_lower and country in b_lower:
            return True

    b_segments = set(_segments(b_lower))
    return any(part in b_segments for part in _segments(a_lower))
