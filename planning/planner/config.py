"""
Configuration for the trip planner.

Centralizes planner tunables and lookup tables so durations, seasons and
transport bases can be reviewed without reading the planning code.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class PlannerConfig:
    """
    Configuration for the trip planner.

    Attributes:
        base_destination_days: Minimum days spent at any destination
        travel_buffer_days: Days added between consecutive destinations
        default_experience_days: Days for an experience with no table match
        default_experiences: Experiences assumed when no interests are given
        default_travel_style: Style used when preferences leave it unset
        domestic_travel_hours: Hours between two city/town/village stops
        international_travel_hours: Hours for any other hop
    """

    base_destination_days: float = 3
    travel_buffer_days: float = 1
    default_experience_days: float = 1
    default_experiences: Tuple[str, ...] = ("sightseeing", "local culture")
    default_travel_style: str = "mid-range"
    domestic_travel_hours: float = 4
    international_travel_hours: float = 8


# Default configuration instance
DEFAULT_CONFIG = PlannerConfig()


# Days each experience adds to a stay. Checked in order; the first key
# contained in the experience text wins.
EXPERIENCE_DURATION_MAP: Mapping[str, float] = MappingProxyType({
    # Cultural
    "museum": 0.5,
    "historical site": 1,
    "cultural tour": 1,
    "local festival": 2,
    "art gallery": 0.5,
    "architecture": 1,
    # Adventure
    "hiking": 1,
    "trekking": 3,
    "climbing": 2,
    "safari": 3,
    "diving": 1,
    "snorkeling": 0.5,
    "skiing": 2,
    "surfing": 1,
    # Food & lifestyle
    "food tour": 0.5,
    "cooking class": 0.5,
    "wine tasting": 0.5,
    "shopping": 1,
    "nightlife": 0.5,
    "spa": 1,
    # Nature
    "beach": 2,
    "national park": 2,
    "wildlife": 2,
    "scenic drive": 1,
    "boat tour": 0.5,
})

DEFAULT_BEST_TIME = "Year-round (Check local seasons)"

BEST_TIME_TO_VISIT: Mapping[str, str] = MappingProxyType({
    "europe": "May-September (Spring/Summer)",
    "asia": "October-March (Dry season)",
    "americas": "April-October (Mild weather)",
})

# One-way transportation base per destination, by region.
DEFAULT_TRANSPORT_BASE = 500
TRANSPORT_BASE_BY_REGION: Mapping[str, float] = MappingProxyType({
    "europe": 400,
    "asia": 800,
    "americas": 300,
})

TRANSPORT_STYLE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "budget": 0.7,
    "mid-range": 1.0,
    "luxury": 1.8,
})
TRANSPORT_SPREAD = (0.8, 1.3)

# Substrings that mark a stop as a local city/town for travel-time purposes.
LOCAL_STOP_KEYWORDS = ("city", "town", "village")
