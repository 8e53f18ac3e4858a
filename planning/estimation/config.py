"""
Pricing tables for the cost estimator.

All values are USD. Tables are read-only mappings loaded at import time.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


CURRENCY = "USD"

# Duration assumed when a trip arrives without one.
DEFAULT_TRIP_DAYS = 7

# Per-category multipliers applied by apply_travel_style_adjustments.
STYLE_MULTIPLIERS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "budget": MappingProxyType(
        {"accommodation": 0.6, "food": 0.7, "activities": 0.5, "transport": 0.8}
    ),
    "mid-range": MappingProxyType(
        {"accommodation": 1.0, "food": 1.0, "activities": 1.0, "transport": 1.0}
    ),
    "luxury": MappingProxyType(
        {"accommodation": 2.5, "food": 1.8, "activities": 2.0, "transport": 1.5}
    ),
})
DEFAULT_STYLE = "mid-range"

# Daily base costs per region. "other" regions use "default".
REGIONAL_BASE_COSTS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "europe": MappingProxyType({"accommodation": 80, "food": 45, "activities": 60}),
    "asia": MappingProxyType({"accommodation": 40, "food": 25, "activities": 35}),
    "americas": MappingProxyType({"accommodation": 90, "food": 50, "activities": 70}),
    "africa": MappingProxyType({"accommodation": 60, "food": 30, "activities": 50}),
    "oceania": MappingProxyType({"accommodation": 120, "food": 60, "activities": 80}),
    "default": MappingProxyType({"accommodation": 70, "food": 40, "activities": 55}),
})

# Flight base costs per leg, by distance category.
TRANSPORT_BASE_COSTS: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "domestic": (200, 600),
    "regional": (400, 1200),
    "intercontinental": (800, 2500),
})

# Asymmetric widening applied to every flight leg.
FLIGHT_MIN_FACTOR = 0.9
FLIGHT_MAX_FACTOR = 1.1

HIGH_DEMAND_DESTINATIONS = ("paris", "london", "tokyo", "new york", "rome", "barcelona")
HIGH_DEMAND_MULTIPLIER = 1.3
MEDIUM_DEMAND_DESTINATIONS = ("berlin", "madrid", "seoul", "bangkok", "sydney")
MEDIUM_DEMAND_MULTIPLIER = 1.1

# (min factor, max factor) spread per stay category.
ACCOMMODATION_SPREAD = (0.8, 1.2)
ACTIVITIES_SPREAD = (0.7, 1.3)
FOOD_SPREAD = (0.75, 1.25)

# Experience keyword groups and their activity-cost adjustment. Only the
# first matching group counts for a given experience.
EXPERIENCE_COST_ADJUSTMENTS: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("luxury", "private", "helicopter"), 0.5),
    (("safari", "diving", "climbing"), 0.3),
    (("tour", "museum", "cultural"), 0.1),
    (("hiking", "walking", "free"), -0.1),
)
EXPERIENCE_MULTIPLIER_BOUNDS = (0.5, 3.0)
