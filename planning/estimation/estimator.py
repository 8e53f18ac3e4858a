"""
Trip cost estimation.

Produces a four-category cost range (transportation, accommodation,
activities, food) plus total for a trip departing from and returning to a
home location. All amounts are heuristic USD ranges from fixed tables in
``planning.estimation.config``.

Rounding is half-up to whole currency units and happens once per category
total, never per leg or per destination.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from planning.estimation.config import (
    ACCOMMODATION_SPREAD,
    ACTIVITIES_SPREAD,
    CURRENCY,
    DEFAULT_STYLE,
    DEFAULT_TRIP_DAYS,
    EXPERIENCE_COST_ADJUSTMENTS,
    EXPERIENCE_MULTIPLIER_BOUNDS,
    FLIGHT_MAX_FACTOR,
    FLIGHT_MIN_FACTOR,
    FOOD_SPREAD,
    HIGH_DEMAND_DESTINATIONS,
    HIGH_DEMAND_MULTIPLIER,
    MEDIUM_DEMAND_DESTINATIONS,
    MEDIUM_DEMAND_MULTIPLIER,
    REGIONAL_BASE_COSTS,
    STYLE_MULTIPLIERS,
    TRANSPORT_BASE_COSTS,
)
from planning.regions import classify_region, same_country
from planning.shared.clock import Clock, SYSTEM_CLOCK
from planning.shared.contracts.cost_estimate import CostEstimate
from planning.shared.errors import InvalidInputError
from planning.shared.schemas.inputs import CostRange, LocationData, TripData


logger = logging.getLogger(__name__)

_log = "[component=estimator] "

Bounds = Tuple[float, float]

CATEGORIES = ("transportation", "accommodation", "activities", "food")


# =============================================================================
# Helpers
# =============================================================================


def round_currency(amount: float) -> int:
    """Round half-up to a whole currency unit."""
    return int(math.floor(amount + 0.5))


def to_cost_range(bounds: Bounds) -> CostRange:
    """Round unrounded (min, max) bounds into a CostRange."""
    low, high = bounds
    return CostRange(min=round_currency(low), max=round_currency(high), currency=CURRENCY)


def build_cost_estimate(
    transportation: CostRange,
    accommodation: CostRange,
    activities: CostRange,
    food: CostRange,
    clock: Clock = SYSTEM_CLOCK,
) -> CostEstimate:
    """Assemble a CostEstimate whose total is the sum of its categories."""
    return CostEstimate(
        transportation=transportation,
        accommodation=accommodation,
        activities=activities,
        food=food,
        total=calculate_total_cost_range(
            [transportation, accommodation, activities, food]
        ),
        currency=CURRENCY,
        last_updated=clock.now(),
    )


def calculate_total_cost_range(cost_ranges: Iterable[CostRange]) -> CostRange:
    """Component-wise sum of mins and maxes."""
    ranges = list(cost_ranges)
    return CostRange(
        min=sum(r.min for r in ranges),
        max=sum(r.max for r in ranges),
        currency=CURRENCY,
    )


def sum_cost_estimates(
    estimates: Sequence[CostEstimate],
    clock: Clock = SYSTEM_CLOCK,
) -> CostEstimate:
    """
    Aggregate several estimates category by category.

    Args:
        estimates: Estimates to add up (e.g. one per destination)
        clock: Source for ``last_updated``

    Returns:
        A new estimate; an empty input yields an all-zero estimate.
    """
    summed = {
        category: CostRange(
            min=sum(getattr(e, category).min for e in estimates),
            max=sum(getattr(e, category).max for e in estimates),
            currency=CURRENCY,
        )
        for category in CATEGORIES
    }
    return build_cost_estimate(clock=clock, **summed)


# =============================================================================
# Multipliers
# =============================================================================


def get_destination_popularity_multiplier(destination: str) -> float:
    """Demand multiplier for flights arriving at ``destination``."""
    lowered = destination.lower()
    if any(name in lowered for name in HIGH_DEMAND_DESTINATIONS):
        return HIGH_DEMAND_MULTIPLIER
    if any(name in lowered for name in MEDIUM_DEMAND_DESTINATIONS):
        return MEDIUM_DEMAND_MULTIPLIER
    return 1.0


def get_experience_cost_multiplier(experiences: Sequence[str]) -> float:
    """
    Activity cost multiplier for a list of experiences.

    Starts at 1.0; each experience contributes the adjustment of the first
    keyword group it matches. The result is clamped to [0.5, 3.0].
    """
    multiplier = 1.0
    for experience in experiences:
        lowered = experience.lower()
        for keywords, adjustment in EXPERIENCE_COST_ADJUSTMENTS:
            if any(keyword in lowered for keyword in keywords):
                multiplier += adjustment
                break

    low, high = EXPERIENCE_MULTIPLIER_BOUNDS
    return max(low, min(high, multiplier))


# =============================================================================
# Transportation
# =============================================================================


def determine_distance_category(origin: str, destination: str) -> str:
    """Classify a leg as domestic, regional or intercontinental."""
    if same_country(origin, destination):
        return "domestic"
    if classify_region(origin) == classify_region(destination):
        return "regional"
    return "intercontinental"


def calculate_flight_cost(origin: str, destination: str) -> Bounds:
    """
    Unrounded (min, max) cost of a single flight leg.

    The arrival end decides the popularity multiplier.
    """
    category = determine_distance_category(origin, destination)
    base_min, base_max = TRANSPORT_BASE_COSTS[category]
    popularity = get_destination_popularity_multiplier(destination)
    return (
        base_min * popularity * FLIGHT_MIN_FACTOR,
        base_max * popularity * FLIGHT_MAX_FACTOR,
    )


def calculate_transportation_costs(
    destinations: Sequence[str],
    home_location: LocationData,
) -> CostRange:
    """
    Round-trip flight costs: home -> each destination in order -> home.

    Args:
        destinations: Non-empty list of destinations in visiting order
        home_location: Departure and return point

    Returns:
        Rounded transportation cost range
    """
    home = home_location.label
    stops: List[str] = [home, *destinations, home]

    total_min = 0.0
    total_max = 0.0
    for origin, destination in zip(stops, stops[1:]):
        leg_min, leg_max = calculate_flight_cost(origin, destination)
        total_min += leg_min
        total_max += leg_max

    return to_cost_range((total_min, total_max))


# =============================================================================
# Stay costs (accommodation, activities, food)
# =============================================================================


def get_regional_base_costs(destination: str) -> Dict[str, float]:
    """Daily base costs for the destination's region (default row as fallback)."""
    region = classify_region(destination)
    return dict(REGIONAL_BASE_COSTS.get(region, REGIONAL_BASE_COSTS["default"]))


def destination_stay_costs(
    destination: str,
    days: float,
    experiences: Sequence[str],
) -> Dict[str, Bounds]:
    """
    Unrounded stay costs for one destination.

    Args:
        destination: Destination name
        days: Days spent there
        experiences: Experiences driving the activity multiplier

    Returns:
        Mapping of accommodation/activities/food to (min, max) bounds
    """
    base = get_regional_base_costs(destination)
    experience_multiplier = get_experience_cost_multiplier(experiences)
    activities_daily = base["activities"] * experience_multiplier

    return {
        "accommodation": (
            base["accommodation"] * days * ACCOMMODATION_SPREAD[0],
            base["accommodation"] * days * ACCOMMODATION_SPREAD[1],
        ),
        "activities": (
            activities_daily * days * ACTIVITIES_SPREAD[0],
            activities_daily * days * ACTIVITIES_SPREAD[1],
        ),
        "food": (
            base["food"] * days * FOOD_SPREAD[0],
            base["food"] * days * FOOD_SPREAD[1],
        ),
    }


def days_per_destination(trip: TripData) -> int:
    """Trip days split evenly across destinations, rounded up."""
    duration = trip.duration or DEFAULT_TRIP_DAYS
    return math.ceil(duration / len(trip.destinations))


def _stay_category_total(trip: TripData, category: str) -> CostRange:
    days = days_per_destination(trip)
    total_min = 0.0
    total_max = 0.0
    for destination in trip.destinations:
        low, high = destination_stay_costs(destination, days, trip.experiences)[category]
        total_min += low
        total_max += high
    return to_cost_range((total_min, total_max))


def calculate_accommodation_costs(trip: TripData) -> CostRange:
    """Accommodation range across all destinations."""
    return _stay_category_total(trip, "accommodation")


def calculate_activities_costs(trip: TripData) -> CostRange:
    """Activities range across all destinations."""
    return _stay_category_total(trip, "activities")


def calculate_food_costs(trip: TripData) -> CostRange:
    """Food range across all destinations."""
    return _stay_category_total(trip, "food")


# =============================================================================
# Public entry points
# =============================================================================


def estimate_costs(
    trip: TripData,
    home_location: Optional[LocationData],
    clock: Clock = SYSTEM_CLOCK,
) -> CostEstimate:
    """
    Estimate the full cost of a trip.

    Args:
        trip: Destinations, experiences and duration
        home_location: Where the traveller departs from and returns to
        clock: Source for ``last_updated``

    Returns:
        CostEstimate with four categories and their total

    Raises:
        InvalidInputError: If the trip has no destinations or no home location
    """
    if not trip.destinations:
        logger.warning(f"{_log}Rejected estimate | reason=no destinations")
        raise InvalidInputError(
            "Trip must have at least one destination for cost estimation",
            field="destinations",
            details={
                "destination_count": 0,
                "has_duration": bool(trip.duration),
                "has_experiences": bool(trip.experiences),
            },
        )

    if home_location is None:
        logger.warning(f"{_log}Rejected estimate | reason=no home location")
        raise InvalidInputError(
            "Home location is required for cost estimation",
            field="home_location",
            details={
                "destination_count": len(trip.destinations),
                "destinations": list(trip.destinations),
            },
        )

    estimate = build_cost_estimate(
        transportation=calculate_transportation_costs(trip.destinations, home_location),
        accommodation=calculate_accommodation_costs(trip),
        activities=calculate_activities_costs(trip),
        food=calculate_food_costs(trip),
        clock=clock,
    )

    logger.info(
        f"{_log}Estimate complete | destinations={len(trip.destinations)}, "
        f"duration={trip.duration}d, home={home_location.label}, "
        f"total={estimate.total.min:.0f}-{estimate.total.max:.0f} {CURRENCY}"
    )
    return estimate


def apply_travel_style_adjustments(
    cost: CostEstimate,
    travel_style: Optional[str],
) -> CostEstimate:
    """
    Rescale an estimate by the travel-style multiplier table.

    Pure: returns a new estimate and leaves ``cost`` untouched, keeping its
    ``last_updated``. Unknown or missing styles use the mid-range row, so a
    mid-range adjustment returns identical values.

    Args:
        cost: Estimate to rescale
        travel_style: budget, mid-range or luxury

    Returns:
        Rescaled estimate whose total is the sum of the rescaled categories
    """
    multipliers = STYLE_MULTIPLIERS.get(
        travel_style or DEFAULT_STYLE, STYLE_MULTIPLIERS[DEFAULT_STYLE]
    )

    def _scale(value: CostRange, factor: float) -> CostRange:
        return to_cost_range((value.min * factor, value.max * factor))

    transportation = _scale(cost.transportation, multipliers["transport"])
    accommodation = _scale(cost.accommodation, multipliers["accommodation"])
    activities = _scale(cost.activities, multipliers["activities"])
    food = _scale(cost.food, multipliers["food"])

    return cost.model_copy(
        update={
            "transportation": transportation,
            "accommodation": accommodation,
            "activities": activities,
            "food": food,
            "total": calculate_total_cost_range(
                [transportation, accommodation, activities, food]
            ),
        }
    )
