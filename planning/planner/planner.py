"""
Trip planning.

Builds a per-destination plan (duration, experiences, season, cost), an
optimized visiting order, travel-time estimates between consecutive stops
and the aggregate duration and cost of the whole trip.
"""

import logging
import math
from typing import Dict, List, Sequence

from planning.estimation.config import DEFAULT_STYLE, STYLE_MULTIPLIERS
from planning.estimation.estimator import (
    build_cost_estimate,
    destination_stay_costs,
    sum_cost_estimates,
    to_cost_range,
)
from planning.planner.config import (
    BEST_TIME_TO_VISIT,
    DEFAULT_BEST_TIME,
    DEFAULT_CONFIG,
    DEFAULT_TRANSPORT_BASE,
    EXPERIENCE_DURATION_MAP,
    LOCAL_STOP_KEYWORDS,
    TRANSPORT_BASE_BY_REGION,
    TRANSPORT_SPREAD,
    TRANSPORT_STYLE_MULTIPLIERS,
    PlannerConfig,
)
from planning.regions import REGION_ORDER, classify_region
from planning.shared.clock import Clock, SYSTEM_CLOCK
from planning.shared.contracts.cost_estimate import CostEstimate
from planning.shared.contracts.trip_plan import DestinationPlan, TripPlan
from planning.shared.errors import InvalidInputError
from planning.shared.schemas.inputs import CostRange, TravelPreferences


logger = logging.getLogger(__name__)


def calculate_destination_duration(
    experiences: Sequence[str],
    config: PlannerConfig = DEFAULT_CONFIG,
) -> float:
    """
    Suggested stay length for a set of experiences.

    Starts from the base stay and adds the table value of the first
    matching keyword for each experience (unmatched experiences add the
    default). The sum is rounded up to the next half day and never falls
    below the base.

    Args:
        experiences: Planned experiences
        config: Planner configuration

    Returns:
        Days, in half-day steps
    """
    total_days = config.base_destination_days
    for experience in experiences:
        lowered = experience.lower()
        total_days += next(
            (days for key, days in EXPERIENCE_DURATION_MAP.items() if key in lowered),
            config.default_experience_days,
        )

    return max(math.ceil(total_days * 2) / 2, config.base_destination_days)


def determine_best_time_to_visit(destination: str) -> str:
    """Recommended season, keyed by the destination's region."""
    return BEST_TIME_TO_VISIT.get(classify_region(destination), DEFAULT_BEST_TIME)


def estimate_transportation_cost(destination: str, travel_style: str) -> CostRange:
    """Transportation to a single destination, adjusted for travel style."""
    base = TRANSPORT_BASE_BY_REGION.get(classify_region(destination), DEFAULT_TRANSPORT_BASE)
    adjusted = base * TRANSPORT_STYLE_MULTIPLIERS.get(travel_style, 1.0)
    return to_cost_range((adjusted * TRANSPORT_SPREAD[0], adjusted * TRANSPORT_SPREAD[1]))


def estimate_destination_cost(
    destination: str,
    duration: float,
    experiences: Sequence[str],
    travel_style: str,
    clock: Clock = SYSTEM_CLOCK,
) -> CostEstimate:
    """
    Cost of one destination stay.

    Uses the estimator's regional stay costs over ``duration`` days,
    rescaled by the travel-style table, plus a style-adjusted one-way
    transportation base.
    """
    multipliers = STYLE_MULTIPLIERS.get(travel_style, STYLE_MULTIPLIERS[DEFAULT_STYLE])
    stay = destination_stay_costs(destination, duration, experiences)

    def _styled(category: str) -> CostRange:
        low, high = stay[category]
        factor = multipliers[category]
        return to_cost_range((low * factor, high * factor))

    return build_cost_estimate(
        transportation=estimate_transportation_cost(destination, travel_style),
        accommodation=_styled("accommodation"),
        activities=_styled("activities"),
        food=_styled("food"),
        clock=clock,
    )


def create_destination_plan(
    destination: str,
    preferences: TravelPreferences,
    config: PlannerConfig = DEFAULT_CONFIG,
    clock: Clock = SYSTEM_CLOCK,
) -> DestinationPlan:
    """Build the plan for a single destination from the traveller's preferences."""
    experiences = list(preferences.interests or config.default_experiences)
    travel_style = preferences.travel_style or config.default_travel_style
    suggested_duration = calculate_destination_duration(experiences, config)

    return DestinationPlan(
        destination=destination,
        suggested_duration=suggested_duration,
        experiences=experiences,
        best_time_to_visit=determine_best_time_to_visit(destination),
        estimated_cost=estimate_destination_cost(
            destination, suggested_duration, experiences, travel_style, clock
        ),
    )


def group_destinations_by_region(destinations: Sequence[str]) -> List[List[str]]:
    """Non-empty region groups in fixed region order, input order kept inside."""
    groups: Dict[str, List[str]] = {region: [] for region in REGION_ORDER}
    for destination in destinations:
        groups[classify_region(destination)].append(destination)
    return [group for group in groups.values() if group]


def optimize_route(destinations: Sequence[str]) -> List[str]:
    """
    Order destinations so that stops in the same region are adjacent.

    Regions are visited europe, asia, americas, africa, oceania, other.
    No ordering is attempted inside a region. Trips with fewer than two
    destinations are returned unchanged.
    """
    if len(destinations) <= 1:
        return list(destinations)

    return [d for group in group_destinations_by_region(destinations) for d in group]


def estimate_travel_time(
    origin: str,
    destination: str,
    config: PlannerConfig = DEFAULT_CONFIG,
) -> float:
    """Hours between two stops: short hop for two local stops, long otherwise."""
    origin_local = any(k in origin.lower() for k in LOCAL_STOP_KEYWORDS)
    destination_local = any(k in destination.lower() for k in LOCAL_STOP_KEYWORDS)
    if origin_local and destination_local:
        return config.domestic_travel_hours
    return config.international_travel_hours


def calculate_travel_times(
    route: Sequence[str],
    config: PlannerConfig = DEFAULT_CONFIG,
) -> Dict[str, float]:
    """Travel hours for each consecutive pair, keyed ``"<from>-<to>"``."""
    return {
        f"{origin}-{destination}": estimate_travel_time(origin, destination, config)
        for origin, destination in zip(route, route[1:])
    }


def calculate_total_duration(
    destination_plans: Sequence[DestinationPlan],
    config: PlannerConfig = DEFAULT_CONFIG,
) -> float:
    """Sum of stays plus one buffer between each pair of destinations."""
    stay_days = sum(plan.suggested_duration for plan in destination_plans)
    buffer_days = (
        (len(destination_plans) - 1) * config.travel_buffer_days
        if len(destination_plans) > 1
        else 0
    )
    return stay_days + buffer_days


def plan_trip(
    destinations: Sequence[str],
    preferences: TravelPreferences,
    config: PlannerConfig = DEFAULT_CONFIG,
    clock: Clock = SYSTEM_CLOCK,
) -> TripPlan:
    """
    Plan a complete trip.

    Args:
        destinations: Destinations in the order the traveller listed them
        preferences: Traveller preferences (interests, travel style)
        config: Planner configuration
        clock: Source for cost ``last_updated`` stamps

    Returns:
        TripPlan with per-destination plans, route, travel times and totals

    Raises:
        InvalidInputError: If no destinations are given
    """
    if not destinations:
        logger.warning("[component=planner] Rejected plan | reason=no destinations")
        raise InvalidInputError(
            "At least one destination is required for trip planning",
            field="destinations",
            details={"destination_count": 0},
        )

    _log = f"[component=planner] [destinations={len(destinations)}] "
    logger.info(
        f"{_log}Planning trip | style={preferences.travel_style or config.default_travel_style}, "
        f"interests={len(preferences.interests or [])}"
    )

    destination_plans = [
        create_destination_plan(destination, preferences, config, clock)
        for destination in destinations
    ]

    suggested_route = optimize_route(destinations)
    travel_times = calculate_travel_times(suggested_route, config)
    total_duration = calculate_total_duration(destination_plans, config)
    total_cost = sum_cost_estimates([p.estimated_cost for p in destination_plans], clock)

    logger.info(
        f"{_log}Plan complete | route={' -> '.join(suggested_route)}, "
        f"total_duration={total_duration}d, "
        f"total={total_cost.total.min:.0f}-{total_cost.total.max:.0f} {total_cost.currency}"
    )

    return TripPlan(
        destinations=destination_plans,
        total_duration=total_duration,
        total_cost=total_cost,
        suggested_route=suggested_route,
        travel_times=travel_times,
    )
