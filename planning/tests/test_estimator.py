"""
Unit tests for the cost estimator.

Tests transportation legs, regional stay costs, experience and popularity
multipliers, totals, input errors and travel-style adjustments.
"""

from datetime import datetime, timezone

import pytest

from planning.estimation.estimator import (
    apply_travel_style_adjustments,
    calculate_transportation_costs,
    days_per_destination,
    determine_distance_category,
    estimate_costs,
    get_destination_popularity_multiplier,
    get_experience_cost_multiplier,
    round_currency,
    sum_cost_estimates,
)
from planning.shared.clock import FixedClock
from planning.shared.errors import InvalidInputError
from planning.shared.schemas.inputs import Coordinates, LocationData, TripData


# ============================================================================
# Test Fixtures
# ============================================================================

CLOCK = FixedClock(datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc))


def _make_home(city="New York", country="United States"):
    """Create a home location for testing."""
    return LocationData(
        city=city,
        country=country,
        coordinates=Coordinates(lat=40.71, lng=-74.0),
    )


def _make_paris_trip():
    """Single-destination trip used in the reference example."""
    return TripData(
        destinations=["Paris, France"],
        duration=5,
        experiences=["museum tour"],
    )


# ============================================================================
# Tests
# ============================================================================


class TestEstimateCosts:
    """Tests for estimate_costs."""

    def test_paris_reference_example(self):
        """Paris from New York over 5 days matches the hand-computed figures."""
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)

        assert (cost.accommodation.min, cost.accommodation.max) == (320, 480)
        assert (cost.transportation.min, cost.transportation.max) == (1872, 7150)
        assert (cost.activities.min, cost.activities.max) == (231, 429)
        assert (cost.food.min, cost.food.max) == (169, 281)
        assert (cost.total.min, cost.total.max) == (2592, 8340)
        assert cost.currency == "USD"
        assert cost.last_updated == CLOCK.now()

    def test_fractional_duration_rounds_stay_up(self):
        """A 4.5-day trip is accepted and priced as a 5-day stay."""
        trip = TripData(destinations=["Paris, France"], duration=4.5, experiences=["museum tour"])
        cost = estimate_costs(trip, _make_home(), clock=CLOCK)

        assert trip.duration == 4.5
        assert days_per_destination(trip) == 5
        assert (cost.accommodation.min, cost.accommodation.max) == (320, 480)
        assert (cost.total.min, cost.total.max) == (2592, 8340)

    def test_total_is_sum_of_components(self):
        """Total min/max equal the sum of the four categories."""
        trip = TripData(
            destinations=["Tokyo, Japan", "Bangkok", "Sydney", "Atlantis"],
            duration=13,
            experiences=["diving", "private helicopter ride", "walking tour"],
        )
        cost = estimate_costs(trip, _make_home("London", "UK"), clock=CLOCK)

        parts = [cost.transportation, cost.accommodation, cost.activities, cost.food]
        assert cost.total.min == sum(p.min for p in parts)
        assert cost.total.max == sum(p.max for p in parts)
        assert cost.total.min <= cost.total.max
        assert all(p.min >= 0 and p.min <= p.max for p in parts)

    def test_unknown_destination_uses_default_region(self):
        """Unrecognized destinations get the default regional profile."""
        trip = TripData(destinations=["Atlantis"], duration=2, experiences=[])
        cost = estimate_costs(trip, _make_home(), clock=CLOCK)

        # default accommodation 70/night over 2 nights
        assert (cost.accommodation.min, cost.accommodation.max) == (112, 168)

    def test_missing_destinations_raises(self):
        """A trip without destinations is rejected before computation."""
        with pytest.raises(InvalidInputError) as exc_info:
            estimate_costs(TripData(destinations=[], duration=3), _make_home())

        assert exc_info.value.field == "destinations"
        assert exc_info.value.code == "INVALID_INPUT"

    def test_missing_home_location_raises(self):
        """A missing home location is rejected with field context."""
        with pytest.raises(InvalidInputError) as exc_info:
            estimate_costs(_make_paris_trip(), None)

        assert exc_info.value.field == "home_location"
        assert exc_info.value.details["destinations"] == ["Paris, France"]


class TestTransportation:
    """Tests for flight legs and distance categories."""

    def test_domestic_round_trip(self):
        """Chicago -> New York -> Chicago uses domestic fares both ways."""
        cost = calculate_transportation_costs(["New York, USA"], _make_home("Chicago", "USA"))

        # out: 200/600 x 1.3 (New York), back: 200/600 x 1.0
        assert (cost.min, cost.max) == (414, 1518)

    def test_regional_round_trip(self):
        """London -> Berlin -> London stays within Europe."""
        cost = calculate_transportation_costs(["Berlin, Germany"], _make_home("London", "UK"))

        assert (cost.min, cost.max) == (864, 3168)

    def test_multi_destination_adds_intermediate_legs(self):
        """Each consecutive pair of destinations adds a leg."""
        home = _make_home("Chicago", "USA")
        single = calculate_transportation_costs(["Atlantis"], home)
        double = calculate_transportation_costs(["Atlantis", "Lemuria"], home)

        assert double.min > single.min
        assert double.max > single.max

    def test_distance_categories(self):
        """Same country, same region and different continents."""
        assert determine_distance_category("Lyon, France", "Nice, France") == "domestic"
        assert determine_distance_category("Rome, Italy", "Vienna, Austria") == "regional"
        assert determine_distance_category("Tokyo, Japan", "Paris, France") == "intercontinental"


class TestMultipliers:
    """Tests for popularity and experience multipliers."""

    def test_popularity_tiers(self):
        assert get_destination_popularity_multiplier("Paris, France") == 1.3
        assert get_destination_popularity_multiplier("Berlin") == 1.1
        assert get_destination_popularity_multiplier("Lima, Peru") == 1.0

    def test_experience_multiplier_defaults_to_one(self):
        assert get_experience_cost_multiplier([]) == 1.0
        assert get_experience_cost_multiplier(["sunbathing"]) == 1.0

    def test_first_matching_group_counts_once(self):
        """'private tour' counts as premium only, not also as a tour."""
        assert get_experience_cost_multiplier(["private tour"]) == pytest.approx(1.5)
        assert get_experience_cost_multiplier(["hiking museum"]) == pytest.approx(1.1)

    def test_multiplier_is_clamped(self):
        assert get_experience_cost_multiplier(["luxury yacht"] * 6) == 3.0
        assert get_experience_cost_multiplier(["free walking"] * 10) == 0.5

    def test_days_per_destination_rounds_up(self):
        trip = TripData(destinations=["Paris", "Rome"], duration=5)
        assert days_per_destination(trip) == 3

    def test_zero_duration_uses_default_week(self):
        trip = TripData(destinations=["Paris"], duration=0)
        assert days_per_destination(trip) == 7

    def test_round_currency_is_half_up(self):
        assert round_currency(168.5) == 169
        assert round_currency(2.5) == 3
        assert round_currency(2.49) == 2


class TestTravelStyleAdjustments:
    """Tests for apply_travel_style_adjustments."""

    def test_mid_range_is_identity(self):
        """Mid-range multipliers are all 1.0."""
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)
        adjusted = apply_travel_style_adjustments(cost, "mid-range")

        assert adjusted.model_dump() == cost.model_dump()

    def test_budget_rescales_each_category(self):
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)
        adjusted = apply_travel_style_adjustments(cost, "budget")

        assert (adjusted.accommodation.min, adjusted.accommodation.max) == (192, 288)
        assert (adjusted.food.min, adjusted.food.max) == (118, 197)
        parts = [adjusted.transportation, adjusted.accommodation, adjusted.activities, adjusted.food]
        assert adjusted.total.min == sum(p.min for p in parts)
        assert adjusted.total.max == sum(p.max for p in parts)

    def test_does_not_mutate_input(self):
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)
        before = cost.model_dump()
        apply_travel_style_adjustments(cost, "luxury")

        assert cost.model_dump() == before

    def test_unknown_style_uses_mid_range(self):
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)

        assert apply_travel_style_adjustments(cost, "adventure").model_dump() == cost.model_dump()
        assert apply_travel_style_adjustments(cost, None).model_dump() == cost.model_dump()

    def test_luxury_is_more_expensive(self):
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)
        adjusted = apply_travel_style_adjustments(cost, "luxury")

        assert adjusted.total.min > cost.total.min
        assert adjusted.total.max > cost.total.max


class TestSumCostEstimates:
    """Tests for sum_cost_estimates."""

    def test_sums_category_by_category(self):
        cost = estimate_costs(_make_paris_trip(), _make_home(), clock=CLOCK)
        summed = sum_cost_estimates([cost, cost], clock=CLOCK)

        assert summed.accommodation.min == 2 * cost.accommodation.min
        assert summed.total.max == 2 * cost.total.max

    def test_empty_input_is_zero(self):
        summed = sum_cost_estimates([], clock=CLOCK)
        assert (summed.total.min, summed.total.max) == (0, 0)
