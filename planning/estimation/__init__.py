"""
Cost estimation for trips.

Turns a trip (destinations, duration, experiences) and a home location
into transportation, accommodation, activities and food cost ranges.
"""

from planning.estimation.estimator import (
    apply_travel_style_adjustments,
    estimate_costs,
    sum_cost_estimates,
)

__all__ = ["apply_travel_style_adjustments", "estimate_costs", "sum_cost_estimates"]
