"""
Trip planner.

Turns destinations and preferences into per-destination plans, a route
grouped by region, travel times and aggregate duration and cost.
"""

from planning.planner.planner import (
    calculate_destination_duration,
    optimize_route,
    plan_trip,
)

__all__ = ["calculate_destination_duration", "optimize_route", "plan_trip"]
