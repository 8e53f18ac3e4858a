"""
Trip plan contract.

Defines the structured output the trip planner produces: one plan per
destination plus route, travel times and aggregate cost.
"""

from typing import Dict, List

from pydantic import Field

from planning.shared.contracts.cost_estimate import CostEstimate
from planning.shared.schemas.base import ValueModel


class DestinationPlan(ValueModel):
    """Plan for a single destination."""

    destination: str = Field(description="Destination name as supplied")
    suggested_duration: float = Field(
        ge=0, description="Suggested stay in days (half-day granularity)"
    )
    experiences: List[str] = Field(
        default_factory=list, description="Experiences planned at this destination"
    )
    best_time_to_visit: str = Field(description="Recommended season")
    estimated_cost: CostEstimate = Field(description="Cost of this leg of the trip")


class TripPlan(ValueModel):
    """
    Complete multi-destination trip plan.

    ``travel_times`` is keyed ``"<from>-<to>"`` for every consecutive pair
    in ``suggested_route`` and holds hours.
    """

    destinations: List[DestinationPlan] = Field(
        default_factory=list, description="Per-destination plans in input order"
    )
    total_duration: float = Field(ge=0, description="Total days including buffers")
    total_cost: CostEstimate = Field(description="Aggregated cost of all destinations")
    suggested_route: List[str] = Field(
        default_factory=list, description="Optimized visiting order"
    )
    travel_times: Dict[str, float] = Field(
        default_factory=dict, description="Hours between consecutive route stops"
    )
