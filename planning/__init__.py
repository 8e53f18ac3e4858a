"""
Planning package for the trip planning backend.

This package contains:
- shared/: Common infrastructure (schemas, contracts, errors, clock, settings, logging, API envelope)
- regions/: Keyword-based region classification
- estimation/: Trip cost estimation
- planner/: Per-destination plans, routing and trip totals
- validation/: Travel input validation, follow-up questions and completeness scoring
- graph/: Pipeline graph (validate -> plan -> estimate)
"""

from planning.estimation import estimate_costs
from planning.graph.build import create_pipeline_graph
from planning.planner import plan_trip
from planning.validation import validate_travel_input

__all__ = [
    "create_pipeline_graph",
    "estimate_costs",
    "plan_trip",
    "validate_travel_input",
]
