"""Output contracts returned by the planning core."""

from planning.shared.contracts.cost_estimate import CostEstimate
from planning.shared.contracts.trip_plan import DestinationPlan, TripPlan
from planning.shared.contracts.validation_output import (
    FollowUpQuestion,
    IncompletenessReport,
    TravelInputAnalysis,
    ValidationResult,
)

__all__ = [
    "CostEstimate",
    "DestinationPlan",
    "TripPlan",
    "FollowUpQuestion",
    "IncompletenessReport",
    "TravelInputAnalysis",
    "ValidationResult",
]
