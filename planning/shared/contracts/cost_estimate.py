"""
Cost estimate contract.

Defines the four-category cost estimate returned by the estimator and
embedded in every destination plan.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from planning.shared.schemas.base import ValueModel
from planning.shared.schemas.inputs import CostRange, DEFAULT_CURRENCY


class CostEstimate(ValueModel):
    """
    Multi-category cost estimate.

    ``total`` is always the component-wise sum of the four categories.
    """

    transportation: CostRange = Field(description="Flights and transfers")
    accommodation: CostRange = Field(description="Lodging")
    activities: CostRange = Field(description="Tours, tickets and experiences")
    food: CostRange = Field(description="Meals and drinks")
    total: CostRange = Field(description="Sum of all categories")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code")
    last_updated: datetime = Field(description="When the estimate was computed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "transportation": {"min": 1872, "max": 7150, "currency": "USD"},
                "accommodation": {"min": 320, "max": 480, "currency": "USD"},
                "activities": {"min": 231, "max": 429, "currency": "USD"},
                "food": {"min": 169, "max": 281, "currency": "USD"},
                "total": {"min": 2592, "max": 8340, "currency": "USD"},
                "currency": "USD",
                "last_updated": "2026-05-01T12:00:00Z",
            }
        }
    )
