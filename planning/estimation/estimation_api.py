"""
FastAPI endpoints for cost estimation.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from planning.estimation import apply_travel_style_adjustments, estimate_costs
from planning.shared.api import ApiResponse, success
from planning.shared.clock import Clock, get_clock
from planning.shared.schemas.inputs import LocationData, TripData


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/costs", tags=["costs"])


class EstimateCostsRequest(BaseModel):
    """Request to estimate trip costs."""

    trip: TripData = Field(description="Trip to estimate")
    home_location: Optional[LocationData] = Field(
        default=None, description="Departure and return location"
    )
    travel_style: Optional[str] = Field(
        default=None, description="Rescale the estimate for this travel style"
    )


@router.post("/estimate", response_model=ApiResponse)
async def estimate(
    request: EstimateCostsRequest,
    clock: Clock = Depends(get_clock),
) -> ApiResponse:
    """
    Estimate the cost of a trip.

    A trip without destinations or a request without a home location is a
    400 with code INVALID_INPUT.
    """
    cost = estimate_costs(request.trip, request.home_location, clock=clock)
    if request.travel_style:
        cost = apply_travel_style_adjustments(cost, request.travel_style)
        logger.info(f"[api=costs/estimate] Applied travel style '{request.travel_style}'")
    return success(cost.model_dump(mode="json"))
