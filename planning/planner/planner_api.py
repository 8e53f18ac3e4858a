"""
FastAPI endpoints for the trip planner.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from planning.planner import plan_trip
from planning.shared.api import ApiResponse, success
from planning.shared.clock import Clock, get_clock
from planning.shared.schemas.inputs import TravelPreferences


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/trips", tags=["trips"])


class PlanTripRequest(BaseModel):
    """Request to plan a trip."""

    destinations: List[str] = Field(description="Destinations to visit")
    preferences: TravelPreferences = Field(
        default_factory=TravelPreferences, description="Traveller preferences"
    )


@router.post("/plan", response_model=ApiResponse)
async def plan(request: PlanTripRequest, clock: Clock = Depends(get_clock)) -> ApiResponse:
    """
    Plan a trip.

    Returns per-destination plans, the suggested route, travel times and
    aggregate duration and cost. An empty destination list is a 400.
    """
    logger.info(f"[api=trips/plan] Planning | destinations={len(request.destinations)}")
    trip_plan = plan_trip(request.destinations, request.preferences, clock=clock)
    return success(trip_plan.model_dump(mode="json"))
