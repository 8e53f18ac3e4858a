"""
FastAPI endpoints for the planning pipeline.

Provides the API to run validate -> plan -> estimate for one travel input.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from planning.graph.build import run_pipeline
from planning.shared.api import ApiResponse, success
from planning.shared.clock import Clock, get_clock
from planning.shared.schemas.inputs import LocationData, TravelInputData


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pipeline", tags=["pipeline"])


# ============================================================================
# Request/Response Models
# ============================================================================


class PipelineRunRequest(BaseModel):
    """Request to run the planning pipeline."""

    travel_input: TravelInputData = Field(description="Raw travel input")
    home_location: Optional[LocationData] = Field(
        default=None,
        description="Departure location (defaults to preferences.home_location)",
    )


class PipelineRunResult(BaseModel):
    """Outcome of one pipeline run."""

    session_id: str = Field(description="Pipeline session identifier")
    status: str = Field(description="'complete', 'invalid_input' or 'error'")
    validation: Optional[Dict[str, Any]] = Field(default=None)
    completeness_score: Optional[int] = Field(default=None)
    incomplete_analysis: Optional[Dict[str, Any]] = Field(default=None)
    follow_up_questions: List[Dict[str, Any]] = Field(default_factory=list)
    trip_plan: Optional[Dict[str, Any]] = Field(default=None)
    cost_estimate: Optional[Dict[str, Any]] = Field(default=None)
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


def _status(final_state: Dict[str, Any]) -> str:
    if final_state.get("errors"):
        return "error"
    validation = final_state.get("validation") or {}
    if not validation.get("is_valid"):
        return "invalid_input"
    return "complete"


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/run", response_model=ApiResponse)
async def run(request: PipelineRunRequest, clock: Clock = Depends(get_clock)) -> ApiResponse:
    """
    Run the full planning pipeline.

    Validation gates planning: invalid input returns the validation result
    and follow-up questions without a plan. The estimate is only produced
    when a home location is known.
    """
    session_id = str(uuid.uuid4())
    _log = f"[session={session_id}] [graph=pipeline] [api=run] "

    logger.info(
        f"{_log}Pipeline starting | destinations={len(request.travel_input.destinations)}, "
        f"has_home={request.home_location is not None}"
    )

    final_state = run_pipeline(
        request.travel_input,
        home_location=request.home_location,
        session_id=session_id,
        clock=clock,
    )

    result = PipelineRunResult(
        session_id=session_id,
        status=_status(final_state),
        validation=final_state.get("validation"),
        completeness_score=final_state.get("completeness_score"),
        incomplete_analysis=final_state.get("incomplete_analysis"),
        follow_up_questions=final_state.get("follow_up_questions") or [],
        trip_plan=final_state.get("trip_plan"),
        cost_estimate=final_state.get("cost_estimate"),
        messages=final_state.get("messages", []),
        errors=final_state.get("errors", []),
    )

    logger.info(
        f"{_log}Pipeline finished | status={result.status}, "
        f"plan={'done' if result.trip_plan else 'missing'}, "
        f"estimate={'done' if result.cost_estimate else 'missing'}, "
        f"errors={len(result.errors)}"
    )
    return success(result.model_dump(mode="json"))
