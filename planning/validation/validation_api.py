"""
FastAPI endpoints for travel input validation.

Provides REST API for validating travel input, generating follow-up
questions for incomplete input and applying the answers.
"""

import logging
from typing import Dict, List, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from planning.shared.api import ApiResponse, success
from planning.shared.clock import Clock, get_clock
from planning.shared.schemas.inputs import TravelInputData
from planning.validation import (
    analyze_travel_input,
    apply_follow_up_answers,
    detect_incomplete_input,
    generate_follow_up_questions,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/travel-input", tags=["travel-input"])


class TravelInputRequest(BaseModel):
    """Request carrying one travel input record."""

    travel_input: TravelInputData = Field(description="Travel input to analyze")


@router.post("/validate", response_model=ApiResponse)
async def validate_input(
    request: TravelInputRequest,
    clock: Clock = Depends(get_clock),
) -> ApiResponse:
    """
    Validate travel input.

    Returns the validation result, completeness score, incompleteness
    report, and the normalized input when the input is valid.
    """
    analysis = analyze_travel_input(request.travel_input, clock)
    logger.info(
        f"[api=travel-input/validate] valid={analysis.validation.is_valid}, "
        f"score={analysis.completeness_score}"
    )
    return success(analysis.model_dump(mode="json"))


@router.post("/follow-up-questions", response_model=ApiResponse)
async def follow_up_questions(request: TravelInputRequest) -> ApiResponse:
    """Generate follow-up questions for incomplete travel input."""
    questions = generate_follow_up_questions(request.travel_input)
    incomplete = detect_incomplete_input(request.travel_input)
    logger.info(
        f"[api=travel-input/follow-up-questions] questions={len(questions)}, "
        f"areas={incomplete.incomplete_areas}"
    )
    return success(
        {
            "questions": [q.model_dump(mode="json") for q in questions],
            "incomplete_analysis": incomplete.model_dump(mode="json"),
            "has_follow_up": len(questions) > 0,
        }
    )


class FollowUpAnswersRequest(BaseModel):
    """Request carrying a travel input and answers to its follow-up questions."""

    travel_input: TravelInputData = Field(description="Input the questions were asked about")
    answers: Dict[str, Union[str, List[str]]] = Field(
        default_factory=dict, description="Selected option(s) keyed by question id"
    )


@router.post("/follow-up-answers", response_model=ApiResponse)
async def follow_up_answers(
    request: FollowUpAnswersRequest,
    clock: Clock = Depends(get_clock),
) -> ApiResponse:
    """
    Apply follow-up answers to travel input.

    Returns the updated input together with its fresh analysis.
    """
    updated = apply_follow_up_answers(request.travel_input, request.answers)
    analysis = analyze_travel_input(updated, clock)
    logger.info(
        f"[api=travel-input/follow-up-answers] answers={len(request.answers)}, "
        f"score={analysis.completeness_score}"
    )
    return success(
        {
            "travel_input": updated.model_dump(mode="json"),
            "analysis": analysis.model_dump(mode="json"),
        }
    )
