"""
Incompleteness detection.

Finds the parts of a travel input that are too vague or missing to plan
well, and suggests what the user should add.
"""

from typing import List, Optional

from planning.shared.contracts.validation_output import IncompletenessReport
from planning.shared.schemas.inputs import TravelInputData
from planning.validation.config import (
    VAGUE_DESTINATION_TERMS,
    VAGUE_EXPERIENCE_MAX_LENGTH,
    VAGUE_EXPERIENCE_TERMS,
)


def matched_vague_destination_term(destination: str) -> Optional[str]:
    """First vague term contained in ``destination``, or None."""
    lowered = destination.lower()
    return next((term for term in VAGUE_DESTINATION_TERMS if term in lowered), None)


def is_vague_destination(destination: str) -> bool:
    return matched_vague_destination_term(destination) is not None


def is_vague_experience(experience: str) -> bool:
    """Short experiences built around a generic word ("fun", "adventure")."""
    lowered = experience.lower().strip()
    return len(lowered) < VAGUE_EXPERIENCE_MAX_LENGTH and any(
        term in lowered for term in VAGUE_EXPERIENCE_TERMS
    )


def find_vague_destinations(input_data: TravelInputData) -> List[str]:
    return [d for d in input_data.destinations if is_vague_destination(d)]


def find_vague_experiences(input_data: TravelInputData) -> List[str]:
    return [e for e in input_data.experiences if is_vague_experience(e)]


def is_budget_missing(input_data: TravelInputData) -> bool:
    """True when no budget range is given or it is all zeros."""
    prefs = input_data.preferences
    budget = prefs.budget_range if prefs else None
    return budget is None or (budget.min == 0 and budget.max == 0)


def detect_incomplete_input(input_data: TravelInputData) -> IncompletenessReport:
    """
    Detect incomplete or vague input that needs follow-up.

    Each finding adds one incomplete area and one suggestion:
    - destinations: a destination names a whole continent or "anywhere"
    - experiences: a short, generic experience such as "fun"
    - travel-style: no travel style given
    - interests: no interests, or an empty list
    - budget: no budget range, or a zero range
    - dates: fixed flexibility without both start and end dates

    Args:
        input_data: Travel input to inspect

    Returns:
        IncompletenessReport listing areas and suggestions
    """
    incomplete_areas: List[str] = []
    suggestions: List[str] = []
    prefs = input_data.preferences

    vague_destinations = find_vague_destinations(input_data)
    if vague_destinations:
        incomplete_areas.append("destinations")
        suggestions.append(
            f"Specify which countries or cities in {', '.join(vague_destinations)}"
        )

    if find_vague_experiences(input_data):
        incomplete_areas.append("experiences")
        suggestions.append(
            'Describe specific activities you want to do '
            '(e.g., "hiking", "museums", "local food tours")'
        )

    if not (prefs and prefs.travel_style):
        incomplete_areas.append("travel-style")
        suggestions.append(
            "Specify your preferred travel style (budget, mid-range, or luxury)"
        )

    if not (prefs and prefs.interests):
        incomplete_areas.append("interests")
        suggestions.append("Select your travel interests to get better recommendations")

    if is_budget_missing(input_data):
        incomplete_areas.append("budget")
        suggestions.append("Provide a budget range to get realistic recommendations")

    timeframe = input_data.timeframe
    if (
        timeframe is not None
        and timeframe.flexibility == "fixed"
        and (timeframe.start_date is None or timeframe.end_date is None)
    ):
        incomplete_areas.append("dates")
        suggestions.append("Provide specific travel dates since you selected fixed dates")

    return IncompletenessReport(
        needs_follow_up=len(incomplete_areas) > 0,
        incomplete_areas=incomplete_areas,
        suggestions=suggestions,
    )
