"""
Follow-up question generation.

Question ids are derived from the triggering field (and index, for
destinations), so the same input always yields the same questions.
Templates are immutable; every call builds fresh question objects.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from planning.shared.contracts.validation_output import FollowUpQuestion
from planning.shared.schemas.inputs import TravelInputData
from planning.validation.incompleteness import (
    find_vague_destinations,
    find_vague_experiences,
    is_budget_missing,
    matched_vague_destination_term,
)


EXPERIENCE_QUESTION_ID = "experience-clarification"
BUDGET_QUESTION_ID = "budget-range"
TRAVEL_STYLE_QUESTION_ID = "travel-style"
DESTINATION_QUESTION_PREFIX = "destination-"


@dataclass(frozen=True)
class QuestionTemplate:
    """
    Immutable multiple-choice question template.

    Attributes:
        question: Question text
        options: Answer choices, in display order
        context: Default context line
    """

    question: str
    options: Tuple[str, ...]
    context: str = ""

    def build(self, question_id: str, context: Optional[str] = None) -> FollowUpQuestion:
        """Instantiate a new question with its own copy of the options."""
        return FollowUpQuestion(
            id=question_id,
            question=self.question,
            type="multiple-choice",
            options=list(self.options),
            context=context if context is not None else self.context,
        )


# =============================================================================
# Question templates
# =============================================================================

_GENERIC_DESTINATION_TEMPLATE = QuestionTemplate(
    question="Which part of the world would you like to start with?",
    options=("Europe", "Asia", "The Americas", "Africa", "Oceania", "Surprise me"),
)

DESTINATION_TEMPLATES: Mapping[str, QuestionTemplate] = MappingProxyType({
    "europe": QuestionTemplate(
        question="Which countries or regions in Europe interest you most?",
        options=(
            "Western Europe", "Eastern Europe", "Mediterranean", "Scandinavia",
            "Specific cities",
        ),
    ),
    "asia": QuestionTemplate(
        question="Which parts of Asia would you like to explore?",
        options=(
            "Southeast Asia", "East Asia", "South Asia", "Central Asia",
            "Specific countries",
        ),
    ),
    "africa": QuestionTemplate(
        question="Which parts of Africa would you like to visit?",
        options=(
            "North Africa", "East Africa", "Southern Africa", "West Africa",
            "Specific countries",
        ),
    ),
    "america": QuestionTemplate(
        question="Which part of the Americas are you thinking of?",
        options=(
            "North America", "Central America", "South America", "Caribbean",
            "Specific countries",
        ),
    ),
    "world": _GENERIC_DESTINATION_TEMPLATE,
    "everywhere": _GENERIC_DESTINATION_TEMPLATE,
    "anywhere": _GENERIC_DESTINATION_TEMPLATE,
})

EXPERIENCE_TEMPLATE = QuestionTemplate(
    question="What specific types of activities do you enjoy?",
    options=(
        "Outdoor activities (hiking, water sports)",
        "Cultural experiences (museums, local traditions)",
        "Food and drink experiences",
        "Adventure sports (climbing, diving)",
        "Relaxation and wellness",
        "Photography and sightseeing",
    ),
    context="Clarifying vague experiences",
)

BUDGET_TEMPLATE = QuestionTemplate(
    question="What is your approximate budget range for this trip (in USD)?",
    options=(
        "Under $1,000",
        "$1,000 - $3,000",
        "$3,000 - $5,000",
        "$5,000 - $10,000",
        "Over $10,000",
    ),
    context="Missing budget information",
)

TRAVEL_STYLE_TEMPLATE = QuestionTemplate(
    question="How would you describe your preferred travel style?",
    options=("Budget-conscious", "Comfortable mid-range", "Luxury and premium"),
    context="Missing travel style preference",
)


# =============================================================================
# Generation
# =============================================================================


def destination_question_id(term: str, index: int) -> str:
    return f"{DESTINATION_QUESTION_PREFIX}{term}-{index}"


def build_destination_question(destination: str, index: int) -> FollowUpQuestion:
    """Question clarifying one vague destination (must contain a vague term)."""
    term = matched_vague_destination_term(destination)
    return DESTINATION_TEMPLATES[term].build(
        destination_question_id(term, index),
        context=f"Clarifying vague destination: {destination}",
    )


def generate_follow_up_questions(input_data: TravelInputData) -> List[FollowUpQuestion]:
    """
    Generate follow-up questions for an incomplete travel input.

    Emits, in order:
    1. One question per vague destination, with a template chosen by the
       vague term it contains
    2. One shared question if any experience is vague
    3. A budget question if no budget range is given
    4. A travel style question if no style is given

    Args:
        input_data: Travel input to inspect

    Returns:
        Newly built questions in a stable order
    """
    questions = [
        build_destination_question(destination, index)
        for index, destination in enumerate(find_vague_destinations(input_data))
    ]

    if find_vague_experiences(input_data):
        questions.append(EXPERIENCE_TEMPLATE.build(EXPERIENCE_QUESTION_ID))

    if is_budget_missing(input_data):
        questions.append(BUDGET_TEMPLATE.build(BUDGET_QUESTION_ID))

    prefs = input_data.preferences
    if not (prefs and prefs.travel_style):
        questions.append(TRAVEL_STYLE_TEMPLATE.build(TRAVEL_STYLE_QUESTION_ID))

    return questions
