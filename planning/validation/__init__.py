"""
Travel input validation.

Validates raw travel input, detects vague or missing fields, generates
follow-up questions, applies their answers and scores completeness.
"""

from planning.validation.answers import apply_follow_up_answers
from planning.validation.incompleteness import detect_incomplete_input
from planning.validation.questions import generate_follow_up_questions
from planning.validation.scoring import calculate_completeness_score
from planning.validation.validator import (
    analyze_travel_input,
    normalize_travel_input,
    validate_travel_input,
)

__all__ = [
    "analyze_travel_input",
    "apply_follow_up_answers",
    "calculate_completeness_score",
    "detect_incomplete_input",
    "generate_follow_up_questions",
    "normalize_travel_input",
    "validate_travel_input",
]
