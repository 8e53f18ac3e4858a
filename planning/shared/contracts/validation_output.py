"""
Travel input analysis contracts.

Result objects returned by the travel input validator. Validation never
raises; these objects are the only failure signal.
"""

from typing import List, Literal, Optional

from pydantic import Field

from planning.shared.schemas.base import ValueModel
from planning.shared.schemas.inputs import TravelInputData


QuestionType = Literal["multiple-choice", "text", "range", "date"]


class ValidationResult(ValueModel):
    """Outcome of validating a travel input record."""

    is_valid: bool = Field(description="True when no errors were found")
    errors: List[str] = Field(default_factory=list, description="Blocking problems")
    warnings: List[str] = Field(default_factory=list, description="Non-blocking notes")


class IncompletenessReport(ValueModel):
    """Areas of the input that are too vague or missing."""

    needs_follow_up: bool = Field(description="True when any area is incomplete")
    incomplete_areas: List[str] = Field(
        default_factory=list, description="Names of incomplete areas"
    )
    suggestions: List[str] = Field(
        default_factory=list, description="One suggestion per incomplete area"
    )


class FollowUpQuestion(ValueModel):
    """A clarifying question to put back to the user."""

    id: str = Field(description="Deterministic identifier derived from the trigger")
    question: str = Field(description="Question text")
    type: QuestionType = Field(description="Answer widget type")
    options: Optional[List[str]] = Field(default=None, description="Choices, if any")
    context: str = Field(description="Why the question is asked")


class TravelInputAnalysis(ValueModel):
    """Everything the validator can say about one input record."""

    validation: ValidationResult = Field(description="Validation outcome")
    completeness_score: int = Field(ge=0, le=100, description="Completeness 0-100")
    incomplete_analysis: IncompletenessReport = Field(
        description="Incompleteness report"
    )
    normalized: Optional[TravelInputData] = Field(
        default=None, description="Normalized input (only when valid)"
    )
