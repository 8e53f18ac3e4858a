"""
Completeness scoring for travel input.

Calculates a 0-100 score from which parts of a travel input are present
and specific. Scoring is deterministic and code-based.
"""

from dataclasses import dataclass, field
from typing import List

from planning.shared.schemas.inputs import TravelInputData
from planning.validation.incompleteness import is_vague_destination, is_vague_experience


@dataclass(frozen=True)
class ScoringConfig:
    """
    Point values for the completeness score.

    Destinations and experiences earn a base amount for being present and
    a bonus when at least one entry is specific. Preferences earn points
    per filled field; timeframe earns points for presence and specificity.
    """

    # Destinations / experiences (20 points each)
    PRESENCE_POINTS: int = 15
    SPECIFIC_BONUS: int = 5

    # Preferences (10 points each, 40 total)
    PREFERENCE_POINTS: int = 10

    # Timeframe (20 points)
    TIMEFRAME_PRESENCE_POINTS: int = 10
    FIXED_DATES_BONUS: int = 10
    PARTIAL_FLEXIBILITY_BONUS: int = 5

    # Denominator: every category counts, present or not
    MAX_SCORE: int = 100


DEFAULT_SCORING_CONFIG = ScoringConfig()


@dataclass
class ScoringResult:
    """
    Result of completeness score calculation.

    Contains the rounded score and the raw points per category, plus the
    names of criteria that earned points.
    """

    score: int
    points: int = 0
    destination_points: int = 0
    experience_points: int = 0
    preference_points: int = 0
    timeframe_points: int = 0
    earned: List[str] = field(default_factory=list)


def score_travel_input(
    input_data: TravelInputData,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ScoringResult:
    """
    Score a travel input with a per-category breakdown.

    Formula:
        destinations  15 present + 5 if any is not vague
        experiences   15 present + 5 if any is not vague
        preferences   10 each: travel style, interests, budget with
                      max > min > 0, group size and travel duration together
        timeframe     10 present + 10 if fixed with both dates,
                      otherwise + 5 unless flexibility is "flexible"
        score = round(100 * points / 100)

    Absent sections count as zero against the full 100-point maximum.

    Args:
        input_data: Travel input to score
        config: Point values

    Returns:
        ScoringResult with score and breakdown
    """
    earned: List[str] = []

    destination_points = 0
    if input_data.destinations:
        destination_points += config.PRESENCE_POINTS
        earned.append("destinations")
        if any(not is_vague_destination(d) for d in input_data.destinations):
            destination_points += config.SPECIFIC_BONUS
            earned.append("specific_destinations")

    experience_points = 0
    if input_data.experiences:
        experience_points += config.PRESENCE_POINTS
        earned.append("experiences")
        if any(not is_vague_experience(e) for e in input_data.experiences):
            experience_points += config.SPECIFIC_BONUS
            earned.append("specific_experiences")

    preference_points = 0
    prefs = input_data.preferences
    if prefs is not None:
        if prefs.travel_style:
            preference_points += config.PREFERENCE_POINTS
            earned.append("travel_style")
        if prefs.interests:
            preference_points += config.PREFERENCE_POINTS
            earned.append("interests")
        budget = prefs.budget_range
        if budget is not None and budget.min > 0 and budget.max > budget.min:
            preference_points += config.PREFERENCE_POINTS
            earned.append("budget_range")
        if prefs.group_size and prefs.travel_duration:
            preference_points += config.PREFERENCE_POINTS
            earned.append("group_size_and_duration")

    timeframe_points = 0
    timeframe = input_data.timeframe
    if timeframe is not None:
        timeframe_points += config.TIMEFRAME_PRESENCE_POINTS
        earned.append("timeframe")
        if (
            timeframe.flexibility == "fixed"
            and timeframe.start_date is not None
            and timeframe.end_date is not None
        ):
            timeframe_points += config.FIXED_DATES_BONUS
            earned.append("fixed_dates")
        elif timeframe.flexibility != "flexible":
            timeframe_points += config.PARTIAL_FLEXIBILITY_BONUS
            earned.append("partial_flexibility")

    points = destination_points + experience_points + preference_points + timeframe_points
    score = round(100 * points / config.MAX_SCORE)

    return ScoringResult(
        score=max(0, min(100, score)),
        points=points,
        destination_points=destination_points,
        experience_points=experience_points,
        preference_points=preference_points,
        timeframe_points=timeframe_points,
        earned=earned,
    )


def calculate_completeness_score(
    input_data: TravelInputData,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> int:
    """
    Completeness of a travel input as an integer from 0 to 100.

    Args:
        input_data: Travel input to score
        config: Point values

    Returns:
        Completeness score
    """
    return score_travel_input(input_data, config).score
