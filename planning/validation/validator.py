"""
Travel input validation and normalization.

Validation never raises: every problem is collected into the errors or
warnings of a ValidationResult and the caller decides what to do.
"""

import logging
from typing import List, Tuple

from planning.shared.clock import Clock, SYSTEM_CLOCK
from planning.shared.contracts.validation_output import (
    TravelInputAnalysis,
    ValidationResult,
)
from planning.shared.schemas.inputs import (
    Timeframe,
    TravelInputData,
    TravelPreferences,
)
from planning.validation.config import (
    HIGH_BUDGET_THRESHOLD,
    LARGE_GROUP_SIZE,
    LOW_BUDGET_THRESHOLD,
    MAX_GROUP_SIZE,
    MAX_TRIP_DAYS,
    MIN_ENTRY_LENGTH,
    MIN_GROUP_SIZE,
    VALID_FLEXIBILITY,
    VALID_TRAVEL_DURATIONS,
    VALID_TRAVEL_STYLES,
)
from planning.validation.incompleteness import (
    detect_incomplete_input,
    find_vague_destinations,
    find_vague_experiences,
)
from planning.validation.scoring import calculate_completeness_score


logger = logging.getLogger(__name__)

Issues = Tuple[List[str], List[str]]


def _validate_destinations(input_data: TravelInputData) -> Issues:
    errors: List[str] = []
    warnings: List[str] = []
    destinations = input_data.destinations

    if not destinations:
        errors.append("At least one destination is required")
        return errors, warnings

    if any(len(d.strip()) < MIN_ENTRY_LENGTH for d in destinations):
        errors.append("All destinations must be at least 2 characters long")

    unique = {d.strip().lower() for d in destinations}
    if len(unique) != len(destinations):
        warnings.append("Some destinations appear to be duplicates")

    vague = find_vague_destinations(input_data)
    if vague:
        warnings.append(
            f"Vague destinations detected: {', '.join(vague)}. "
            "Consider being more specific for better recommendations."
        )

    return errors, warnings


def _validate_experiences(input_data: TravelInputData) -> Issues:
    errors: List[str] = []
    warnings: List[str] = []
    experiences = input_data.experiences

    if not experiences:
        errors.append("At least one experience or activity is required")
        return errors, warnings

    if any(len(e.strip()) < MIN_ENTRY_LENGTH for e in experiences):
        errors.append("All experiences must be at least 2 characters long")

    vague = find_vague_experiences(input_data)
    if vague:
        warnings.append(
            f"Vague experiences detected: {', '.join(vague)}. Consider being more specific."
        )

    return errors, warnings


def _validate_preferences(prefs: TravelPreferences) -> Issues:
    errors: List[str] = []
    warnings: List[str] = []

    if prefs.travel_style and prefs.travel_style not in VALID_TRAVEL_STYLES:
        errors.append("Invalid travel style. Must be budget, mid-range, or luxury")

    if prefs.travel_duration and prefs.travel_duration not in VALID_TRAVEL_DURATIONS:
        errors.append("Invalid travel duration. Must be short, medium, or long")

    if prefs.group_size is not None:
        if prefs.group_size < MIN_GROUP_SIZE or prefs.group_size > MAX_GROUP_SIZE:
            errors.append("Group size must be between 1 and 50")
        if prefs.group_size > LARGE_GROUP_SIZE:
            warnings.append(
                "Large groups may have limited accommodation and activity options"
            )

    budget = prefs.budget_range
    if budget is not None:
        if budget.min < 0 or budget.max < 0:
            errors.append("Budget amounts must be positive")
        if budget.min >= budget.max:
            errors.append("Maximum budget must be greater than minimum budget")
        if budget.min < LOW_BUDGET_THRESHOLD:
            warnings.append("Very low budget may limit travel options")
        if budget.max > HIGH_BUDGET_THRESHOLD:
            warnings.append("High budget detected - consider if this is accurate")

    if prefs.interests is not None and len(prefs.interests) == 0:
        warnings.append("No interests selected - this may limit recommendation quality")

    return errors, warnings


def _validate_timeframe(timeframe: Timeframe, clock: Clock) -> Issues:
    errors: List[str] = []
    warnings: List[str] = []

    if timeframe.flexibility and timeframe.flexibility not in VALID_FLEXIBILITY:
        errors.append("Invalid flexibility option")

    start, end = timeframe.start_date, timeframe.end_date
    if start is not None and end is not None:
        if start >= end:
            errors.append("End date must be after start date")
        if start < clock.today():
            warnings.append("Start date is in the past")

        duration_days = (end - start).days
        if duration_days < 1:
            errors.append("Trip must be at least 1 day long")
        elif duration_days > MAX_TRIP_DAYS:
            warnings.append(
                "Very long trip duration detected - consider breaking into multiple trips"
            )

    return errors, warnings


def validate_travel_input(
    input_data: TravelInputData,
    clock: Clock = SYSTEM_CLOCK,
) -> ValidationResult:
    """
    Validate a travel input record.

    Checks destinations, experiences, preferences and timeframe. Errors make
    the input invalid; warnings are informational.

    Args:
        input_data: Raw travel input
        clock: Source of "today" for past-date warnings

    Returns:
        ValidationResult with accumulated errors and warnings
    """
    errors: List[str] = []
    warnings: List[str] = []

    checks = [_validate_destinations(input_data), _validate_experiences(input_data)]
    if input_data.preferences is not None:
        checks.append(_validate_preferences(input_data.preferences))
    if input_data.timeframe is not None:
        checks.append(_validate_timeframe(input_data.timeframe, clock))

    for check_errors, check_warnings in checks:
        errors.extend(check_errors)
        warnings.extend(check_warnings)

    logger.debug(
        f"[component=validator] Validated input | errors={len(errors)}, "
        f"warnings={len(warnings)}"
    )

    return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)


def _clean(values: List[str]) -> List[str]:
    return [v.strip() for v in values if v.strip()]


def normalize_travel_input(input_data: TravelInputData) -> TravelInputData:
    """
    Trim destinations, experiences and interests, dropping blank entries.

    Idempotent: normalizing a normalized input returns an equal input.
    """
    preferences = input_data.preferences
    if preferences is not None and preferences.interests is not None:
        preferences = preferences.model_copy(
            update={"interests": _clean(preferences.interests)}
        )

    return input_data.model_copy(
        update={
            "destinations": _clean(input_data.destinations),
            "experiences": _clean(input_data.experiences),
            "preferences": preferences,
        }
    )


def analyze_travel_input(
    input_data: TravelInputData,
    clock: Clock = SYSTEM_CLOCK,
) -> TravelInputAnalysis:
    """
    Run every validator check on one input.

    Returns the validation result, completeness score, incompleteness
    report and, when the input is valid, its normalized form.
    """
    validation = validate_travel_input(input_data, clock)
    return TravelInputAnalysis(
        validation=validation,
        completeness_score=calculate_completeness_score(input_data),
        incomplete_analysis=detect_incomplete_input(input_data),
        normalized=normalize_travel_input(input_data) if validation.is_valid else None,
    )
