"""
Follow-up answer integration.

Maps answers to the questions from ``generate_follow_up_questions`` back
into the travel input: region choices replace vague destinations,
activity categories replace vague experiences, and budget or style
choices fill in preferences. Answers are keyed by question id.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from planning.shared.schemas.inputs import CostRange, TravelInputData, TravelPreferences
from planning.validation.incompleteness import (
    find_vague_destinations,
    is_vague_destination,
    is_vague_experience,
    matched_vague_destination_term,
)
from planning.validation.questions import (
    BUDGET_QUESTION_ID,
    DESTINATION_QUESTION_PREFIX,
    EXPERIENCE_QUESTION_ID,
    TRAVEL_STYLE_QUESTION_ID,
)


logger = logging.getLogger(__name__)

Answer = Union[str, List[str]]

# Options that ask the user to type their own value; they resolve to nothing.
PLACEHOLDER_OPTIONS = ("Specific cities", "Specific countries", "Surprise me")

REGION_DESTINATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Europe
    "Western Europe": ("Paris, France", "Amsterdam, Netherlands", "Berlin, Germany"),
    "Eastern Europe": ("Prague, Czech Republic", "Krakow, Poland", "Budapest, Hungary"),
    "Mediterranean": ("Sicily, Italy", "Santorini, Greece", "Mallorca, Spain"),
    "Scandinavia": ("Stockholm, Sweden", "Oslo, Norway", "Copenhagen, Denmark"),
    # Asia
    "Southeast Asia": ("Bangkok, Thailand", "Ho Chi Minh City, Vietnam", "Bali, Indonesia"),
    "East Asia": ("Tokyo, Japan", "Seoul, South Korea", "Beijing, China"),
    "South Asia": ("Mumbai, India", "Kathmandu, Nepal", "Colombo, Sri Lanka"),
    "Central Asia": ("Almaty, Kazakhstan", "Tashkent, Uzbekistan"),
    # Africa
    "North Africa": ("Marrakech, Morocco", "Cairo, Egypt", "Tunis, Tunisia"),
    "East Africa": ("Nairobi, Kenya", "Zanzibar, Tanzania", "Kampala, Uganda"),
    "Southern Africa": ("Cape Town", "Windhoek, Namibia", "Victoria Falls, Zimbabwe"),
    "West Africa": ("Accra, Ghana", "Dakar, Senegal", "Lagos, Nigeria"),
    # Americas
    "North America": ("New York, USA", "Toronto, Canada", "Vancouver, Canada"),
    "Central America": ("San Jose, Costa Rica", "Antigua, Guatemala", "Mexico City, Mexico"),
    "South America": ("Lima, Peru", "Buenos Aires, Argentina", "Rio de Janeiro, Brazil"),
    "Caribbean": ("Havana, Cuba", "San Juan, Puerto Rico", "Nassau, Bahamas"),
    # Continents, from the open-ended destination question
    "Europe": ("Paris, France", "Rome, Italy", "Barcelona, Spain"),
    "Asia": ("Tokyo, Japan", "Bangkok, Thailand", "Singapore"),
    "The Americas": ("New York, USA", "Mexico City, Mexico", "Lima, Peru"),
    "Africa": ("Cape Town", "Marrakech, Morocco", "Nairobi, Kenya"),
    "Oceania": ("Sydney, Australia", "Auckland, New Zealand", "Nadi, Fiji"),
})

EXPERIENCE_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Outdoor activities (hiking, water sports)": (
        "Hiking mountain trails", "Snorkeling", "Kayaking",
    ),
    "Cultural experiences (museums, local traditions)": (
        "Museum visits", "Local festival", "Historical site tours",
    ),
    "Food and drink experiences": (
        "Cooking class with locals", "Street food tour", "Wine tasting",
    ),
    "Adventure sports (climbing, diving)": (
        "Rock climbing", "Scuba diving", "Paragliding",
    ),
    "Relaxation and wellness": ("Spa treatments", "Beach relaxation", "Yoga retreat"),
    "Photography and sightseeing": (
        "Landscape photography", "Scenic drive", "Sightseeing walking tour",
    ),
})

BUDGET_BRACKETS: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "Under $1,000": (500, 1000),
    "$1,000 - $3,000": (1000, 3000),
    "$3,000 - $5,000": (3000, 5000),
    "$5,000 - $10,000": (5000, 10000),
    "Over $10,000": (10000, 50000),
})

TRAVEL_STYLE_CHOICES: Mapping[str, str] = MappingProxyType({
    "Budget-conscious": "budget",
    "Comfortable mid-range": "mid-range",
    "Luxury and premium": "luxury",
    "budget": "budget",
    "mid-range": "mid-range",
    "luxury": "luxury",
})

# Filled in alongside a budget answer when the traveller left them unset.
BUDGET_ANSWER_DEFAULTS = MappingProxyType({
    "travel_style": "mid-range",
    "travel_duration": "medium",
    "group_size": 2,
})


# =============================================================================
# Helpers
# =============================================================================


def _as_list(answer: Answer) -> List[str]:
    values = [answer] if isinstance(answer, str) else list(answer)
    return [v.strip() for v in values if v and v.strip()]


def _first(answer: Answer) -> Optional[str]:
    values = _as_list(answer)
    return values[0] if values else None


def _dedupe(values: Sequence[str]) -> List[str]:
    seen = set()
    unique = []
    for value in values:
        key = value.strip().lower()
        if key not in seen:
            seen.add(key)
            unique.append(value)
    return unique


def resolve_destination_answer(answer: Answer) -> List[str]:
    """
    Concrete destinations for one destination answer.

    Known region choices expand to their destination list, placeholders
    resolve to nothing and anything else is taken as typed.
    """
    resolved: List[str] = []
    for choice in _as_list(answer):
        if choice in REGION_DESTINATIONS:
            resolved.extend(REGION_DESTINATIONS[choice])
        elif choice not in PLACEHOLDER_OPTIONS:
            resolved.append(choice)
    return resolved


def resolve_experience_answer(answer: Answer) -> List[str]:
    """Concrete experiences for the activity-category answer."""
    resolved: List[str] = []
    for choice in _as_list(answer):
        resolved.extend(EXPERIENCE_CATEGORIES.get(choice, (choice,)))
    return resolved


def _parse_destination_id(question_id: str) -> Optional[Tuple[str, int]]:
    """Split ``destination-<term>-<index>`` into (term, index)."""
    if not question_id.startswith(DESTINATION_QUESTION_PREFIX):
        return None
    term, _, index = question_id[len(DESTINATION_QUESTION_PREFIX):].rpartition("-")
    if not term or not index.isdigit():
        return None
    return term, int(index)


# =============================================================================
# Integration
# =============================================================================


def _apply_destination_answers(
    input_data: TravelInputData,
    answers: Mapping[str, Answer],
) -> List[str]:
    vague = find_vague_destinations(input_data)
    replacements: Dict[int, List[str]] = {}

    for question_id, answer in answers.items():
        parsed = _parse_destination_id(question_id)
        if parsed is None:
            continue
        term, index = parsed
        # Stale ids (already resolved, or asked about another input) are skipped.
        if index >= len(vague) or matched_vague_destination_term(vague[index]) != term:
            continue
        resolved = resolve_destination_answer(answer)
        if resolved:
            replacements[index] = resolved

    if not replacements:
        return list(input_data.destinations)

    destinations: List[str] = []
    vague_index = 0
    for destination in input_data.destinations:
        if is_vague_destination(destination):
            destinations.extend(replacements.get(vague_index, [destination]))
            vague_index += 1
        else:
            destinations.append(destination)
    return _dedupe(destinations)


def _apply_experience_answer(input_data: TravelInputData, answer: Answer) -> List[str]:
    resolved = resolve_experience_answer(answer)
    if not resolved:
        return list(input_data.experiences)
    kept = [e for e in input_data.experiences if not is_vague_experience(e)]
    return _dedupe(kept + resolved)


def _apply_preference_answers(
    preferences: TravelPreferences,
    answers: Mapping[str, Answer],
) -> TravelPreferences:
    updates: Dict[str, object] = {}

    style_choice = _first(answers.get(TRAVEL_STYLE_QUESTION_ID, []))
    if style_choice in TRAVEL_STYLE_CHOICES:
        updates["travel_style"] = TRAVEL_STYLE_CHOICES[style_choice]

    budget_choice = _first(answers.get(BUDGET_QUESTION_ID, []))
    if budget_choice in BUDGET_BRACKETS:
        low, high = BUDGET_BRACKETS[budget_choice]
        updates["budget_range"] = CostRange(min=low, max=high)
        for name, default in BUDGET_ANSWER_DEFAULTS.items():
            if not (updates.get(name) or getattr(preferences, name)):
                updates[name] = default

    return preferences.model_copy(update=updates) if updates else preferences


def apply_follow_up_answers(
    input_data: TravelInputData,
    answers: Mapping[str, Answer],
) -> TravelInputData:
    """
    Fold follow-up answers back into a travel input.

    - ``destination-<term>-<i>``: replaces the i-th vague destination with
      the chosen regions' destinations (or the typed text)
    - ``experience-clarification``: replaces vague experiences with the
      chosen categories' activities
    - ``budget-range``: sets the budget bracket and fills unset travel
      style, duration and group size with defaults
    - ``travel-style``: sets the travel style

    Unknown ids, unknown choices and ids that no longer match the input
    are ignored, so applying the same answers twice changes nothing more.

    Args:
        input_data: Input the questions were generated from
        answers: Selected option(s) keyed by question id

    Returns:
        A new TravelInputData; ``input_data`` is left untouched
    """
    destinations = _apply_destination_answers(input_data, answers)

    experiences = list(input_data.experiences)
    if EXPERIENCE_QUESTION_ID in answers:
        experiences = _apply_experience_answer(input_data, answers[EXPERIENCE_QUESTION_ID])

    preferences = input_data.preferences
    if TRAVEL_STYLE_QUESTION_ID in answers or BUDGET_QUESTION_ID in answers:
        preferences = _apply_preference_answers(
            preferences or TravelPreferences(), answers
        )

    logger.info(
        f"[component=follow-up] Applied answers | ids={sorted(answers)}, "
        f"destinations={len(input_data.destinations)}->{len(destinations)}, "
        f"experiences={len(input_data.experiences)}->{len(experiences)}"
    )

    return input_data.model_copy(
        update={
            "destinations": destinations,
            "experiences": experiences,
            "preferences": preferences,
        }
    )
