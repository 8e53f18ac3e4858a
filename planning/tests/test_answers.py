"""
Unit tests for applying follow-up answers.

Tests destination, experience, budget and travel style answers, stale or
unknown answers, repeat application and coverage of every question option.
"""

from planning.shared.schemas.inputs import CostRange, TravelInputData, TravelPreferences
from planning.validation import apply_follow_up_answers, generate_follow_up_questions
from planning.validation.answers import (
    BUDGET_BRACKETS,
    EXPERIENCE_CATEGORIES,
    PLACEHOLDER_OPTIONS,
    REGION_DESTINATIONS,
    TRAVEL_STYLE_CHOICES,
)
from planning.validation.incompleteness import is_vague_destination, is_vague_experience
from planning.validation.questions import (
    BUDGET_TEMPLATE,
    DESTINATION_TEMPLATES,
    EXPERIENCE_TEMPLATE,
    TRAVEL_STYLE_TEMPLATE,
)


# ============================================================================
# Test Fixtures
# ============================================================================


def _make_input(destinations=None, experiences=None, preferences=None):
    """Create a travel input with vague destination and experience."""
    return TravelInputData(
        destinations=["Europe"] if destinations is None else destinations,
        experiences=["fun"] if experiences is None else experiences,
        preferences=preferences,
    )


def _make_full_answers():
    """One answer for every question asked about the default input."""
    return {
        "destination-europe-0": "Western Europe",
        "experience-clarification": ["Food and drink experiences"],
        "budget-range": "$1,000 - $3,000",
        "travel-style": "Budget-conscious",
    }


# ============================================================================
# Destinations
# ============================================================================


class TestDestinationAnswers:
    """Tests for destination-<term>-<i> answers."""

    def test_region_replaces_vague_destination(self):
        data = _make_input(destinations=["Europe", "Tokyo, Japan"])
        result = apply_follow_up_answers(data, {"destination-europe-0": "Western Europe"})

        assert result.destinations == [
            "Paris, France",
            "Amsterdam, Netherlands",
            "Berlin, Germany",
            "Tokyo, Japan",
        ]

    def test_multiple_regions(self):
        result = apply_follow_up_answers(
            _make_input(), {"destination-europe-0": ["Scandinavia", "Mediterranean"]}
        )

        assert result.destinations[:3] == ["Stockholm, Sweden", "Oslo, Norway", "Copenhagen, Denmark"]
        assert len(result.destinations) == 6

    def test_second_vague_destination_by_index(self):
        data = _make_input(destinations=["Europe", "Asia"])
        result = apply_follow_up_answers(data, {"destination-asia-1": "East Asia"})

        assert result.destinations == ["Europe", "Tokyo, Japan", "Seoul, South Korea", "Beijing, China"]

    def test_typed_destination_is_used_verbatim(self):
        result = apply_follow_up_answers(_make_input(), {"destination-europe-0": "Lisbon, Portugal"})

        assert result.destinations == ["Lisbon, Portugal"]

    def test_placeholder_keeps_original(self):
        result = apply_follow_up_answers(_make_input(), {"destination-europe-0": "Specific cities"})

        assert result.destinations == ["Europe"]

    def test_duplicates_are_dropped(self):
        data = _make_input(destinations=["paris, france", "Europe"])
        result = apply_follow_up_answers(data, {"destination-europe-0": "Western Europe"})

        assert result.destinations == ["paris, france", "Amsterdam, Netherlands", "Berlin, Germany"]

    def test_mismatched_or_stale_ids_are_ignored(self):
        data = _make_input()

        assert apply_follow_up_answers(data, {"destination-asia-0": "East Asia"}).destinations == ["Europe"]
        assert apply_follow_up_answers(data, {"destination-europe-3": "Scandinavia"}).destinations == ["Europe"]
        assert apply_follow_up_answers(data, {"destination-europe-x": "Scandinavia"}).destinations == ["Europe"]


# ============================================================================
# Experiences
# ============================================================================


class TestExperienceAnswers:
    """Tests for the experience-clarification answer."""

    def test_category_replaces_vague_experiences(self):
        data = _make_input(experiences=["fun", "something", "hot air balloon ride"])
        result = apply_follow_up_answers(
            data, {"experience-clarification": "Food and drink experiences"}
        )

        assert result.experiences == [
            "hot air balloon ride",
            "Cooking class with locals",
            "Street food tour",
            "Wine tasting",
        ]

    def test_typed_experience_is_used_verbatim(self):
        result = apply_follow_up_answers(
            _make_input(), {"experience-clarification": ["birdwatching in wetlands"]}
        )

        assert result.experiences == ["birdwatching in wetlands"]

    def test_empty_answer_keeps_experiences(self):
        result = apply_follow_up_answers(_make_input(), {"experience-clarification": []})

        assert result.experiences == ["fun"]


# ============================================================================
# Preferences
# ============================================================================


class TestPreferenceAnswers:
    """Tests for budget-range and travel-style answers."""

    def test_budget_fills_missing_preferences(self):
        result = apply_follow_up_answers(_make_input(), {"budget-range": "$1,000 - $3,000"})
        prefs = result.preferences

        assert prefs.budget_range == CostRange(min=1000, max=3000)
        assert prefs.travel_style == "mid-range"
        assert prefs.travel_duration == "medium"
        assert prefs.group_size == 2
        assert prefs.interests is None

    def test_budget_keeps_existing_preferences(self):
        existing = TravelPreferences(travel_style="luxury", group_size=4, interests=["art"])
        result = apply_follow_up_answers(
            _make_input(preferences=existing), {"budget-range": "Over $10,000"}
        )
        prefs = result.preferences

        assert prefs.budget_range == CostRange(min=10000, max=50000)
        assert prefs.travel_style == "luxury"
        assert prefs.group_size == 4
        assert prefs.interests == ["art"]

    def test_style_answer_wins_over_budget_default(self):
        result = apply_follow_up_answers(
            _make_input(),
            {"budget-range": "Under $1,000", "travel-style": "Luxury and premium"},
        )

        assert result.preferences.travel_style == "luxury"
        assert result.preferences.budget_range == CostRange(min=500, max=1000)

    def test_unknown_choices_are_ignored(self):
        result = apply_follow_up_answers(
            _make_input(), {"budget-range": "a lot", "travel-style": "backpacker"}
        )

        assert result.preferences == TravelPreferences()


# ============================================================================
# Whole input
# ============================================================================


class TestApplyFollowUpAnswers:
    """Tests for apply_follow_up_answers as a whole."""

    def test_answered_input_needs_no_more_questions(self):
        result = apply_follow_up_answers(_make_input(), _make_full_answers())

        assert generate_follow_up_questions(result) == []
        assert result.preferences.travel_style == "budget"

    def test_applying_twice_changes_nothing_more(self):
        answers = _make_full_answers()
        once = apply_follow_up_answers(_make_input(), answers)
        twice = apply_follow_up_answers(once, answers)

        assert twice.model_dump() == once.model_dump()

    def test_input_is_not_modified(self):
        data = _make_input()
        before = data.model_dump()

        apply_follow_up_answers(data, _make_full_answers())

        assert data.model_dump() == before

    def test_unknown_ids_are_ignored(self):
        data = _make_input()
        result = apply_follow_up_answers(data, {"favourite-colour": "blue"})

        assert result.model_dump() == data.model_dump()


class TestOptionCoverage:
    """Every offered option resolves to something concrete."""

    def test_destination_options(self):
        for template in DESTINATION_TEMPLATES.values():
            for option in template.options:
                assert option in PLACEHOLDER_OPTIONS or option in REGION_DESTINATIONS

    def test_resolved_destinations_are_specific(self):
        for destinations in REGION_DESTINATIONS.values():
            assert not any(is_vague_destination(d) for d in destinations)

    def test_experience_options(self):
        assert set(EXPERIENCE_TEMPLATE.options) == set(EXPERIENCE_CATEGORIES)
        for experiences in EXPERIENCE_CATEGORIES.values():
            assert not any(is_vague_experience(e) for e in experiences)

    def test_budget_and_style_options(self):
        assert set(BUDGET_TEMPLATE.options) == set(BUDGET_BRACKETS)
        assert set(TRAVEL_STYLE_TEMPLATE.options) <= set(TRAVEL_STYLE_CHOICES)
