"""
Unit tests for completeness scoring.

Tests the point breakdown per category and the 0-100 score.
"""

from datetime import date

from planning.shared.schemas.inputs import (
    CostRange,
    Timeframe,
    TravelInputData,
    TravelPreferences,
)
from planning.validation.scoring import (
    ScoringConfig,
    calculate_completeness_score,
    score_travel_input,
)


# ============================================================================
# Test Fixtures
# ============================================================================


def _make_input(**overrides):
    """Create a minimal specific travel input."""
    fields = {"destinations": ["Lisbon"], "experiences": ["surfing lessons"]}
    fields.update(overrides)
    return TravelInputData(**fields)


def _make_full_preferences():
    return TravelPreferences(
        travel_style="luxury",
        interests=["food"],
        budget_range=CostRange(min=1000, max=3000),
        group_size=2,
        travel_duration="medium",
    )


# ============================================================================
# Tests
# ============================================================================


class TestCompletenessScore:
    """Tests for calculate_completeness_score."""

    def test_destinations_and_experiences_only(self):
        """Two specific entries and nothing else scores 40."""
        score = calculate_completeness_score(
            TravelInputData(destinations=["a"], experiences=["b"])
        )

        assert score == 40
        assert score < 50

    def test_empty_input_scores_zero(self):
        assert calculate_completeness_score(TravelInputData()) == 0

    def test_fully_specified_input_scores_100(self):
        data = _make_input(
            preferences=_make_full_preferences(),
            timeframe=Timeframe(
                flexibility="fixed",
                start_date=date(2026, 6, 1),
                end_date=date(2026, 6, 14),
            ),
        )

        assert calculate_completeness_score(data) == 100

    def test_vague_entries_lose_specific_bonus(self):
        data = TravelInputData(destinations=["Europe"], experiences=["fun"])

        assert calculate_completeness_score(data) == 30

    def test_one_specific_entry_earns_bonus(self):
        data = TravelInputData(destinations=["Europe", "Kyoto"], experiences=["fun"])

        assert calculate_completeness_score(data) == 35

    def test_score_always_in_range(self):
        inputs = [
            TravelInputData(),
            _make_input(),
            _make_input(preferences=_make_full_preferences()),
            _make_input(timeframe=Timeframe(flexibility="very-flexible")),
        ]

        for data in inputs:
            assert 0 <= calculate_completeness_score(data) <= 100


class TestScoreBreakdown:
    """Tests for score_travel_input's per-category points."""

    def test_preferences_breakdown(self):
        result = score_travel_input(_make_input(preferences=_make_full_preferences()))

        assert result.preference_points == 40
        assert result.points == 80
        assert "budget_range" in result.earned
        assert "group_size_and_duration" in result.earned

    def test_budget_needs_positive_increasing_range(self):
        prefs = TravelPreferences(budget_range=CostRange(min=0, max=3000))
        result = score_travel_input(_make_input(preferences=prefs))

        assert result.preference_points == 0

    def test_group_size_needs_travel_duration(self):
        prefs = TravelPreferences(group_size=4)
        result = score_travel_input(_make_input(preferences=prefs))

        assert result.preference_points == 0

    def test_timeframe_flexibility_points(self):
        flexible = score_travel_input(_make_input(timeframe=Timeframe(flexibility="flexible")))
        very_flexible = score_travel_input(
            _make_input(timeframe=Timeframe(flexibility="very-flexible"))
        )
        fixed_no_dates = score_travel_input(_make_input(timeframe=Timeframe(flexibility="fixed")))
        unspecified = score_travel_input(_make_input(timeframe=Timeframe()))

        assert flexible.timeframe_points == 10
        assert very_flexible.timeframe_points == 15
        assert fixed_no_dates.timeframe_points == 15
        assert unspecified.timeframe_points == 15

    def test_custom_config(self):
        config = ScoringConfig(PRESENCE_POINTS=30, SPECIFIC_BONUS=20)
        result = score_travel_input(_make_input(), config)

        assert result.score == 100
