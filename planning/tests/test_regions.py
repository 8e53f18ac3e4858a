"""
Unit tests for region classification.

Tests keyword matching, rule priority, the fallback region and the
same-country heuristic.
"""

import pytest

from planning.regions import REGION_ORDER, classify_region, same_country


class TestClassifyRegion:
    """Tests for the classify_region function."""

    @pytest.mark.parametrize(
        "location, expected",
        [
            ("Paris, France", "europe"),
            ("Tokyo, Japan", "asia"),
            ("New York, USA", "americas"),
            ("Cairo, Egypt", "africa"),
            ("Sydney, Australia", "oceania"),
        ],
    )
    def test_known_locations(self, location, expected):
        """Locations containing a region keyword classify to that region."""
        assert classify_region(location) == expected

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert classify_region("PARIS") == "europe"
        assert classify_region("bangkok") == "asia"

    def test_unknown_location_is_other(self):
        """Locations without any keyword fall back to 'other'."""
        assert classify_region("Atlantis") == "other"
        assert classify_region("") == "other"

    def test_first_matching_region_wins(self):
        """Europe is checked before the Americas."""
        assert classify_region("Paris, Texas, USA") == "europe"

    def test_region_order_ends_with_fallback(self):
        """Route grouping order follows rule priority then 'other'."""
        assert REGION_ORDER == ("europe", "asia", "americas", "africa", "oceania", "other")


class TestSameCountry:
    """Tests for the same_country heuristic."""

    def test_shared_country_token(self):
        """Both strings mentioning a known country token are domestic."""
        assert same_country("Osaka, Japan", "Tokyo, Japan") is True
        assert same_country("Chicago, USA", "New York, USA") is True

    def test_shared_comma_segment(self):
        """A literal comma segment in common also counts."""
        assert same_country("Porto, Portugal", "Lisbon,  portugal") is True

    def test_different_countries(self):
        """Different countries are not domestic."""
        assert same_country("Paris, France", "Berlin, Germany") is False
        assert same_country("New York, United States", "Paris, France") is False

    def test_blank_segments_do_not_match(self):
        """Trailing commas produce no empty-segment matches."""
        assert same_country("Paris,", "Rome,") is False
