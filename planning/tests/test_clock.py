"""
Unit tests for the clock abstraction.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from planning.shared.clock import SYSTEM_CLOCK, Clock, FixedClock, get_clock


class TestClock:
    """Tests for Clock implementations."""

    def test_base_clock_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Clock()

    def test_subclass_without_now_cannot_be_instantiated(self):
        class Broken(Clock):
            pass

        with pytest.raises(TypeError):
            Broken()

    def test_fixed_clock_assumes_utc_for_naive_instants(self):
        clock = FixedClock(datetime(2026, 3, 1, 23, 30))

        assert clock.now().tzinfo == timezone.utc
        assert clock.today() == date(2026, 3, 1)

    def test_fixed_clock_keeps_aware_instants(self):
        tz = timezone(timedelta(hours=9))
        instant = datetime(2026, 3, 1, 8, 0, tzinfo=tz)

        assert FixedClock(instant).now() == instant
        assert FixedClock(instant).now().tzinfo == tz

    def test_system_clock_is_aware(self):
        assert SYSTEM_CLOCK.now().tzinfo is not None
        assert get_clock() is SYSTEM_CLOCK
