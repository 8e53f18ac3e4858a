"""
Clock abstraction.

The planning core only reads the current time to stamp ``last_updated``
and to warn about start dates in the past. Both go through a ``Clock`` so
tests can pin "now".
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone


class Clock(ABC):
    """Source of the current instant (UTC)."""

    @abstractmethod
    def now(self) -> datetime:
        """Current instant, timezone-aware."""

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Always returns the same instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


SYSTEM_CLOCK = SystemClock()


def get_clock() -> Clock:
    """FastAPI dependency; tests override it with a FixedClock."""
    return SYSTEM_CLOCK
