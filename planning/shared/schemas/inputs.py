"""
Input schemas consumed by the planning core.

These models describe what callers hand to the core: resolved locations,
travel preferences, trip data and raw travel-input records.
"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from planning.shared.schemas.base import ValueModel


DEFAULT_CURRENCY = "USD"


class Coordinates(ValueModel):
    """Geographic point (heuristic placeholder, never used for distances)."""

    lat: float = Field(description="Latitude")
    lng: float = Field(description="Longitude")


class LocationData(ValueModel):
    """A location already resolved by the location service."""

    city: str = Field(description="City name")
    country: str = Field(description="Country name")
    coordinates: Coordinates = Field(description="Approximate coordinates")
    airport_code: Optional[str] = Field(
        default=None, description="Nearest airport IATA code"
    )

    @property
    def label(self) -> str:
        """Render as ``City, Country`` for keyword matching."""
        return f"{self.city}, {self.country}"


class CostRange(ValueModel):
    """
    A min/max cost range in a single currency.

    Computed ranges always satisfy ``0 <= min <= max``. The model does not
    enforce this itself so that caller-supplied budgets can be validated
    and reported instead of rejected at parse time.
    """

    min: float = Field(description="Lower bound")
    max: float = Field(description="Upper bound")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code")


class TravelPreferences(ValueModel):
    """
    Traveller preferences.

    ``travel_style`` and ``travel_duration`` are kept as plain strings so
    unknown values reach the validator rather than failing at parse time.
    """

    budget_range: Optional[CostRange] = Field(
        default=None, description="Total trip budget range"
    )
    travel_style: Optional[str] = Field(
        default=None, description="budget, mid-range, luxury or adventure"
    )
    interests: Optional[List[str]] = Field(
        default=None, description="Free-text interests"
    )
    travel_duration: Optional[str] = Field(
        default=None, description="short, medium or long"
    )
    group_size: Optional[int] = Field(default=None, description="Number of travellers")
    home_location: Optional[LocationData] = Field(
        default=None, description="Departure location"
    )


class TripData(ValueModel):
    """Trip description used for cost estimation."""

    destinations: List[str] = Field(default_factory=list, description="Destinations in visiting order")
    experiences: List[str] = Field(default_factory=list, description="Desired experiences")
    duration: float = Field(default=7, ge=0, description="Trip length in days, may be fractional")
    travelers: int = Field(default=1, ge=1, description="Number of travellers")


class Timeframe(ValueModel):
    """When the traveller wants to go."""

    flexibility: Optional[str] = Field(
        default=None, description="fixed, flexible or very-flexible"
    )
    start_date: Optional[date] = Field(default=None, description="Start date (YYYY-MM-DD)")
    end_date: Optional[date] = Field(default=None, description="End date (YYYY-MM-DD)")
    duration: Optional[int] = Field(default=None, description="Desired length in days")


class TravelInputData(ValueModel):
    """Raw travel-input record as submitted by the user."""

    destinations: List[str] = Field(default_factory=list, description="Destinations")
    experiences: List[str] = Field(default_factory=list, description="Experiences")
    preferences: Optional[TravelPreferences] = Field(default=None, description="Preferences")
    timeframe: Optional[Timeframe] = Field(default=None, description="Timeframe")
