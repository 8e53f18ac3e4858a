"""Input schemas and the shared value-model base."""

from planning.shared.schemas.base import ValueModel
from planning.shared.schemas.inputs import (
    DEFAULT_CURRENCY,
    Coordinates,
    CostRange,
    LocationData,
    Timeframe,
    TravelInputData,
    TravelPreferences,
    TripData,
)

__all__ = [
    "ValueModel",
    "DEFAULT_CURRENCY",
    "Coordinates",
    "CostRange",
    "LocationData",
    "Timeframe",
    "TravelInputData",
    "TravelPreferences",
    "TripData",
]
