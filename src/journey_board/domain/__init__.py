"""Domain layer - core business logic and models."""

from journey_board.domain.models import (
    Journey,
    Leg,
    Preferences,
    Station,
)
from journey_board.domain.ports import (
    DisplayAdapter,
    JourneyRepository,
    PreferencesRepository,
    StationRepository,
)

__all__ = [
    "DisplayAdapter",
    "Journey",
    "JourneyRepository",
    "Leg",
    "Preferences",
    "PreferencesRepository",
    "Station",
    "StationRepository",
]
