"""Domain models for journey board."""

from journey_board.domain.models.delay_history import DelayHistory
from journey_board.domain.models.error_details import ErrorDetails
from journey_board.domain.models.journey import Journey
from journey_board.domain.models.journey_identity import JourneyIdentity
from journey_board.domain.models.leg import Leg
from journey_board.domain.models.preferences import (
    DEFAULT_DESTINATION,
    DEFAULT_ORIGIN,
    FavoriteRoute,
    Preferences,
)
from journey_board.domain.models.raw_journey import RawJourneyBatch, RawLeg
from journey_board.domain.models.station import Station

__all__ = [
    "DEFAULT_DESTINATION",
    "DEFAULT_ORIGIN",
    "DelayHistory",
    "ErrorDetails",
    "FavoriteRoute",
    "Journey",
    "JourneyIdentity",
    "Leg",
    "Preferences",
    "RawJourneyBatch",
    "RawLeg",
    "Station",
]
