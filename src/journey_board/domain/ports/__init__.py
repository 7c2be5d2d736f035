"""Ports (interfaces) for the ports-and-adapters architecture."""

from journey_board.domain.ports.display_adapter import DisplayAdapter
from journey_board.domain.ports.journey_repository import JourneyRepository
from journey_board.domain.ports.preferences_repository import PreferencesRepository
from journey_board.domain.ports.station_repository import StationRepository

__all__ = [
    "DisplayAdapter",
    "JourneyRepository",
    "PreferencesRepository",
    "StationRepository",
]
