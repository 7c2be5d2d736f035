"""VBB transport.rest API adapters."""

from journey_board.adapters.vbb_api.vbb_journey_repository import VbbJourneyRepository
from journey_board.adapters.vbb_api.vbb_station_repository import VbbStationRepository

__all__ = ["VbbJourneyRepository", "VbbStationRepository"]
