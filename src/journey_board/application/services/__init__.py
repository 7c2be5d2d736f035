"""Application services."""

from journey_board.application.services.delay_history_tracker import DelayHistoryTracker
from journey_board.application.services.favorites_service import FavoritesService
from journey_board.application.services.journey_builder import JourneyBuilder
from journey_board.application.services.novelty_detector import NoveltyDetector

__all__ = [
    "DelayHistoryTracker",
    "FavoritesService",
    "JourneyBuilder",
    "NoveltyDetector",
]
