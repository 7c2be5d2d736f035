"""Preferences persistence adapters."""

from journey_board.adapters.preferences.json_preferences_repository import (
    JsonPreferencesRepository,
)

__all__ = ["JsonPreferencesRepository"]
