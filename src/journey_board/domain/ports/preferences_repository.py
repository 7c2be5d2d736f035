"""Preferences repository port."""

from typing import Protocol

from journey_board.domain.models.preferences import Preferences


class PreferencesRepository(Protocol):
    """Port for loading and saving user preferences."""

    def load(self) -> Preferences:
        """Load preferences, falling back to defaults when unavailable."""
        ...

    def save(self, preferences: Preferences) -> None:
        """Persist preferences."""
        ...
