"""Favorite routes and last-used station pair."""

import logging
from dataclasses import replace

from journey_board.domain.models.preferences import FavoriteRoute, Preferences
from journey_board.domain.models.station import Station
from journey_board.domain.ports.preferences_repository import PreferencesRepository

logger = logging.getLogger(__name__)


class FavoritesService:
    """Keeps user preferences in memory and persists every change."""

    def __init__(self, repository: PreferencesRepository) -> None:
        """Initialize with a preferences repository and load current preferences."""
        self._repository = repository
        self.preferences = repository.load()

    @property
    def origin(self) -> Station:
        return self.preferences.last_origin

    @property
    def dest(self) -> Station:
        return self.preferences.last_dest

    @property
    def routes(self) -> list[FavoriteRoute]:
        return list(self.preferences.routes)

    def add_current(self) -> bool:
        """Save the current origin/destination pair as a favorite.

        Returns:
            False if the pair is already a favorite.
        """
        if any(route.matches(self.origin, self.dest) for route in self.preferences.routes):
            return False
        routes = [*self.preferences.routes, FavoriteRoute(origin=self.origin, dest=self.dest)]
        self._update(replace(self.preferences, routes=routes))
        return True

    def remove(self, index: int) -> FavoriteRoute | None:
        """Remove the favorite at index. Returns the removed route, if any."""
        if not 0 <= index < len(self.preferences.routes):
            return None
        routes = list(self.preferences.routes)
        removed = routes.pop(index)
        self._update(replace(self.preferences, routes=routes))
        return removed

    def load(self, index: int) -> FavoriteRoute | None:
        """Make the favorite at index the current station pair."""
        if not 0 <= index < len(self.preferences.routes):
            return None
        route = self.preferences.routes[index]
        self._update(replace(self.preferences, last_origin=route.origin, last_dest=route.dest))
        return route

    def reverse(self) -> None:
        """Swap origin and destination."""
        self._update(
            replace(self.preferences, last_origin=self.dest, last_dest=self.origin)
        )

    def select_origin(self, station: Station) -> None:
        self._update(replace(self.preferences, last_origin=station))

    def select_destination(self, station: Station) -> None:
        self._update(replace(self.preferences, last_dest=station))

    def select_route(self, origin: Station, dest: Station) -> None:
        self._update(replace(self.preferences, last_origin=origin, last_dest=dest))

    def _update(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self._repository.save(preferences)
        logger.debug(
            f"Preferences updated: {preferences.last_origin.name} -> "
            f"{preferences.last_dest.name}, {len(preferences.routes)} favorite(s)"
        )
