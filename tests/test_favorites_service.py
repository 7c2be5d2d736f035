"""Tests for FavoritesService."""

from journey_board.application.services import FavoritesService
from journey_board.domain.models import (
    DEFAULT_DESTINATION,
    DEFAULT_ORIGIN,
    FavoriteRoute,
    Preferences,
    Station,
)
from journey_board.domain.ports import PreferencesRepository

ALEX = Station(id="900100003", name="S+U Alexanderplatz Bhf (Berlin)")
ZOO = Station(id="900023201", name="S+U Zoologischer Garten Bhf (Berlin)")


class InMemoryPreferencesRepository(PreferencesRepository):
    """Preferences repository keeping every saved version in memory."""

    def __init__(self, preferences: Preferences | None = None) -> None:
        self.preferences = preferences or Preferences()
        self.saved: list[Preferences] = []

    def load(self) -> Preferences:
        return self.preferences

    def save(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self.saved.append(preferences)


def test_loads_last_route_on_start() -> None:
    """Given stored preferences, when creating the service, then the last route is current."""
    repo = InMemoryPreferencesRepository(Preferences(last_origin=ALEX, last_dest=ZOO))

    service = FavoritesService(repo)

    assert service.origin == ALEX
    assert service.dest == ZOO
    assert repo.saved == []


def test_add_current_appends_once() -> None:
    """Given the current route, when adding it twice, then it is stored once and the second add reports a duplicate."""
    repo = InMemoryPreferencesRepository()
    service = FavoritesService(repo)

    assert service.add_current() is True
    assert service.add_current() is False

    assert service.routes == [FavoriteRoute(origin=DEFAULT_ORIGIN, dest=DEFAULT_DESTINATION)]
    assert len(repo.saved) == 1


def test_reverse_swaps_and_saves() -> None:
    """Given a route, when reversing, then origin and destination swap and are saved."""
    repo = InMemoryPreferencesRepository(Preferences(last_origin=ALEX, last_dest=ZOO))
    service = FavoritesService(repo)

    service.reverse()

    assert (service.origin, service.dest) == (ZOO, ALEX)
    assert repo.preferences.last_origin == ZOO


def test_load_makes_favorite_current() -> None:
    """Given a saved favorite, when loading it, then it becomes the current route."""
    repo = InMemoryPreferencesRepository(
        Preferences(routes=[FavoriteRoute(origin=ALEX, dest=ZOO)])
    )
    service = FavoritesService(repo)

    route = service.load(0)

    assert route == FavoriteRoute(origin=ALEX, dest=ZOO)
    assert (service.origin, service.dest) == (ALEX, ZOO)


def test_load_and_remove_out_of_range() -> None:
    """Given no favorites, when loading or removing, then nothing happens."""
    repo = InMemoryPreferencesRepository()
    service = FavoritesService(repo)

    assert service.load(0) is None
    assert service.remove(-1) is None
    assert repo.saved == []


def test_remove_deletes_favorite() -> None:
    """Given two favorites, when removing the first, then only the second remains."""
    first = FavoriteRoute(origin=ALEX, dest=ZOO)
    second = FavoriteRoute(origin=ZOO, dest=ALEX)
    service = FavoritesService(InMemoryPreferencesRepository(Preferences(routes=[first, second])))

    assert service.remove(0) == first
    assert service.routes == [second]


def test_select_stations() -> None:
    """Given a new origin and destination, when selecting them, then both are current."""
    service = FavoritesService(InMemoryPreferencesRepository())

    service.select_origin(ALEX)
    service.select_destination(ZOO)

    assert (service.origin, service.dest) == (ALEX, ZOO)
