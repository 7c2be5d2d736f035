"""User preference domain models."""

from dataclasses import dataclass, field

from journey_board.domain.models.station import Station

DEFAULT_ORIGIN = Station(id="900180001", name="S Köpenick (Berlin)")
DEFAULT_DESTINATION = Station(id="900100041", name="Brunnenstr./Invalidenstr. (Berlin)")


@dataclass(frozen=True)
class FavoriteRoute:
    """A saved origin/destination pair."""

    origin: Station
    dest: Station

    def matches(self, origin: Station, dest: Station) -> bool:
        """Check whether this favorite connects the same two stations."""
        return self.origin.id == origin.id and self.dest.id == dest.id


@dataclass(frozen=True)
class Preferences:
    """Persisted user preferences: favorites and the last used station pair."""

    routes: list[FavoriteRoute] = field(default_factory=list)
    last_origin: Station = DEFAULT_ORIGIN
    last_dest: Station = DEFAULT_DESTINATION
