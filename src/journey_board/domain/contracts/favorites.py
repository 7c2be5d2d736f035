"""Protocol for favorite routes and the current station pair."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.preferences import FavoriteRoute
    from journey_board.domain.models.station import Station


class FavoritesProtocol(Protocol):
    """Protocol for persisting favorites and the last-used station pair."""

    @property
    def origin(self) -> "Station": ...

    @property
    def dest(self) -> "Station": ...

    def add_current(self) -> bool:
        """Save the current pair as a favorite, False if it already is one."""
        ...

    def load(self, index: int) -> "FavoriteRoute | None":
        """Make the favorite at index the current pair."""
        ...

    def reverse(self) -> None:
        """Swap origin and destination."""
        ...

    def select_route(self, origin: "Station", dest: "Station") -> None:
        """Make the given pair the current one."""
        ...
