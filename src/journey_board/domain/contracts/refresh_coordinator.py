"""Protocol for the refresh and animation coordinator."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.station import Station


class RefreshCoordinatorProtocol(Protocol):
    """Protocol for driving periodic refreshes and the animation clock."""

    async def start(self) -> None:
        """Start the animation clock and periodic refresh."""
        ...

    async def stop(self) -> None:
        """Signal shutdown and wait for background work to finish."""
        ...

    def request_refresh(self) -> bool:
        """Request an immediate refresh.

        Returns:
            True if a fetch was started, False if one is already in flight
            or the coordinator is shutting down.
        """
        ...

    def change_route(self, origin: "Station", dest: "Station") -> None:
        """Switch to another station pair and refresh."""
        ...

    def show_status_message(self, message: str) -> None:
        """Show a transient status message."""
        ...

    def move_selection(self, delta: int) -> None:
        """Move the selected journey up (negative) or down (positive)."""
        ...

    def reverse_route(self) -> None:
        """Swap origin and destination and refresh."""
        ...

    def load_favorite(self, index: int) -> bool:
        """Switch to the favorite at index. Returns False if there is none."""
        ...

    def add_favorite(self) -> bool:
        """Save the current pair as a favorite and report it in the status line."""
        ...

    def select_route(self, origin: "Station", dest: "Station") -> None:
        """Remember and switch to the given station pair."""
        ...
