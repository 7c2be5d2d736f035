"""Protocol for updating the published board state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.journey import Journey
    from journey_board.domain.models.journey_identity import JourneyIdentity
    from journey_board.domain.models.station import Station


class StateUpdaterProtocol(Protocol):
    """Protocol for the single writer of the published board state."""

    def begin_fetch(self) -> None:
        """Mark a refresh as in flight (loading indicator on)."""
        ...

    def publish_journeys(
        self,
        journeys: list["Journey"],
        identities: frozenset["JourneyIdentity"],
        new_highlight_ticks: int,
        refresh_pulse_ticks: int,
    ) -> None:
        """Atomically publish the result of a successful refresh cycle.

        Args:
            journeys: Ordered journeys to display.
            identities: Identity set replacing the previous cycle's.
            new_highlight_ticks: Length of the "new journey" highlight window.
            refresh_pulse_ticks: Length of the "just refreshed" pulse.
        """
        ...

    def fetch_failed(self) -> None:
        """Clear the loading indicator, keeping the previously published journeys."""
        ...

    def tick(self) -> None:
        """Advance the animation frame and decrement transient countdowns."""
        ...

    def show_status_message(self, message: str, ticks: int) -> None:
        """Display a transient status message for a number of ticks."""
        ...

    def set_route(self, origin: "Station", dest: "Station") -> None:
        """Change the origin/destination pair being displayed."""
        ...

    def move_selection(self, delta: int) -> None:
        """Move the selected journey index, clamped to the journey list."""
        ...
