"""Protocol for tracking per-line delay history."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.delay_history import DelayHistory
    from journey_board.domain.models.journey import Journey


class DelayHistoryTrackerProtocol(Protocol):
    """Protocol for recording delay samples and reading them concurrently."""

    def record(self, journeys: list["Journey"]) -> None:
        """Fold the departure delays of a fresh batch into the history.

        Args:
            journeys: Journeys of the latest refresh cycle.
        """
        ...

    def snapshot(self, line_name: str) -> list[int]:
        """Return a copy of the recent delay samples (minutes) for a line.

        Args:
            line_name: The transit line name.

        Returns:
            Delay samples, oldest first. Empty if the line has no history.
        """
        ...

    def history(self, line_name: str) -> "DelayHistory | None":
        """Return a copy of the full history entry for a line, if any."""
        ...
