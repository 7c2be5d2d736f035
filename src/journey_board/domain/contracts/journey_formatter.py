"""Protocol for formatting journeys for display."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

from journey_board.domain.models.journey import Journey
from journey_board.domain.models.leg import Leg


@dataclass(frozen=True)
class JourneySummary:
    """Status flags of a journey shown next to it in the list."""

    has_delay: bool
    has_warning: bool
    has_tight_connection: bool
    max_occupancy: str | None


class JourneyFormatterProtocol(Protocol):
    """Protocol for turning journeys into display strings."""

    def format_time(self, moment: datetime | None) -> str:
        """Format a moment as HH:MM in the display timezone, "?" when unset."""
        ...

    def format_countdown(self, delta: timedelta) -> str:
        """Format time left until departure ("GONE", "42s", "4:05")."""
        ...

    def format_delay(self, delay_seconds: int) -> str:
        """Format a delay as "+Nm", empty when there is none."""
        ...

    def sparkline(self, values: list[int], width: int = 8) -> str:
        """Render delay samples as a block sparkline of the given width."""
        ...

    def summarize(self, journey: Journey) -> JourneySummary:
        """Compute the status flags of a journey."""
        ...

    def transit_progress(self, leg: Leg, now: datetime) -> float | None:
        """Fraction of a leg already travelled, None when not in transit."""
        ...
