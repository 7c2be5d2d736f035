"""Leg domain model."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Leg:
    """One boarded transit segment between two stops on a single line.

    Delays are kept in seconds as delivered by the data source; conversion to
    minutes happens when formatting.
    """

    line_name: str
    product: str
    origin_name: str
    dest_name: str
    departure: datetime
    arrival: datetime
    wait_before: timedelta = timedelta(0)
    departure_delay_seconds: int = 0
    arrival_delay_seconds: int = 0
    occupancy_level: str | None = None  # "low", "medium" or "high"
    service_warnings: list[str] = field(default_factory=list)
    departure_platform: str | None = None
    arrival_platform: str | None = None
    repeat_interval_minutes: int = 0
    line_color: str | None = None
    trip_id: str = ""

    @property
    def departure_delay_minutes(self) -> int:
        """Departure delay in whole minutes."""
        return self.departure_delay_seconds // 60

    @property
    def duration(self) -> timedelta:
        """Scheduled time spent on board."""
        return self.arrival - self.departure
