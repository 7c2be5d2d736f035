"""Journey domain model."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from journey_board.domain.models.leg import Leg


@dataclass(frozen=True)
class Journey:
    """An ordered, non-empty sequence of legs from origin to destination."""

    depart_at: datetime
    arrive_at: datetime
    legs: list[Leg]
    total_wait: timedelta = timedelta(0)
    is_new: bool = True

    def __post_init__(self) -> None:
        if not self.legs:
            raise ValueError("Journey requires at least one leg")

    @property
    def total_duration(self) -> timedelta:
        """Time between leaving the origin and arriving at the destination."""
        return self.arrive_at - self.depart_at

    @property
    def first_line_name(self) -> str:
        """Line name of the first boarded leg."""
        return self.legs[0].line_name
