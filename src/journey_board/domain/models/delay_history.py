"""Delay history domain model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class DelayHistory:
    """Rolling window of recent departure delays (minutes) for one line."""

    line_name: str
    recent_delays_minutes: list[int] = field(default_factory=list)
    last_updated: datetime | None = None
