"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a public transport stop returned by station search."""

    id: str
    name: str
    kind: str = "stop"
