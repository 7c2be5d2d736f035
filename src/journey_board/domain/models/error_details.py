"""Error details domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetails:
    """HTTP status code and human-readable reason extracted from a fetch failure."""

    status_code: int | None
    reason: str
