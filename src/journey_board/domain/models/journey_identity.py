"""Journey identity used for novelty detection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JourneyIdentity:
    """Key identifying a journey across refresh cycles.

    Derived from the canonical departure timestamp and the first line name;
    never persisted.
    """

    depart_at: str
    first_line_name: str

    def __str__(self) -> str:
        return f"{self.depart_at}-{self.first_line_name}"
