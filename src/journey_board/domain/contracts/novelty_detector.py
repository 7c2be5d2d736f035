"""Protocol for detecting new journeys across refresh cycles."""

from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.journey import Journey
    from journey_board.domain.models.journey_identity import JourneyIdentity


class NoveltyResult(NamedTuple):
    """Journeys with their novelty flag set, plus the identity set replacing the previous one."""

    journeys: list["Journey"]
    identities: frozenset["JourneyIdentity"]
    any_new: bool


class NoveltyDetectorProtocol(Protocol):
    """Protocol for comparing a fresh journey list against the previous cycle."""

    def detect(
        self,
        journeys: list["Journey"],
        previous_identities: frozenset["JourneyIdentity"],
    ) -> NoveltyResult:
        """Flag journeys whose identity was absent from the previous cycle."""
        ...
