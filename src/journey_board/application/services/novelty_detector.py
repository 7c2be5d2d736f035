"""Novelty detection across refresh cycles."""

from dataclasses import replace

from journey_board.domain.contracts.novelty_detector import (
    NoveltyDetectorProtocol,
    NoveltyResult,
)
from journey_board.domain.models.journey import Journey
from journey_board.domain.models.journey_identity import JourneyIdentity


def journey_identity(journey: Journey) -> JourneyIdentity:
    """Identity of a journey: canonical departure timestamp and first line."""
    return JourneyIdentity(
        depart_at=journey.depart_at.isoformat(),
        first_line_name=journey.first_line_name,
    )


class NoveltyDetector(NoveltyDetectorProtocol):
    """Flags journeys that were not part of the previous refresh cycle."""

    def detect(
        self,
        journeys: list[Journey],
        previous_identities: frozenset[JourneyIdentity],
    ) -> NoveltyResult:
        """Mark new journeys and build the identity set for the next cycle.

        The returned identity set replaces the previous one; it is never
        merged. With an empty previous set every journey is new.
        """
        flagged: list[Journey] = []
        identities: set[JourneyIdentity] = set()
        any_new = False

        for journey in journeys:
            identity = journey_identity(journey)
            identities.add(identity)
            is_new = identity not in previous_identities
            any_new = any_new or is_new
            flagged.append(replace(journey, is_new=is_new))

        return NoveltyResult(journeys=flagged, identities=frozenset(identities), any_new=any_new)
