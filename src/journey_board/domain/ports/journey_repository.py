"""Journey repository port."""

from typing import Protocol

from journey_board.domain.models.raw_journey import RawJourneyBatch


class JourneyRepository(Protocol):
    """Port for retrieving raw journey data between two stations."""

    async def fetch_raw(self, origin_id: str, dest_id: str) -> RawJourneyBatch:
        """Fetch the raw journey batch for an origin/destination pair."""
        ...
