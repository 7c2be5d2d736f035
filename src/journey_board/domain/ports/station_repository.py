"""Station repository port."""

from typing import Protocol

from journey_board.domain.models.station import Station


class StationRepository(Protocol):
    """Port for resolving a text query to candidate stations."""

    async def search_stations(self, query: str) -> list[Station]:
        """Search stations by name."""
        ...
