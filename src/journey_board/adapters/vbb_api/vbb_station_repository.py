"""VBB REST API station search adapter."""

import logging
from typing import TYPE_CHECKING

from journey_board.adapters.vbb_api.http import get_json
from journey_board.adapters.vbb_api.vbb_journey_repository import DEFAULT_BASE_URL
from journey_board.domain.models.station import Station
from journey_board.domain.ports.station_repository import StationRepository

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class VbbStationRepository(StationRepository):
    """Adapter resolving station names via the ``/locations`` endpoint."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10,
        results: int = 10,
    ) -> None:
        """Initialize with optional aiohttp session and request settings."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._results = results

    async def search_stations(self, query: str) -> list[Station]:
        """Search stops matching a query.

        Only locations of type "stop" are returned; addresses and POIs are
        skipped. Queries shorter than two characters return no results
        without calling the API.
        """
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        url = f"{self._base_url}/locations"
        params: dict[str, str | int] = {"query": query, "results": self._results}

        try:
            data = await get_json(self._session, url, params, self._timeout_seconds)
        except Exception as e:
            logger.error(f"Error searching VBB stations for '{query}': {e}")
            raise

        locations = data if isinstance(data, list) else []
        return [
            Station(id=str(location["id"]), name=location.get("name", ""), kind="stop")
            for location in locations
            if isinstance(location, dict) and location.get("type") == "stop" and location.get("id")
        ]
