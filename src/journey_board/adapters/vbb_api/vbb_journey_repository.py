"""VBB (Berlin/Brandenburg) REST API journey repository adapter.

Uses the v6.vbb.transport.rest ``/journeys`` endpoint.
"""

import logging
from typing import TYPE_CHECKING

from journey_board.adapters.vbb_api.http import get_json
from journey_board.domain.models.raw_journey import RawJourneyBatch
from journey_board.domain.ports.journey_repository import JourneyRepository

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://v6.vbb.transport.rest"


class VbbJourneyRepository(JourneyRepository):
    """Adapter fetching raw journeys between two VBB stops."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10,
        results: int = 25,
        transfers: int = 3,
    ) -> None:
        """Initialize with optional aiohttp session and request settings."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._results = results
        self._transfers = transfers

    async def fetch_raw(self, origin_id: str, dest_id: str) -> RawJourneyBatch:
        """Fetch raw journeys from origin to destination.

        Response structure (abridged):
        {
          "journeys": [
            {
              "legs": [
                {
                  "origin": {"name": "S Köpenick (Berlin)"},
                  "departure": "2024-01-01T12:00:00+01:00",
                  "departureDelay": 120,
                  "departurePlatform": "2",
                  "line": {"name": "S3", "product": "suburban", "color": {"bg": "#..."}},
                  "remarks": [{"type": "hint", "code": "...", "text": "..."}],
                  "cycle": {"min": 600},
                  ...
                },
                {"walking": true, "arrival": "...", ...}
              ]
            }
          ]
        }
        """
        url = f"{self._base_url}/journeys"
        params: dict[str, str | int] = {
            "from": origin_id,
            "to": dest_id,
            "transfers": self._transfers,
            "results": self._results,
            "remarks": "true",
        }

        try:
            data = await get_json(self._session, url, params, self._timeout_seconds)
        except Exception as e:
            logger.error(f"Error fetching journeys from VBB API for '{origin_id}' -> '{dest_id}': {e}")
            raise

        if not isinstance(data, dict):
            raise RuntimeError("VBB API returned an unexpected journeys document")
        logger.debug(f"Fetched {len(data.get('journeys') or [])} raw journeys")
        return data
