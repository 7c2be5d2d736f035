"""Protocol for turning raw journey batches into journeys."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from journey_board.domain.models.journey import Journey
    from journey_board.domain.models.raw_journey import RawJourneyBatch


class JourneyBuilderProtocol(Protocol):
    """Protocol for building ordered journeys from a raw batch."""

    def build(
        self, raw_batch: "RawJourneyBatch", filters: Mapping[str, bool] | None = None
    ) -> list["Journey"]:
        """Build journeys sorted by departure, then total wait.

        Args:
            raw_batch: Decoded journey document from the data source.
            filters: Transport mode to enabled flag. Modes absent from the
                mapping are enabled.

        Returns:
            Ordered list of valid journeys.
        """
        ...
