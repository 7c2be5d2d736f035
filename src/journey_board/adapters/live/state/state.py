"""Owned state of a live journey board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from journey_board.domain.models.preferences import DEFAULT_DESTINATION, DEFAULT_ORIGIN

from .board_snapshot import BoardSnapshot

if TYPE_CHECKING:
    from journey_board.domain.contracts.delay_history_tracker import (
        DelayHistoryTrackerProtocol,
    )
    from journey_board.domain.models.journey_identity import JourneyIdentity
    from journey_board.domain.models.station import Station

logger = logging.getLogger(__name__)


class State:
    """Refresh cycle state shared between the coordinator and the presentation layer.

    The coordinator is the only writer. Readers take ``snapshot`` once per
    render; it is replaced as a whole, never mutated in place. The delay
    history lives behind the tracker's own lock.
    """

    def __init__(
        self,
        delay_history: DelayHistoryTrackerProtocol,
        origin: Station | None = None,
        dest: Station | None = None,
        splash_ticks: int = 0,
    ) -> None:
        """Initialize with empty journeys and the given station pair.

        Args:
            delay_history: Tracker holding per-line delay samples.
            origin: Initial origin, defaults to the built-in default station.
            dest: Initial destination, defaults to the built-in default station.
            splash_ticks: Ticks to show the splash before the first refresh.
        """
        self.snapshot: BoardSnapshot = BoardSnapshot(
            origin=origin or DEFAULT_ORIGIN,
            dest=dest or DEFAULT_DESTINATION,
            splash_ticks=max(0, splash_ticks),
            is_loading=True,
        )
        self.previous_identities: frozenset[JourneyIdentity] = frozenset()
        # True until the first cycle for the current station pair is published.
        self.awaiting_baseline = True
        self.delay_history = delay_history
