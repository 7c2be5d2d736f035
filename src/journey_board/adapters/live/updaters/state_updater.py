"""Updater for the published board state."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from journey_board.adapters.live.state.state import (
    State,  # noqa: TC001 - Runtime dependency: used in __init__
)
from journey_board.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from journey_board.domain.models.journey import Journey
    from journey_board.domain.models.journey_identity import JourneyIdentity
    from journey_board.domain.models.station import Station

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Writes the board state by swapping in a new snapshot for every change."""

    def __init__(self, state: State) -> None:
        """Initialize the state updater.

        Args:
            state: The State instance to update.
        """
        self.state = state

    def begin_fetch(self) -> None:
        self.state.snapshot = replace(self.state.snapshot, is_loading=True)

    def publish_journeys(
        self,
        journeys: list[Journey],
        identities: frozenset[JourneyIdentity],
        new_highlight_ticks: int,
        refresh_pulse_ticks: int,
    ) -> None:
        """Publish a refresh result in a single snapshot swap."""
        current = self.state.snapshot
        self.state.previous_identities = identities
        self.state.awaiting_baseline = False
        self.state.snapshot = replace(
            current,
            journeys=tuple(journeys),
            selected_index=0,
            is_loading=False,
            last_update=datetime.now(UTC),
            api_status="success",
            refresh_count=current.refresh_count + 1,
            refresh_pulse_ticks=refresh_pulse_ticks,
            new_highlight_ticks=max(new_highlight_ticks, 0) or current.new_highlight_ticks,
        )
        logger.debug(f"Published {len(journeys)} journeys")

    def fetch_failed(self) -> None:
        self.state.snapshot = replace(self.state.snapshot, is_loading=False, api_status="error")

    def tick(self) -> None:
        """Advance one animation frame and decrement every active countdown."""
        current = self.state.snapshot
        self.state.snapshot = replace(
            current,
            animation_frame=current.animation_frame + 1,
            splash_ticks=max(current.splash_ticks - 1, 0),
            refresh_pulse_ticks=max(current.refresh_pulse_ticks - 1, 0),
            new_highlight_ticks=max(current.new_highlight_ticks - 1, 0),
            status_message_ticks=max(current.status_message_ticks - 1, 0),
        )

    def show_status_message(self, message: str, ticks: int) -> None:
        self.state.snapshot = replace(
            self.state.snapshot, status_message=message, status_message_ticks=ticks
        )
        logger.debug(f"Status message: {message}")

    def set_route(self, origin: Station, dest: Station) -> None:
        """Switch to another station pair; journeys of the old pair are cleared."""
        self.state.previous_identities = frozenset()
        self.state.awaiting_baseline = True
        self.state.snapshot = replace(
            self.state.snapshot,
            origin=origin,
            dest=dest,
            journeys=(),
            selected_index=0,
        )
        logger.info(f"Route changed: {origin.name} -> {dest.name}")

    def move_selection(self, delta: int) -> None:
        current = self.state.snapshot
        if not current.journeys:
            return
        index = min(max(current.selected_index + delta, 0), len(current.journeys) - 1)
        if index != current.selected_index:
            self.state.snapshot = replace(current, selected_index=index)
