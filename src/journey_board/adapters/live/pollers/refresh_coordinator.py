"""Refresh and animation coordinator for the live journey board."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import aiohttp

from journey_board.domain.contracts.refresh_coordinator import RefreshCoordinatorProtocol
from journey_board.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from journey_board.adapters.config.app_config import AppConfig
    from journey_board.adapters.live.state.state import State
    from journey_board.domain.contracts.favorites import FavoritesProtocol
    from journey_board.domain.contracts.journey_builder import JourneyBuilderProtocol
    from journey_board.domain.contracts.novelty_detector import NoveltyDetectorProtocol
    from journey_board.domain.contracts.state_updater import StateUpdaterProtocol
    from journey_board.domain.models.raw_journey import RawJourneyBatch
    from journey_board.domain.models.station import Station
    from journey_board.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


class RefreshPhase(StrEnum):
    """Phase of the refresh cycle."""

    IDLE = "idle"
    FETCHING = "fetching"
    APPLYING = "applying"


def _extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from a fetch failure."""
    if isinstance(error, TimeoutError):
        return ErrorDetails(status_code=None, reason="Request timed out")
    if isinstance(error, aiohttp.ClientConnectionError):
        return ErrorDetails(status_code=None, reason="Connection failed")

    # Format: "VBB API returned status 502: ..."
    status_match = re.search(r"status (\d{3})", str(error))
    status_code = int(status_match.group(1)) if status_match else None

    if status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)


@dataclass(frozen=True)
class RefreshCoordinatorServices:
    """Collaborators used during a refresh cycle."""

    journey_repository: JourneyRepository
    journey_builder: JourneyBuilderProtocol
    novelty_detector: NoveltyDetectorProtocol
    state_updater: StateUpdaterProtocol
    favorites: FavoritesProtocol | None = None


class RefreshCoordinator(RefreshCoordinatorProtocol):
    """Drives the animation clock and periodic refreshes of the board state.

    One background task ticks the animation clock and triggers refreshes;
    each refresh runs as its own short-lived task, so the clock keeps
    ticking while the network call is in flight. All writes to the
    published state go through the state updater from the event loop.
    """

    def __init__(
        self,
        services: RefreshCoordinatorServices,
        state: State,
        config: AppConfig,
    ) -> None:
        """Initialize the coordinator.

        Args:
            services: Repository, builder, detector and state updater.
            state: Board state owned by this coordinator.
            config: Application configuration (intervals, tick counts, filters).
        """
        self.journey_repository = services.journey_repository
        self.journey_builder = services.journey_builder
        self.novelty_detector = services.novelty_detector
        self.state_updater = services.state_updater
        self.favorites = services.favorites
        self.state = state
        self.config = config
        self.phase = RefreshPhase.IDLE
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None
        self._fetch_task: asyncio.Task | None = None
        self._refresh_pending = False
        self._next_refresh_at: float | None = None

    @property
    def is_fetching(self) -> bool:
        return self._fetch_task is not None and not self._fetch_task.done()

    @property
    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    async def start(self) -> None:
        """Start the animation clock and periodic refresh."""
        if self._task is not None and not self._task.done():
            logger.warning("Refresh coordinator already running")
            return

        self._stop_event.clear()
        self._task = asyncio.create_task(self._run_loop())
        logger.info(
            f"Started refresh coordinator (refresh every {self.config.refresh_interval_seconds}s, "
            f"{self.config.animation_fps} ticks/s)"
        )

    async def stop(self) -> None:
        """Signal shutdown, then wait for the clock and any in-flight fetch."""
        self._stop_event.set()
        if self._task is not None:
            await self._task
            self._task = None
        if self._fetch_task is not None and not self._fetch_task.done():
            logger.info("Waiting for in-flight fetch; its result will be discarded")
            await self._fetch_task
        logger.info("Stopped refresh coordinator")

    def request_refresh(self) -> bool:
        """Start a refresh now, or queue one to run after the fetch in flight.

        Returns:
            True if a fetch started now, False if it was queued or shutdown began.
        """
        return self._trigger_refresh("manual")

    async def refresh_now(self) -> bool:
        """Run one complete refresh cycle and wait for it.

        Returns:
            True if the cycle published new journeys.
        """
        if self.is_fetching:
            await self._fetch_task
            return False
        if not self._trigger_refresh("manual") or self._fetch_task is None:
            return False
        return await self._fetch_task

    def change_route(self, origin: Station, dest: Station) -> None:
        self.state_updater.set_route(origin, dest)
        self._trigger_refresh("route change")

    def show_status_message(self, message: str) -> None:
        self.state_updater.show_status_message(message, self.config.status_message_ticks)

    def move_selection(self, delta: int) -> None:
        self.state_updater.move_selection(delta)

    def reverse_route(self) -> None:
        if self.favorites is None:
            snapshot = self.state.snapshot
            self.change_route(snapshot.dest, snapshot.origin)
            return
        self.favorites.reverse()
        self.change_route(self.favorites.origin, self.favorites.dest)

    def load_favorite(self, index: int) -> bool:
        if self.favorites is None:
            return False
        route = self.favorites.load(index)
        if route is None:
            logger.warning(f"No favorite route at index {index}")
            return False
        self.change_route(route.origin, route.dest)
        return True

    def add_favorite(self) -> bool:
        if self.favorites is None:
            return False
        added = self.favorites.add_current()
        self.show_status_message("★ Added to favorites!" if added else "Already in favorites")
        return added

    def select_route(self, origin: Station, dest: Station) -> None:
        if self.favorites is not None:
            self.favorites.select_route(origin, dest)
        self.change_route(origin, dest)

    async def _run_loop(self) -> None:
        """Tick the animation clock until the shutdown signal fires."""
        if not self.state.snapshot.show_splash:
            self._trigger_refresh("startup")

        tick_interval = self.config.tick_interval_seconds
        while not self._stop_event.is_set():
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=tick_interval)
            except TimeoutError:
                self._on_tick()
        logger.debug("Animation clock stopped")

    def _on_tick(self) -> None:
        """Advance the animation clock and fire the periodic refresh when due."""
        splash_was_visible = self.state.snapshot.show_splash
        self.state_updater.tick()

        if splash_was_visible:
            if not self.state.snapshot.show_splash:
                self._trigger_refresh("startup")
            return

        loop = asyncio.get_running_loop()
        if self._next_refresh_at is not None and loop.time() >= self._next_refresh_at:
            self._trigger_refresh("periodic")

    def _trigger_refresh(self, reason: str) -> bool:
        """Enter the fetching phase by spawning a fetch task."""
        if self._stop_event.is_set():
            return False
        if self.is_fetching:
            logger.debug(f"Refresh ({reason}) requested while fetching, queued")
            self._refresh_pending = True
            return False

        loop = asyncio.get_running_loop()
        self._next_refresh_at = loop.time() + self.config.refresh_interval_seconds
        self.phase = RefreshPhase.FETCHING
        self.state_updater.begin_fetch()
        logger.debug(f"Refresh started ({reason})")
        self._fetch_task = asyncio.create_task(self._refresh_cycle())
        return True

    async def _refresh_cycle(self) -> bool:
        """Fetch, then apply the result unless it became stale or shutdown began."""
        snapshot = self.state.snapshot
        origin, dest = snapshot.origin, snapshot.dest

        try:
            raw_batch = await self.journey_repository.fetch_raw(origin.id, dest.id)
        except Exception as e:
            error_details = _extract_error_details(e)
            logger.error(
                f"Refresh failed for {origin.name} -> {dest.name}: "
                f"{error_details.reason} (status: {error_details.status_code}, error: {e})"
            )
            if error_details.status_code == 429:
                logger.warning("Rate limit (429) detected - consider a longer refresh interval")
            if not self._stop_event.is_set():
                self.state_updater.fetch_failed()
            self._finish_cycle()
            return False

        if self._stop_event.is_set():
            logger.info("Discarding fetch result received after shutdown")
            self._finish_cycle()
            return False

        current = self.state.snapshot
        if (current.origin.id, current.dest.id) != (origin.id, dest.id):
            logger.info(f"Discarding journeys for {origin.name} -> {dest.name}: route changed")
            self._finish_cycle()
            return False

        published = self._apply(raw_batch)
        self._finish_cycle()
        return published

    def _apply(self, raw_batch: RawJourneyBatch) -> bool:
        """Build, detect novelty, record delays and publish in one step."""
        self.phase = RefreshPhase.APPLYING
        try:
            journeys = self.journey_builder.build(raw_batch, self.config.filters)
            novelty = self.novelty_detector.detect(journeys, self.state.previous_identities)
            self.state.delay_history.record(novelty.journeys)
        except Exception:
            logger.exception("Could not process fetched journeys, keeping previous ones")
            self.state_updater.fetch_failed()
            return False

        highlight = novelty.any_new and (
            not self.state.awaiting_baseline or self.config.highlight_new_on_first_refresh
        )
        self.state_updater.publish_journeys(
            novelty.journeys,
            novelty.identities,
            new_highlight_ticks=self.config.new_highlight_ticks if highlight else 0,
            refresh_pulse_ticks=self.config.refresh_pulse_ticks,
        )
        logger.info(
            f"Refreshed {len(novelty.journeys)} journeys "
            f"({'with' if novelty.any_new else 'no'} new journeys)"
        )
        return True

    def _finish_cycle(self) -> None:
        self.phase = RefreshPhase.IDLE
        if self._refresh_pending and not self._stop_event.is_set():
            self._refresh_pending = False
            # Runs after this fetch task has completed.
            asyncio.get_running_loop().call_soon(self._trigger_refresh, "queued")
