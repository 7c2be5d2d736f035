"""Terminal display adapter rendering the board with rich."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from journey_board.adapters.live.formatters.journey_formatter import (
    clean_station_name,
    occupancy_bar,
    product_color,
    product_icon,
    spinner_frame,
)
from journey_board.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from journey_board.adapters.config.app_config import AppConfig
    from journey_board.adapters.live.formatters.journey_formatter import JourneyFormatter
    from journey_board.adapters.live.state.board_snapshot import BoardSnapshot
    from journey_board.adapters.live.state.state import State
    from journey_board.domain.contracts.refresh_coordinator import RefreshCoordinatorProtocol
    from journey_board.domain.models.journey import Journey

logger = logging.getLogger(__name__)

TITLE = "BERLIN ROUTER"
OCCUPANCY_MARKERS = {"low": ("○", "green"), "medium": ("◐", "yellow"), "high": ("●", "red")}
LEGEND = (
    "Legend: ○ Low ◐ Med ● High occupancy   ⏱ Delayed   ⚡ Tight connection   "
    "⚠ Warning   ★ New"
)


class TerminalDisplayAdapter(DisplayAdapter):
    """Renders the published board snapshot on its own refresh cycle.

    Only reads state: the snapshot is taken once per frame and delay samples
    come from the tracker's read side.
    """

    def __init__(
        self,
        state: State,
        coordinator: RefreshCoordinatorProtocol,
        formatter: JourneyFormatter,
        config: AppConfig,
        console: Console | None = None,
    ) -> None:
        """Initialize the display adapter.

        Args:
            state: Board state to read from.
            coordinator: Coordinator driving refreshes and the animation clock.
            formatter: Formatter for times, countdowns and trends.
            config: Application configuration.
            console: Console to render to, stdout by default.
        """
        self.state = state
        self.coordinator = coordinator
        self.formatter = formatter
        self.config = config
        self.console = console or Console()
        self._stop_event = asyncio.Event()

    async def start(self) -> None:
        """Start the coordinator and render frames until stopped."""
        await self.coordinator.start()
        frame_interval = self.config.tick_interval_seconds
        with Live(console=self.console, auto_refresh=False, screen=True) as live:
            while not self._stop_event.is_set():
                live.update(self.render(), refresh=True)
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=frame_interval)
                except TimeoutError:
                    continue
        logger.info("Terminal display stopped")

    async def stop(self) -> None:
        """Stop rendering and shut the coordinator down."""
        self._stop_event.set()
        await self.coordinator.stop()

    def render(self, now: datetime | None = None) -> Group:
        """Build the renderable for the current snapshot."""
        snapshot = self.state.snapshot
        now = now or datetime.now(UTC)
        if snapshot.show_splash:
            return Group(Panel(Text(TITLE, style="bold yellow", justify="center"), padding=(2, 4)))

        parts = [self.render_header(snapshot, now), self.render_list(snapshot, now)]
        journey = snapshot.selected_journey
        if journey is not None:
            parts.append(self.render_detail(journey, now))
        parts.append(Text(LEGEND, style="dim"))
        return Group(*parts)

    def render_header(self, snapshot: BoardSnapshot, now: datetime) -> Panel:
        origin = clean_station_name(snapshot.origin.name)[:15]
        dest = clean_station_name(snapshot.dest.name)[:15]

        header = Text()
        header.append(f"{TITLE}  ", style="bold")
        header.append(f"{origin} → {dest}  ")
        header.append(self.formatter.format_clock(now), style="cyan")
        if snapshot.is_loading:
            header.append(f" {spinner_frame(snapshot.animation_frame)}")
        if snapshot.visible_status_message:
            header.append(f"  {snapshot.visible_status_message}", style="bold green")

        border = "yellow"
        if snapshot.refresh_pulse and snapshot.animation_frame % 4 < 2:
            border = "green"
        return Panel(header, border_style=border)

    def render_list(self, snapshot: BoardSnapshot, now: datetime) -> Text:
        text = Text()
        if not snapshot.journeys:
            if snapshot.is_loading:
                text.append(f"  {spinner_frame(snapshot.animation_frame)} Loading routes...\n", style="dim")
            else:
                text.append(" No journeys found. Press 'r' to refresh.\n", style="dim")
            return text

        for index, journey in enumerate(snapshot.journeys):
            self._append_journey_row(text, snapshot, index, journey, now)
        return text

    def _append_journey_row(
        self, text: Text, snapshot: BoardSnapshot, index: int, journey: Journey, now: datetime
    ) -> None:
        summary = self.formatter.summarize(journey)
        countdown = journey.depart_at - now
        selected = index == snapshot.selected_index
        style = self.formatter.journey_style(journey, summary, now)
        if selected:
            style += " bold"

        text.append(" ▸ " if selected else "   ", style="reverse" if selected else "")
        text.append(
            f"{index + 1}. {self.formatter.format_time(journey.depart_at)} → "
            f"{self.formatter.format_time(journey.arrive_at)}  "
            f"({self.formatter.format_minutes(journey.total_duration)}m)  "
            f"wait:{self.formatter.format_minutes(journey.total_wait)}m",
            style=style,
        )
        text.append("  ")
        text.append(
            self.formatter.format_countdown(countdown),
            style=self.formatter.countdown_style(countdown),
        )
        if summary.max_occupancy in OCCUPANCY_MARKERS:
            marker, marker_style = OCCUPANCY_MARKERS[summary.max_occupancy]
            text.append(f" {marker}", style=marker_style)
        if summary.has_delay:
            text.append(" ⏱", style="yellow")
        if summary.has_tight_connection:
            text.append(" ⚡", style="red")
        if summary.has_warning:
            text.append(" ⚠", style="red")
        if journey.is_new and snapshot.new_highlight_ticks > 0:
            text.append(" ★", style="green")
        text.append("\n    ")

        for leg_index, leg in enumerate(journey.legs):
            color = product_color(leg.product)
            if leg_index == 0:
                text.append("●", style=color)
            text.append(f"─{leg.line_name}─", style=color)
            text.append("●", style=color)
        text.append("\n    " + "─" * 50 + "\n", style="dim")

    def render_detail(self, journey: Journey, now: datetime) -> Panel:
        countdown = journey.depart_at - now
        text = Text()
        text.append(
            f"Journey: {self.formatter.format_time(journey.depart_at)} → "
            f"{self.formatter.format_time(journey.arrive_at)}",
            style="bold yellow",
        )
        text.append("  Departs in: ")
        text.append(
            self.formatter.format_countdown(countdown),
            style=self.formatter.countdown_style(countdown),
        )
        text.append(
            f"\nDuration: {self.formatter.format_minutes(journey.total_duration)}min  |  "
            f"Total wait: {self.formatter.format_minutes(journey.total_wait)}min\n"
        )
        text.append("─" * 55 + "\n\n")

        for leg_index, leg in enumerate(journey.legs):
            wait_minutes = self.formatter.format_minutes(leg.wait_before)
            if self.formatter.is_tight(leg.wait_before):
                text.append(f"  ⚡ TIGHT CONNECTION: {wait_minutes}min to change!\n", style="bold red")
            elif leg.wait_before.total_seconds() > 0:
                text.append(f"  ⏱ Wait {wait_minutes}min\n", style="yellow")

            color = product_color(leg.product)
            text.append(f"{product_icon(leg.product)} {leg.line_name}", style=f"bold {color}")
            text.append(
                f" {self.formatter.format_time(leg.departure)} → {self.formatter.format_time(leg.arrival)}"
            )
            delay = self.formatter.format_delay(leg.departure_delay_seconds)
            if delay:
                text.append(f" {delay}", style="bold red")
            text.append(f"  {occupancy_bar(leg.occupancy_level)}")
            if leg.repeat_interval_minutes > 0:
                text.append(f" (every {leg.repeat_interval_minutes}m)")
            samples = self.state.delay_history.snapshot(leg.line_name)
            if samples:
                text.append(f" {self.formatter.sparkline(samples)}", style="dim")
            text.append("\n")

            progress = self.formatter.transit_progress(leg, now)
            if progress is not None:
                text.append(f"    {self.formatter.progress_bar(progress)}", style=color)
                text.append(" in transit\n", style="dim")

            text.append(f"    From: {clean_station_name(leg.origin_name)}")
            if leg.departure_platform:
                text.append(f" [Plt {leg.departure_platform}]", style="cyan")
            text.append(f"\n    To:   {clean_station_name(leg.dest_name)}")
            if leg.arrival_platform:
                text.append(f" [Plt {leg.arrival_platform}]", style="cyan")
            text.append("\n")

            for warning in leg.service_warnings:
                text.append(f"    ⚠ {self.formatter.truncate(warning)}\n", style="red")
            if leg_index < len(journey.legs) - 1:
                text.append("\n")

        return Panel(text, title="Journey Details")
