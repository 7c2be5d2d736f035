"""Formatter for journeys, legs and delay trends."""

import re
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from journey_board.adapters.config.app_config import AppConfig
from journey_board.domain.contracts.journey_formatter import (
    JourneyFormatterProtocol,
    JourneySummary,
)
from journey_board.domain.models.journey import Journey
from journey_board.domain.models.leg import Leg

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"
SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

PRODUCT_COLORS = {
    "suburban": "green",
    "subway": "blue",
    "tram": "red",
    "bus": "magenta",
    "ferry": "cyan",
    "regional": "yellow",
    "express": "yellow",
}

PRODUCT_ICONS = {
    "suburban": "[S]",
    "subway": "[U]",
    "tram": "[T]",
    "bus": "[B]",
    "ferry": "[F]",
    "regional": "[R]",
    "express": "[I]",
}

OCCUPANCY_BARS = {
    "low": "▓░░░░",
    "medium": "▓▓▓░░",
    "high": "▓▓▓▓▓",
}

OCCUPANCY_RANK = {"low": 1, "medium": 2, "high": 3}

_STATION_NOISE = [
    re.compile(r"\s*\[.*?\]"),
    re.compile(r"\s*\(Berlin\)"),
    re.compile(r"^S\+U\s+"),
    re.compile(r"^S\s+"),
    re.compile(r"^U\s+"),
]


def clean_station_name(name: str) -> str:
    """Shorten a VBB stop name for display.

    Drops bracketed suffixes, the "(Berlin)" suffix, S/U/S+U prefixes, " Bhf"
    and anything after a slash.
    """
    for pattern in _STATION_NOISE:
        name = pattern.sub("", name)
    name = name.replace(" Bhf", "")
    name = name.split("/", 1)[0]
    return name.strip()


def product_color(product: str) -> str:
    return PRODUCT_COLORS.get(product, "white")


def product_icon(product: str) -> str:
    return PRODUCT_ICONS.get(product, "[ ]")


def occupancy_bar(level: str | None) -> str:
    return OCCUPANCY_BARS.get(level or "", "░░░░░")


def spinner_frame(frame: int) -> str:
    return SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]


class JourneyFormatter(JourneyFormatterProtocol):
    """Formats journeys according to the display configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone and tight connection settings.
        """
        self.config = config
        self._timezone = ZoneInfo(config.timezone)

    def format_time(self, moment: datetime | None) -> str:
        if moment is None:
            return "?"
        return moment.astimezone(self._timezone).strftime("%H:%M")

    def format_clock(self, now: datetime | None = None) -> str:
        now = now or datetime.now(UTC)
        return now.astimezone(self._timezone).strftime("%H:%M:%S")

    def format_countdown(self, delta: timedelta) -> str:
        total_seconds = int(delta.total_seconds())
        if delta < timedelta(0):
            return "GONE"
        minutes, seconds = divmod(total_seconds, 60)
        if minutes < 1:
            return f"{seconds}s"
        return f"{minutes}:{seconds:02d}"

    def countdown_style(self, delta: timedelta) -> str:
        """Colour for a countdown: red under a minute, yellow under five, else green."""
        if delta < timedelta(minutes=1):
            return "red"
        if delta < timedelta(minutes=5):
            return "yellow"
        return "green"

    def format_delay(self, delay_seconds: int) -> str:
        if delay_seconds <= 0:
            return ""
        return f"+{delay_seconds // 60}m"

    def format_minutes(self, delta: timedelta) -> int:
        return int(delta.total_seconds() // 60)

    def sparkline(self, values: list[int], width: int = 8) -> str:
        """Render values scaled between their min and max.

        With more values than width, every ``len(values) // width``-th value
        is sampled. The result is right-padded with the lowest block.
        """
        if not values:
            return SPARK_BLOCKS[0] * width

        low, high = min(values), max(values)
        step = max(len(values) // width, 1)
        blocks = []
        for i in range(width):
            if i * step >= len(values):
                break
            index = 0
            if high > low:
                index = int((values[i * step] - low) / (high - low) * 7)
            blocks.append(SPARK_BLOCKS[min(index, 7)])
        return "".join(blocks).ljust(width, SPARK_BLOCKS[0])

    def summarize(self, journey: Journey) -> JourneySummary:
        max_occupancy: str | None = None
        for leg in journey.legs:
            rank = OCCUPANCY_RANK.get(leg.occupancy_level or "", 0)
            if rank > OCCUPANCY_RANK.get(max_occupancy or "", 0):
                max_occupancy = leg.occupancy_level
        return JourneySummary(
            has_delay=any(leg.departure_delay_seconds > 0 for leg in journey.legs),
            has_warning=any(leg.service_warnings for leg in journey.legs),
            has_tight_connection=any(self.is_tight(leg.wait_before) for leg in journey.legs),
            max_occupancy=max_occupancy,
        )

    def journey_style(self, journey: Journey, summary: JourneySummary, now: datetime) -> str:
        """Colour of a journey row: delays first, then imminent departure, then total wait."""
        countdown = journey.depart_at - now
        wait_minutes = self.format_minutes(journey.total_wait)
        if summary.has_delay:
            return "yellow"
        if timedelta(0) < countdown < timedelta(minutes=5):
            return "red"
        if wait_minutes <= 5:
            return "green"
        if wait_minutes <= 10:
            return "yellow"
        return "white"

    def is_tight(self, wait: timedelta) -> bool:
        return timedelta(0) < wait <= timedelta(minutes=self.config.tight_connection_minutes)

    def transit_progress(self, leg: Leg, now: datetime) -> float | None:
        if not leg.departure < now < leg.arrival:
            return None
        return (now - leg.departure) / (leg.arrival - leg.departure)

    def progress_bar(self, progress: float, width: int = 20) -> str:
        """Track with a dot at the vehicle's position."""
        position = min(int(progress * width), width - 1)
        return "─" * position + "●" + "─" * (width - 1 - position)

    def truncate(self, text: str, limit: int = 50) -> str:
        return text if len(text) <= limit else text[:limit] + "..."
