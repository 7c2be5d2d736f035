"""Tests for JourneyFormatter."""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from journey_board.adapters.config import AppConfig
from journey_board.adapters.live.formatters import (
    JourneyFormatter,
    clean_station_name,
    occupancy_bar,
    product_color,
    product_icon,
    spinner_frame,
)
from tests.test_models import NOW, make_journey, make_leg


@pytest.fixture
def formatter() -> JourneyFormatter:
    with patch.dict(os.environ, {}, clear=True):
        return JourneyFormatter(AppConfig.for_testing(timezone="Europe/Berlin"))


def test_format_time_uses_display_timezone(formatter: JourneyFormatter) -> None:
    """Given a UTC time in summer, when formatting, then Berlin local time is shown."""
    assert formatter.format_time(datetime(2024, 5, 6, 6, 5, tzinfo=UTC)) == "08:05"
    assert formatter.format_time(None) == "?"


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=-1), "GONE"),
        (timedelta(seconds=42), "42s"),
        (timedelta(minutes=3, seconds=7), "3:07"),
        (timedelta(minutes=75), "75:00"),
    ],
)
def test_format_countdown(formatter: JourneyFormatter, delta: timedelta, expected: str) -> None:
    """Given a time until departure, when formatting, then the countdown text matches."""
    assert formatter.format_countdown(delta) == expected


def test_countdown_style_thresholds(formatter: JourneyFormatter) -> None:
    """Given countdowns around one and five minutes, when styling, then colours change at the thresholds."""
    assert formatter.countdown_style(timedelta(seconds=-5)) == "red"
    assert formatter.countdown_style(timedelta(seconds=59)) == "red"
    assert formatter.countdown_style(timedelta(minutes=4)) == "yellow"
    assert formatter.countdown_style(timedelta(minutes=5)) == "green"


def test_format_delay(formatter: JourneyFormatter) -> None:
    """Given delays in seconds, when formatting, then whole minutes are shown for positive delays."""
    assert formatter.format_delay(0) == ""
    assert formatter.format_delay(-30) == ""
    assert formatter.format_delay(150) == "+2m"


def test_sparkline_scales_between_min_and_max(formatter: JourneyFormatter) -> None:
    """Given rising delays, when rendering a sparkline, then it goes from lowest to highest block."""
    assert formatter.sparkline([0, 7]) == "▁█▁▁▁▁▁▁"
    assert formatter.sparkline([]) == "▁" * 8
    assert formatter.sparkline([3, 3, 3]) == "▁" * 8


def test_sparkline_samples_long_histories(formatter: JourneyFormatter) -> None:
    """Given twenty values, when rendering eight blocks, then every second value is sampled."""
    values = list(range(20))

    line = formatter.sparkline(values)

    assert len(line) == 8
    assert line[0] == "▁"
    assert line == "".join(sorted(line))


def test_summarize_flags(formatter: JourneyFormatter) -> None:
    """Given a delayed, crowded journey with a tight change, when summarizing, then all flags are set."""
    journey = make_journey(
        make_leg("S3", 0, 10, departure_delay_seconds=120, occupancy_level="medium"),
        make_leg(
            "U2",
            12,
            10,
            wait_before=timedelta(minutes=2),
            occupancy_level="high",
            service_warnings=["Elevator out of service"],
        ),
    )

    summary = formatter.summarize(journey)

    assert summary.has_delay
    assert summary.has_warning
    assert summary.has_tight_connection
    assert summary.max_occupancy == "high"


def test_summarize_plain_journey(formatter: JourneyFormatter) -> None:
    """Given a punctual journey with a comfortable change, when summarizing, then no flags are set."""
    journey = make_journey(
        make_leg("S3", 0, 10),
        make_leg("U2", 16, 10, wait_before=timedelta(minutes=6)),
    )

    summary = formatter.summarize(journey)

    assert not summary.has_delay
    assert not summary.has_warning
    assert not summary.has_tight_connection
    assert summary.max_occupancy is None


def test_journey_style(formatter: JourneyFormatter) -> None:
    """Given journeys with delay, imminent departure and long waits, when styling, then colours follow that priority."""
    delayed = make_journey(make_leg(departure_delay_seconds=60))
    relaxed = make_journey(make_leg("S3", 0), make_leg("U2", 25, wait_before=timedelta(minutes=15)))

    assert formatter.journey_style(delayed, formatter.summarize(delayed), NOW) == "yellow"
    imminent_now = NOW - timedelta(minutes=2)
    assert formatter.journey_style(relaxed, formatter.summarize(relaxed), imminent_now) == "red"
    early = NOW - timedelta(hours=1)
    assert formatter.journey_style(relaxed, formatter.summarize(relaxed), early) == "white"


def test_transit_progress(formatter: JourneyFormatter) -> None:
    """Given a leg in progress, when computing progress, then the fraction is returned."""
    leg = make_leg("S3", 0, 10)

    assert formatter.transit_progress(leg, NOW + timedelta(minutes=5)) == pytest.approx(0.5)
    assert formatter.transit_progress(leg, NOW - timedelta(minutes=1)) is None
    assert formatter.transit_progress(leg, NOW + timedelta(minutes=11)) is None
    assert formatter.progress_bar(0.5, width=10) == "─────●────"


def test_truncate(formatter: JourneyFormatter) -> None:
    assert formatter.truncate("short") == "short"
    assert formatter.truncate("x" * 60) == "x" * 50 + "..."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("S Köpenick (Berlin)", "Köpenick"),
        ("S+U Alexanderplatz Bhf (Berlin)", "Alexanderplatz"),
        ("U Hermannplatz (Berlin) [U7]", "Hermannplatz"),
        ("Brunnenstr./Invalidenstr. (Berlin)", "Brunnenstr."),
    ],
)
def test_clean_station_name(raw: str, expected: str) -> None:
    """Given a VBB stop name, when cleaning, then prefixes and suffixes are removed."""
    assert clean_station_name(raw) == expected


def test_product_helpers() -> None:
    """Given products and occupancy levels, when mapping, then icons, colours and bars match."""
    assert product_icon("subway") == "[U]"
    assert product_icon("cablecar") == "[ ]"
    assert product_color("bus") == "magenta"
    assert product_color("unknown") == "white"
    assert occupancy_bar("medium") == "▓▓▓░░"
    assert occupancy_bar(None) == "░░░░░"
    assert spinner_frame(0) == spinner_frame(10)
