"""Formatters for the live board."""

from journey_board.adapters.live.formatters.journey_formatter import (
    JourneyFormatter,
    clean_station_name,
    occupancy_bar,
    product_color,
    product_icon,
    spinner_frame,
)

__all__ = [
    "JourneyFormatter",
    "clean_station_name",
    "occupancy_bar",
    "product_color",
    "product_icon",
    "spinner_frame",
]
