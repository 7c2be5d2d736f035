"""Configuration adapters."""

from journey_board.adapters.config.app_config import TRANSPORT_MODES, AppConfig

__all__ = ["TRANSPORT_MODES", "AppConfig"]
