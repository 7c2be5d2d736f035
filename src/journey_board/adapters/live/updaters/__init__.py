"""Updaters for the live board state."""

from journey_board.adapters.live.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
