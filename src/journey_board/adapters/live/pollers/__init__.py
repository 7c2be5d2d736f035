"""Pollers driving the live board."""

from journey_board.adapters.live.pollers.refresh_coordinator import (
    RefreshCoordinator,
    RefreshCoordinatorServices,
    RefreshPhase,
)

__all__ = ["RefreshCoordinator", "RefreshCoordinatorServices", "RefreshPhase"]
