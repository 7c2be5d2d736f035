"""Published state of the live journey board."""

from journey_board.adapters.live.state.board_snapshot import BoardSnapshot
from journey_board.adapters.live.state.state import State

__all__ = ["BoardSnapshot", "State"]
