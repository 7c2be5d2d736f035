"""Terminal display adapter."""

from journey_board.adapters.terminal.terminal_display import TerminalDisplayAdapter

__all__ = ["TerminalDisplayAdapter"]
