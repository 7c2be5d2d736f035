"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for rendering the live journey board.

    Implementations own their render cycle and only read published state.
    """

    @abstractmethod
    async def start(self) -> None:
        """Start refreshing and render until stop() is called."""

    @abstractmethod
    async def stop(self) -> None:
        """Stop rendering and shut down background refreshes."""
