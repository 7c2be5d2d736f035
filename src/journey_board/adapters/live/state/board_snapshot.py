"""Board snapshot dataclass."""

from dataclasses import dataclass
from datetime import datetime

from journey_board.domain.models.journey import Journey
from journey_board.domain.models.preferences import DEFAULT_DESTINATION, DEFAULT_ORIGIN
from journey_board.domain.models.station import Station


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything the presentation layer reads, swapped as a whole on every change."""

    origin: Station = DEFAULT_ORIGIN
    dest: Station = DEFAULT_DESTINATION
    journeys: tuple[Journey, ...] = ()
    selected_index: int = 0
    is_loading: bool = False
    last_update: datetime | None = None
    api_status: str = "unknown"
    refresh_count: int = 0
    # Countdowns in animation ticks
    animation_frame: int = 0
    splash_ticks: int = 0
    refresh_pulse_ticks: int = 0
    new_highlight_ticks: int = 0
    status_message: str = ""
    status_message_ticks: int = 0

    @property
    def refresh_pulse(self) -> bool:
        return self.refresh_pulse_ticks > 0

    @property
    def show_splash(self) -> bool:
        return self.splash_ticks > 0

    @property
    def visible_status_message(self) -> str:
        return self.status_message if self.status_message_ticks > 0 else ""

    @property
    def selected_journey(self) -> Journey | None:
        if 0 <= self.selected_index < len(self.journeys):
            return self.journeys[self.selected_index]
        return None
