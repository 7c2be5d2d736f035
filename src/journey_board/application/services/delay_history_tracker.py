"""Per-line delay history tracker."""

import logging
from collections.abc import Callable
from copy import deepcopy
from datetime import UTC, datetime

from readerwriterlock import rwlock

from journey_board.domain.contracts.delay_history_tracker import DelayHistoryTrackerProtocol
from journey_board.domain.models.delay_history import DelayHistory
from journey_board.domain.models.journey import Journey

logger = logging.getLogger(__name__)

DEFAULT_MAX_SAMPLES = 20


class DelayHistoryTracker(DelayHistoryTrackerProtocol):
    """Keeps a rolling window of departure delays per line.

    Writes hold the exclusive side of a reader/writer lock, reads the shared
    side, so the renderer can read while a refresh cycle records.
    """

    def __init__(
        self,
        max_samples: int = DEFAULT_MAX_SAMPLES,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the tracker.

        Args:
            max_samples: Number of samples kept per line; older ones are evicted first.
            clock: Source of "now" for last-updated timestamps.
        """
        if max_samples < 1:
            raise ValueError("max_samples must be at least 1")
        self.max_samples = max_samples
        self._clock = clock or (lambda: datetime.now(UTC))
        self._histories: dict[str, DelayHistory] = {}
        self._lock = rwlock.RWLockFairD()

    def record(self, journeys: list[Journey]) -> None:
        """Append every strictly positive departure delay to its line's history."""
        appended = 0
        with self._lock.gen_wlock():
            for journey in journeys:
                for leg in journey.legs:
                    if leg.departure_delay_seconds <= 0:
                        continue
                    history = self._histories.get(leg.line_name)
                    if history is None:
                        history = DelayHistory(line_name=leg.line_name)
                        self._histories[leg.line_name] = history
                    history.recent_delays_minutes.append(leg.departure_delay_minutes)
                    if len(history.recent_delays_minutes) > self.max_samples:
                        del history.recent_delays_minutes[: -self.max_samples]
                    history.last_updated = self._clock()
                    appended += 1
        if appended:
            logger.debug(f"Recorded {appended} delay samples")

    def snapshot(self, line_name: str) -> list[int]:
        """Return a copy of the delay samples for a line, oldest first."""
        with self._lock.gen_rlock():
            history = self._histories.get(line_name)
            return list(history.recent_delays_minutes) if history else []

    def history(self, line_name: str) -> DelayHistory | None:
        """Return a copy of the history entry for a line."""
        with self._lock.gen_rlock():
            history = self._histories.get(line_name)
            return deepcopy(history) if history else None

    def line_names(self) -> list[str]:
        """Return the lines that have recorded delays."""
        with self._lock.gen_rlock():
            return sorted(self._histories)
