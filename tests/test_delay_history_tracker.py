"""Tests for DelayHistoryTracker."""

from datetime import UTC, datetime

import pytest

from journey_board.application.services import DelayHistoryTracker
from tests.test_models import make_journey, make_leg


def delayed(line_name: str, minutes: int):
    return make_journey(make_leg(line_name, departure_delay_seconds=minutes * 60))


def test_when_delay_positive_then_recorded_in_minutes() -> None:
    """Given delayed and punctual legs, when recording, then only positive delays are kept."""
    tracker = DelayHistoryTracker()

    tracker.record(
        [
            make_journey(make_leg("S3", departure_delay_seconds=150)),
            make_journey(make_leg("S3", departure_delay_seconds=0)),
            make_journey(make_leg("U2", departure_delay_seconds=-60)),
        ]
    )

    assert tracker.snapshot("S3") == [2]
    assert tracker.snapshot("U2") == []
    assert tracker.line_names() == ["S3"]


def test_when_21st_sample_then_oldest_evicted() -> None:
    """Given 21 samples for a line, when recording, then the first one is evicted."""
    tracker = DelayHistoryTracker()

    for minutes in range(1, 22):
        tracker.record([delayed("S3", minutes)])

    samples = tracker.snapshot("S3")
    assert len(samples) == 20
    assert samples[0] == 2
    assert samples[-1] == 21


def test_when_batch_exceeds_cap_then_latest_kept() -> None:
    """Given more samples than the cap in one batch, when recording, then only the latest remain."""
    tracker = DelayHistoryTracker(max_samples=3)

    tracker.record([delayed("S3", m) for m in (1, 2, 3, 4, 5)])

    assert tracker.snapshot("S3") == [3, 4, 5]


def test_snapshot_is_a_copy() -> None:
    """Given a snapshot, when mutating it, then the tracker is unaffected."""
    tracker = DelayHistoryTracker()
    tracker.record([delayed("S3", 4)])

    samples = tracker.snapshot("S3")
    samples.append(99)

    assert tracker.snapshot("S3") == [4]


def test_last_updated_refreshed_on_append() -> None:
    """Given a fixed clock, when recording, then the line's last update is the clock time."""
    moment = datetime(2024, 5, 6, 8, 0, tzinfo=UTC)
    tracker = DelayHistoryTracker(clock=lambda: moment)

    assert tracker.history("S3") is None
    tracker.record([delayed("S3", 1)])

    history = tracker.history("S3")
    assert history is not None
    assert history.last_updated == moment
    history.recent_delays_minutes.clear()
    assert tracker.snapshot("S3") == [1]


def test_invalid_max_samples() -> None:
    """Given a cap below one, when creating the tracker, then ValueError is raised."""
    with pytest.raises(ValueError, match="at least 1"):
        DelayHistoryTracker(max_samples=0)
