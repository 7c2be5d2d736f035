"""Tests for NoveltyDetector."""

from datetime import timedelta

from journey_board.application.services import NoveltyDetector
from journey_board.application.services.novelty_detector import journey_identity
from tests.test_models import make_journey, make_leg


def test_when_no_previous_identities_then_everything_is_new() -> None:
    """Given the first cycle, when detecting, then every journey is new."""
    journeys = [make_journey(make_leg("S3", 0)), make_journey(make_leg("S5", 10))]

    result = NoveltyDetector().detect(journeys, frozenset())

    assert result.any_new
    assert all(j.is_new for j in result.journeys)
    assert len(result.identities) == 2


def test_when_batch_unchanged_then_nothing_is_new() -> None:
    """Given the same batch twice, when detecting, then the second cycle has no new journeys."""
    journeys = [make_journey(make_leg("S3", 0)), make_journey(make_leg("S5", 10))]
    detector = NoveltyDetector()

    first = detector.detect(journeys, frozenset())
    second = detector.detect(journeys, first.identities)
    third = detector.detect(journeys, second.identities)

    assert not second.any_new
    assert not any(j.is_new for j in second.journeys)
    assert second.identities == first.identities == third.identities


def test_when_one_journey_appears_then_only_it_is_new() -> None:
    """Given one extra journey, when detecting, then only that journey is flagged."""
    detector = NoveltyDetector()
    old = [make_journey(make_leg("S3", 0))]
    previous = detector.detect(old, frozenset()).identities

    result = detector.detect([*old, make_journey(make_leg("U2", 5))], previous)

    assert [j.is_new for j in result.journeys] == [False, True]
    assert result.any_new


def test_identity_set_is_replaced_not_merged() -> None:
    """Given a journey that disappeared, when detecting, then its identity is not carried over."""
    detector = NoveltyDetector()
    gone = make_journey(make_leg("S3", 0))
    previous = detector.detect([gone], frozenset()).identities

    result = detector.detect([make_journey(make_leg("S3", 20))], previous)

    assert journey_identity(gone) not in result.identities
    assert len(result.identities) == 1


def test_same_departure_on_another_line_is_new() -> None:
    """Given the same departure time but a different first line, when detecting, then it is new."""
    detector = NoveltyDetector()
    previous = detector.detect([make_journey(make_leg("S3", 0))], frozenset()).identities

    result = detector.detect([make_journey(make_leg("S47", 0))], previous)

    assert result.journeys[0].is_new


def test_identity_ignores_later_legs() -> None:
    """Given journeys differing only after the first leg, when identifying, then identities match."""
    a = make_journey(make_leg("S3", 0), make_leg("U2", 12, wait_before=timedelta(minutes=2)))
    b = make_journey(make_leg("S3", 0), make_leg("M10", 15, wait_before=timedelta(minutes=5)))

    assert journey_identity(a) == journey_identity(b)
