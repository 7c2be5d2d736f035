"""Journey builder service."""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from journey_board.domain.contracts.journey_builder import JourneyBuilderProtocol
from journey_board.domain.models.journey import Journey
from journey_board.domain.models.leg import Leg
from journey_board.domain.models.raw_journey import RawJourneyBatch, RawLeg

logger = logging.getLogger(__name__)

# Scanned in this order; the first keyword found in an occupancy remark wins.
OCCUPANCY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("low", ("low",)),
    ("medium", ("medium", "moderate")),
    ("high", ("high",)),
)

WARNING_REMARK_TYPES = ("warning", "status")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp carrying an explicit zone.

    A trailing ``Z`` is normalized to ``+00:00``. Returns None for empty,
    malformed or zone-less values.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


def parse_occupancy(remarks: list[dict[str, Any]]) -> str | None:
    """Classify occupancy from remark records.

    Only remarks whose code mentions "occup" or whose text mentions
    "occupancy" are considered. Returns "low", "medium", "high" or None.
    """
    for remark in remarks:
        code = str(remark.get("code") or "").lower()
        text = str(remark.get("text") or "").lower()
        if "occup" not in code and "occupancy" not in text:
            continue
        for level, keywords in OCCUPANCY_KEYWORDS:
            if any(keyword in text for keyword in keywords):
                return level
    return None


def parse_service_warnings(remarks: list[dict[str, Any]]) -> list[str]:
    """Collect warning and status remark texts in their original order."""
    return [
        remark["text"]
        for remark in remarks
        if remark.get("type") in WARNING_REMARK_TYPES and remark.get("text")
    ]


def _remarks_of(raw_leg: RawLeg) -> list[dict[str, Any]]:
    remarks = raw_leg.get("remarks") or []
    return [r for r in remarks if isinstance(r, dict)]


def _location_name(raw_location: Any) -> str:
    if isinstance(raw_location, dict):
        return raw_location.get("name") or ""
    return ""


def _platform(raw_leg: RawLeg, realized_key: str, planned_key: str) -> str | None:
    return raw_leg.get(realized_key) or raw_leg.get(planned_key) or None


def _repeat_interval_minutes(raw_leg: RawLeg) -> int:
    cycle = raw_leg.get("cycle")
    if not isinstance(cycle, dict):
        return 0
    try:
        return int(cycle.get("min") or 0) // 60
    except (TypeError, ValueError):
        return 0


def _delay_seconds(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class JourneyBuilder(JourneyBuilderProtocol):
    """Builds ordered journeys from raw transport.rest journey batches.

    Malformed legs are dropped without aborting the journey; journeys left
    without legs are dropped without aborting the batch.
    """

    def build(
        self, raw_batch: RawJourneyBatch, filters: Mapping[str, bool] | None = None
    ) -> list[Journey]:
        """Build journeys sorted by departure time, then by total wait."""
        raw_journeys = raw_batch.get("journeys") if isinstance(raw_batch, dict) else None
        if not isinstance(raw_journeys, list):
            logger.warning("Raw batch has no journey list, nothing to build")
            return []

        journeys: list[Journey] = []
        for index, raw_journey in enumerate(raw_journeys):
            journey = self._build_journey(raw_journey)
            if journey is None:
                logger.debug(f"Dropped raw journey #{index}: no usable legs or times")
                continue
            if filters and self._is_filtered_out(journey, filters):
                logger.debug(f"Filtered out journey departing {journey.depart_at.isoformat()}")
                continue
            journeys.append(journey)

        journeys.sort(key=lambda j: (j.depart_at, j.total_wait))
        return journeys

    def _build_journey(self, raw_journey: Any) -> Journey | None:
        if not isinstance(raw_journey, dict):
            return None
        raw_legs = [leg for leg in raw_journey.get("legs") or [] if isinstance(leg, dict)]
        if not raw_legs:
            return None

        legs: list[Leg] = []
        total_wait = timedelta(0)
        previous_arrival: datetime | None = None

        for raw_leg in raw_legs:
            line = raw_leg.get("line")
            if not line:
                # Walking or transfer gap: no leg, but it moves the wait reference.
                gap_arrival = parse_timestamp(raw_leg.get("arrival"))
                if gap_arrival is not None:
                    previous_arrival = gap_arrival
                continue

            leg = self._build_leg(raw_leg, line, previous_arrival)
            if leg is None:
                continue
            legs.append(leg)
            total_wait += leg.wait_before
            previous_arrival = leg.arrival

        if not legs:
            return None

        depart_at = parse_timestamp(raw_legs[0].get("departure"))
        arrive_at = legs[-1].arrival
        if depart_at is None or depart_at > arrive_at:
            return None

        return Journey(
            depart_at=depart_at,
            arrive_at=arrive_at,
            legs=legs,
            total_wait=total_wait,
            is_new=True,
        )

    def _build_leg(
        self, raw_leg: RawLeg, line: Any, previous_arrival: datetime | None
    ) -> Leg | None:
        if not isinstance(line, dict) or not line.get("name"):
            logger.debug("Dropped leg without a line name")
            return None

        departure = parse_timestamp(raw_leg.get("departure"))
        arrival = parse_timestamp(raw_leg.get("arrival"))
        if departure is None or arrival is None:
            logger.debug(
                f"Dropped leg of line {line['name']}: unparseable departure "
                f"{raw_leg.get('departure')!r} or arrival {raw_leg.get('arrival')!r}"
            )
            return None
        if arrival < departure:
            logger.debug(f"Dropped leg of line {line['name']}: arrival before departure")
            return None

        wait_before = timedelta(0)
        if previous_arrival is not None and departure > previous_arrival:
            wait_before = departure - previous_arrival

        color = line.get("color")
        remarks = _remarks_of(raw_leg)

        return Leg(
            line_name=line["name"],
            product=line.get("product") or "",
            origin_name=_location_name(raw_leg.get("origin")),
            dest_name=_location_name(raw_leg.get("destination")),
            departure=departure,
            arrival=arrival,
            wait_before=wait_before,
            departure_delay_seconds=_delay_seconds(raw_leg.get("departureDelay")),
            arrival_delay_seconds=_delay_seconds(raw_leg.get("arrivalDelay")),
            occupancy_level=parse_occupancy(remarks),
            service_warnings=parse_service_warnings(remarks),
            departure_platform=_platform(raw_leg, "departurePlatform", "plannedDeparturePlatform"),
            arrival_platform=_platform(raw_leg, "arrivalPlatform", "plannedArrivalPlatform"),
            repeat_interval_minutes=_repeat_interval_minutes(raw_leg),
            line_color=(color.get("bg") or None) if isinstance(color, dict) else None,
            trip_id=raw_leg.get("tripId") or "",
        )

    @staticmethod
    def _is_filtered_out(journey: Journey, filters: Mapping[str, bool]) -> bool:
        """Check whether any leg uses a transport mode explicitly disabled."""
        return any(not filters.get(leg.product, True) for leg in journey.legs)
