"""Raw journey batch type.

A raw batch is the decoded JSON document returned by a journey data source:
``{"journeys": [{"legs": [{...}, ...]}, ...]}`` with transport.rest leg
fields (``line``, ``departure``, ``arrival``, ``departureDelay``,
``plannedDeparturePlatform``, ``remarks``, ``cycle``, ``tripId`` ...).
"""

from typing import Any, TypeAlias

RawJourneyBatch: TypeAlias = dict[str, Any]
RawLeg: TypeAlias = dict[str, Any]
