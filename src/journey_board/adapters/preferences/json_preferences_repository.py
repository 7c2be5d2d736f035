"""JSON file preferences repository."""

import json
import logging
from pathlib import Path
from typing import Any

from journey_board.domain.models.preferences import (
    DEFAULT_DESTINATION,
    DEFAULT_ORIGIN,
    FavoriteRoute,
    Preferences,
)
from journey_board.domain.models.station import Station
from journey_board.domain.ports.preferences_repository import PreferencesRepository

logger = logging.getLogger(__name__)


def _station_to_dict(station: Station) -> dict[str, str]:
    data = {"id": station.id, "name": station.name}
    if station.kind:
        data["type"] = station.kind
    return data


def _station_from_dict(data: Any) -> Station | None:
    if not isinstance(data, dict) or not data.get("id"):
        return None
    return Station(id=str(data["id"]), name=str(data.get("name", "")), kind=data.get("type") or "stop")


def preferences_to_dict(preferences: Preferences) -> dict[str, Any]:
    """Serialize preferences to the on-disk JSON shape."""
    return {
        "routes": [
            {"origin": _station_to_dict(r.origin), "dest": _station_to_dict(r.dest)}
            for r in preferences.routes
        ],
        "last_origin": _station_to_dict(preferences.last_origin),
        "last_dest": _station_to_dict(preferences.last_dest),
    }


def preferences_from_dict(data: dict[str, Any]) -> Preferences:
    """Deserialize preferences, skipping malformed favorites."""
    routes = []
    for raw_route in data.get("routes") or []:
        if not isinstance(raw_route, dict):
            continue
        origin = _station_from_dict(raw_route.get("origin"))
        dest = _station_from_dict(raw_route.get("dest"))
        if origin is None or dest is None:
            logger.warning(f"Skipping malformed favorite {raw_route!r}")
            continue
        routes.append(FavoriteRoute(origin=origin, dest=dest))
    return Preferences(
        routes=routes,
        last_origin=_station_from_dict(data.get("last_origin")) or DEFAULT_ORIGIN,
        last_dest=_station_from_dict(data.get("last_dest")) or DEFAULT_DESTINATION,
    )


class JsonPreferencesRepository(PreferencesRepository):
    """Stores preferences in a small JSON file in the user's home directory.

    Failures never propagate: loading falls back to defaults and saving
    keeps the in-memory state.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with the preferences file path."""
        self.path = path

    def load(self) -> Preferences:
        """Load preferences, falling back to defaults when missing or unreadable."""
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"No preferences file at {self.path}, using defaults")
            return Preferences()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read preferences from {self.path}: {e}")
            return Preferences()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences file {self.path}")
            return Preferences()
        return preferences_from_dict(data)

    def save(self, preferences: Preferences) -> None:
        """Write preferences atomically; errors are logged and swallowed.

        The file is written next to the target and then renamed over it, so a
        failed write leaves the previous file intact.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(f".{self.path.name}.tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(preferences_to_dict(preferences), f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Could not save preferences to {self.path}: {e}")
