"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRANSPORT_MODES = ("suburban", "subway", "tram", "bus", "ferry", "regional", "express")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Journey data source
    api_base_url: str = Field(
        default="https://v6.vbb.transport.rest",
        description="Base URL of the transport.rest API",
    )
    api_timeout_seconds: float = Field(
        default=10, description="Timeout for journey and station requests in seconds"
    )
    journey_results: int = Field(default=25, description="Number of journeys to request")
    max_transfers: int = Field(default=3, description="Maximum number of transfers per journey")
    station_search_results: int = Field(
        default=10, description="Maximum number of stations returned by a search"
    )

    # Refresh and animation
    refresh_interval_seconds: int = Field(
        default=30, description="Interval between journey refreshes in seconds"
    )
    animation_fps: int = Field(default=10, description="Animation clock ticks per second")
    new_highlight_ticks: int = Field(
        default=30, description="Ticks a newly appeared journey stays highlighted"
    )
    status_message_ticks: int = Field(
        default=30, description="Ticks a transient status message stays visible"
    )
    refresh_pulse_ticks: int = Field(
        default=5, description="Ticks the 'just refreshed' pulse stays active"
    )
    splash_ticks: int = Field(
        default=20, description="Ticks the startup splash is shown before the first refresh"
    )
    highlight_new_on_first_refresh: bool = Field(
        default=False,
        description="Highlight every journey as new after the very first refresh",
    )

    # Journey presentation
    max_delay_samples: int = Field(
        default=20, description="Delay samples kept per line for trend display"
    )
    tight_connection_minutes: int = Field(
        default=2, description="Transfers with at most this wait are flagged as tight"
    )
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for displaying times (IANA timezone name)",
    )
    filters: dict[str, bool] = Field(
        default_factory=dict,
        description="Transport mode to enabled flag; modes not listed are enabled",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level name")
    log_file: str | None = Field(
        default=None, description="Write logs to this file instead of stderr"
    )

    # Files
    preferences_file: str = Field(
        default="~/.commute_favorites.json",
        description="JSON file holding favorite routes and the last used stations",
    )
    config_file: str | None = Field(
        default=None,
        description="Optional TOML file with [api], [display] and [filters] sections",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that does not read the .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator(
        "refresh_interval_seconds", "animation_fps", "api_timeout_seconds", "max_delay_samples"
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals, rates and caps are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got '{v}'") from e
        return v

    @field_validator("filters")
    @classmethod
    def validate_filter_modes(cls, v: dict[str, bool]) -> dict[str, bool]:
        """Validate filter keys are known transport modes."""
        unknown = sorted(set(v) - set(TRANSPORT_MODES))
        if unknown:
            raise ValueError(f"unknown transport mode(s): {', '.join(unknown)}")
        return v

    @property
    def tick_interval_seconds(self) -> float:
        """Seconds between two animation ticks."""
        return 1.0 / self.animation_fps

    @property
    def preferences_path(self) -> Path:
        """Expanded path of the preferences file."""
        return Path(self.preferences_file).expanduser()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings to this configuration.

        Every assignment is validated, so an invalid value raises a
        pydantic ValidationError, which is a ValueError.

        Returns:
            The parsed TOML document, or an empty dict if no file is configured.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        for key in (
            "api_base_url",
            "api_timeout_seconds",
            "journey_results",
            "max_transfers",
            "station_search_results",
        ):
            if key in api:
                setattr(self, key, api[key])

        display = toml_data.get("display", {})
        for key in (
            "refresh_interval_seconds",
            "animation_fps",
            "new_highlight_ticks",
            "status_message_ticks",
            "refresh_pulse_ticks",
            "splash_ticks",
            "highlight_new_on_first_refresh",
            "max_delay_samples",
            "tight_connection_minutes",
            "timezone",
        ):
            if key in display:
                setattr(self, key, display[key])

        filters = toml_data.get("filters", {})
        if not isinstance(filters, dict):
            raise ValueError("TOML config 'filters' must be a table of mode = true/false")
        for mode, enabled in filters.items():
            if not isinstance(enabled, bool):
                raise ValueError(f"Filter for '{mode}' must be true or false")
        self.filters = {**self.filters, **filters}

        return toml_data
