"""Tests for configuration adapter."""

import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from unittest.mock import patch

import pytest

from journey_board.adapters.config import AppConfig


def write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig.for_testing()

    assert config.api_base_url == "https://v6.vbb.transport.rest"
    assert config.api_timeout_seconds == 10
    assert config.refresh_interval_seconds == 30
    assert config.animation_fps == 10
    assert config.tick_interval_seconds == pytest.approx(0.1)
    assert config.new_highlight_ticks == 30
    assert config.status_message_ticks == 30
    assert config.max_delay_samples == 20
    assert config.highlight_new_on_first_refresh is False
    assert config.timezone == "Europe/Berlin"
    assert config.filters == {}
    assert config.log_level == "INFO"
    assert config.preferences_path == Path.home() / ".commute_favorites.json"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "60")
    monkeypatch.setenv("ANIMATION_FPS", "20")
    monkeypatch.setenv("HIGHLIGHT_NEW_ON_FIRST_REFRESH", "true")
    monkeypatch.setenv("FILTERS", '{"bus": false}')

    config = AppConfig.for_testing()

    assert config.refresh_interval_seconds == 60
    assert config.tick_interval_seconds == pytest.approx(0.05)
    assert config.highlight_new_on_first_refresh is True
    assert config.filters == {"bus": False}


@pytest.mark.parametrize(
    "field", ["refresh_interval_seconds", "animation_fps", "api_timeout_seconds", "max_delay_samples"]
)
def test_config_rejects_non_positive_values(field: str) -> None:
    """Given a zero interval, rate or cap, when loading config, then validation fails."""
    with patch.dict(os.environ, {}, clear=True), pytest.raises(ValueError, match="must be positive"):
        AppConfig.for_testing(**{field: 0})


def test_config_validates_timezone() -> None:
    """Given an unknown timezone, when loading config, then validation fails."""
    with patch.dict(os.environ, {}, clear=True), pytest.raises(ValueError, match="IANA timezone"):
        AppConfig.for_testing(timezone="Mars/Olympus")


def test_config_applies_toml_sections() -> None:
    """Given a TOML file with api, display and filters, when loading it, then fields are overridden."""
    temp_path = write_toml(
        """
[api]
api_base_url = "https://example.invalid"
journey_results = 10

[display]
refresh_interval_seconds = 45
timezone = "UTC"

[filters]
bus = false
ferry = true
"""
    )
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.for_testing(config_file=temp_path, filters={"tram": False})
            data = config.load_toml_overrides()

        assert "api" in data
        assert config.api_base_url == "https://example.invalid"
        assert config.journey_results == 10
        assert config.refresh_interval_seconds == 45
        assert config.timezone == "UTC"
        assert config.filters == {"tram": False, "bus": False, "ferry": True}
    finally:
        Path(temp_path).unlink()


def test_config_rejects_non_boolean_filter() -> None:
    """Given a filter that is not a boolean, when loading TOML, then ValueError is raised."""
    temp_path = write_toml('[filters]\nbus = "no"\n')
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.for_testing(config_file=temp_path)
            with pytest.raises(ValueError, match="must be true or false"):
                config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading TOML, then FileNotFoundError is raised."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig.for_testing(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


def test_config_without_file_has_no_overrides() -> None:
    """Given no config file, when loading TOML, then nothing changes."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig.for_testing()

    assert config.load_toml_overrides() == {}
    assert config.refresh_interval_seconds == 30


def test_config_validates_toml_display_values() -> None:
    """Given a TOML file with a zero animation rate, when loading it, then validation fails."""
    temp_path = write_toml("[display]\nanimation_fps = 0\n")
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.for_testing(config_file=temp_path)
            with pytest.raises(ValueError, match="must be positive"):
                config.load_toml_overrides()

        assert config.animation_fps == 10
    finally:
        Path(temp_path).unlink()


def test_config_validates_toml_timezone() -> None:
    """Given a TOML file with an unknown timezone, when loading it, then validation fails."""
    temp_path = write_toml('[display]\ntimezone = "Mars/Olympus"\n')
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.for_testing(config_file=temp_path)
            with pytest.raises(ValueError, match="IANA timezone"):
                config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()


def test_config_rejects_unknown_filter_mode() -> None:
    """Given a filter for an unknown transport mode, when loading TOML, then validation fails."""
    temp_path = write_toml("[filters]\nhovercraft = false\n")
    try:
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.for_testing(config_file=temp_path)
            with pytest.raises(ValueError, match="unknown transport mode"):
                config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()
