"""Main entry point for the live journey board."""

import asyncio
import logging
import sys

import aiohttp
from rich.console import Console

from journey_board.adapters.config import AppConfig
from journey_board.adapters.live.formatters import JourneyFormatter
from journey_board.adapters.live.pollers import RefreshCoordinator, RefreshCoordinatorServices
from journey_board.adapters.live.state import State
from journey_board.adapters.live.updaters import StateUpdater
from journey_board.adapters.preferences import JsonPreferencesRepository
from journey_board.adapters.terminal import TerminalDisplayAdapter
from journey_board.adapters.vbb_api import VbbJourneyRepository
from journey_board.application.services import (
    DelayHistoryTracker,
    FavoritesService,
    JourneyBuilder,
    NoveltyDetector,
)
from journey_board.domain.models.station import Station

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Send logs to the configured file, or stderr so they stay out of the board."""
    if config.log_file:
        logging.basicConfig(
            level=config.log_level.upper(),
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            filename=config.log_file,
        )
    else:
        logging.basicConfig(
            level=config.log_level.upper(),
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file."""
    config = AppConfig()
    config.load_toml_overrides()
    return config


def create_favorites_service(config: AppConfig) -> FavoritesService:
    return FavoritesService(JsonPreferencesRepository(config.preferences_path))


def create_display(
    config: AppConfig,
    session: aiohttp.ClientSession,
    favorites: FavoritesService,
    origin: Station | None = None,
    dest: Station | None = None,
    console: Console | None = None,
) -> TerminalDisplayAdapter:
    """Wire repositories, services, state and coordinator into a terminal display.

    Args:
        config: Application configuration.
        session: Shared HTTP session for journey requests.
        favorites: Favorites service; also provides the last used station pair.
        origin: Station to start from instead of the last used origin.
        dest: Station to go to instead of the last used destination.
        console: Console to render to.
    """
    journey_repository = VbbJourneyRepository(
        session=session,
        base_url=config.api_base_url,
        timeout_seconds=config.api_timeout_seconds,
        results=config.journey_results,
        transfers=config.max_transfers,
    )
    state = State(
        delay_history=DelayHistoryTracker(max_samples=config.max_delay_samples),
        origin=origin or favorites.origin,
        dest=dest or favorites.dest,
        splash_ticks=config.splash_ticks,
    )
    services = RefreshCoordinatorServices(
        journey_repository=journey_repository,
        journey_builder=JourneyBuilder(),
        novelty_detector=NoveltyDetector(),
        state_updater=StateUpdater(state),
        favorites=favorites,
    )
    coordinator = RefreshCoordinator(services, state, config)
    return TerminalDisplayAdapter(
        state, coordinator, JourneyFormatter(config), config, console=console
    )


async def run_board(
    config: AppConfig,
    favorites: FavoritesService,
    origin: Station | None = None,
    dest: Station | None = None,
) -> None:
    """Run the live board until interrupted."""
    async with aiohttp.ClientSession() as session:
        display = create_display(config, session, favorites, origin, dest)
        logger.info(
            f"Starting journey board: {display.state.snapshot.origin.name} -> "
            f"{display.state.snapshot.dest.name}"
        )
        try:
            await display.start()
        except (KeyboardInterrupt, asyncio.CancelledError):
            logger.info("Shutting down...")
        finally:
            await display.stop()


async def main() -> None:
    """Main application entry point."""
    try:
        config = load_config()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config)
    await run_board(config, create_favorites_service(config))


if __name__ == "__main__":
    asyncio.run(main())
