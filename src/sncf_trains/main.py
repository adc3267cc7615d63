"""Main entry point for the SNCF MCP server."""

import asyncio
import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from sncf_trains.adapters.config import AppConfig, load_config
from sncf_trains.adapters.mcp_server import McpServerAdapter
from sncf_trains.adapters.sncf_api import (
    SncfHttpClient,
    SncfJourneyRepository,
    SncfPlaceRepository,
    SncfVehicleJourneyRepository,
)
from sncf_trains.application import JourneySearchService, ToolDispatcher, TrainDetailsService
from sncf_trains.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure logging on stderr; stdout carries the protocol stream."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def load_config_or_exit() -> AppConfig:
    """Load configuration, exiting the process with status 1 if it is invalid."""
    try:
        return load_config()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def create_session(config: AppConfig) -> aiohttp.ClientSession:
    """Create the aiohttp session shared by all SNCF API requests."""
    if config.sncf_api_timeout is None:
        return aiohttp.ClientSession()
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.sncf_api_timeout))


def build_dispatcher(config: AppConfig, session: aiohttp.ClientSession) -> ToolDispatcher:
    """Wire the SNCF adapters into the use cases and the tool dispatcher."""
    http_client = SncfHttpClient(
        session=session,
        api_key=config.sncf_api_key,
        base_url=config.sncf_api_base_url,
    )
    journey_search_service = JourneySearchService(
        place_repository=SncfPlaceRepository(http_client),
        journey_repository=SncfJourneyRepository(http_client),
        journey_count=config.journey_count,
    )
    train_details_service = TrainDetailsService(SncfVehicleJourneyRepository(http_client))
    return ToolDispatcher(journey_search_service, train_details_service)


@asynccontextmanager
async def open_dispatcher(config: AppConfig) -> AsyncIterator[ToolDispatcher]:
    """Yield a dispatcher whose HTTP session is closed on exit."""
    async with create_session(config) as session:
        yield build_dispatcher(config, session)


async def serve(config: AppConfig) -> None:
    """Serve MCP requests on stdio until the host disconnects."""
    async with open_dispatcher(config) as dispatcher:
        await McpServerAdapter(dispatcher).run_stdio()


def main() -> None:
    """Console script entry point."""
    configure_logging()
    config = load_config_or_exit()
    logging.getLogger().setLevel(config.log_level)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
