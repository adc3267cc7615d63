"""Adapters layer - external system integrations."""

from sncf_trains.adapters.config import AppConfig, load_config
from sncf_trains.adapters.mcp_server import McpServerAdapter
from sncf_trains.adapters.sncf_api import (
    SncfHttpClient,
    SncfJourneyRepository,
    SncfPlaceRepository,
    SncfVehicleJourneyRepository,
)

__all__ = [
    "AppConfig",
    "McpServerAdapter",
    "SncfHttpClient",
    "SncfJourneyRepository",
    "SncfPlaceRepository",
    "SncfVehicleJourneyRepository",
    "load_config",
]
