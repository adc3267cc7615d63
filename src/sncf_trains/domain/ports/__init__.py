"""Ports (interfaces) for the ports-and-adapters architecture."""

from sncf_trains.domain.ports.journey_repository import JourneyRepository
from sncf_trains.domain.ports.place_repository import PlaceRepository
from sncf_trains.domain.ports.tool_call_handler import ToolCallHandler
from sncf_trains.domain.ports.vehicle_journey_repository import VehicleJourneyRepository

__all__ = [
    "JourneyRepository",
    "PlaceRepository",
    "ToolCallHandler",
    "VehicleJourneyRepository",
]
