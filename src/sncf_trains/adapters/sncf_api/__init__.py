"""SNCF API adapters (Navitia-based coverage API)."""

from sncf_trains.adapters.sncf_api.http_client import SncfHttpClient
from sncf_trains.adapters.sncf_api.sncf_journey_repository import SncfJourneyRepository
from sncf_trains.adapters.sncf_api.sncf_place_repository import SncfPlaceRepository
from sncf_trains.adapters.sncf_api.sncf_vehicle_journey_repository import (
    SncfVehicleJourneyRepository,
)

__all__ = [
    "SncfHttpClient",
    "SncfJourneyRepository",
    "SncfPlaceRepository",
    "SncfVehicleJourneyRepository",
]
