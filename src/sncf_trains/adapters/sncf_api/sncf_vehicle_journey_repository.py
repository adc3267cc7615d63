"""SNCF vehicle journey repository adapter."""

from typing import Any
from urllib.parse import quote

from sncf_trains.adapters.sncf_api.constants import VEHICLE_JOURNEYS_PATH
from sncf_trains.adapters.sncf_api.http_client import SncfHttpClient
from sncf_trains.domain.ports.vehicle_journey_repository import VehicleJourneyRepository


class SncfVehicleJourneyRepository(VehicleJourneyRepository):
    """Looks up train runs with the SNCF /vehicle_journeys endpoint."""

    def __init__(self, http_client: SncfHttpClient) -> None:
        """Initialize with the SNCF HTTP client."""
        self._http_client = http_client

    async def get_vehicle_journey(self, vehicle_journey_id: str) -> dict[str, Any]:
        """Fetch a vehicle journey by id.

        Args:
            vehicle_journey_id: Composite id, e.g.
                "vehicle_journey:SNCF:2025-05-20:88721:1187:Train".

        Returns:
            The API response, unmodified.
        """
        path = f"{VEHICLE_JOURNEYS_PATH}/{quote(vehicle_journey_id, safe='')}"
        return await self._http_client.get_json(path)
