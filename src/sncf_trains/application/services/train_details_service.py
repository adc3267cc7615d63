"""Train details use case."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sncf_trains.domain.ports import VehicleJourneyRepository


class TrainDetailsService:
    """Looks up a scheduled train run by its vehicle journey id."""

    def __init__(self, vehicle_journey_repository: "VehicleJourneyRepository") -> None:
        """Initialize with a vehicle journey repository."""
        self._vehicle_journey_repository = vehicle_journey_repository

    async def get_details(self, vehicle_journey_id: str) -> dict[str, Any]:
        """Return the provider payload for the train run, unmodified."""
        return await self._vehicle_journey_repository.get_vehicle_journey(vehicle_journey_id)
