"""Vehicle journey repository port."""

from typing import Any, Protocol


class VehicleJourneyRepository(Protocol):
    """Port for looking up a scheduled train run."""

    async def get_vehicle_journey(self, vehicle_journey_id: str) -> dict[str, Any]:
        """Return the provider payload for a vehicle journey, unmodified."""
        ...
