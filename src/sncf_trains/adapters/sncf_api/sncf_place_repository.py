"""SNCF place repository adapter."""

import logging

from sncf_trains.adapters.sncf_api.constants import PLACES_PATH
from sncf_trains.adapters.sncf_api.http_client import SncfHttpClient
from sncf_trains.domain.ports.place_repository import PlaceRepository

logger = logging.getLogger(__name__)


class SncfPlaceRepository(PlaceRepository):
    """Resolves place names with the SNCF /places endpoint."""

    def __init__(self, http_client: SncfHttpClient) -> None:
        """Initialize with the SNCF HTTP client."""
        self._http_client = http_client

    async def find_stop_area_id(self, name: str) -> str | None:
        """Find the stop area matching a free-text place name.

        Candidates are inspected in the order returned by the API; the first
        one carrying a stop area wins.

        Args:
            name: Free-text place name, passed through unchanged.

        Returns:
            The stop area id, or None if no candidate is a stop area.
        """
        data = await self._http_client.get_json(PLACES_PATH, params={"q": name})

        for place in data.get("places") or []:
            stop_area = place.get("stop_area")
            if stop_area:
                stop_area_id: str | None = stop_area.get("id") or None
                logger.debug(f"Resolved '{name}' to stop area {stop_area_id}")
                return stop_area_id

        logger.info(f"No stop area found for '{name}'")
        return None
