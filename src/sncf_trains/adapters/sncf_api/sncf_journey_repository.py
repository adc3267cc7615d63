"""SNCF journey repository adapter."""

import logging

from sncf_trains.adapters.sncf_api.constants import JOURNEYS_PATH
from sncf_trains.adapters.sncf_api.http_client import SncfHttpClient
from sncf_trains.adapters.sncf_api.journey_parser import JourneyParser
from sncf_trains.domain.models.journey_summary import JourneySummary
from sncf_trains.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


class SncfJourneyRepository(JourneyRepository):
    """Searches journeys with the SNCF /journeys endpoint."""

    def __init__(self, http_client: SncfHttpClient) -> None:
        """Initialize with the SNCF HTTP client."""
        self._http_client = http_client

    async def search_journeys(
        self,
        from_id: str,
        to_id: str,
        datetime: str | None = None,
        count: int = 10,
    ) -> list[JourneySummary]:
        """Search journeys between two stop areas.

        Args:
            from_id: Origin stop area id.
            to_id: Destination stop area id.
            datetime: Earliest departure, forwarded verbatim (e.g. "20250520T080000").
                Empty or None means no date filter.
            count: Maximum number of journeys to request.

        Returns:
            Journeys in the order returned by the API.
        """
        params: dict[str, str | int] = {"from": from_id, "to": to_id}
        if datetime:
            params["datetime"] = datetime
            params["datetime_represents"] = "departure"
        params["count"] = count

        data = await self._http_client.get_json(JOURNEYS_PATH, params=params)
        journeys = JourneyParser.parse_journeys(data)
        logger.debug(f"Found {len(journeys)} journey(s) from {from_id} to {to_id}")
        return journeys
