"""Journey search use case."""

import logging
from typing import TYPE_CHECKING

from sncf_trains.domain.errors import PlaceNotFoundError
from sncf_trains.domain.models import JourneySummary

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sncf_trains.domain.ports import JourneyRepository, PlaceRepository

DEFAULT_JOURNEY_COUNT = 10


class JourneySearchService:
    """Searches journeys between two place names."""

    def __init__(
        self,
        place_repository: "PlaceRepository",
        journey_repository: "JourneyRepository",
        journey_count: int = DEFAULT_JOURNEY_COUNT,
    ) -> None:
        """Initialize with the place and journey repositories."""
        self._place_repository = place_repository
        self._journey_repository = journey_repository
        self._journey_count = journey_count

    async def _resolve(self, place: str) -> str:
        stop_area_id = await self._place_repository.find_stop_area_id(place)
        if not stop_area_id:
            raise PlaceNotFoundError(place)
        return stop_area_id

    async def search(
        self, from_place: str, to_place: str, datetime: str | None = None
    ) -> list[JourneySummary]:
        """Resolve both places, then search journeys between them.

        Resolution is sequential: the destination is only looked up once the
        origin resolved.

        Args:
            from_place: Origin city or station name.
            to_place: Destination city or station name.
            datetime: Optional earliest departure, forwarded verbatim.

        Returns:
            Journeys in provider order; empty when no itinerary exists.

        Raises:
            PlaceNotFoundError: If either place has no stop area.
        """
        from_id = await self._resolve(from_place)
        to_id = await self._resolve(to_place)

        logger.info(f"Searching journeys {from_place} ({from_id}) -> {to_place} ({to_id})")
        return await self._journey_repository.search_journeys(
            from_id, to_id, datetime=datetime or None, count=self._journey_count
        )
