"""Journey repository port."""

from typing import Protocol

from sncf_trains.domain.models.journey_summary import JourneySummary


class JourneyRepository(Protocol):
    """Port for searching journeys between two stop areas."""

    async def search_journeys(
        self,
        from_id: str,
        to_id: str,
        datetime: str | None = None,
        count: int = 10,
    ) -> list[JourneySummary]:
        """Search journeys, optionally departing no earlier than datetime."""
        ...
