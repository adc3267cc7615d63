"""Parser for SNCF API journey responses."""

from typing import Any

from sncf_trains.domain.models.journey_summary import JourneySummary
from sncf_trains.domain.models.section_summary import SectionSummary


class JourneyParser:
    """Reshapes SNCF journeys into JourneySummary objects.

    Journeys and sections keep the order the API returned them in.
    """

    @staticmethod
    def parse_journeys(data: dict[str, Any]) -> list[JourneySummary]:
        """Parse the journeys of a /journeys response.

        Args:
            data: Decoded JSON response.

        Returns:
            One JourneySummary per upstream journey, in upstream order.
        """
        return [JourneyParser.parse_journey(journey) for journey in data.get("journeys") or []]

    @staticmethod
    def parse_journey(journey: dict[str, Any]) -> JourneySummary:
        """Parse a single journey, leaving fields the API omits as None."""
        return JourneySummary(
            departure=journey.get("departure_date_time"),
            arrival=journey.get("arrival_date_time"),
            duration=journey.get("duration"),
            transfer_count=journey.get("nb_transfers"),
            sections=tuple(
                JourneyParser.parse_section(section) for section in journey.get("sections") or []
            ),
        )

    @staticmethod
    def parse_section(section: dict[str, Any]) -> SectionSummary:
        """Parse a single section.

        Missing endpoint names become ''; other missing fields stay None.
        """
        return SectionSummary(
            from_name=JourneyParser._endpoint_name(section.get("from")),
            to_name=JourneyParser._endpoint_name(section.get("to")),
            mode=section.get("mode"),
            type=section.get("type"),
            duration=section.get("duration"),
        )

    @staticmethod
    def _endpoint_name(endpoint: dict[str, Any] | None) -> str:
        if not endpoint:
            return ""
        return endpoint.get("name") or ""
