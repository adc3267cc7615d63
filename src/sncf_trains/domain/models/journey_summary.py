"""Journey summary domain model."""

from dataclasses import dataclass
from typing import Any

from sncf_trains.domain.models.section_summary import SectionSummary


@dataclass(frozen=True)
class JourneySummary:
    """A point-to-point itinerary reduced to the fields callers need.

    Sections keep the provider's chronological order. Scalar fields are None
    when the provider omits them.
    """

    departure: str | None  # Provider timestamp, e.g. "20250520T083000"
    arrival: str | None
    duration: int | None  # Seconds
    transfer_count: int | None
    sections: tuple[SectionSummary, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the public field names, leaving out absent values."""
        scalars = {
            "departure": self.departure,
            "arrival": self.arrival,
            "duration": self.duration,
            "nb_transfers": self.transfer_count,
        }
        data: dict[str, Any] = {key: value for key, value in scalars.items() if value is not None}
        data["sections"] = [section.to_dict() for section in self.sections]
        return data
