"""Domain layer - core models, errors and ports."""

from sncf_trains.domain.errors import (
    ConfigurationError,
    PlaceNotFoundError,
    SncfApiError,
    SncfError,
)
from sncf_trains.domain.models import (
    JourneySummary,
    SectionSummary,
    ToolDescriptor,
    ToolRequest,
    ToolResponse,
)
from sncf_trains.domain.ports import (
    JourneyRepository,
    PlaceRepository,
    ToolCallHandler,
    VehicleJourneyRepository,
)

__all__ = [
    "ConfigurationError",
    "JourneyRepository",
    "JourneySummary",
    "PlaceNotFoundError",
    "PlaceRepository",
    "SectionSummary",
    "SncfApiError",
    "SncfError",
    "ToolCallHandler",
    "ToolDescriptor",
    "ToolRequest",
    "ToolResponse",
    "VehicleJourneyRepository",
]
