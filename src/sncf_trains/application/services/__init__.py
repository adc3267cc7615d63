"""Application services (use cases)."""

from sncf_trains.application.services.journey_search_service import JourneySearchService
from sncf_trains.application.services.train_details_service import TrainDetailsService

__all__ = ["JourneySearchService", "TrainDetailsService"]
