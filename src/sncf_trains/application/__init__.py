"""Application layer - use cases and tool dispatch."""

from sncf_trains.application.services import JourneySearchService, TrainDetailsService
from sncf_trains.application.tool_dispatcher import ToolDispatcher
from sncf_trains.application.tools import (
    SEARCH_TRAIN_TOOL,
    TOOLS,
    TRAIN_DETAILS_TOOL,
)

__all__ = [
    "SEARCH_TRAIN_TOOL",
    "TOOLS",
    "TRAIN_DETAILS_TOOL",
    "JourneySearchService",
    "ToolDispatcher",
    "TrainDetailsService",
]
