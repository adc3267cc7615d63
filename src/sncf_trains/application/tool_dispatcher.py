"""Tool dispatcher: validates tool calls, runs them and wraps every outcome."""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from sncf_trains.application.tools import (
    SEARCH_TRAIN_TOOL_NAME,
    TOOLS,
    TRAIN_DETAILS_TOOL_NAME,
)
from sncf_trains.domain.errors import SncfError
from sncf_trains.domain.models import Err, Ok, ToolDescriptor, ToolRequest, ToolResponse, ToolResult
from sncf_trains.domain.models.tool_result import to_response

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sncf_trains.application.services import JourneySearchService, TrainDetailsService

NO_JOURNEY_FOUND_TEXT = "no journey found"

ToolHandler = Callable[[ToolRequest], Awaitable[ToolResult]]


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Routes tool calls to the use cases.

    Every call resolves to a ToolResponse: validation problems, upstream
    failures and unexpected faults all become error envelopes. No state is
    kept between calls.
    """

    def __init__(
        self,
        journey_search_service: "JourneySearchService",
        train_details_service: "TrainDetailsService",
    ) -> None:
        """Initialize with the use cases backing each tool."""
        self._journey_search_service = journey_search_service
        self._train_details_service = train_details_service
        self._handlers: dict[str, ToolHandler] = {
            SEARCH_TRAIN_TOOL_NAME: self._search_train,
            TRAIN_DETAILS_TOOL_NAME: self._train_details,
        }

    def list_tools(self) -> list[ToolDescriptor]:
        """Return the descriptors of all tools. Makes no external calls."""
        return list(TOOLS)

    async def call_tool(self, request: ToolRequest) -> ToolResponse:
        """Run a tool call and wrap its outcome in the response envelope."""
        try:
            result = await self._dispatch(request)
        except SncfError as e:
            logger.warning(f"Tool '{request.name}' failed: {e}")
            result = Err(f"Erreur: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error while running tool '{request.name}'")
            result = Err(f"Erreur: {str(e) or e.__class__.__name__}")
        return to_response(result)

    async def _dispatch(self, request: ToolRequest) -> ToolResult:
        handler = self._handlers.get(request.name)
        if handler is None:
            logger.warning(f"Unknown tool requested: {request.name}")
            return Err(f"Unknown tool: {request.name}")
        return await handler(request)

    async def _search_train(self, request: ToolRequest) -> ToolResult:
        from_place = request.get_text("from")
        to_place = request.get_text("to")
        if not from_place or not to_place:
            return Err("Arguments 'from' and 'to' are required")

        journeys = await self._journey_search_service.search(
            from_place, to_place, datetime=request.get_text("datetime")
        )
        if not journeys:
            return Ok(NO_JOURNEY_FOUND_TEXT)
        return Ok(_to_json([journey.to_dict() for journey in journeys]))

    async def _train_details(self, request: ToolRequest) -> ToolResult:
        vehicle_journey_id = request.get_text("vehicle_journey_id")
        if not vehicle_journey_id:
            return Err("Argument 'vehicle_journey_id' is required")

        details = await self._train_details_service.get_details(vehicle_journey_id)
        return Ok(_to_json(details))
