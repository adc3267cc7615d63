"""Tool call handler port."""

from typing import Protocol

from sncf_trains.domain.models.tool_descriptor import ToolDescriptor
from sncf_trains.domain.models.tool_request import ToolRequest
from sncf_trains.domain.models.tool_response import ToolResponse


class ToolCallHandler(Protocol):
    """Port for listing and running tools, implemented by the application layer."""

    def list_tools(self) -> list[ToolDescriptor]:
        """Return the descriptors of all tools."""
        ...

    async def call_tool(self, request: ToolRequest) -> ToolResponse:
        """Run a tool call; never raises."""
        ...
