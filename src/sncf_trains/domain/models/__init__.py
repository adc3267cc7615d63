"""Domain models for SNCF train search."""

from sncf_trains.domain.models.journey_summary import JourneySummary
from sncf_trains.domain.models.section_summary import SectionSummary
from sncf_trains.domain.models.tool_descriptor import ToolDescriptor
from sncf_trains.domain.models.tool_request import ToolRequest
from sncf_trains.domain.models.tool_response import TextContent, ToolResponse
from sncf_trains.domain.models.tool_result import Err, Ok, ToolResult

__all__ = [
    "Err",
    "JourneySummary",
    "Ok",
    "SectionSummary",
    "TextContent",
    "ToolDescriptor",
    "ToolRequest",
    "ToolResponse",
    "ToolResult",
]
