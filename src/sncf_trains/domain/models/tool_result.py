"""Tagged result of a tool execution."""

from dataclasses import dataclass

from sncf_trains.domain.models.tool_response import ToolResponse


@dataclass(frozen=True)
class Ok:
    """Successful execution carrying the text to return."""

    text: str


@dataclass(frozen=True)
class Err:
    """Failed execution carrying a human-readable message."""

    message: str


ToolResult = Ok | Err


def to_response(result: ToolResult) -> ToolResponse:
    """Convert a tool result into the response envelope."""
    if isinstance(result, Err):
        return ToolResponse.text(result.message, is_error=True)
    return ToolResponse.text(result.text)
