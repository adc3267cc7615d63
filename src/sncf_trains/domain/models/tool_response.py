"""Tool response envelope."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A text item of a tool response."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Uniform envelope returned for every tool call, successful or not."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResponse":
        """Build an envelope holding a single text item."""
        return cls(content=[TextContent(text=text)], is_error=is_error)
