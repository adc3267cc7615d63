"""Tool request domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolRequest(BaseModel):
    """A single tool invocation: the tool name and its raw arguments."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    def get_text(self, key: str) -> str | None:
        """Return a truthy argument as a string, or None when missing or falsy."""
        value = self.arguments.get(key)
        if not value:
            return None
        return str(value)
