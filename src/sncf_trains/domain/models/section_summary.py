"""Section summary domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SectionSummary:
    """One leg of a journey (a train ride, a transfer, a walk...).

    Fields other than the endpoint names are None when the provider omits them.
    """

    from_name: str  # Empty when the provider gives no origin
    to_name: str  # Empty when the provider gives no destination
    mode: str | None  # Only present on some section types (e.g. "walking")
    type: str | None
    duration: int | None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the public field names, leaving out absent values."""
        data: dict[str, Any] = {"from": self.from_name, "to": self.to_name}
        optional = {"mode": self.mode, "type": self.type, "duration": self.duration}
        data.update({key: value for key, value in optional.items() if value is not None})
        return data
