"""Place repository port."""

from typing import Protocol


class PlaceRepository(Protocol):
    """Port for resolving free-text place names."""

    async def find_stop_area_id(self, name: str) -> str | None:
        """Return the id of the first stop area matching the name, or None."""
        ...
