#!/usr/bin/env python3
"""Helper script to find SNCF stop area IDs."""

import asyncio
import sys
from typing import Any

from sncf_trains.adapters.sncf_api import SncfHttpClient
from sncf_trains.adapters.sncf_api.constants import PLACES_PATH
from sncf_trains.main import create_session, load_config_or_exit


def _print_place_info(place: dict[str, Any]) -> None:
    """Print place information."""
    print(f"  {place.get('embedded_type', '?'):<22} {place.get('id', '')}")
    print(f"    Name: {place.get('name', '')}")


async def find_place(query: str) -> None:
    """List the places matching a query, marking the stop area the tools would use."""
    config = load_config_or_exit()
    print(f"Searching for: {query}")

    async with create_session(config) as session:
        http_client = SncfHttpClient(
            session=session,
            api_key=config.sncf_api_key,
            base_url=config.sncf_api_base_url,
        )
        data = await http_client.get_json(PLACES_PATH, params={"q": query})

    places = data.get("places") or []
    if not places:
        print(f"No place found: {query}")
        sys.exit(1)

    print(f"\nFound {len(places)} place(s):")
    for place in places:
        _print_place_info(place)

    stop_area = next((p["stop_area"] for p in places if p.get("stop_area")), None)
    if stop_area:
        print(f"\nStop area used by the tools: {stop_area.get('id')}")
    else:
        print("\nNo stop area among the results; journey search would fail for this name.")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_place.py <place_name>")
        print('Example: python find_place.py "Lyon Part-Dieu"')
        sys.exit(1)

    asyncio.run(find_place(sys.argv[1]))
