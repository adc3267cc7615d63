"""CLI helpers for trying the SNCF tools from a terminal."""

import argparse
import asyncio
import sys

from sncf_trains.adapters.config import AppConfig
from sncf_trains.adapters.sncf_api import SncfHttpClient, SncfPlaceRepository
from sncf_trains.application.tools import SEARCH_TRAIN_TOOL_NAME, TRAIN_DETAILS_TOOL_NAME
from sncf_trains.domain.models import ToolRequest, ToolResponse
from sncf_trains.domain.ports import ToolCallHandler
from sncf_trains.main import configure_logging, create_session, load_config_or_exit, open_dispatcher


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="sncf-trains",
        description="Query the SNCF API the same way the MCP tools do",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    places_parser = subparsers.add_parser("places", help="Resolve a place name to a stop area id")
    places_parser.add_argument("query", help="City or station name")

    journeys_parser = subparsers.add_parser("journeys", help="Search journeys between two places")
    journeys_parser.add_argument("from_place", metavar="from", help="Departure city or station")
    journeys_parser.add_argument("to_place", metavar="to", help="Arrival city or station")
    journeys_parser.add_argument(
        "--datetime",
        default=None,
        help="Earliest departure, format YYYYMMDDTHHmmss",
    )

    train_parser = subparsers.add_parser("train", help="Show the details of a train run")
    train_parser.add_argument("vehicle_journey_id", help="vehicle_journey id of the train")

    return parser


def build_tool_request(args: argparse.Namespace) -> ToolRequest:
    """Translate parsed arguments into the equivalent tool call."""
    if args.command == "journeys":
        arguments = {"from": args.from_place, "to": args.to_place}
        if args.datetime:
            arguments["datetime"] = args.datetime
        return ToolRequest(name=SEARCH_TRAIN_TOOL_NAME, arguments=arguments)
    if args.command == "train":
        return ToolRequest(
            name=TRAIN_DETAILS_TOOL_NAME,
            arguments={"vehicle_journey_id": args.vehicle_journey_id},
        )
    raise ValueError(f"Command '{args.command}' is not a tool call")


def print_response(response: ToolResponse) -> int:
    """Print a response envelope and return the matching exit status."""
    stream = sys.stderr if response.is_error else sys.stdout
    for item in response.content:
        print(item.text, file=stream)
    return 1 if response.is_error else 0


async def run_tool(handler: ToolCallHandler, args: argparse.Namespace) -> int:
    """Run a tool subcommand through the dispatcher."""
    response = await handler.call_tool(build_tool_request(args))
    return print_response(response)


async def resolve_place(config: AppConfig, query: str) -> int:
    """Print the stop area id a place name resolves to."""
    async with create_session(config) as session:
        http_client = SncfHttpClient(
            session=session,
            api_key=config.sncf_api_key,
            base_url=config.sncf_api_base_url,
        )
        stop_area_id = await SncfPlaceRepository(http_client).find_stop_area_id(query)

    if not stop_area_id:
        print(f"No stop area found for '{query}'", file=sys.stderr)
        return 1
    print(stop_area_id)
    return 0


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging("WARNING")
    config = load_config_or_exit()

    try:
        if args.command == "places":
            return await resolve_place(config, args.query)
        async with open_dispatcher(config) as dispatcher:
            return await run_tool(dispatcher, args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
