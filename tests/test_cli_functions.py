"""Tests for CLI helper functions."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from sncf_trains.adapters.config import AppConfig
from sncf_trains.cli import (
    build_parser,
    build_tool_request,
    main,
    print_response,
    resolve_place,
    run_tool,
)
from sncf_trains.domain.models import ToolRequest, ToolResponse
from tests.test_mcp_server import RecordingToolCallHandler
from tests.test_sncf_http_client import make_session


def test_journeys_command_maps_to_search_tool() -> None:
    """Given a journeys command, when building the request, then it targets the search tool."""
    args = build_parser().parse_args(["journeys", "Paris", "Lyon", "--datetime", "20250520T080000"])

    request = build_tool_request(args)

    assert request == ToolRequest(
        name="sncf_search_train",
        arguments={"from": "Paris", "to": "Lyon", "datetime": "20250520T080000"},
    )


def test_journeys_command_without_datetime_omits_it() -> None:
    """Given no --datetime, when building the request, then datetime is not sent."""
    args = build_parser().parse_args(["journeys", "Paris", "Lyon"])

    assert "datetime" not in build_tool_request(args).arguments


def test_train_command_maps_to_details_tool() -> None:
    """Given a train command, when building the request, then it targets the details tool."""
    args = build_parser().parse_args(["train", "vehicle_journey:SNCF:1187"])

    request = build_tool_request(args)

    assert request.name == "sncf_train_details"
    assert request.arguments == {"vehicle_journey_id": "vehicle_journey:SNCF:1187"}


def test_places_command_is_not_a_tool_call() -> None:
    """Given a places command, when building a tool request, then ValueError is raised."""
    args = build_parser().parse_args(["places", "Paris"])

    with pytest.raises(ValueError, match="not a tool call"):
        build_tool_request(args)


def test_print_response_success_goes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a successful response, when printing, then text goes to stdout with status 0."""
    status = print_response(ToolResponse.text("no journey found"))

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "no journey found\n"
    assert captured.err == ""


def test_print_response_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an error response, when printing, then text goes to stderr with status 1."""
    status = print_response(ToolResponse.text("Unknown tool: x", is_error=True))

    captured = capsys.readouterr()
    assert status == 1
    assert captured.err == "Unknown tool: x\n"


@pytest.mark.asyncio
async def test_run_tool_sends_request_to_handler(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a train command, when running, then the handler receives the tool call."""
    handler = RecordingToolCallHandler(ToolResponse.text('{"vehicle_journeys": []}'))
    args = build_parser().parse_args(["train", "vj:1"])

    status = await run_tool(handler, args)

    assert status == 0
    assert handler.requests[0].name == "sncf_train_details"
    assert '"vehicle_journeys"' in capsys.readouterr().out


@pytest.mark.asyncio
async def test_resolve_place_prints_stop_area_id(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a resolvable place, when resolving, then its stop area id is printed."""
    config = AppConfig(sncf_api_key="secret")
    session = make_session({"places": [{"stop_area": {"id": "stop_area:SNCF:87686006"}}]})
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False

    with patch("sncf_trains.cli.create_session", return_value=session):
        status = await resolve_place(config, "Paris")

    assert status == 0
    assert capsys.readouterr().out == "stop_area:SNCF:87686006\n"


@pytest.mark.asyncio
async def test_resolve_place_not_found_returns_1(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unknown place, when resolving, then an error is printed and 1 returned."""
    config = AppConfig(sncf_api_key="secret")
    session = make_session({"places": []})
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False

    with patch("sncf_trains.cli.create_session", return_value=session):
        status = await resolve_place(config, "Nowhereville")

    assert status == 1
    assert "No stop area found for 'Nowhereville'" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running main, then help is printed and 1 returned."""
    status = await main([])

    assert status == 1
    assert "usage: sncf-trains" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_without_api_key_exits(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Given no API key, when running a command, then the process exits with status 1."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SNCF_API_KEY", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        await main(["places", "Paris"])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_main_reports_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a failing command, when running main, then the error is printed and 1 returned."""
    monkeypatch.setenv("SNCF_API_KEY", "secret")

    with patch(
        "sncf_trains.cli.resolve_place", new=AsyncMock(side_effect=RuntimeError("boom"))
    ):
        status = await main(["places", "Paris"])

    assert status == 1
    assert "Error: boom" in capsys.readouterr().err
