"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters can depend on domain but not on application
- The MCP adapter and the SNCF API adapter stay independent of each other
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and other models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("sncf_trains.domain.models*")
        .should_not_import("sncf_trains.adapters*")
        .should_not_import("sncf_trains.application*")
        .should_not_import("sncf_trains.domain.ports*")
        .may_import("sncf_trains.domain.models*")
        .check("sncf_trains")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("sncf_trains.domain.ports*")
        .should_not_import("sncf_trains.adapters*")
        .should_not_import("sncf_trains.application*")
        .may_import("sncf_trains.domain.ports*")
        .may_import("sncf_trains.domain.models*")
        .check("sncf_trains")
    )


def test_application_doesnt_import_adapters() -> None:
    """Application services and the dispatcher should not depend on adapters."""
    (
        archrule("application layer", comment="Application should not depend on adapters")
        .match("sncf_trains.application*")
        .should_not_import("sncf_trains.adapters*")
        .should_not_import("sncf_trains.main")
        .should_not_import("sncf_trains.cli")
        .may_import("sncf_trains.domain*")
        .may_import("sncf_trains.application*")
        .check("sncf_trains")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("sncf_trains.adapters*")
        .should_not_import("sncf_trains.application*")
        .may_import("sncf_trains.domain*")
        .may_import("sncf_trains.adapters*")
        .check("sncf_trains", only_direct_imports=True)
    )


def test_mcp_adapter_doesnt_import_sncf_api() -> None:
    """The MCP server adapter should only talk to the tool call handler port."""
    (
        archrule("mcp adapter", comment="MCP adapter should not know about the SNCF API")
        .match("sncf_trains.adapters.mcp_server*")
        .should_not_import("sncf_trains.adapters.sncf_api*")
        .check("sncf_trains", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("sncf_trains.domain*")
        .should_not_import("sncf_trains.adapters*")
        .should_not_import("sncf_trains.application*")
        .may_import("sncf_trains.domain*")
        .check("sncf_trains", only_direct_imports=True)
    )
