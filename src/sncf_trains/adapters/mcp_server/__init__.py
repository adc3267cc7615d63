"""Model Context Protocol server adapter."""

from sncf_trains.adapters.mcp_server.mcp_server import McpServerAdapter

__all__ = ["McpServerAdapter"]
