"""MCP server adapter exposing the tools over stdio."""

import logging
from typing import TYPE_CHECKING, Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from sncf_trains import __version__
from sncf_trains.domain.models import ToolDescriptor, ToolRequest, ToolResponse

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sncf_trains.domain.ports import ToolCallHandler

SERVER_NAME = "sncf-mcp-server"


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    """Convert a tool descriptor into its MCP representation."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_call_tool_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a response envelope into an MCP call-tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in response.content],
        isError=response.is_error,
    )


class McpServerAdapter:
    """Adapter wiring the tool call handler into an MCP low-level server."""

    def __init__(self, tool_call_handler: "ToolCallHandler") -> None:
        """Initialize and register the list-tools and call-tool handlers."""
        self._tool_call_handler = tool_call_handler
        self._server: Server[Any, Any] = Server(SERVER_NAME, version=__version__)
        self._register_handlers()

    @property
    def server(self) -> "Server[Any, Any]":
        """The underlying MCP server."""
        return self._server

    def _register_handlers(self) -> None:
        # Arguments are validated by the dispatcher so that missing ones produce its error texts
        @self._server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return self.list_tools()

        @self._server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
            return await self.call_tool(name, arguments)

    def list_tools(self) -> list[types.Tool]:
        """Return the MCP descriptors of all tools."""
        return [to_mcp_tool(descriptor) for descriptor in self._tool_call_handler.list_tools()]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        """Run a tool call and convert the envelope for the transport."""
        logger.debug(f"Tool call: {name}")
        request = ToolRequest(name=name, arguments=arguments or {})
        response = await self._tool_call_handler.call_tool(request)
        return to_call_tool_result(response)

    async def run_stdio(self) -> None:
        """Serve requests on stdin/stdout until the host closes the stream."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("SNCF MCP server running on stdio")
            await self._server.run(
                read_stream,
                write_stream,
                self._server.create_initialization_options(),
            )
