# The module binds the tool registry to the MCP protocol (tools/list and tools/call).
# Date: 2026-10-17
# Version: 0.1.0

from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ultimarr.core.tool_registry import ToolRegistry
from ultimarr.utils.logger import console

SERVER_NAME = "ultimarr"
SERVER_VERSION = "1.0.0"


def build_server(registry: ToolRegistry) -> Server:
    """
    Creates the MCP server. Argument checking is left to the tools themselves,
    so that invalid calls report the argument name and the expected type.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.get_definitions()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        result = await registry.dispatch(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )

    return server


async def serve_stdio(server: Server):
    """Serves MCP over stdin/stdout until the client closes the stream."""
    async with stdio_server() as (read_stream, write_stream):
        console.info(f"{SERVER_NAME} {SERVER_VERSION} listening on stdio.")
        await server.run(read_stream, write_stream, server.create_initialization_options())
