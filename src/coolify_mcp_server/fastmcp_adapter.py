"""Adapters for exposing Coolify tools via FastMCP."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from anyio import to_thread
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool, ToolResult

from coolify_mcp.tools import ToolDefinition
from coolify_mcp_server.dispatcher import Dispatcher, InvocationResult
from coolify_mcp_server.errors import ErrorKind


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, dispatcher: Dispatcher) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=None,
            tags={definition.family},
        )
        self._definition = definition
        self._dispatcher = dispatcher

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call on a worker thread and wrap the JSON text."""
        result = await to_thread.run_sync(
            self._dispatcher.invoke, self._definition.name, arguments
        )
        if not result.ok:
            raise ToolError(error_text(result))
        return ToolResult(content=result.to_text())


def error_text(result: InvocationResult) -> str:
    """Text reported to MCP clients for a failed invocation."""
    if result.kind is ErrorKind.REMOTE_ERROR:
        return f"Coolify API error: {result.message}"
    return result.message or "Unknown error"


def to_fastmcp_tools(
    tool_definitions: Sequence[ToolDefinition], dispatcher: Dispatcher
) -> list[Tool]:
    """Convert tool definitions into FastMCP-compatible tools."""
    return [
        ToolDefinitionAdapter(definition, dispatcher)
        for definition in tool_definitions
    ]


def build_fastmcp_app(dispatcher: Dispatcher) -> tuple[FastMCP, list[ToolDefinition]]:
    """Create a FastMCP server instance with all Coolify tools registered."""
    app = FastMCP(
        name="coolify-mcp-server",
        instructions=(
            "Coolify platform management (servers, services, applications, "
            "deployments and private keys) exposed over the Model Context Protocol."
        ),
    )
    tool_definitions = dispatcher.catalog.list()
    for tool in to_fastmcp_tools(tool_definitions, dispatcher):
        app.add_tool(tool)
    return app, tool_definitions
