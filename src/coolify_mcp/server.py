"""Operation catalog for the Coolify MCP server.

The catalog is the single source of truth shared by the protocol-facing tool
listing and by the dispatcher. It keeps operations in declaration order and
refuses duplicate names.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from coolify_mcp.tools import ToolDefinition


class OperationCatalog:
    """Ordered, in-memory registry of tool definitions."""

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the catalog.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools in declaration order."""
        return list(self._tools)

    def list(self) -> list[ToolDefinition]:
        """Return every registered definition in declaration order."""
        return list(self._tools.values())

    def lookup(self, name: str) -> ToolDefinition | None:
        """Return the definition registered under ``name``, if any."""
        return self._tools.get(name)

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata, in declaration order.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
