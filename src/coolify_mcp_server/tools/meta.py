"""Version and health tools."""

from __future__ import annotations

from coolify_mcp.tools import ToolDefinition
from coolify_mcp_server.tools.common import list_tool


def get_version_tool() -> ToolDefinition:
    """Create the get_version tool definition."""
    return list_tool(
        "get_version",
        "meta",
        "/version",
        "Get Coolify version information. Returns the current version of the "
        "Coolify instance.",
    )


def health_check_tool() -> ToolDefinition:
    """Create the health_check tool definition."""
    return list_tool(
        "health_check",
        "meta",
        "/health",
        "Check Coolify API health status. Verifies if the API is responsive and "
        "functioning correctly.",
    )
