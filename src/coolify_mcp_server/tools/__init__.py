"""Tool registration helpers for the Coolify MCP server."""

from __future__ import annotations

from coolify_mcp.server import OperationCatalog
from coolify_mcp.tools import ToolDefinition
from coolify_mcp_server.tools.applications import (
    create_application_tool,
    execute_command_application_tool,
    list_applications_tool,
    restart_application_tool,
    start_application_tool,
    stop_application_tool,
)
from coolify_mcp_server.tools.deployments import (
    get_deployment_tool,
    list_deployments_tool,
)
from coolify_mcp_server.tools.keys import (
    create_private_key_tool,
    list_private_keys_tool,
)
from coolify_mcp_server.tools.meta import get_version_tool, health_check_tool
from coolify_mcp_server.tools.servers import (
    create_server_tool,
    get_server_domains_tool,
    get_server_resources_tool,
    list_servers_tool,
    validate_server_tool,
)
from coolify_mcp_server.tools.services import (
    create_service_tool,
    list_services_tool,
    restart_service_tool,
    start_service_tool,
    stop_service_tool,
)
from coolify_mcp_server.tools.teams import (
    get_current_team_members_tool,
    get_current_team_tool,
    get_team_tool,
    list_teams_tool,
)


def build_tools() -> list[ToolDefinition]:
    """Instantiate all tool definitions in catalog order."""
    return [
        get_version_tool(),
        health_check_tool(),
        list_teams_tool(),
        get_team_tool(),
        get_current_team_tool(),
        get_current_team_members_tool(),
        list_servers_tool(),
        create_server_tool(),
        validate_server_tool(),
        get_server_resources_tool(),
        get_server_domains_tool(),
        list_services_tool(),
        create_service_tool(),
        start_service_tool(),
        stop_service_tool(),
        restart_service_tool(),
        list_applications_tool(),
        create_application_tool(),
        start_application_tool(),
        stop_application_tool(),
        restart_application_tool(),
        execute_command_application_tool(),
        list_deployments_tool(),
        get_deployment_tool(),
        list_private_keys_tool(),
        create_private_key_tool(),
    ]


def build_catalog() -> OperationCatalog:
    """Return a catalog holding every Coolify tool."""
    catalog = OperationCatalog()
    catalog.register_tools(*build_tools())
    return catalog
