"""Server tools."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from coolify_mcp.tools import ToolDefinition, ToolParameters
from coolify_mcp_server.tools.common import (
    EXAMPLE_UUID,
    list_tool,
    uuid_field,
    uuid_params,
)

IP_PATTERN = (
    r"^(?:[0-9]{1,3}\.){3}[0-9]{1,3}$|^([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$"
)


class CreateServerParams(ToolParameters):
    """Parameters for create_server."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "production-server-1",
                    "description": "Main production server",
                    "ip": "192.168.1.100",
                    "port": 22,
                    "user": "root",
                    "private_key_uuid": EXAMPLE_UUID,
                    "is_build_server": False,
                    "instant_validate": True,
                    "proxy_type": "nginx",
                }
            ]
        }
    )

    name: str = Field(
        description="A unique, human-readable name for the server",
        examples=["production-server-1"],
    )
    description: str | None = Field(
        default=None,
        description="Optional description of the server's purpose or configuration",
        examples=["Main production server for customer-facing applications"],
    )
    ip: str = Field(
        description="IP address of the server. Can be IPv4 or IPv6.",
        pattern=IP_PATTERN,
        examples=["192.168.1.100"],
    )
    port: int = Field(
        description="SSH port number",
        ge=1,
        le=65535,
        examples=[22],
        json_schema_extra={"default": 22},
    )
    user: str = Field(
        description="SSH username for authentication", examples=["root"]
    )
    private_key_uuid: str = uuid_field(
        "UUID of the private key to use for SSH authentication. Obtain this from "
        "list_private_keys."
    )
    is_build_server: bool = Field(
        default=False,
        description="Whether this server should be used for building applications",
    )
    instant_validate: bool = Field(
        default=True,
        description=(
            "Whether to validate the server configuration immediately after creation"
        ),
    )
    proxy_type: Literal["none", "nginx", "caddy"] = Field(
        default="nginx", description="Type of proxy to use for this server"
    )


def list_servers_tool() -> ToolDefinition:
    """Create the list_servers tool definition."""
    return list_tool(
        "list_servers",
        "servers",
        "/servers",
        "List all servers registered in your Coolify instance. Use this to get "
        "server UUIDs needed for other operations.",
        responseFormat=(
            "Returns an array of server objects containing UUIDs, names, IP "
            "addresses, and configuration details"
        ),
        usage="Call this first to get server UUIDs needed for other server operations",
        relatedTools=[
            "create_server - Add new servers to your instance",
            "validate_server - Check server configuration",
            "get_server_resources - Monitor server status",
            "get_server_domains - Manage server domains",
        ],
    )


def create_server_tool() -> ToolDefinition:
    """Create the create_server tool definition."""
    return ToolDefinition(
        name="create_server",
        family="servers",
        description=(
            "Create a new server in Coolify. Requires SSH access details and a "
            "private key for authentication."
        ),
        method="POST",
        path_template="/servers",
        parameters_model=CreateServerParams,
        additional_info={
            "workflow": [
                "1. First call list_private_keys to get available private key UUIDs",
                "2. Use a private key UUID from the response when creating the server",
                "3. After creation, you may want to call validate_server to ensure "
                "proper configuration",
            ],
            "relatedTools": [
                "list_private_keys - Get available private keys",
                "validate_server - Validate server configuration",
            ],
        },
    )


def validate_server_tool() -> ToolDefinition:
    """Create the validate_server tool definition."""
    return ToolDefinition(
        name="validate_server",
        family="servers",
        description=(
            "Validate a server's configuration and connectivity. Use this to verify "
            "server setup and troubleshoot connection issues."
        ),
        method="GET",
        path_template="/servers/{uuid}/validate",
        parameters_model=uuid_params(
            "ValidateServerParams",
            "UUID of the server to validate. Get this from list_servers.",
        ),
        additional_info={
            "notes": [
                "Validates SSH connectivity and server requirements",
                "Recommended after server creation or configuration changes",
            ]
        },
    )


def get_server_resources_tool() -> ToolDefinition:
    """Create the get_server_resources tool definition."""
    return ToolDefinition(
        name="get_server_resources",
        family="servers",
        description=(
            "Get detailed resource usage information for a server, including CPU, "
            "memory, disk, and network statistics."
        ),
        method="GET",
        path_template="/servers/{uuid}/resources",
        parameters_model=uuid_params(
            "ServerResourcesParams",
            "UUID of the server to check. Get this from list_servers.",
        ),
        additional_info={
            "responseFormat": "Returns an object with detailed resource metrics",
        },
    )


def get_server_domains_tool() -> ToolDefinition:
    """Create the get_server_domains tool definition."""
    return ToolDefinition(
        name="get_server_domains",
        family="servers",
        description=(
            "Get a list of domains configured for a server. These domains are used "
            "for routing traffic to applications and services."
        ),
        method="GET",
        path_template="/servers/{uuid}/domains",
        parameters_model=uuid_params(
            "ServerDomainsParams",
            "UUID of the server to get domains for. Get this from list_servers.",
        ),
        additional_info={
            "responseFormat": "Returns an array of domain configurations",
        },
    )
