"""Service tools."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from coolify_mcp.tools import ToolDefinition, ToolParameters
from coolify_mcp_server.tools.common import (
    EXAMPLE_UUID,
    OTHER_EXAMPLE_UUID,
    lifecycle_tool,
    list_tool,
    uuid_field,
)


class CreateServiceParams(ToolParameters):
    """Parameters for create_service."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "backend-api",
                    "description": "Node.js backend API service",
                    "server_uuid": EXAMPLE_UUID,
                    "project_uuid": OTHER_EXAMPLE_UUID,
                    "environment_name": "production",
                }
            ]
        }
    )

    name: str = Field(
        description="A unique, human-readable name for the service",
        examples=["backend-api"],
    )
    description: str | None = Field(
        default=None,
        description="Optional description of the service's purpose or configuration",
        examples=["Node.js backend API service"],
    )
    server_uuid: str = uuid_field(
        "UUID of the server where this service will run. Obtain this from "
        "list_servers."
    )
    project_uuid: str = uuid_field(
        "UUID of the project this service belongs to. Projects help organize "
        "related services."
    )
    environment_name: str | None = Field(
        default=None,
        description="Name of the environment (e.g., production, staging, development)",
        examples=["production"],
    )
    environment_uuid: str | None = uuid_field(
        "Optional UUID of an existing environment to use", default=None
    )


def list_services_tool() -> ToolDefinition:
    """Create the list_services tool definition."""
    return list_tool(
        "list_services",
        "services",
        "/services",
        "List all services across your Coolify instance. Services are "
        "containerized applications running on your servers.",
        usage="Use this to get service UUIDs needed for management operations",
        relatedTools=[
            "create_service - Create new services",
            "start_service - Start a service",
            "stop_service - Stop a service",
            "restart_service - Restart a service",
        ],
    )


def create_service_tool() -> ToolDefinition:
    """Create the create_service tool definition."""
    return ToolDefinition(
        name="create_service",
        family="services",
        description=(
            "Create a new service on a specified server. Services are containerized "
            "applications that run on your Coolify servers."
        ),
        method="POST",
        path_template="/services",
        parameters_model=CreateServiceParams,
        additional_info={
            "workflow": [
                "1. First call list_servers to get available server UUIDs",
                "2. Use a server UUID from the response when creating the service",
                "3. After creation, you can start the service using start_service",
            ],
        },
    )


def start_service_tool() -> ToolDefinition:
    """Create the start_service tool definition."""
    return lifecycle_tool(
        "services",
        "service",
        "start",
        "Start a previously created service. This will initialize the service "
        "container and make it accessible.",
        "UUID of the service to start. Obtain this from list_services or from the "
        "create_service response.",
    )


def stop_service_tool() -> ToolDefinition:
    """Create the stop_service tool definition."""
    return lifecycle_tool(
        "services",
        "service",
        "stop",
        "Stop a running service. This will gracefully shut down the service "
        "container.",
        "UUID of the service to stop. Get this from list_services.",
        notes=["Service data persists unless explicitly removed"],
    )


def restart_service_tool() -> ToolDefinition:
    """Create the restart_service tool definition."""
    return lifecycle_tool(
        "services",
        "service",
        "restart",
        "Restart a service by stopping and starting it again. Useful for applying "
        "configuration changes or recovering from issues.",
        "UUID of the service to restart. Get this from list_services.",
    )
