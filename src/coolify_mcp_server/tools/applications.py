"""Application tools."""

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


class CreateApplicationParams(ToolParameters):
    """Parameters for create_application."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "project_uuid": EXAMPLE_UUID,
                    "environment_name": "production",
                    "git_repository": "https://github.com/username/repo.git",
                    "ports_exposes": "3000",
                    "destination_uuid": OTHER_EXAMPLE_UUID,
                }
            ]
        }
    )

    project_uuid: str = uuid_field(
        "UUID of the project this application belongs to. Projects help organize "
        "related applications."
    )
    environment_name: str = Field(
        description=(
            "Name of the deployment environment (e.g., production, staging, "
            "development)"
        ),
        examples=["production", "staging", "development"],
    )
    environment_uuid: str | None = uuid_field(
        "Optional UUID of an existing environment to use", default=None
    )
    git_repository: str | None = Field(
        default=None,
        description="URL of the Git repository containing the application code",
        examples=["https://github.com/username/repo.git"],
    )
    ports_exposes: str | None = Field(
        default=None,
        description=(
            'Comma-separated list of ports to expose (e.g., "3000,8080"). These '
            "ports will be accessible from outside the container."
        ),
        examples=["3000", "8080,3000"],
    )
    destination_uuid: str = uuid_field(
        "UUID of the destination server where this application will be deployed. "
        "Get this from list_servers."
    )


class ExecuteCommandParams(ToolParameters):
    """Parameters for execute_command_application."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"uuid": EXAMPLE_UUID, "command": "npm run migrations"}]
        }
    )

    uuid: str = uuid_field(
        "UUID of the application where the command will be executed. Get this "
        "from list_applications."
    )
    command: str = Field(
        description=(
            "The command to execute inside the container. This can be any valid "
            "shell command."
        ),
        examples=[
            "npm run migrations",
            "python manage.py collectstatic",
            "ls -la",
            "cat /var/log/app.log",
        ],
    )


def list_applications_tool() -> ToolDefinition:
    """Create the list_applications tool definition."""
    return list_tool(
        "list_applications",
        "applications",
        "/applications",
        "List all applications across your Coolify instance. Applications are "
        "deployable units sourced from Git repositories.",
        usage="Use this to get application UUIDs needed for management operations",
        relatedTools=[
            "create_application - Create new applications",
            "start_application - Start an application",
            "stop_application - Stop an application",
            "restart_application - Restart an application",
            "execute_command_application - Run commands in applications",
        ],
    )


def create_application_tool() -> ToolDefinition:
    """Create the create_application tool definition."""
    return ToolDefinition(
        name="create_application",
        family="applications",
        description=(
            "Create a new application in Coolify. Applications are deployable units "
            "that can be sourced from Git repositories."
        ),
        method="POST",
        path_template="/applications",
        parameters_model=CreateApplicationParams,
        additional_info={
            "workflow": [
                "1. First call list_servers to get available server UUIDs for the "
                "destination_uuid",
                "2. Create the application with required parameters",
                "3. After creation, you can start the application using "
                "start_application",
            ],
            "notes": [
                "The Git repository should be accessible by the Coolify server",
                "Exposed ports must be available on the destination server",
            ],
        },
    )


def start_application_tool() -> ToolDefinition:
    """Create the start_application tool definition."""
    return lifecycle_tool(
        "applications",
        "application",
        "start",
        "Start a previously created application. This will initialize the "
        "application container and make it accessible.",
        "UUID of the application to start. Obtain this from list_applications or "
        "from the create_application response.",
    )


def stop_application_tool() -> ToolDefinition:
    """Create the stop_application tool definition."""
    return lifecycle_tool(
        "applications",
        "application",
        "stop",
        "Stop a running application. This will gracefully shut down the "
        "application container.",
        "UUID of the application to stop. Get this from list_applications.",
    )


def restart_application_tool() -> ToolDefinition:
    """Create the restart_application tool definition."""
    return lifecycle_tool(
        "applications",
        "application",
        "restart",
        "Restart an application by stopping and starting it again. Useful for "
        "applying configuration changes or recovering from issues.",
        "UUID of the application to restart. Get this from list_applications.",
    )


def execute_command_application_tool() -> ToolDefinition:
    """Create the execute_command_application tool definition.

    Only ``command`` is sent in the body; ``uuid`` is consumed by the path.
    """
    return ToolDefinition(
        name="execute_command_application",
        family="applications",
        description=(
            "Execute a command inside a running application container. Useful for "
            "debugging, maintenance, or running one-off tasks."
        ),
        method="POST",
        path_template="/applications/{uuid}/execute",
        parameters_model=ExecuteCommandParams,
        body_fields=("command",),
        additional_info={
            "notes": [
                "The application must be running for commands to execute",
                "Command execution is synchronous and will return the output",
                "Use with caution as commands can modify the application state",
            ],
        },
    )
