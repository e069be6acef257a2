"""Shared helpers for MCP tools."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from coolify_mcp.tools import UUID_PATTERN, ToolDefinition, ToolParameters

EXAMPLE_UUID = "123e4567-e89b-12d3-a456-426614174000"
OTHER_EXAMPLE_UUID = "987fcdeb-51a2-43f7-9876-543210abcdef"


def uuid_field(description: str, **kwargs: Any) -> Any:
    """Declare a UUID-valued argument with the documented pattern."""
    return Field(description=description, pattern=UUID_PATTERN, **kwargs)


class NoParams(ToolParameters):
    """Parameters for operations that take no arguments."""

    model_config = ConfigDict(json_schema_extra={"examples": [{}]})


def uuid_params(title: str, description: str) -> type[ToolParameters]:
    """Build a parameters model holding a single resource ``uuid``."""

    class UuidParams(ToolParameters):
        model_config = ConfigDict(
            title=title,
            json_schema_extra={"examples": [{"uuid": EXAMPLE_UUID}]},
        )

        uuid: str = uuid_field(description)

    return UuidParams


def list_tool(
    name: str, family: str, path: str, description: str, **info: Any
) -> ToolDefinition:
    """Create a parameterless GET tool."""
    return ToolDefinition(
        name=name,
        family=family,
        description=description,
        method="GET",
        path_template=path,
        parameters_model=NoParams,
        additional_info=info,
    )


def lifecycle_tool(
    family: str,
    resource: str,
    action: str,
    description: str,
    uuid_description: str,
    **info: Any,
) -> ToolDefinition:
    """Create a start/stop/restart tool for a service or application."""
    return ToolDefinition(
        name=f"{action}_{resource}",
        family=family,
        description=description,
        method="GET",
        path_template=f"/{family}/{{uuid}}/{action}",
        parameters_model=uuid_params(
            f"{action.title()}{resource.title()}Params", uuid_description
        ),
        additional_info=info,
    )
