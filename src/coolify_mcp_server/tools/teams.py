"""Team tools."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from coolify_mcp.tools import UUID_PATTERN, ToolDefinition, ToolParameters
from coolify_mcp_server.tools.common import EXAMPLE_UUID, list_tool


class GetTeamParams(ToolParameters):
    """Parameters for get_team."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"team_id": EXAMPLE_UUID}]}
    )

    team_id: str = Field(
        description=(
            "UUID of the team to retrieve. This must be a valid UUID obtained from "
            "the list_teams response."
        ),
        pattern=UUID_PATTERN,
        examples=[EXAMPLE_UUID],
    )


def list_teams_tool() -> ToolDefinition:
    """Create the list_teams tool definition."""
    return list_tool(
        "list_teams",
        "teams",
        "/teams",
        "List all teams the authenticated user has access to. Use this to get "
        "team UUIDs needed for other operations.",
        responseFormat=(
            "Returns an array of team objects, each containing: id (UUID), name, "
            "and other team details"
        ),
        usage=(
            "Call this first to get team IDs needed for get_team or other "
            "team-related operations"
        ),
    )


def get_team_tool() -> ToolDefinition:
    """Create the get_team tool definition."""
    return ToolDefinition(
        name="get_team",
        family="teams",
        description=(
            "Get details of a specific team. Requires a team UUID obtained from "
            "list_teams."
        ),
        method="GET",
        path_template="/teams/{team_id}",
        parameters_model=GetTeamParams,
        additional_info={
            "workflow": [
                "1. First call list_teams to get available team UUIDs",
                "2. Use a team UUID from the response in this operation",
            ]
        },
    )


def get_current_team_tool() -> ToolDefinition:
    """Create the get_current_team tool definition."""
    return list_tool(
        "get_current_team",
        "teams",
        "/teams/current",
        "Get details of the currently authenticated team. This is the team "
        "associated with your API token.",
        responseFormat=(
            "Returns a team object containing id (UUID), name, and other team "
            "details"
        ),
        usage="Use this to quickly get information about your current team context",
    )


def get_current_team_members_tool() -> ToolDefinition:
    """Create the get_current_team_members tool definition."""
    return list_tool(
        "get_current_team_members",
        "teams",
        "/teams/current/members",
        "Get a list of all members in the currently authenticated team. Shows who "
        "has access to team resources.",
        responseFormat=(
            "Returns an array of team member objects containing user information "
            "and roles"
        ),
        usage="Use this to manage team access and verify member permissions",
    )
