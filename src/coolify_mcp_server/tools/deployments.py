"""Deployment tools."""

from __future__ import annotations

from coolify_mcp.tools import ToolDefinition
from coolify_mcp_server.tools.common import list_tool, uuid_params


def list_deployments_tool() -> ToolDefinition:
    """Create the list_deployments tool definition."""
    return list_tool(
        "list_deployments",
        "deployments",
        "/deployments",
        "List all deployments across your Coolify instance. Deployments represent "
        "the history of application and service deployments.",
        notes=[
            "Use get_deployment with a specific UUID to get detailed information "
            "about a deployment"
        ],
    )


def get_deployment_tool() -> ToolDefinition:
    """Create the get_deployment tool definition."""
    return ToolDefinition(
        name="get_deployment",
        family="deployments",
        description=(
            "Get detailed information about a specific deployment. Use this to "
            "monitor deployment status and troubleshoot issues."
        ),
        method="GET",
        path_template="/deployments/{uuid}",
        parameters_model=uuid_params(
            "GetDeploymentParams",
            "UUID of the deployment to retrieve. Obtain this from list_deployments "
            "or from deployment event responses.",
        ),
    )
