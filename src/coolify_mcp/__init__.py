"""coolify_mcp package initialization."""

from coolify_mcp.server import OperationCatalog
from coolify_mcp.tools import ToolDefinition, ToolParameters

__all__ = ["OperationCatalog", "ToolDefinition", "ToolParameters"]
