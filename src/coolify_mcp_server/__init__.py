"""Model Context Protocol server for the Coolify platform API."""

from coolify_mcp_server.dispatcher import Dispatcher, InvocationResult
from coolify_mcp_server.errors import ErrorKind, MCPError, TransportError
from coolify_mcp_server.settings import TransportConfig, load_config
from coolify_mcp_server.tools import build_catalog, build_tools

__all__ = [
    "Dispatcher",
    "ErrorKind",
    "InvocationResult",
    "MCPError",
    "TransportConfig",
    "TransportError",
    "build_catalog",
    "build_tools",
    "load_config",
]
