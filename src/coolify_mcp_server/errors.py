"""Custom error types for MCP tooling."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, TypedDict


class ErrorKind(str, Enum):
    """Recognized failure categories reported to MCP callers."""

    NOT_CONFIGURED = "NotConfigured"
    UNKNOWN_OPERATION = "UnknownOperation"
    INVALID_ARGUMENTS = "InvalidArguments"
    REMOTE_ERROR = "RemoteError"


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.error: MCPErrorPayload = {
            "error": {
                "type": str(getattr(error_type, "value", error_type)),
                "message": message,
                "details": details,
            }
        }

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error


class TransportError(Exception):
    """The remote API answered with an HTTP failure status."""

    def __init__(
        self, message: str, status_code: int | None = None, body: object = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def remote_message(self) -> str | None:
        """The ``message`` field of the remote error body, when present."""
        if isinstance(self.body, dict):
            message = self.body.get("message")
            if isinstance(message, str) and message:
                return message
        return None


def raise_mcp_error(
    error_type: str, message: str, details: object | None = None
) -> NoReturn:
    """Raise an :class:`MCPError` with a structured payload."""
    raise MCPError(error_type=error_type, message=message, details=details)
