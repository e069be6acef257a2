"""Translate named tool invocations into Coolify REST calls.

The dispatcher is stateless apart from the catalog and transport it is built
with, so a single instance can serve concurrent invocations. Recognized
failures come back as failed :class:`InvocationResult` objects; anything else
raised by the transport propagates to the caller untouched.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from coolify_mcp.server import OperationCatalog
from coolify_mcp.tools import HttpMethod
from coolify_mcp_server.errors import ErrorKind, MCPError, TransportError
from coolify_mcp_server.settings import BASE_URL_ENV, TOKEN_ENV
from coolify_mcp_server.transport import Transport

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Coolify configuration not initialized. Please set "
    f"{BASE_URL_ENV} and {TOKEN_ENV} environment variables."
)


@dataclass(frozen=True)
class OperationRequest:
    """A fully resolved HTTP call."""

    method: HttpMethod
    path: str
    body: dict[str, Any] | None = None


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of one invocation.

    Attributes:
        ok: Whether the remote call succeeded.
        payload: Decoded response body on success.
        kind: Failure category on error.
        message: Human-readable failure description on error.
        details: Structured context for the failure, such as the missing
            argument.

    """

    ok: bool
    payload: Any = None
    kind: ErrorKind | None = None
    message: str | None = None
    details: Any = None

    @classmethod
    def success(cls, payload: Any) -> InvocationResult:
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, details: Any = None
    ) -> InvocationResult:
        return cls(ok=False, kind=kind, message=message, details=details)

    def to_text(self) -> str:
        """Render the payload as indented JSON, or the failure message."""
        if self.ok:
            return json.dumps(self.payload, indent=2, ensure_ascii=False)
        return self.message or ""

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "payload": self.payload}
        kind = self.kind.value if self.kind is not None else None
        return {
            "ok": False,
            "kind": kind,
            "message": self.message,
            "details": self.details,
        }


class Dispatcher:
    """Generic executor driven by the operation catalog."""

    def __init__(
        self, catalog: OperationCatalog, transport: Transport | None = None
    ) -> None:
        self._catalog = catalog
        self._transport = transport

    @property
    def catalog(self) -> OperationCatalog:
        return self._catalog

    @property
    def configured(self) -> bool:
        return self._transport is not None

    def prepare(self, name: str, arguments: Mapping[str, Any]) -> OperationRequest:
        """Validate an invocation and resolve its HTTP call.

        Raises:
            MCPError: ``NotConfigured``, ``UnknownOperation`` or
                ``InvalidArguments``.

        """
        if self._transport is None:
            raise MCPError(ErrorKind.NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)

        tool = self._catalog.lookup(name)
        if tool is None:
            raise MCPError(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}")

        missing = tool.first_missing(arguments)
        if missing is not None:
            raise MCPError(
                ErrorKind.INVALID_ARGUMENTS,
                f"{missing} is required",
                {"tool": name, "argument": missing},
            )

        return OperationRequest(
            method=tool.method,
            path=tool.resolve_path(arguments),
            body=tool.build_body(arguments),
        )

    def invoke(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> InvocationResult:
        """Run one operation and return its result."""
        arguments = dict(arguments or {})
        try:
            request = self.prepare(name, arguments)
        except MCPError as error:
            logger.warning("Rejected %s: %s", name, error.message)
            error_payload = error.to_dict()["error"]
            return InvocationResult.failure(
                ErrorKind(error.error_type), error.message, error_payload["details"]
            )

        transport = cast(Transport, self._transport)
        logger.info("%s %s", request.method, request.path)
        try:
            payload = transport.send(request.method, request.path, request.body)
        except TransportError as error:
            message = error.remote_message or str(error)
            logger.warning(
                "Coolify API error for %s (status %s): %s",
                name,
                error.status_code,
                message,
            )
            return InvocationResult.failure(
                ErrorKind.REMOTE_ERROR,
                message,
                {"status_code": error.status_code, "body": error.body},
            )
        return InvocationResult.success(payload)
