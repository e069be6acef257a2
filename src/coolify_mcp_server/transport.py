"""HTTP transport used to reach the Coolify REST API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from coolify_mcp.tools import HttpMethod
from coolify_mcp_server.errors import TransportError
from coolify_mcp_server.settings import TransportConfig

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to perform one authenticated call against the API root."""

    def send(
        self, method: HttpMethod, path: str, body: dict[str, Any] | None = None
    ) -> Any:
        """Perform the call and return the decoded body.

        Raises:
            TransportError: If the remote API answers with a failure status.
        """
        ...


class RequestsTransport:
    """:class:`Transport` backed by a shared :class:`requests.Session`."""

    def __init__(
        self, config: TransportConfig, session: requests.Session | None = None
    ) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    def url_for(self, path: str) -> str:
        """Resolve an operation path against the configured API root."""
        return f"{self._config.api_root}{path}"

    def send(
        self, method: HttpMethod, path: str, body: dict[str, Any] | None = None
    ) -> Any:
        url = self.url_for(path)
        response = self._session.request(
            method, url, json=body, timeout=self._config.timeout
        )
        try:
            response.raise_for_status()
        except requests.HTTPError as error:
            logger.debug("Coolify API returned %s for %s", response.status_code, url)
            raise TransportError(
                str(error), status_code=response.status_code, body=_decode(response)
            ) from error
        return _decode(response)

    def close(self) -> None:
        self._session.close()


def _decode(response: requests.Response) -> Any:
    """Decode a JSON body, falling back to its raw text.

    Coolify answers ``/health`` with a plain-text ``OK``.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
