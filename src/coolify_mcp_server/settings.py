"""Process-wide connection settings for the Coolify API."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from coolify_mcp_server.errors import ErrorKind, raise_mcp_error

BASE_URL_ENV = "COOLIFY_BASE_URL"
TOKEN_ENV = "COOLIFY_TOKEN"
TIMEOUT_ENV = "COOLIFY_TIMEOUT"

API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT = 30.0


class TransportConfig(BaseModel):
    """Base URL, bearer token and timeout shared by every remote call."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    token: str = Field(min_length=1, repr=False)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        stripped = value.rstrip("/")
        if not stripped:
            raise ValueError("base_url must not be empty")
        return stripped

    @property
    def api_root(self) -> str:
        """Root URL that every operation path is resolved against."""
        return f"{self.base_url}{API_PREFIX}"


def load_config(environ: Mapping[str, str] | None = None) -> TransportConfig:
    """Build a :class:`TransportConfig` from environment variables.

    Raises:
        MCPError: ``NotConfigured`` when a required variable is missing or a
            value is invalid.
    """
    env = os.environ if environ is None else environ
    base_url = env.get(BASE_URL_ENV, "").strip()
    token = env.get(TOKEN_ENV, "").strip()

    missing = [
        name for name, value in ((BASE_URL_ENV, base_url), (TOKEN_ENV, token))
        if not value
    ]
    if missing:
        raise_mcp_error(
            ErrorKind.NOT_CONFIGURED,
            f"{BASE_URL_ENV} and {TOKEN_ENV} environment variables are required",
            {"missing": missing},
        )

    values: dict[str, object] = {"base_url": base_url, "token": token}
    raw_timeout = env.get(TIMEOUT_ENV, "").strip()
    if raw_timeout:
        values["timeout"] = raw_timeout
    try:
        return TransportConfig.model_validate(values)
    except ValidationError as error:
        raise_mcp_error(
            ErrorKind.NOT_CONFIGURED,
            "Invalid Coolify configuration",
            [item["msg"] for item in error.errors()],
        )
