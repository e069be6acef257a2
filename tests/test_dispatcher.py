"""Behavioral coverage for the dispatcher."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from coolify_mcp.server import OperationCatalog
from coolify_mcp_server.dispatcher import Dispatcher, InvocationResult
from coolify_mcp_server.errors import ErrorKind, TransportError

U = "123e4567-e89b-12d3-a456-426614174000"

# name -> (method, expected path, arguments holding every required field)
OPERATIONS: dict[str, tuple[str, str, dict[str, Any]]] = {
    "get_version": ("GET", "/version", {}),
    "health_check": ("GET", "/health", {}),
    "list_teams": ("GET", "/teams", {}),
    "get_team": ("GET", f"/teams/{U}", {"team_id": U}),
    "get_current_team": ("GET", "/teams/current", {}),
    "get_current_team_members": ("GET", "/teams/current/members", {}),
    "list_servers": ("GET", "/servers", {}),
    "create_server": (
        "POST",
        "/servers",
        {
            "name": "s1",
            "ip": "10.0.0.1",
            "port": 22,
            "user": "root",
            "private_key_uuid": "K",
        },
    ),
    "validate_server": ("GET", f"/servers/{U}/validate", {"uuid": U}),
    "get_server_resources": ("GET", f"/servers/{U}/resources", {"uuid": U}),
    "get_server_domains": ("GET", f"/servers/{U}/domains", {"uuid": U}),
    "list_services": ("GET", "/services", {}),
    "create_service": (
        "POST",
        "/services",
        {"name": "api", "server_uuid": "S", "project_uuid": "P"},
    ),
    "start_service": ("GET", f"/services/{U}/start", {"uuid": U}),
    "stop_service": ("GET", f"/services/{U}/stop", {"uuid": U}),
    "restart_service": ("GET", f"/services/{U}/restart", {"uuid": U}),
    "list_applications": ("GET", "/applications", {}),
    "create_application": (
        "POST",
        "/applications",
        {"project_uuid": "P", "environment_name": "production", "destination_uuid": "D"},
    ),
    "start_application": ("GET", f"/applications/{U}/start", {"uuid": U}),
    "stop_application": ("GET", f"/applications/{U}/stop", {"uuid": U}),
    "restart_application": ("GET", f"/applications/{U}/restart", {"uuid": U}),
    "execute_command_application": (
        "POST",
        f"/applications/{U}/execute",
        {"uuid": U, "command": "ls -la"},
    ),
    "list_deployments": ("GET", "/deployments", {}),
    "get_deployment": ("GET", f"/deployments/{U}", {"uuid": U}),
    "list_private_keys": ("GET", "/security/keys", {}),
    "create_private_key": (
        "POST",
        "/security/keys",
        {"name": "key", "private_key": "-----BEGIN KEY-----"},
    ),
}

REQUIRED_CASES = [
    (name, required)
    for name, (_, _, arguments) in OPERATIONS.items()
    for required in arguments
]


def test_table_covers_catalog(catalog: OperationCatalog) -> None:
    """Every catalog entry is exercised by the operation table."""
    assert set(OPERATIONS) == set(catalog.available_tools())


@pytest.mark.parametrize("name", list(OPERATIONS))
def test_invocation_issues_one_matching_call(
    name: str, dispatcher: Dispatcher, fake_transport: Any
) -> None:
    """Each operation maps onto exactly one call with the documented binding."""
    # Arrange
    method, path, arguments = OPERATIONS[name]

    # Act
    result = dispatcher.invoke(name, arguments)

    # Assert
    assert result.ok is True
    assert len(fake_transport.calls) == 1
    sent_method, sent_path, body = fake_transport.calls[0]
    assert (sent_method, sent_path) == (method, path)
    if method == "GET":
        assert body is None


@pytest.mark.parametrize(("name", "required"), REQUIRED_CASES)
def test_missing_required_argument_never_calls_transport(
    name: str, required: str, dispatcher: Dispatcher, fake_transport: Any
) -> None:
    """Omitting any required argument fails before the transport is used."""
    # Arrange
    arguments = dict(OPERATIONS[name][2])
    del arguments[required]

    # Act
    result = dispatcher.invoke(name, arguments)

    # Assert
    assert result.ok is False
    assert result.kind is ErrorKind.INVALID_ARGUMENTS
    assert fake_transport.calls == []


class TestDispatcher:
    """Error surface and body construction."""

    def test_not_configured_fails_closed(self, catalog: OperationCatalog) -> None:
        """Without a transport every call reports NotConfigured."""
        # Arrange
        dispatcher = Dispatcher(catalog)

        # Act
        result = dispatcher.invoke("list_servers")

        # Assert
        assert result.ok is False
        assert result.kind is ErrorKind.NOT_CONFIGURED
        assert "COOLIFY_BASE_URL" in (result.message or "")
        assert dispatcher.configured is False

    def test_not_configured_precedes_unknown_operation(
        self, catalog: OperationCatalog
    ) -> None:
        """Configuration is checked before the operation name."""
        result = Dispatcher(catalog).invoke("does_not_exist")

        assert result.kind is ErrorKind.NOT_CONFIGURED

    def test_unknown_operation(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """Names absent from the catalog are rejected without a call."""
        # Act
        result = dispatcher.invoke("delete_everything", {"uuid": U})

        # Assert
        assert result.kind is ErrorKind.UNKNOWN_OPERATION
        assert result.message == "Unknown tool: delete_everything"
        assert fake_transport.calls == []

    def test_reports_first_missing_argument_only(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """Validation stops at the first missing field in declaration order."""
        # Act
        result = dispatcher.invoke("create_server", {"name": "s1", "user": "root"})

        # Assert
        assert result.kind is ErrorKind.INVALID_ARGUMENTS
        assert result.message == "ip is required"
        assert result.details == {"tool": "create_server", "argument": "ip"}
        assert fake_transport.calls == []

    def test_none_arguments_are_treated_as_empty(
        self, dispatcher: Dispatcher
    ) -> None:
        """A missing argument bag behaves like an empty one."""
        result = dispatcher.invoke("get_team", None)

        assert result.message == "team_id is required"

    def test_execute_command_body_holds_only_command(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """The application uuid goes into the path and not into the body."""
        # Act
        dispatcher.invoke("execute_command_application", {"uuid": "U", "command": "ls -la"})

        # Assert
        assert fake_transport.calls == [
            ("POST", "/applications/U/execute", {"command": "ls -la"})
        ]

    def test_create_server_sends_arguments_unmodified(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """POST operations forward the whole argument bag, optional fields included."""
        # Arrange
        arguments = {
            "name": "s1",
            "ip": "10.0.0.1",
            "port": 22,
            "user": "root",
            "private_key_uuid": "K",
            "proxy_type": "caddy",
            "unexpected": {"nested": [1, 2]},
        }

        # Act
        dispatcher.invoke("create_server", arguments)

        # Assert
        assert fake_transport.calls == [("POST", "/servers", arguments)]

    def test_successful_payload_round_trips(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """The text result parses back to the upstream body."""
        # Arrange
        upstream = {"version": "4.0.0-beta", "tags": ["é", None, 1.5], "ok": True}
        fake_transport.queue(upstream)

        # Act
        result = dispatcher.invoke("get_version")

        # Assert
        assert result.payload == upstream
        text = result.to_text()
        assert json.loads(text) == upstream
        assert text == json.dumps(upstream, indent=2, ensure_ascii=False)
        assert "é" in text

    def test_empty_body_is_null(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """An empty response body becomes a JSON null payload."""
        fake_transport.queue(None)

        result = dispatcher.invoke("health_check")

        assert result.ok is True
        assert result.to_text() == "null"

    def test_remote_error_prefers_remote_message(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """The upstream message field becomes the error message."""
        # Arrange
        fake_transport.queue(
            TransportError(
                "429 Client Error: Too Many Requests",
                status_code=429,
                body={"message": "quota exceeded"},
            )
        )

        # Act
        result = dispatcher.invoke("list_servers")

        # Assert
        assert result.ok is False
        assert result.kind is ErrorKind.REMOTE_ERROR
        assert result.message == "quota exceeded"
        assert result.details == {
            "status_code": 429,
            "body": {"message": "quota exceeded"},
        }

    @pytest.mark.parametrize(
        "body", [None, {"error": "nope"}, {"message": ""}, "Bad Gateway", [1, 2]]
    )
    def test_remote_error_falls_back_to_generic_text(
        self, body: object, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """Without a usable message field the transport text is reported."""
        # Arrange
        fake_transport.queue(
            TransportError("502 Server Error: Bad Gateway", status_code=502, body=body)
        )

        # Act
        result = dispatcher.invoke("list_servers")

        # Assert
        assert result.kind is ErrorKind.REMOTE_ERROR
        assert result.message == "502 Server Error: Bad Gateway"

    def test_unclassified_failures_propagate(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """Network failures are not converted into structured results."""
        fake_transport.queue(requests.ConnectionError("network unreachable"))

        with pytest.raises(requests.ConnectionError):
            dispatcher.invoke("list_servers")

    def test_every_call_reaches_the_transport(
        self, dispatcher: Dispatcher, fake_transport: Any
    ) -> None:
        """Identical invocations are never served from a cache."""
        dispatcher.invoke("list_servers")
        dispatcher.invoke("list_servers")

        assert len(fake_transport.calls) == 2

    def test_prepare_resolves_request(self, dispatcher: Dispatcher) -> None:
        """prepare exposes the resolved method, path and body."""
        request = dispatcher.prepare("get_deployment", {"uuid": "D1"})

        assert (request.method, request.path, request.body) == (
            "GET",
            "/deployments/D1",
            None,
        )


def test_result_to_dict_shapes() -> None:
    """Results serialize to exactly one of the two documented shapes."""
    assert InvocationResult.success({"a": 1}).to_dict() == {
        "ok": True,
        "payload": {"a": 1},
    }
    assert InvocationResult.failure(ErrorKind.REMOTE_ERROR, "boom").to_dict() == {
        "ok": False,
        "kind": "RemoteError",
        "message": "boom",
        "details": None,
    }
