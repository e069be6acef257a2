"""Command-line access to the Coolify tool catalog.

``coolify-mcp --catalog`` prints every tool with its input schema.
``coolify-mcp call NAME --arguments '{...}'`` performs one invocation through
the same dispatcher the MCP server uses and prints its text result. With
``--json`` the whole result object is printed instead.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from coolify_mcp_server.dispatcher import Dispatcher, InvocationResult
from coolify_mcp_server.errors import MCPError
from coolify_mcp_server.main import configure_logging
from coolify_mcp_server.settings import load_config
from coolify_mcp_server.tools import build_catalog
from coolify_mcp_server.transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Call Coolify MCP tools directly.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    subparsers = parser.add_subparsers(dest="command")
    call = subparsers.add_parser("call", help="Invoke a single tool.")
    call.add_argument("name", help="Tool name, e.g. list_servers.")
    call.add_argument(
        "--arguments",
        default="{}",
        help="Tool arguments as a JSON object.",
    )
    call.add_argument(
        "--json",
        action="store_true",
        help="Print the full result object, failure details included.",
    )
    return parser


def _build_transport() -> Transport | None:
    try:
        return RequestsTransport(load_config())
    except MCPError as error:
        logger.debug("Configuration unavailable: %s", error.message)
        return None


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    catalog = build_catalog()

    if args.catalog:
        print(json.dumps(catalog.to_catalog(), indent=2))
        return 0

    if args.command != "call":
        print(json.dumps({"tools": catalog.available_tools()}))
        return 0

    try:
        arguments = json.loads(args.arguments)
    except json.JSONDecodeError as error:
        parser.error(f"--arguments is not valid JSON: {error}")
    if not isinstance(arguments, dict):
        parser.error("--arguments must be a JSON object")

    load_dotenv()
    result = Dispatcher(catalog, _build_transport()).invoke(args.name, arguments)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_result(result)
    return 0 if result.ok else 1


def _print_result(result: InvocationResult) -> None:
    if result.ok:
        print(result.to_text())
        return
    kind = result.kind.value if result.kind is not None else "Error"
    print(f"{kind}: {result.message}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
