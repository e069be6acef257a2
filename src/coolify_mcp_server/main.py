"""Entry point for the Coolify MCP server."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from coolify_mcp_server.dispatcher import Dispatcher
from coolify_mcp_server.errors import MCPError
from coolify_mcp_server.fastmcp_adapter import build_fastmcp_app
from coolify_mcp_server.settings import load_config
from coolify_mcp_server.tools import build_catalog
from coolify_mcp_server.transport import RequestsTransport

logger = logging.getLogger("coolify_mcp_server")

LOG_FORMAT = "%(asctime)s [coolify-mcp] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr, leaving stdout to the stdio transport."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coolify MCP server")
    parser.add_argument("--catalog", action="store_true", help="Print the tool catalog")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="MCP transport to serve on.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for http/sse.")
    parser.add_argument("--port", type=int, default=8000, help="Port for http/sse.")
    parser.add_argument("--path", default=None, help="URL path for http/sse.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load configuration, register tools and serve them over MCP."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    catalog = build_catalog()
    if args.catalog:
        print(json.dumps(catalog.to_catalog(), indent=2))
        return 0

    load_dotenv()
    try:
        config = load_config()
    except MCPError as error:
        logger.error("%s", error.message)
        return 1

    transport = RequestsTransport(config)
    app, tool_definitions = build_fastmcp_app(Dispatcher(catalog, transport))
    logger.info(
        "Coolify MCP server running on %s with %d tools",
        args.transport,
        len(tool_definitions),
    )

    run_options: dict[str, object] = {}
    if args.transport != "stdio":
        run_options = {"host": args.host, "port": args.port}
        if args.path:
            run_options["path"] = args.path
    try:
        app.run(transport=args.transport, **run_options)
    finally:
        transport.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
