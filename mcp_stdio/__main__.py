"""Command-line entry point: ``python -m mcp_stdio`` / ``mcp-stdio-server``."""
import argparse
import logging
import sys
from typing import List, Optional
from urllib.parse import urlsplit

from .config import load_settings
from .server import MCPServer, create_app, create_server

logger = logging.getLogger(__name__)


def resource_name(uri: str) -> str:
    """Last path segment of ``uri``, falling back to the URI itself."""
    path = urlsplit(uri).path.rstrip("/")
    return path.rsplit("/", 1)[-1] or uri


def register_cli_resources(server: MCPServer, uris: List[str]) -> None:
    for uri in uris:
        server.register_resource(
            uri=uri,
            name=resource_name(uri),
            description=f"Resource at {uri}",
        )


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-stdio-server",
        description="Minimal MCP server exposing tools and resources over JSON-RPC 2.0"
    )
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio",
                        help="Transport to serve on (default: stdio)")
    parser.add_argument("--host", default=settings.http_host,
                        help=f"HTTP bind address (default: {settings.http_host})")
    parser.add_argument("--port", type=int, default=settings.http_port,
                        help=f"HTTP port (default: {settings.http_port})")
    parser.add_argument("--resource", action="append", default=[], metavar="URI",
                        help="Register a resource URI (repeatable)")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper,
                        help=f"Logging level (default: {settings.log_level})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    # stdout carries protocol messages; logs always go to stderr
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = create_server(name=settings.server_name, version=settings.server_version)
    register_cli_resources(server, args.resource)

    if args.transport == "http":
        import uvicorn

        logger.info(f"Serving HTTP on {args.host}:{args.port}")
        uvicorn.run(create_app(server), host=args.host, port=args.port,
                    log_level=args.log_level.lower())
    else:
        server.run_stdio()
    return 0


if __name__ == "__main__":
    sys.exit(main())
