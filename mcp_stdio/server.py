"""MCP server wiring: registry, resource reader, dispatcher and transports."""
import logging
from contextlib import asynccontextmanager
from typing import Any, BinaryIO, Dict, Optional, TextIO, Union

from fastapi import FastAPI

from .config import DEFAULT_SERVER_NAME
from .jsonrpc.handler import JSONRPCHandler
from .jsonrpc.models import JSONRPCRequest
from .mcp_handler import MCPRegistry, ToolFunction
from .mcp_transport import StdioTransport, TransportStats
from .methods import MCP_PROTOCOL_VERSION, build_method_table
from .resource_reader import ResourceReader
from .tools import ECHO_INPUT_SCHEMA, echo
from . import __version__

logger = logging.getLogger(__name__)


class MCPServer:
    """One MCP server instance.

    Owns its registry and resource reader; several instances can coexist in
    one process. Register tools and resources, then serve: the registry is
    frozen as soon as a transport starts.
    """

    def __init__(
        self,
        name: str = DEFAULT_SERVER_NAME,
        version: str = __version__,
        reader: Optional[ResourceReader] = None,
    ):
        self.name = name
        self.version = version
        self.registry = MCPRegistry()
        self.reader = reader if reader is not None else ResourceReader.with_defaults()
        self.jsonrpc_handler = JSONRPCHandler(
            build_method_table(self.registry, self.reader, name, version)
        )

    def register_tool(
        self, name: str, description: str, input_schema: Dict[str, Any], handler: ToolFunction
    ) -> None:
        self.registry.register_tool(name, description, input_schema, handler)

    def register_resource(
        self, uri: str, name: str, description: str, mime_type: str = "text/plain"
    ) -> None:
        self.registry.register_resource(uri, name, description, mime_type)

    def stdio_transport(
        self,
        instream: Optional[Union[BinaryIO, TextIO]] = None,
        outstream: Optional[TextIO] = None,
    ) -> StdioTransport:
        return StdioTransport(self.jsonrpc_handler, self.registry, instream, outstream)

    def run_stdio(self) -> TransportStats:
        """Serve on stdin/stdout until end-of-input."""
        logger.info(f"Starting MCP server {self.name} {self.version} on stdio")
        return self.stdio_transport().run()


def register_default_tools(server: MCPServer) -> None:
    """Register the built-in tools."""
    server.register_tool(
        name="echo",
        description="Echo back the given message",
        input_schema=ECHO_INPUT_SCHEMA,
        handler=echo,
    )


def create_server(name: str = DEFAULT_SERVER_NAME, version: str = __version__) -> MCPServer:
    """Server with the built-in tools registered."""
    server = MCPServer(name=name, version=version)
    register_default_tools(server)
    return server


def create_app(server: MCPServer) -> FastAPI:
    """Expose ``server`` over HTTP with the same JSON-RPC dispatcher."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager for FastAPI app."""
        logger.info("Starting MCP server with HTTP transport...")
        server.registry.freeze()
        yield
        logger.info("Shutting down MCP server...")

    app = FastAPI(
        title="MCP stdio server",
        description="MCP tools and resources over JSON-RPC 2.0",
        version=server.version,
        lifespan=lifespan,
    )

    @app.post("/")
    @app.post("/rpc")
    @app.post("/jsonrpc")
    async def jsonrpc_endpoint(request: JSONRPCRequest):
        """JSON-RPC 2.0 endpoint, one request per POST."""
        response = await server.jsonrpc_handler.handle_request(request)
        return response.to_wire()

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": server.name,
            "version": server.version,
            "protocol_version": MCP_PROTOCOL_VERSION,
            "tools": len(server.registry.tools),
            "resources": len(server.registry.resources),
        }

    return app
