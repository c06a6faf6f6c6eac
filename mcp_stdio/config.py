"""Environment-driven server settings."""
import os
from dataclasses import dataclass

from . import __version__

DEFAULT_SERVER_NAME = "mcp-stdio-server"


@dataclass(frozen=True)
class ServerSettings:
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = __version__
    log_level: str = "INFO"
    http_host: str = "127.0.0.1"
    http_port: int = 8080


def load_settings() -> ServerSettings:
    """Read settings from MCP_* environment variables.

    Raises:
        ValueError: MCP_HTTP_PORT is not an integer.
    """
    port = os.getenv("MCP_HTTP_PORT", "8080")
    try:
        http_port = int(port)
    except ValueError:
        raise ValueError(f"MCP_HTTP_PORT must be an integer, got {port!r}") from None

    return ServerSettings(
        server_name=os.getenv("MCP_SERVER_NAME", DEFAULT_SERVER_NAME),
        server_version=os.getenv("MCP_SERVER_VERSION", __version__),
        log_level=os.getenv("MCP_LOG_LEVEL", "INFO").upper(),
        http_host=os.getenv("MCP_HTTP_HOST", "127.0.0.1"),
        http_port=http_port,
    )
