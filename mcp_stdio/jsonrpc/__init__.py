"""JSON-RPC 2.0 implementation for MCP protocol.

The dispatcher lives in ``mcp_stdio.jsonrpc.handler``; it is not re-exported
here because it depends on ``mcp_stdio.utils.errors``, which depends on these
models.
"""
from .models import JSONRPCRequest, JSONRPCResponse, JSONRPCError, ErrorCode

__all__ = [
    "JSONRPCRequest",
    "JSONRPCResponse",
    "JSONRPCError",
    "ErrorCode",
]
