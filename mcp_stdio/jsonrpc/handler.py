"""JSON-RPC 2.0 request handler."""
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping
import logging
from .models import (
    JSONRPC_VERSION,
    JSONRPCRequest,
    JSONRPCResponse,
    ErrorCode
)
from ..utils.errors import MCPError

logger = logging.getLogger(__name__)

MethodHandler = Callable[[Any], Awaitable[Any]]


class JSONRPCHandler:
    """Handles JSON-RPC 2.0 requests and routes them through a fixed method table."""

    def __init__(self, methods: Mapping[str, MethodHandler]):
        """Build the dispatcher.

        Args:
            methods: Mapping of JSON-RPC method name (e.g., "tools/list") to
                an async callable taking the request params. The table is
                copied and cannot change afterwards.
        """
        self.methods: Mapping[str, MethodHandler] = MappingProxyType(dict(methods))
        logger.debug(f"JSON-RPC methods: {', '.join(self.methods)}")

    async def handle_request(
        self,
        request: JSONRPCRequest
    ) -> JSONRPCResponse:
        """Handle a JSON-RPC 2.0 request.

        Args:
            request: JSONRPCRequest object

        Returns:
            JSONRPCResponse with result or error
        """
        if request.jsonrpc != JSONRPC_VERSION:
            return JSONRPCResponse.failure(
                request.id, ErrorCode.INVALID_REQUEST, "Invalid Request"
            )

        handler = self.methods.get(request.method)
        if handler is None:
            return JSONRPCResponse.failure(
                request.id,
                ErrorCode.METHOD_NOT_FOUND,
                "Method not found",
                data={"method": request.method},
            )

        logger.debug(f"Dispatching {request.method} (id={request.id!r})")
        try:
            result = await handler(request.params)
        except MCPError as e:
            return JSONRPCResponse.failure(request.id, e.code, e.message, data=e.data)
        except Exception as e:
            # Internal error
            logger.error(f"Internal error handling {request.method}: {e}", exc_info=True)
            return JSONRPCResponse.failure(
                request.id,
                ErrorCode.INTERNAL_ERROR,
                "Internal error",
                data={"details": str(e)},
            )

        return JSONRPCResponse.success(request.id, result)
