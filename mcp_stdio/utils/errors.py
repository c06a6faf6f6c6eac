"""Custom exception classes for the MCP server."""
from typing import Any, Optional

from ..jsonrpc.models import ErrorCode


class MCPError(Exception):
    """Base exception for MCP-related errors.

    Each subclass carries the JSON-RPC error code the dispatcher reports
    when the exception escapes a method handler.
    """

    code: int = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class MethodNotFoundError(MCPError):
    """Method or target (tool) does not exist."""

    code = ErrorCode.METHOD_NOT_FOUND


class InvalidParamsError(MCPError):
    """Method parameters have the wrong shape."""

    code = ErrorCode.INVALID_PARAMS


class RegistrationError(MCPError):
    """Tool or resource registration rejected."""

    pass


class ToolExecutionError(MCPError):
    """Tool execution errors."""

    pass
