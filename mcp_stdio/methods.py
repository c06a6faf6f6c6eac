"""MCP method handlers bound to one server's registry and resource reader."""
import logging
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, StrictStr, ValidationError

from .jsonrpc.handler import MethodHandler
from .mcp_handler import MCPRegistry
from .resource_reader import ResourceReader
from .utils.errors import InvalidParamsError

logger = logging.getLogger(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class ToolCallParams(BaseModel):
    name: StrictStr
    arguments: Any = None


class ResourceReadParams(BaseModel):
    uri: StrictStr


def parse_params(model: Type[ParamsT], params: Any, detail: str) -> ParamsT:
    """Validate raw params into ``model``.

    Every shape problem maps to the same INVALID_PARAMS error; ``detail``
    names the field the method cannot do without.
    """
    if not isinstance(params, dict):
        raise InvalidParamsError("Invalid parameters", data={"detail": "params must be an object"})
    try:
        return model.model_validate(params)
    except ValidationError:
        raise InvalidParamsError("Invalid parameters", data={"detail": detail}) from None


def build_method_table(
    registry: MCPRegistry,
    reader: ResourceReader,
    server_name: str,
    server_version: str,
) -> Dict[str, MethodHandler]:
    """Create the JSON-RPC method table for one server instance."""

    # Method: initialize
    async def initialize(params: Any):
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {
                "tools": {"listChanged": True},
                "resources": {"subscribe": True, "listChanged": True},
            },
            "serverInfo": {
                "name": server_name,
                "version": server_version
            }
        }

    # Method: ping
    async def ping(params: Any):
        return {}

    # Method: tools/list
    async def tools_list(params: Any):
        return {"tools": registry.list_tools()}

    # Method: tools/call
    async def tools_call(params: Any):
        call = parse_params(ToolCallParams, params, "Tool name is required")
        outcome = await registry.execute_tool(call.name, call.arguments)
        return outcome.to_result()

    # Method: resources/list
    async def resources_list(params: Any):
        return {"resources": registry.list_resources()}

    # Method: resources/read
    async def resources_read(params: Any):
        read = parse_params(ResourceReadParams, params, "URI is required")
        text = await reader.read(read.uri)
        return {
            "contents": [
                {"uri": read.uri, "mimeType": "text/plain", "text": text}
            ]
        }

    return {
        "initialize": initialize,
        "ping": ping,
        "tools/list": tools_list,
        "tools/call": tools_call,
        "resources/list": resources_list,
        "resources/read": resources_read,
    }
