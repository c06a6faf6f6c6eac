"""MCP tool/resource registry with tool execution."""
import inspect
from typing import Dict, Any, Callable, List, Union
import logging
from pydantic import BaseModel

from .utils.errors import MethodNotFoundError, RegistrationError, ToolExecutionError
from .utils.validation import validate_tool_name, validate_uri

logger = logging.getLogger(__name__)

ToolFunction = Callable[[Any], Any]


class Tool(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]


class Resource(BaseModel):
    uri: str
    name: str
    description: str
    mimeType: str = "text/plain"


class ToolSuccess(BaseModel):
    """Tool completed; ``payload`` is returned to the client as-is."""

    payload: Dict[str, Any]

    def to_result(self) -> Dict[str, Any]:
        return self.payload


class ToolFailure(BaseModel):
    """Tool could not complete. Reported inside a successful response."""

    message: str

    def to_result(self) -> Dict[str, Any]:
        return {"error": self.message}


ToolOutcome = Union[ToolSuccess, ToolFailure]


class MCPRegistry:
    """Tools keyed by name and resources keyed by URI.

    Both tables keep insertion order, which is the order ``list_tools`` and
    ``list_resources`` report. Registration is only allowed until
    :meth:`freeze` is called by the transport that starts serving.
    """

    def __init__(self):
        self.tools: Dict[str, ToolFunction] = {}
        self.tool_schemas: Dict[str, Tool] = {}
        self.resources: Dict[str, Resource] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further registration."""
        if not self._frozen:
            self._frozen = True
            logger.info(
                f"Registry frozen with {len(self.tools)} tools and "
                f"{len(self.resources)} resources"
            )

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RegistrationError("Registry is frozen; register tools and resources before serving")

    def register_tool(
        self, name: str, description: str, input_schema: Dict[str, Any], handler: ToolFunction
    ) -> None:
        """Register an MCP tool.

        Raises:
            RegistrationError: name is invalid or already registered, or the
                registry is frozen.
        """
        self._check_mutable()
        if not validate_tool_name(name):
            raise RegistrationError(f"Invalid tool name: {name!r}")
        if name in self.tools:
            raise RegistrationError(f"Tool already registered: {name}")
        if not callable(handler):
            raise RegistrationError(f"Handler for tool {name} is not callable")

        self.tool_schemas[name] = Tool(
            name=name, description=description, inputSchema=input_schema
        )
        self.tools[name] = handler
        logger.info(f"Registered tool: {name}")

    def register_resource(
        self, uri: str, name: str, description: str, mime_type: str = "text/plain"
    ) -> None:
        """Register an MCP resource.

        Raises:
            RegistrationError: URI is empty or already registered, or the
                registry is frozen.
        """
        self._check_mutable()
        if not validate_uri(uri):
            raise RegistrationError(f"Invalid resource URI: {uri!r}")
        if uri in self.resources:
            raise RegistrationError(f"Resource already registered: {uri}")

        self.resources[uri] = Resource(
            uri=uri, name=name, description=description, mimeType=mime_type
        )
        logger.info(f"Registered resource: {uri}")

    def has_tool(self, name: str) -> bool:
        return name in self.tools

    def list_tools(self) -> List[Dict[str, Any]]:
        """List all registered tools."""
        return [schema.model_dump() for schema in self.tool_schemas.values()]

    def list_resources(self) -> List[Dict[str, Any]]:
        """List all registered resources."""
        return [resource.model_dump() for resource in self.resources.values()]

    async def execute_tool(self, tool_name: str, arguments: Any) -> ToolOutcome:
        """Execute a registered tool.

        ``arguments`` is passed to the handler unexamined. A handler signals
        an application-level failure by raising ToolExecutionError; any
        other exception propagates to the caller.

        Raises:
            MethodNotFoundError: no tool with this name is registered.
        """
        if tool_name not in self.tools:
            raise MethodNotFoundError("Tool not found", data={"name": tool_name})

        handler = self.tools[tool_name]
        try:
            result = handler(arguments)
            if inspect.isawaitable(result):
                result = await result
        except ToolExecutionError as e:
            logger.info(f"Tool {tool_name} failed: {e.message}")
            return ToolFailure(message=e.message)

        if not isinstance(result, dict):
            raise TypeError(
                f"Tool {tool_name} returned {type(result).__name__}, expected dict"
            )
        return ToolSuccess(payload=result)
