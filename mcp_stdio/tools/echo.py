"""Reference ``echo`` tool."""
from typing import Any, Dict

from ..utils.errors import ToolExecutionError

ECHO_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "message": {"type": "string", "description": "Message to echo back"},
    },
    "required": ["message"],
}


def echo(arguments: Any) -> Dict[str, Any]:
    """Return the message prefixed with "Echo: " as MCP text content."""
    if not isinstance(arguments, dict):
        raise ToolExecutionError("Invalid arguments")

    message = arguments.get("message")
    if not isinstance(message, str):
        raise ToolExecutionError("Message is required")

    return {
        "content": [{"type": "text", "text": f"Echo: {message}"}]
    }
