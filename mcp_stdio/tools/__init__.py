"""Built-in MCP tools."""
from .echo import ECHO_INPUT_SCHEMA, echo

__all__ = ["ECHO_INPUT_SCHEMA", "echo"]
