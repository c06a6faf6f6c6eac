"""Minimal MCP server speaking JSON-RPC 2.0 over stdio."""

__version__ = "1.0.0"
