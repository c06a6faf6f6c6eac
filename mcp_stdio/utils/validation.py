"""Input validation utilities."""
import re
from typing import Optional, Tuple

VALID_TOOL_NAME = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.\-/]*$")

ALLOWED_URI_SCHEMES: Tuple[str, ...] = ("file://", "https://")


def validate_tool_name(name: str) -> bool:
    """Validate tool name against MCP naming rules."""
    return isinstance(name, str) and bool(VALID_TOOL_NAME.match(name))


def validate_uri(uri: str) -> bool:
    """Check that a resource URI is a non-empty string."""
    return isinstance(uri, str) and bool(uri.strip())


def match_uri_scheme(uri: str, allowed: Tuple[str, ...] = ALLOWED_URI_SCHEMES) -> Optional[str]:
    """Return the allowed scheme prefix the URI starts with, or None.

    Matching is a literal prefix comparison, so "FILE://x" and "file:/x"
    are both rejected.
    """
    for prefix in allowed:
        if uri.startswith(prefix):
            return prefix
    return None
