"""Resolve resource URIs to text content, keyed by URI scheme."""
import inspect
import logging
from typing import Any, Callable, Dict, Tuple

from .utils.errors import InvalidParamsError
from .utils.validation import match_uri_scheme

logger = logging.getLogger(__name__)

ReaderFunction = Callable[[str], Any]


def read_file_placeholder(uri: str) -> str:
    return f"Content of {uri}"


def read_https_placeholder(uri: str) -> str:
    return f"Web content of {uri}"


class ResourceReader:
    """Scheme prefix (e.g. ``"file://"``) to content-resolution function.

    The registered prefixes are the URI allow-list: a URI that starts with
    none of them is rejected before any reader runs. Readers may be plain
    functions or coroutines and must return a string. A reader that cannot
    resolve a URI raises an MCPError subclass, which the dispatcher turns
    into an error response.
    """

    def __init__(self):
        self.readers: Dict[str, ReaderFunction] = {}

    @classmethod
    def with_defaults(cls) -> "ResourceReader":
        """Reader with placeholder resolvers for ``file://`` and ``https://``."""
        reader = cls()
        reader.register_scheme("file://", read_file_placeholder)
        reader.register_scheme("https://", read_https_placeholder)
        return reader

    def register_scheme(self, prefix: str, reader: ReaderFunction) -> None:
        if not prefix.endswith("://"):
            raise ValueError(f"Scheme prefix must end with '://': {prefix!r}")
        self.readers[prefix] = reader
        logger.debug(f"Registered resource reader for {prefix}")

    @property
    def allowed_schemes(self) -> Tuple[str, ...]:
        return tuple(self.readers)

    async def read(self, uri: str) -> str:
        """Resolve ``uri`` with the reader registered for its scheme.

        Raises:
            InvalidParamsError: the URI scheme is not in the allow-list.
        """
        prefix = match_uri_scheme(uri, self.allowed_schemes)
        if prefix is None:
            raise InvalidParamsError("Invalid URI scheme", data={"uri": uri})

        content = self.readers[prefix](uri)
        if inspect.isawaitable(content):
            content = await content
        return content
