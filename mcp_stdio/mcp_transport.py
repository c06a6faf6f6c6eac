"""MCP stdio transport: newline-delimited JSON-RPC over stdin/stdout."""
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import BinaryIO, Optional, TextIO, Union

from pydantic import ValidationError

from .jsonrpc.handler import JSONRPCHandler
from .jsonrpc.models import JSONRPCRequest, JSONRPCResponse
from .mcp_handler import MCPRegistry

logger = logging.getLogger(__name__)


@dataclass
class TransportStats:
    """Counters for one serving session."""
    lines_read: int = 0
    responses_written: int = 0
    lines_dropped: int = 0


class StdioTransport:
    """Serves one client over an input stream and a text output stream.

    The input is read as bytes by default (``sys.stdin.buffer``) and decoded
    one line at a time, so a line with invalid UTF-8 is dropped without
    losing the lines around it. Text input streams are accepted too.

    Requests are handled strictly in order: a line is parsed, dispatched and
    its response written and flushed before the next line is read.
    """

    def __init__(
        self,
        jsonrpc_handler: JSONRPCHandler,
        registry: MCPRegistry,
        instream: Optional[Union[BinaryIO, TextIO]] = None,
        outstream: Optional[TextIO] = None,
    ):
        self.jsonrpc_handler = jsonrpc_handler
        self.registry = registry
        if instream is None:
            instream = getattr(sys.stdin, "buffer", sys.stdin)
        self.instream = instream
        self.outstream = outstream if outstream is not None else sys.stdout
        self.stats = TransportStats()

    def _read_line(self) -> Optional[Union[bytes, str]]:
        """Next raw input line, or None at end-of-input or on a read failure."""
        try:
            line = self.instream.readline()
        except (OSError, ValueError) as e:
            # a text stream decodes whole chunks, so its decode errors are fatal too
            logger.error(f"Failed to read from input stream: {e}")
            return None
        return line or None

    def decode_line(self, line: Union[bytes, str]) -> Optional[str]:
        """Decode one raw line as UTF-8; undecodable lines are logged and yield None."""
        if isinstance(line, str):
            return line
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Dropping undecodable input line: {e}")
            return None

    def parse_line(self, line: str) -> Optional[JSONRPCRequest]:
        """Parse one input line; malformed lines are logged and yield None."""
        try:
            return JSONRPCRequest.model_validate_json(line)
        except ValidationError as e:
            logger.warning(f"Dropping malformed request line: {e.errors(include_url=False)}")
            return None

    def write_response(self, response: JSONRPCResponse) -> bool:
        """Write one response line and flush.

        Returns False if the response could not be serialized; nothing is
        written in that case. Write errors propagate.
        """
        try:
            data = response.to_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize response for id={response.id!r}: {e}")
            return False

        self.outstream.write(data + "\n")
        self.outstream.flush()
        return True

    async def handle_line(self, raw: Union[bytes, str]) -> None:
        line = self.decode_line(raw)
        if line is None:
            self.stats.lines_dropped += 1
            return
        if not line.strip():
            return

        request = self.parse_line(line)
        if request is None:
            self.stats.lines_dropped += 1
            return

        response = await self.jsonrpc_handler.handle_request(request)
        if self.write_response(response):
            self.stats.responses_written += 1
        else:
            self.stats.lines_dropped += 1

    async def serve(self) -> TransportStats:
        """Serve until end-of-input, a read failure or a write failure."""
        self.registry.freeze()
        logger.info("MCP stdio transport started")

        while True:
            line = self._read_line()
            if line is None:
                break
            self.stats.lines_read += 1
            try:
                await self.handle_line(line)
            except OSError as e:
                logger.error(f"Failed to write to output stream: {e}")
                break

        logger.info(
            f"MCP stdio transport stopped: {self.stats.lines_read} lines read, "
            f"{self.stats.responses_written} responses written, "
            f"{self.stats.lines_dropped} dropped"
        )
        return self.stats

    def run(self) -> TransportStats:
        return asyncio.run(self.serve())
