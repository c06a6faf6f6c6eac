"""JSON-RPC 2.0 request/response models."""
import json
from typing import Any, Dict, Optional, Union, Literal

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, model_validator

JSONRPC_VERSION = "2.0"

RequestId = Optional[Union[StrictInt, StrictFloat, StrictStr]]


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request model.

    ``jsonrpc`` is accepted as any value so that a wrong version still
    parses and can be answered with INVALID_REQUEST; the dispatcher owns
    that check.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Optional[Any] = None
    method: StrictStr
    params: Optional[Any] = None
    id: RequestId = None


class JSONRPCError(BaseModel):
    """JSON-RPC 2.0 error model."""

    code: StrictInt
    message: str
    data: Optional[Any] = None


class JSONRPCResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    Exactly one of ``result`` and ``error`` is set.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    result: Optional[Any] = None
    error: Optional[JSONRPCError] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "JSONRPCResponse":
        if self.result is not None and self.error is not None:
            raise ValueError("response cannot carry both result and error")
        if self.result is None and self.error is None:
            raise ValueError("response must carry either result or error")
        return self

    @classmethod
    def success(cls, id: Any, result: Any) -> "JSONRPCResponse":
        return cls(id=id, result=result)

    @classmethod
    def failure(
        cls, id: Any, code: int, message: str, data: Optional[Any] = None
    ) -> "JSONRPCResponse":
        return cls(id=id, error=JSONRPCError(code=code, message=message, data=data))

    def to_wire(self) -> Dict[str, Any]:
        """Return the message as it goes on the wire.

        ``id`` is always present, even when null, and only the populated
        outcome branch is emitted.
        """
        message: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            message["error"] = self.error.model_dump(exclude_none=True)
        else:
            message["result"] = self.result
        return message

    def to_json(self) -> str:
        """Serialize to a single line of compact JSON."""
        return json.dumps(self.to_wire(), separators=(",", ":"), allow_nan=False)


class ErrorCode:
    """JSON-RPC 2.0 standard error codes used by the server."""

    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
