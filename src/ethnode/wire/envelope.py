"""JSON-RPC 2.0 request and response envelopes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import EnvelopeDecodeError, ProtocolError

JSONRPC_VERSION = "2.0"

# One request is outstanding per call, so a constant id is enough to
# correlate the reply.
REQUEST_ID = 1

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

_MISSING = object()


@dataclass(frozen=True)
class Request:
    method: str
    params: tuple[Any, ...] = ()
    id: int = REQUEST_ID
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": list(self.params),
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class RpcErrorObject:
    code: int
    message: str
    data: Any = None

    def to_exception(self) -> ProtocolError:
        return ProtocolError(self.code, self.message, self.data)


@dataclass(frozen=True)
class Response:
    id: int | None
    jsonrpc: str | None = JSONRPC_VERSION
    result: Any = None
    error: RpcErrorObject | None = field(default=None)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Any:
        """Return the raw result, or raise ProtocolError if the node reported one."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.result


def _parse_error_object(raw: Any) -> RpcErrorObject:
    if not isinstance(raw, dict):
        raise EnvelopeDecodeError(f"error must be an object, got {type(raw).__name__}")
    code = raw.get("code")
    message = raw.get("message")
    if isinstance(code, bool) or not isinstance(code, int):
        raise EnvelopeDecodeError(f"error code must be an integer, got {code!r}")
    if not isinstance(message, str):
        raise EnvelopeDecodeError(f"error message must be a string, got {message!r}")
    return RpcErrorObject(code=code, message=message, data=raw.get("data"))


def parse_response(body: bytes | str, request_id: int = REQUEST_ID) -> Response:
    """
    Parse a reply body into a Response.

    Args:
        body: Raw HTTP response body
        request_id: Id of the request this reply answers

    Returns:
        Parsed Response; a populated error wins over any result member

    Raises:
        EnvelopeDecodeError: If the body is not a well-formed response envelope
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EnvelopeDecodeError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise EnvelopeDecodeError(f"Response must be a JSON object, got {type(data).__name__}")

    response_id = data.get("id")
    if response_id is not None:
        if isinstance(response_id, bool) or not isinstance(response_id, int):
            raise EnvelopeDecodeError(f"id must be an integer or null, got {response_id!r}")
        if response_id != request_id:
            raise EnvelopeDecodeError(
                f"Response id {response_id} does not match request id {request_id}"
            )

    jsonrpc = data.get("jsonrpc")
    if jsonrpc is not None and not isinstance(jsonrpc, str):
        raise EnvelopeDecodeError(f"jsonrpc must be a string, got {jsonrpc!r}")

    raw_error = data.get("error")
    if raw_error is not None:
        return Response(id=response_id, jsonrpc=jsonrpc, error=_parse_error_object(raw_error))

    result = data.get("result", _MISSING)
    if result is _MISSING:
        raise EnvelopeDecodeError("Response must have either 'result' or 'error'")

    return Response(id=response_id, jsonrpc=jsonrpc, result=result)
