"""
Failure taxonomy for ethnode.

Every failure surfaces to the caller as one of these exceptions. None of
them is retried or recovered from inside the client.
"""

from __future__ import annotations

from typing import Any


class EthRpcError(RuntimeError):
    exit_code: int = 1


class TransportError(EthRpcError):
    """The request could not be sent or the reply could not be received."""

    exit_code = 2


class EnvelopeDecodeError(EthRpcError):
    """The reply body is not a well-formed JSON-RPC response envelope."""

    exit_code = 3


class ProtocolError(EthRpcError):
    """The node answered with an error object."""

    exit_code = 4

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        return f"Error {self.code} ({self.message})"


class DecodeError(EthRpcError):
    """The result payload does not have the shape the method expects."""

    exit_code = 5
