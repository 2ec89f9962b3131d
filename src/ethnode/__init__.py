"""
ethnode - a client for the Ethereum node JSON-RPC interface.

Sends one JSON-RPC 2.0 request per call over HTTP and decodes the reply
into typed records.
"""

__all__ = [
    # Client
    "EthClient",
    "ClientConfig",
    # Capabilities
    "HttpPoster",
    "LineLogger",
    "LoggingLineLogger",
    # Errors
    "EthRpcError",
    "TransportError",
    "EnvelopeDecodeError",
    "ProtocolError",
    "DecodeError",
    "ParseError",
    "QuantityOverflowError",
    # Quantity codec
    "hex_to_int",
    "hex_to_big_int",
    "int_to_hex",
    "big_to_hex",
    # Records
    "Block",
    "FilterParams",
    "Log",
    "Syncing",
    "Transaction",
    "TransactionParams",
    "TransactionReceipt",
    # Units
    "ETH1",
    "eth1",
]

from .client import EthClient
from .config import ClientConfig
from .errors import DecodeError, EnvelopeDecodeError, EthRpcError, ProtocolError, TransportError
from .records.models import (
    Block,
    FilterParams,
    Log,
    Syncing,
    Transaction,
    TransactionParams,
    TransactionReceipt,
)
from .utils import ETH1, eth1
from .wire.quantity import (
    ParseError,
    QuantityOverflowError,
    big_to_hex,
    hex_to_big_int,
    hex_to_int,
    int_to_hex,
)
from .wire.transport import HttpPoster, LineLogger, LoggingLineLogger
