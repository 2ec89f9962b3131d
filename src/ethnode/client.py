"""
EthClient - dispatches one JSON-RPC call per method invocation.

Each call is a single synchronous POST: build the request envelope, send
it through the injected HTTP poster, then classify the reply as a
transport failure, a malformed envelope, a node-reported error, or a raw
result for the caller to decode. Nothing is retried.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Optional, TypeVar

import httpx

from .config import get_rpc_url
from .errors import TransportError
from .facade.eth import Eth
from .facade.net import Net
from .facade.web3 import Web3
from .records.decode import Decoder
from .wire.envelope import Request, parse_response
from .wire.transport import (
    CONTENT_TYPE,
    HttpPoster,
    LineLogger,
    LoggingLineLogger,
    default_http_client,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_HEADERS = {"Content-Type": CONTENT_TYPE}


class EthClient:
    """
    Ethereum JSON-RPC client.

    Usage:
        with EthClient("http://127.0.0.1:8545") as client:
            height = client.eth.block_number()
            balance = client.eth.get_balance("0x...", "latest")

    Configuration is fixed at construction. One instance may be shared by
    concurrent callers as long as the HTTP poster is safe to share.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        http_client: Optional[HttpPoster] = None,
        logger: Optional[LineLogger] = None,
        debug: bool = False,
    ) -> None:
        """
        Args:
            endpoint: JSON-RPC URL. If None, uses ETH_RPC_URL or the default.
            http_client: Anything with an httpx-style ``post``. If None, the
                client creates an ``httpx.Client`` and closes it in close().
            logger: Receives the request/response trace when debug is on.
            debug: Write every outbound and inbound body to ``logger``.
        """
        self._endpoint = endpoint or get_rpc_url()
        self._owns_http_client = http_client is None
        self._http_client: HttpPoster = http_client or default_http_client()
        self._log: LineLogger = logger or LoggingLineLogger()
        self._debug = debug

        self._web3 = Web3(self)
        self._net = Net(self)
        self._eth = Eth(self)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def web3(self) -> Web3:
        return self._web3

    @property
    def net(self) -> Net:
        return self._net

    @property
    def eth(self) -> Eth:
        return self._eth

    def close(self) -> None:
        if self._owns_http_client and isinstance(self._http_client, httpx.Client):
            self._http_client.close()

    def __enter__(self) -> "EthClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def call(self, method: str, *params: Any) -> Any:
        """
        Make a JSON-RPC call and return the raw result.

        Args:
            method: RPC method name (e.g., "eth_blockNumber")
            params: Positional parameters, passed through as given

        Returns:
            The undecoded ``result`` member of the reply

        Raises:
            TransportError: If sending or receiving fails
            EnvelopeDecodeError: If the reply is not a response envelope
            ProtocolError: If the node reports an error
        """
        request = Request(method=method, params=params)
        body = request.to_json()

        logger.debug("RPC call: method=%s", method)
        try:
            response = self._http_client.post(self._endpoint, content=body, headers=_HEADERS)
            data = response.content
        except (httpx.HTTPError, OSError) as exc:
            logger.warning("RPC transport failure: method=%s, endpoint=%s: %s", method, self._endpoint, exc)
            if self._debug:
                self._trace(method, body, f"<transport error: {exc}>")
            raise TransportError(f"{method}: {exc}") from exc

        if self._debug:
            self._trace(method, body, data.decode("utf-8", errors="replace"))

        return parse_response(data, request_id=request.id).unwrap()

    def raw_call(self, method: str, *params: Any) -> Any:
        """Deprecated alias of call()."""
        warnings.warn("raw_call() is deprecated, use call()", DeprecationWarning, stacklevel=2)
        return self.call(method, *params)

    def request(self, method: str, decoder: Decoder[T], *params: Any) -> T:
        """Call ``method`` and decode its result with ``decoder``."""
        return decoder(self.call(method, *params))

    def _trace(self, method: str, request: bytes, response: str) -> None:
        self._log.write_line(
            f"{method}\nRequest: {request.decode('utf-8')}\nResponse: {response}\n"
        )
