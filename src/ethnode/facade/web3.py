from __future__ import annotations

from typing import TYPE_CHECKING

from ..records.decode import decode_string

if TYPE_CHECKING:
    from ..client import EthClient


class Web3:
    def __init__(self, client: "EthClient") -> None:
        self._client = client

    def client_version(self) -> str:
        """Return the current client version."""
        return self._client.request("web3_clientVersion", decode_string)

    def sha3(self, data: bytes) -> str:
        """Return Keccak-256 (not the standardized SHA3-256) of ``data``, computed by the node."""
        return self._client.request("web3_sha3", decode_string, "0x" + data.hex())
