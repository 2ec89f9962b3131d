from __future__ import annotations

from typing import TYPE_CHECKING

from ..records.decode import decode_bool, decode_quantity, decode_string

if TYPE_CHECKING:
    from ..client import EthClient


class Net:
    def __init__(self, client: "EthClient") -> None:
        self._client = client

    def version(self) -> str:
        """Return the current network id."""
        return self._client.request("net_version", decode_string)

    def listening(self) -> bool:
        """Return True if the client is actively listening for network connections."""
        return self._client.request("net_listening", decode_bool)

    def peer_count(self) -> int:
        """Return the number of peers currently connected to the client."""
        return self._client.request("net_peerCount", decode_quantity)
