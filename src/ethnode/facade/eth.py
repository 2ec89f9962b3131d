"""
Eth namespace - the eth_* procedures.

Integer block numbers, indices and storage positions are sent as
quantities. Block arguments also accept tags ("latest", "pending", ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..records.decode import (
    block_shape,
    decode_big_quantity,
    decode_bool,
    decode_logs,
    decode_quantity,
    decode_receipt,
    decode_string,
    decode_string_list,
    decode_syncing,
    decode_transaction,
    optional,
)
from ..records.models import (
    Block,
    BlockId,
    FilterParams,
    Log,
    Syncing,
    Transaction,
    TransactionParams,
    TransactionReceipt,
    block_param,
)
from ..wire.quantity import int_to_hex

if TYPE_CHECKING:
    from ..client import EthClient

_decode_optional_transaction = optional(decode_transaction)
_decode_optional_receipt = optional(decode_receipt)


class Eth:
    def __init__(self, client: "EthClient") -> None:
        self._client = client

    # ============ Node status ============

    def protocol_version(self) -> str:
        return self._client.request("eth_protocolVersion", decode_string)

    def syncing(self) -> Syncing:
        """Return sync progress; ``is_syncing`` is False when the node answered ``false``."""
        return self._client.request("eth_syncing", decode_syncing)

    def coinbase(self) -> str:
        return self._client.request("eth_coinbase", decode_string)

    def mining(self) -> bool:
        return self._client.request("eth_mining", decode_bool)

    def hashrate(self) -> int:
        """Hashes per second the node is mining with."""
        return self._client.request("eth_hashrate", decode_quantity)

    def gas_price(self) -> int:
        """Current price per gas in wei."""
        return self._client.request("eth_gasPrice", decode_big_quantity)

    def accounts(self) -> list[str]:
        return self._client.request("eth_accounts", decode_string_list)

    def block_number(self) -> int:
        return self._client.request("eth_blockNumber", decode_quantity)

    # ============ Account state ============

    def get_balance(self, address: str, block: BlockId = "latest") -> int:
        """Balance of ``address`` in wei."""
        return self._client.request(
            "eth_getBalance", decode_big_quantity, address, block_param(block)
        )

    def get_storage_at(self, address: str, position: int, block: BlockId = "latest") -> str:
        return self._client.request(
            "eth_getStorageAt", decode_string, address, int_to_hex(position), block_param(block)
        )

    def get_transaction_count(self, address: str, block: BlockId = "latest") -> int:
        """Number of transactions sent from ``address`` (its nonce)."""
        return self._client.request(
            "eth_getTransactionCount", decode_quantity, address, block_param(block)
        )

    def get_code(self, address: str, block: BlockId = "latest") -> str:
        return self._client.request("eth_getCode", decode_string, address, block_param(block))

    # ============ Block counts ============

    def get_block_transaction_count_by_hash(self, block_hash: str) -> int:
        return self._client.request("eth_getBlockTransactionCountByHash", decode_quantity, block_hash)

    def get_block_transaction_count_by_number(self, number: BlockId) -> int:
        return self._client.request(
            "eth_getBlockTransactionCountByNumber", decode_quantity, block_param(number)
        )

    def get_uncle_count_by_block_hash(self, block_hash: str) -> int:
        return self._client.request("eth_getUncleCountByBlockHash", decode_quantity, block_hash)

    def get_uncle_count_by_block_number(self, number: BlockId) -> int:
        return self._client.request(
            "eth_getUncleCountByBlockNumber", decode_quantity, block_param(number)
        )

    # ============ Transactions ============

    def sign(self, address: str, data: str) -> str:
        """
        Sign ``data`` with the node-held key of ``address``.

        The node computes sign(keccak256("\\x19Ethereum Signed Message:\\n" + len(message) + message)).
        """
        return self._client.request("eth_sign", decode_string, address, data)

    def send_transaction(self, transaction: TransactionParams) -> str:
        """Submit a transaction signed by the node; returns its hash."""
        return self._client.request("eth_sendTransaction", decode_string, transaction.to_dict())

    def send_raw_transaction(self, data: str) -> str:
        """Submit an already signed transaction; returns its hash."""
        return self._client.request("eth_sendRawTransaction", decode_string, data)

    def call(self, transaction: TransactionParams, block: BlockId = "latest") -> str:
        """Execute a message call without creating a transaction."""
        return self._client.request(
            "eth_call", decode_string, transaction.to_dict(), block_param(block)
        )

    def estimate_gas(self, transaction: TransactionParams) -> int:
        return self._client.request("eth_estimateGas", decode_quantity, transaction.to_dict())

    # ============ Blocks ============

    def get_block_by_hash(self, block_hash: str, with_transactions: bool) -> Optional[Block]:
        """
        Fetch a block by hash.

        Args:
            block_hash: 0x-prefixed block hash
            with_transactions: If True, ``transactions`` holds full Transaction
                records, otherwise transaction hashes

        Returns:
            The block, or None if the node does not know it
        """
        decoder = optional(block_shape(with_transactions))
        return self._client.request("eth_getBlockByHash", decoder, block_hash, with_transactions)

    def get_block_by_number(self, number: BlockId, with_transactions: bool) -> Optional[Block]:
        """Fetch a block by number or tag; see get_block_by_hash()."""
        decoder = optional(block_shape(with_transactions))
        return self._client.request(
            "eth_getBlockByNumber", decoder, block_param(number), with_transactions
        )

    def get_transaction_by_hash(self, tx_hash: str) -> Optional[Transaction]:
        return self._client.request("eth_getTransactionByHash", _decode_optional_transaction, tx_hash)

    def get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> Optional[Transaction]:
        return self._client.request(
            "eth_getTransactionByBlockHashAndIndex",
            _decode_optional_transaction,
            block_hash,
            int_to_hex(index),
        )

    def get_transaction_by_block_number_and_index(
        self, number: BlockId, index: int
    ) -> Optional[Transaction]:
        return self._client.request(
            "eth_getTransactionByBlockNumberAndIndex",
            _decode_optional_transaction,
            block_param(number),
            int_to_hex(index),
        )

    def get_transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        """Receipt of a mined transaction; None while it is still pending."""
        return self._client.request("eth_getTransactionReceipt", _decode_optional_receipt, tx_hash)

    def get_compilers(self) -> list[str]:
        return self._client.request("eth_getCompilers", decode_string_list)

    # ============ Filters ============

    def new_filter(self, params: FilterParams) -> str:
        """Install a log filter; returns the filter id to poll with."""
        return self._client.request("eth_newFilter", decode_string, params.to_dict())

    def new_block_filter(self) -> str:
        return self._client.request("eth_newBlockFilter", decode_string)

    def new_pending_transaction_filter(self) -> str:
        return self._client.request("eth_newPendingTransactionFilter", decode_string)

    def uninstall_filter(self, filter_id: str) -> bool:
        return self._client.request("eth_uninstallFilter", decode_bool, filter_id)

    def get_filter_changes(self, filter_id: str) -> list[Log]:
        """Logs that occurred since the last poll of a log filter."""
        return self._client.request("eth_getFilterChanges", decode_logs, filter_id)

    def get_filter_change_hashes(self, filter_id: str) -> list[str]:
        """Block or transaction hashes seen since the last poll of a block or pending filter."""
        return self._client.request("eth_getFilterChanges", decode_string_list, filter_id)

    def get_filter_logs(self, filter_id: str) -> list[Log]:
        return self._client.request("eth_getFilterLogs", decode_logs, filter_id)

    def get_logs(self, params: FilterParams) -> list[Log]:
        return self._client.request("eth_getLogs", decode_logs, params.to_dict())
