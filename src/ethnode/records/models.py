from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..wire.quantity import big_to_hex, int_to_hex

BlockId = Union[int, str]


def block_param(block: BlockId) -> str:
    """Integers become quantities; tags such as "latest" pass through."""
    if isinstance(block, int) and not isinstance(block, bool):
        return int_to_hex(block)
    return block


@dataclass(frozen=True)
class Syncing:
    is_syncing: bool
    starting_block: Optional[int] = None
    current_block: Optional[int] = None
    highest_block: Optional[int] = None

    @classmethod
    def not_syncing(cls) -> "Syncing":
        return cls(is_syncing=False)


@dataclass(frozen=True)
class Transaction:
    hash: str
    nonce: int = 0
    block_hash: Optional[str] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None
    from_address: str = ""
    to_address: Optional[str] = None
    value: int = 0
    gas: int = 0
    gas_price: int = 0
    input: str = ""

    @property
    def pending(self) -> bool:
        return self.block_number is None


@dataclass(frozen=True)
class Log:
    removed: bool = False
    log_index: int = 0
    transaction_index: int = 0
    transaction_hash: str = ""
    block_number: int = 0
    block_hash: str = ""
    address: str = ""
    data: str = ""
    topics: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: str
    transaction_index: int = 0
    block_hash: str = ""
    block_number: int = 0
    cumulative_gas_used: int = 0
    gas_used: int = 0
    contract_address: Optional[str] = None
    logs: list[Log] = field(default_factory=list)
    logs_bloom: str = ""
    root: str = ""
    status: str = ""

    @property
    def succeeded(self) -> bool:
        # Pre-Byzantium receipts carry a state root instead of a status
        return self.status == "0x1"


@dataclass(frozen=True)
class Block:
    """
    A block as returned by eth_getBlockBy{Hash,Number}.

    ``transactions`` holds either hash strings or Transaction records,
    never a mix; ``full_transactions`` says which.
    """

    number: Optional[int]
    hash: Optional[str]
    parent_hash: str = ""
    nonce: Optional[str] = None
    sha3_uncles: str = ""
    logs_bloom: Optional[str] = None
    transactions_root: str = ""
    state_root: str = ""
    miner: str = ""
    difficulty: int = 0
    total_difficulty: int = 0
    extra_data: str = ""
    size: int = 0
    gas_limit: int = 0
    gas_used: int = 0
    timestamp: int = 0
    uncles: list[str] = field(default_factory=list)
    transactions: list[Any] = field(default_factory=list)
    full_transactions: bool = False

    def transaction_hashes(self) -> list[str]:
        if self.full_transactions:
            return [tx.hash for tx in self.transactions]
        return list(self.transactions)


@dataclass(frozen=True)
class TransactionParams:
    """Transaction object sent with eth_sendTransaction, eth_call and eth_estimateGas."""

    from_address: str
    to_address: str = ""
    gas: int = 0
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: str = ""
    nonce: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        params: dict[str, Any] = {"from": self.from_address}
        if self.to_address:
            params["to"] = self.to_address
        if self.gas > 0:
            params["gas"] = int_to_hex(self.gas)
        if self.gas_price is not None:
            params["gasPrice"] = big_to_hex(self.gas_price)
        if self.value is not None:
            params["value"] = big_to_hex(self.value)
        if self.data:
            params["data"] = self.data
        if self.nonce is not None:
            params["nonce"] = int_to_hex(self.nonce)
        return params


@dataclass(frozen=True)
class FilterParams:
    """Log filter query; has no identity until installed with eth_newFilter."""

    from_block: Optional[BlockId] = None
    to_block: Optional[BlockId] = None
    address: list[str] = field(default_factory=list)
    topics: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.from_block is not None:
            params["fromBlock"] = block_param(self.from_block)
        if self.to_block is not None:
            params["toBlock"] = block_param(self.to_block)
        if self.address:
            params["address"] = list(self.address)
        if self.topics:
            params["topics"] = list(self.topics)
        return params
