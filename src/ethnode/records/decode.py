"""
Resource decoder - raw JSON-RPC results to typed records.

Each decoder takes the undecoded ``result`` value of a reply and either
returns a typed value or raises DecodeError. Quantities go through the
quantity codec; codec failures are reported as DecodeError.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from ..errors import DecodeError
from ..wire.quantity import ParseError, QuantityOverflowError, hex_to_big_int, hex_to_int
from .models import Block, Log, Syncing, Transaction, TransactionReceipt

T = TypeVar("T")

Decoder = Callable[[Any], T]


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def decode_string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise DecodeError(f"expected a string, got {type(raw).__name__}")
    return raw


def decode_bool(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise DecodeError(f"expected a boolean, got {type(raw).__name__}")
    return raw


def _quantity(raw: Any, parse: Callable[[str], int], what: str) -> int:
    if not isinstance(raw, str):
        raise DecodeError(f"{what}: expected a hex string, got {type(raw).__name__}")
    try:
        return parse(raw)
    except (ParseError, QuantityOverflowError) as exc:
        raise DecodeError(f"{what}: {exc}") from exc


def decode_quantity(raw: Any) -> int:
    """Decode a count-sized quantity (block numbers, nonces, gas)."""
    return _quantity(raw, hex_to_int, "quantity")


def decode_big_quantity(raw: Any) -> int:
    """Decode an unbounded quantity (balances, gas price, difficulty)."""
    return _quantity(raw, hex_to_big_int, "quantity")


def decode_list(item: Decoder[T]) -> Decoder[list[T]]:
    """Build a decoder for a JSON array; null decodes to an empty list."""

    def decode(raw: Any) -> list[T]:
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise DecodeError(f"expected an array, got {type(raw).__name__}")
        return [item(element) for element in raw]

    return decode


def optional(decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """Wrap a decoder so a null result decodes to None."""

    def decode(raw: Any) -> Optional[T]:
        if raw is None:
            return None
        return decoder(raw)

    return decode


decode_string_list = decode_list(decode_string)


# ---------------------------------------------------------------------------
# Record fields
# ---------------------------------------------------------------------------


def _object(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"{what}: expected an object, got {type(raw).__name__}")
    return raw


class _Fields:
    """Typed accessors over one wire object; absent members take defaults."""

    def __init__(self, raw: Any, what: str) -> None:
        self._data = _object(raw, what)
        self._what = what

    def _name(self, key: str) -> str:
        return f"{self._what}.{key}"

    def string(self, key: str, default: Optional[str] = "") -> Optional[str]:
        value = self._data.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise DecodeError(f"{self._name(key)}: expected a string, got {type(value).__name__}")
        return value

    def boolean(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise DecodeError(f"{self._name(key)}: expected a boolean, got {type(value).__name__}")
        return value

    def quantity(self, key: str, default: Optional[int] = 0) -> Optional[int]:
        value = self._data.get(key)
        if value is None:
            return default
        return _quantity(value, hex_to_int, self._name(key))

    def big_quantity(self, key: str, default: Optional[int] = 0) -> Optional[int]:
        value = self._data.get(key)
        if value is None:
            return default
        return _quantity(value, hex_to_big_int, self._name(key))

    def strings(self, key: str) -> list[str]:
        value = self._data.get(key)
        try:
            return decode_string_list(value)
        except DecodeError as exc:
            raise DecodeError(f"{self._name(key)}: {exc}") from exc

    def raw(self, key: str) -> Any:
        return self._data.get(key)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def decode_transaction(raw: Any) -> Transaction:
    f = _Fields(raw, "transaction")
    tx_hash = f.string("hash", None)
    if tx_hash is None:
        raise DecodeError("transaction.hash: missing")
    return Transaction(
        hash=tx_hash,
        nonce=f.quantity("nonce"),
        block_hash=f.string("blockHash", None),
        block_number=f.quantity("blockNumber", None),
        transaction_index=f.quantity("transactionIndex", None),
        from_address=f.string("from"),
        to_address=f.string("to", None),
        value=f.big_quantity("value"),
        gas=f.quantity("gas"),
        gas_price=f.big_quantity("gasPrice"),
        input=f.string("input"),
    )


def decode_log(raw: Any) -> Log:
    f = _Fields(raw, "log")
    return Log(
        removed=f.boolean("removed"),
        log_index=f.quantity("logIndex"),
        transaction_index=f.quantity("transactionIndex"),
        transaction_hash=f.string("transactionHash"),
        block_number=f.quantity("blockNumber"),
        block_hash=f.string("blockHash"),
        address=f.string("address"),
        data=f.string("data"),
        topics=f.strings("topics"),
    )


decode_logs = decode_list(decode_log)


def decode_receipt(raw: Any) -> TransactionReceipt:
    f = _Fields(raw, "receipt")
    return TransactionReceipt(
        transaction_hash=f.string("transactionHash"),
        transaction_index=f.quantity("transactionIndex"),
        block_hash=f.string("blockHash"),
        block_number=f.quantity("blockNumber"),
        cumulative_gas_used=f.quantity("cumulativeGasUsed"),
        gas_used=f.quantity("gasUsed"),
        contract_address=f.string("contractAddress", None),
        logs=decode_logs(f.raw("logs")),
        logs_bloom=f.string("logsBloom"),
        root=f.string("root"),
        status=f.string("status"),
    )


def decode_syncing(raw: Any) -> Syncing:
    """
    eth_syncing answers either ``false`` or a progress object.

    The two forms stay distinct: ``false`` yields a record with
    ``is_syncing=False`` and no progress fields at all.
    """
    if raw is False:
        return Syncing.not_syncing()
    if isinstance(raw, bool):
        raise DecodeError("syncing: expected false or an object, got true")
    f = _Fields(raw, "syncing")
    return Syncing(
        is_syncing=True,
        starting_block=f.quantity("startingBlock"),
        current_block=f.quantity("currentBlock"),
        highest_block=f.quantity("highestBlock"),
    )


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class BlockShape:
    """Wire shape of a block, fixed before the request is sent."""

    full_transactions: bool = False

    def decode_element(self, raw: Any) -> Any:
        raise NotImplementedError

    def __call__(self, raw: Any) -> Block:
        f = _Fields(raw, "block")
        elements = f.raw("transactions")
        if elements is None:
            elements = []
        if not isinstance(elements, list):
            raise DecodeError(f"block.transactions: expected an array, got {type(elements).__name__}")
        transactions = [self.decode_element(element) for element in elements]

        return Block(
            number=f.quantity("number", None),
            hash=f.string("hash", None),
            parent_hash=f.string("parentHash"),
            nonce=f.string("nonce", None),
            sha3_uncles=f.string("sha3Uncles"),
            logs_bloom=f.string("logsBloom", None),
            transactions_root=f.string("transactionsRoot"),
            state_root=f.string("stateRoot"),
            miner=f.string("miner"),
            difficulty=f.big_quantity("difficulty"),
            total_difficulty=f.big_quantity("totalDifficulty"),
            extra_data=f.string("extraData"),
            size=f.quantity("size"),
            gas_limit=f.quantity("gasLimit"),
            gas_used=f.quantity("gasUsed"),
            timestamp=f.quantity("timestamp"),
            uncles=f.strings("uncles"),
            transactions=transactions,
            full_transactions=self.full_transactions,
        )


class HashesBlockShape(BlockShape):
    full_transactions = False

    def decode_element(self, raw: Any) -> str:
        if not isinstance(raw, str):
            raise DecodeError(
                f"block.transactions: expected transaction hashes, got {type(raw).__name__}"
            )
        return raw


class FullBlockShape(BlockShape):
    full_transactions = True

    def decode_element(self, raw: Any) -> Transaction:
        if not isinstance(raw, dict):
            raise DecodeError(
                f"block.transactions: expected transaction objects, got {type(raw).__name__}"
            )
        return decode_transaction(raw)


def block_shape(with_transactions: bool) -> BlockShape:
    if with_transactions:
        return FullBlockShape()
    return HashesBlockShape()
