"""Tests for the web3/net/eth method catalogue."""

from __future__ import annotations

import pytest

from ethnode.errors import DecodeError, ProtocolError
from ethnode.records.models import FilterParams, TransactionParams
from ethnode.utils import ETH1, eth1

TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32
ADDRESS = "0x407d73d8a49eeb85d32cf465507dd71d507100c1"

TRANSACTION = {
    "hash": TX_HASH,
    "nonce": "0x0",
    "blockHash": BLOCK_HASH,
    "blockNumber": "0x1",
    "transactionIndex": "0x0",
    "from": ADDRESS,
    "to": ADDRESS,
    "value": "0xde0b6b3a7640000",
    "gas": "0x5208",
    "gasPrice": "0x3b9aca00",
    "input": "0x",
}


def _block(transactions: list) -> dict:
    return {
        "number": "0x1",
        "hash": BLOCK_HASH,
        "parentHash": "0x" + "00" * 32,
        "miner": ADDRESS,
        "difficulty": "0x0",
        "totalDifficulty": "0x0",
        "gasLimit": "0x1c9c380",
        "gasUsed": "0x5208",
        "timestamp": "0x6553f100",
        "uncles": [],
        "transactions": transactions,
    }


class TestWeb3AndNet:
    """Tests for the web3 and net namespaces."""

    def test_client_version(self, result_client) -> None:
        client, poster = result_client("Geth/v1.13.5-stable/linux-amd64/go1.21.4")
        assert client.web3.client_version().startswith("Geth/")
        assert poster.last["json"]["method"] == "web3_clientVersion"
        assert poster.last["json"]["params"] == []

    def test_sha3_hex_encodes_data(self, result_client) -> None:
        digest = "0x47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad"
        client, poster = result_client(digest)
        assert client.web3.sha3(b"hello world") == digest
        assert poster.last["json"]["params"] == ["0x68656c6c6f20776f726c64"]

    def test_net_version(self, result_client) -> None:
        client, _ = result_client("1")
        assert client.net.version() == "1"

    def test_net_listening(self, result_client) -> None:
        client, _ = result_client(True)
        assert client.net.listening() is True

    def test_peer_count(self, result_client) -> None:
        client, _ = result_client("0x19")
        assert client.net.peer_count() == 25


class TestEthScalars:
    """Tests for eth methods returning scalars."""

    def test_get_balance(self, make_client) -> None:
        client, poster = make_client('{"id":1,"jsonrpc":"2.0","result":"0x1bc16d674ec80000"}')
        assert client.eth.get_balance(ADDRESS, "latest") == 2000000000000000000
        assert poster.last["json"]["params"] == [ADDRESS, "latest"]

    def test_get_balance_at_height(self, result_client) -> None:
        client, poster = result_client("0x0")
        assert client.eth.get_balance(ADDRESS, 100) == 0
        assert poster.last["json"]["params"] == [ADDRESS, "0x64"]

    def test_gas_price_big(self, result_client) -> None:
        client, _ = result_client("0x" + "f" * 20)
        assert client.eth.gas_price() == 16**20 - 1

    def test_block_number(self, result_client) -> None:
        client, poster = result_client("0x4b7")
        assert client.eth.block_number() == 1207
        assert poster.last["json"]["method"] == "eth_blockNumber"

    def test_block_number_non_string(self, result_client) -> None:
        client, _ = result_client(1207)
        with pytest.raises(DecodeError):
            client.eth.block_number()

    def test_transaction_count(self, result_client) -> None:
        client, poster = result_client("0x1")
        assert client.eth.get_transaction_count(ADDRESS, "pending") == 1
        assert poster.last["json"]["params"] == [ADDRESS, "pending"]

    def test_storage_position_encoded(self, result_client) -> None:
        client, poster = result_client("0x" + "00" * 31 + "01")
        client.eth.get_storage_at(ADDRESS, 10, "latest")
        assert poster.last["json"]["params"] == [ADDRESS, "0xa", "latest"]

    @pytest.mark.parametrize(
        "call, method, params",
        [
            (lambda eth: eth.get_block_transaction_count_by_hash(BLOCK_HASH), "eth_getBlockTransactionCountByHash", [BLOCK_HASH]),
            (lambda eth: eth.get_block_transaction_count_by_number(232), "eth_getBlockTransactionCountByNumber", ["0xe8"]),
            (lambda eth: eth.get_uncle_count_by_block_hash(BLOCK_HASH), "eth_getUncleCountByBlockHash", [BLOCK_HASH]),
            (lambda eth: eth.get_uncle_count_by_block_number(0), "eth_getUncleCountByBlockNumber", ["0x0"]),
            (lambda eth: eth.hashrate(), "eth_hashrate", []),
        ],
    )
    def test_counts(self, result_client, call, method: str, params: list) -> None:
        client, poster = result_client("0x2")
        assert call(client.eth) == 2
        assert poster.last["json"]["method"] == method
        assert poster.last["json"]["params"] == params

    def test_strings(self, result_client) -> None:
        client, poster = result_client("63", ADDRESS, "0x600160008035811a818181146012578301005b601b6001356025565b8060005260206000f25b600060078202905091905056")
        assert client.eth.protocol_version() == "63"
        assert client.eth.coinbase() == ADDRESS
        assert client.eth.get_code(ADDRESS, 2).startswith("0x6001")
        assert poster.last["json"]["params"] == [ADDRESS, "0x2"]

    def test_mining(self, result_client) -> None:
        client, _ = result_client(False)
        assert client.eth.mining() is False


class TestEthLists:
    """List-returning methods."""

    def test_accounts_empty(self, make_client) -> None:
        client, _ = make_client({"result": []})
        assert client.eth.accounts() == []

    def test_accounts(self, result_client) -> None:
        client, _ = result_client([ADDRESS])
        assert client.eth.accounts() == [ADDRESS]

    def test_compilers_null(self, result_client) -> None:
        client, _ = result_client(None)
        assert client.eth.get_compilers() == []


class TestSyncing:
    def test_not_syncing(self, result_client) -> None:
        client, _ = result_client(False)
        status = client.eth.syncing()
        assert status.is_syncing is False

    def test_in_progress(self, result_client) -> None:
        client, _ = result_client({"startingBlock": "0x0", "currentBlock": "0x10", "highestBlock": "0x20"})
        status = client.eth.syncing()
        assert status.is_syncing is True
        assert (status.starting_block, status.current_block, status.highest_block) == (0, 16, 32)


class TestTransactions:
    """Transaction submission and lookup."""

    def test_send_transaction(self, result_client) -> None:
        client, poster = result_client(TX_HASH)
        params = TransactionParams(
            from_address=ADDRESS,
            to_address="0xd46e8dd67c5d32be8058bb8eb970870f07244567",
            gas=30400,
            gas_price=10000000000000,
            value=2441406250,
            data="0xd46e8dd6",
        )
        assert client.eth.send_transaction(params) == TX_HASH
        assert poster.last["json"]["params"] == [
            {
                "from": ADDRESS,
                "to": "0xd46e8dd67c5d32be8058bb8eb970870f07244567",
                "gas": "0x76c0",
                "gasPrice": "0x9184e72a000",
                "value": "0x9184e72a",
                "data": "0xd46e8dd6",
            }
        ]

    def test_params_omit_unset(self) -> None:
        assert TransactionParams(from_address=ADDRESS).to_dict() == {"from": ADDRESS}

    def test_params_zero_value_kept(self) -> None:
        params = TransactionParams(from_address=ADDRESS, value=0, nonce=3)
        assert params.to_dict() == {"from": ADDRESS, "value": "0x0", "nonce": "0x3"}

    def test_params_first_nonce_kept(self) -> None:
        params = TransactionParams(from_address=ADDRESS, nonce=0)
        assert params.to_dict() == {"from": ADDRESS, "nonce": "0x0"}

    def test_call(self, result_client) -> None:
        client, poster = result_client("0x")
        client.eth.call(TransactionParams(from_address=ADDRESS, to_address=ADDRESS), "latest")
        assert poster.last["json"]["method"] == "eth_call"
        assert poster.last["json"]["params"] == [{"from": ADDRESS, "to": ADDRESS}, "latest"]

    def test_estimate_gas(self, result_client) -> None:
        client, _ = result_client("0x5208")
        assert client.eth.estimate_gas(TransactionParams(from_address=ADDRESS)) == 21000

    def test_send_raw_and_sign(self, result_client) -> None:
        client, poster = result_client(TX_HASH, "0x" + "11" * 65)
        assert client.eth.send_raw_transaction("0xf86c") == TX_HASH
        assert client.eth.sign(ADDRESS, "0xdeadbeaf") == "0x" + "11" * 65
        assert poster.last["json"]["params"] == [ADDRESS, "0xdeadbeaf"]

    def test_get_transaction_by_hash(self, result_client) -> None:
        client, _ = result_client(TRANSACTION)
        tx = client.eth.get_transaction_by_hash(TX_HASH)
        assert tx is not None
        assert tx.value == ETH1
        assert tx.gas == 21000

    def test_unknown_transaction(self, result_client) -> None:
        client, _ = result_client(None)
        assert client.eth.get_transaction_by_hash(TX_HASH) is None

    def test_by_index_params(self, result_client) -> None:
        client, poster = result_client(TRANSACTION, TRANSACTION)
        client.eth.get_transaction_by_block_hash_and_index(BLOCK_HASH, 0)
        assert poster.last["json"]["params"] == [BLOCK_HASH, "0x0"]
        client.eth.get_transaction_by_block_number_and_index(668, 1)
        assert poster.last["json"]["params"] == ["0x29c", "0x1"]

    def test_receipt_pending(self, result_client) -> None:
        client, _ = result_client(None)
        assert client.eth.get_transaction_receipt(TX_HASH) is None

    def test_receipt(self, result_client) -> None:
        client, _ = result_client({"transactionHash": TX_HASH, "gasUsed": "0x5208", "status": "0x1", "logs": []})
        receipt = client.eth.get_transaction_receipt(TX_HASH)
        assert receipt is not None
        assert receipt.gas_used == 21000
        assert receipt.succeeded


class TestBlocks:
    """Blocks keep the shape requested by with_transactions."""

    def test_by_hash_hashes(self, result_client) -> None:
        client, poster = result_client(_block([TX_HASH]))
        block = client.eth.get_block_by_hash(BLOCK_HASH, False)
        assert block is not None
        assert block.full_transactions is False
        assert block.transactions == [TX_HASH]
        assert poster.last["json"]["params"] == [BLOCK_HASH, False]

    def test_by_hash_full(self, result_client) -> None:
        client, poster = result_client(_block([TRANSACTION]))
        block = client.eth.get_block_by_hash(BLOCK_HASH, True)
        assert block is not None
        assert block.full_transactions is True
        assert block.transactions[0].hash == TX_HASH
        assert poster.last["json"]["params"] == [BLOCK_HASH, True]

    def test_wrong_shape(self, result_client) -> None:
        client, _ = result_client(_block([TX_HASH]), _block([TRANSACTION]))
        with pytest.raises(DecodeError):
            client.eth.get_block_by_hash(BLOCK_HASH, True)
        with pytest.raises(DecodeError):
            client.eth.get_block_by_hash(BLOCK_HASH, False)

    def test_by_number(self, result_client) -> None:
        client, poster = result_client(_block([]))
        block = client.eth.get_block_by_number(1, False)
        assert block is not None
        assert block.number == 1
        assert poster.last["json"]["method"] == "eth_getBlockByNumber"
        assert poster.last["json"]["params"] == ["0x1", False]

    def test_by_tag(self, result_client) -> None:
        client, poster = result_client(_block([]))
        client.eth.get_block_by_number("latest", True)
        assert poster.last["json"]["params"] == ["latest", True]

    def test_unknown_block(self, result_client) -> None:
        client, _ = result_client(None)
        assert client.eth.get_block_by_number(10**9, False) is None


class TestFilters:
    """Filter lifecycle driven through repeated calls."""

    def test_lifecycle(self, result_client) -> None:
        log = {
            "logIndex": "0x0",
            "transactionIndex": "0x0",
            "transactionHash": TX_HASH,
            "blockHash": BLOCK_HASH,
            "blockNumber": "0x1",
            "address": ADDRESS,
            "data": "0x",
            "topics": [],
        }
        client, poster = result_client("0x1", [log], [], True)
        params = FilterParams(from_block=1, to_block="latest", address=[ADDRESS], topics=[None, "0x01"])

        filter_id = client.eth.new_filter(params)
        assert filter_id == "0x1"
        assert poster.requests[0]["json"]["params"] == [
            {"fromBlock": "0x1", "toBlock": "latest", "address": [ADDRESS], "topics": [None, "0x01"]}
        ]

        logs = client.eth.get_filter_changes(filter_id)
        assert [entry.transaction_hash for entry in logs] == [TX_HASH]
        assert client.eth.get_filter_logs(filter_id) == []
        assert client.eth.uninstall_filter(filter_id) is True
        assert [r["json"]["method"] for r in poster.requests] == [
            "eth_newFilter",
            "eth_getFilterChanges",
            "eth_getFilterLogs",
            "eth_uninstallFilter",
        ]

    def test_empty_filter_params(self) -> None:
        assert FilterParams().to_dict() == {}

    def test_block_filter_hashes(self, result_client) -> None:
        client, poster = result_client("0x2", [BLOCK_HASH], "0x3")
        filter_id = client.eth.new_block_filter()
        assert client.eth.get_filter_change_hashes(filter_id) == [BLOCK_HASH]
        assert client.eth.new_pending_transaction_filter() == "0x3"
        assert poster.last["json"]["method"] == "eth_newPendingTransactionFilter"

    def test_get_logs_null(self, result_client) -> None:
        client, _ = result_client(None)
        assert client.eth.get_logs(FilterParams(from_block="earliest")) == []

    def test_uninstall_unknown_filter(self, make_client) -> None:
        client, _ = make_client({"id": 1, "jsonrpc": "2.0", "error": {"code": -32000, "message": "filter not found"}})
        with pytest.raises(ProtocolError, match="filter not found"):
            client.eth.uninstall_filter("0xdead")


def test_eth1() -> None:
    assert eth1() == 10**18
