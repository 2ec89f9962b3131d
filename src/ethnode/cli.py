"""
ethnode CLI

Command-line access to an Ethereum node's JSON-RPC interface.

Commands:
  client-version - Show the node's client version
  block-number   - Show the latest block number
  gas-price      - Show the current gas price
  balance        - Show an account balance
  block          - Show a block by number or hash
  tx             - Show a transaction
  receipt        - Show a transaction receipt
  syncing        - Show sync progress
  accounts       - List accounts held by the node
  call           - Send any method and print the raw result
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

import click

from .client import EthClient
from .config import DEFAULT_RPC_URL, load_env
from .errors import EthRpcError
from .utils import to_ether

VERSION = "0.1.0"


def _client(ctx: click.Context) -> EthClient:
    return ctx.obj


def _echo_json(value: Any) -> None:
    if is_dataclass(value):
        value = asdict(value)
    click.echo(json.dumps(value, indent=2))


def _fail(exc: EthRpcError) -> None:
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(exc.exit_code)


class _StderrLineLogger:
    """Writes the --debug request/response trace to stderr."""

    def write_line(self, line: str) -> None:
        click.echo(line, err=True)


def _parse_param(raw: str) -> Any:
    """JSON when it parses, the raw string otherwise (addresses, tags)."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="ethnode")
@click.option(
    "--rpc-url",
    envvar="ETH_RPC_URL",
    default=DEFAULT_RPC_URL,
    show_default=True,
    help="Node JSON-RPC URL",
)
@click.option("--debug", is_flag=True, envvar="ETHNODE_DEBUG", help="Log raw requests and responses")
@click.pass_context
def cli(ctx: click.Context, rpc_url: str, debug: bool) -> None:
    """ethnode - Ethereum node JSON-RPC client."""
    client = EthClient(rpc_url, logger=_StderrLineLogger(), debug=debug)
    ctx.obj = client
    ctx.call_on_close(client.close)


# ============ Node ============


@cli.command("client-version")
@click.pass_context
def client_version(ctx: click.Context) -> None:
    """Show the node's client version."""
    try:
        click.echo(_client(ctx).web3.client_version())
    except EthRpcError as exc:
        _fail(exc)


@cli.command("block-number")
@click.pass_context
def block_number(ctx: click.Context) -> None:
    """Show the latest block number."""
    try:
        click.echo(_client(ctx).eth.block_number())
    except EthRpcError as exc:
        _fail(exc)


@cli.command("gas-price")
@click.pass_context
def gas_price(ctx: click.Context) -> None:
    """Show the current gas price in wei."""
    try:
        click.echo(_client(ctx).eth.gas_price())
    except EthRpcError as exc:
        _fail(exc)


@cli.command()
@click.pass_context
def syncing(ctx: click.Context) -> None:
    """Show sync progress."""
    try:
        status = _client(ctx).eth.syncing()
    except EthRpcError as exc:
        _fail(exc)
        return

    if not status.is_syncing:
        click.echo("Not syncing")
        return
    click.echo(f"Starting block: {status.starting_block}")
    click.echo(f"Current block:  {status.current_block}")
    click.echo(f"Highest block:  {status.highest_block}")


@cli.command()
@click.pass_context
def accounts(ctx: click.Context) -> None:
    """List accounts held by the node."""
    try:
        for address in _client(ctx).eth.accounts():
            click.echo(address)
    except EthRpcError as exc:
        _fail(exc)


# ============ Chain data ============


@cli.command()
@click.argument("address")
@click.option("--block", default="latest", show_default=True, help="Block number or tag")
@click.pass_context
def balance(ctx: click.Context, address: str, block: str) -> None:
    """Show the balance of ADDRESS."""
    block_id: Any = int(block) if block.isdigit() else block
    try:
        wei = _client(ctx).eth.get_balance(address, block_id)
    except EthRpcError as exc:
        _fail(exc)
        return
    click.echo(f"{wei} wei ({to_ether(wei):.6f} ETH)")


@cli.command()
@click.argument("block_id")
@click.option("--full", is_flag=True, help="Include full transaction objects")
@click.pass_context
def block(ctx: click.Context, block_id: str, full: bool) -> None:
    """Show a block by number, tag or 0x hash."""
    eth = _client(ctx).eth
    try:
        if block_id.startswith("0x") and len(block_id) == 66:
            result = eth.get_block_by_hash(block_id, full)
        elif block_id.isdigit():
            result = eth.get_block_by_number(int(block_id), full)
        else:
            result = eth.get_block_by_number(block_id, full)
    except EthRpcError as exc:
        _fail(exc)
        return

    if result is None:
        click.echo(f"Block not found: {block_id}")
        sys.exit(1)
    _echo_json(result)


@cli.command()
@click.argument("tx_hash")
@click.pass_context
def tx(ctx: click.Context, tx_hash: str) -> None:
    """Show the transaction TX_HASH."""
    try:
        result = _client(ctx).eth.get_transaction_by_hash(tx_hash)
    except EthRpcError as exc:
        _fail(exc)
        return

    if result is None:
        click.echo(f"Transaction not found: {tx_hash}")
        sys.exit(1)
    _echo_json(result)


@cli.command()
@click.argument("tx_hash")
@click.pass_context
def receipt(ctx: click.Context, tx_hash: str) -> None:
    """Show the receipt of TX_HASH."""
    try:
        result = _client(ctx).eth.get_transaction_receipt(tx_hash)
    except EthRpcError as exc:
        _fail(exc)
        return

    if result is None:
        click.echo(f"No receipt (pending or unknown): {tx_hash}")
        sys.exit(1)
    _echo_json(result)


# ============ Raw ============


@cli.command()
@click.argument("method")
@click.argument("params", nargs=-1)
@click.pass_context
def call(ctx: click.Context, method: str, params: tuple[str, ...]) -> None:
    """
    Send METHOD with PARAMS and print the raw result.

    Each PARAM is parsed as JSON when possible, otherwise sent as a string.
    """
    try:
        result = _client(ctx).call(method, *[_parse_param(p) for p in params])
    except EthRpcError as exc:
        _fail(exc)
        return
    _echo_json(result)


def main(argv: Optional[list[str]] = None) -> None:
    load_env()
    cli(args=argv, prog_name="ethnode")
