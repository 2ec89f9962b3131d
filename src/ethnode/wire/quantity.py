"""
Quantity codec - hex-string integers as used on the Ethereum JSON-RPC wire.

Quantities are "0x"-prefixed hexadecimal strings. Counts fit a native
signed 64-bit integer; balances and gas prices may not, which is why the
decoder has a bounded and an unbounded variant.
"""

from __future__ import annotations

import re

from ..errors import EthRpcError

MAX_NATIVE_INT = 2**63 - 1

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class ParseError(EthRpcError, ValueError):
    """Malformed quantity string."""

    exit_code = 5


class QuantityOverflowError(EthRpcError, OverflowError):
    """Quantity does not fit a native integer."""

    exit_code = 5


def _digits(value: str) -> str:
    if not isinstance(value, str):
        raise ParseError(f"quantity must be a string, got {type(value).__name__}")
    if not value.startswith("0x"):
        raise ParseError(f"quantity is missing the 0x prefix: {value!r}")
    digits = value[2:]
    if not digits:
        raise ParseError(f"quantity has no digits: {value!r}")
    # int(x, 16) would also accept signs, spaces and underscores
    if not _HEX_DIGITS.fullmatch(digits):
        raise ParseError(f"quantity has non-hex digits: {value!r}")
    return digits


def hex_to_big_int(value: str) -> int:
    """
    Decode a quantity of any magnitude.

    Args:
        value: 0x-prefixed hex string with at least one digit

    Returns:
        Decoded non-negative integer

    Raises:
        ParseError: If the prefix or the digits are missing, or a digit is not hex
    """
    return int(_digits(value), 16)


def hex_to_int(value: str) -> int:
    """
    Decode a quantity that must fit a native signed 64-bit integer.

    Raises:
        ParseError: If the prefix is missing or a digit is not hex
        QuantityOverflowError: If the value exceeds MAX_NATIVE_INT
    """
    number = hex_to_big_int(value)
    if number > MAX_NATIVE_INT:
        raise QuantityOverflowError(f"quantity {value} exceeds the native integer range")
    return number


def int_to_hex(value: int) -> str:
    """Encode a non-negative integer as a quantity ("0x0" for zero)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"quantity must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"quantity must be non-negative, got {value}")
    return hex(value)


def big_to_hex(value: int) -> str:
    """Encode an arbitrary-precision integer; same wire form as int_to_hex."""
    return int_to_hex(value)
